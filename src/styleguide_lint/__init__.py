"""Style-guide linter for markdown documentation."""

__version__ = "1.0.0"
