"""Configuration management with environment variable overrides."""
from dataclasses import dataclass, field
from pathlib import Path
import logging
import os

from styleguide_lint import __version__
from styleguide_lint.core.linter.models import EnglishVariant, StyleGuide
from styleguide_lint.core.linter.rules.common import LONG_SENTENCE_WORDS

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Configuration for the style-guide linter CLI and MCP server."""

    # Base directory for relative document paths
    docs_dir: Path = field(default_factory=Path.cwd)

    # Style guide used when a request names none
    default_style_guide: StyleGuide = StyleGuide.GOOGLE

    # Accepted for future spelling checks
    default_english_variant: EnglishVariant = EnglishVariant.US

    # Custom rules file applied when a request names none (optional)
    # Set via STYLEGUIDE_LINT_RULES_FILE
    rules_file: Path | None = None

    # Long sentence threshold (words per line)
    max_sentence_words: int = LONG_SENTENCE_WORDS

    # Versioning
    version: str = __version__

    @classmethod
    def load(cls) -> "Config":
        """Load config with environment variable overrides."""
        config = cls()

        if val := os.environ.get("STYLEGUIDE_LINT_DOCS_DIR"):
            config.docs_dir = Path(val).expanduser()

        # Unknown values keep the default
        if val := os.environ.get("STYLEGUIDE_LINT_STYLE_GUIDE"):
            try:
                config.default_style_guide = StyleGuide(val.lower())
            except ValueError:
                logger.warning(f"Ignoring unknown STYLEGUIDE_LINT_STYLE_GUIDE={val!r}")

        if val := os.environ.get("STYLEGUIDE_LINT_ENGLISH_VARIANT"):
            try:
                config.default_english_variant = EnglishVariant(val.lower())
            except ValueError:
                logger.warning(f"Ignoring unknown STYLEGUIDE_LINT_ENGLISH_VARIANT={val!r}")

        if val := os.environ.get("STYLEGUIDE_LINT_RULES_FILE"):
            config.rules_file = Path(val).expanduser()

        if val := os.environ.get("STYLEGUIDE_LINT_MAX_SENTENCE_WORDS"):
            try:
                config.max_sentence_words = max(1, int(val))
            except ValueError:
                logger.warning(f"Ignoring non-integer STYLEGUIDE_LINT_MAX_SENTENCE_WORDS={val!r}")

        return config

    def resolve_path(self, path: str | Path) -> Path:
        """Resolve a document path against docs_dir."""
        path = Path(path).expanduser()
        if not path.is_absolute():
            path = self.docs_dir / path
        return path
