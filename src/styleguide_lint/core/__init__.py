"""Core modules for style-guide linting."""
from .readability import ReadabilityBand, readability_band, readability_score
from .report import render_markdown_report

__all__ = [
    "ReadabilityBand",
    "readability_band",
    "readability_score",
    "render_markdown_report",
]
