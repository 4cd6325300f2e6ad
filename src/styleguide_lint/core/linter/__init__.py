"""Style-guide linter for markdown prose."""
from .engine import lint, lint_content, lint_file
from .autofix import apply_fix, apply_fixes
from .models import (
    EnglishVariant, Fix, LintConfigError, LintIssue, LintReport, Severity, StyleGuide,
)
from .rules_config import CustomRule, CustomRulesConfig, RulesConfigError

__all__ = [
    "lint", "lint_content", "lint_file", "apply_fix", "apply_fixes",
    "EnglishVariant", "Fix", "LintConfigError", "LintIssue", "LintReport",
    "Severity", "StyleGuide", "CustomRule", "CustomRulesConfig", "RulesConfigError",
]
