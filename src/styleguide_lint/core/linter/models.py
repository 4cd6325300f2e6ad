"""Data models for the linter."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class LintConfigError(ValueError):
    """Raised when a lint request names an unusable guide or variant."""


class Severity(Enum):
    """Severity levels for lint issues."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class StyleGuide(Enum):
    """Style guides a document can be checked against."""
    GOOGLE = "google"
    MICROSOFT = "microsoft"
    REDHAT = "redhat"
    CUSTOM = "custom"     # Base guide of a CustomRulesConfig + its rules

    @property
    def label(self) -> str:
        return _GUIDE_INFO[self][0]

    @property
    def description(self) -> str:
        return _GUIDE_INFO[self][1]


_GUIDE_INFO = {
    StyleGuide.GOOGLE: (
        "Google Developer",
        "Google's developer documentation style guide - clear, consistent, accessible",
    ),
    StyleGuide.MICROSOFT: (
        "Microsoft Writing",
        "Microsoft's style guide - warm, conversational, and inclusive",
    ),
    StyleGuide.REDHAT: (
        "Red Hat",
        "Red Hat's documentation style guide - open, helpful, and precise",
    ),
    StyleGuide.CUSTOM: (
        "Custom Rules",
        "A built-in guide extended with your own rules file",
    ),
}

BUILTIN_GUIDES = (StyleGuide.GOOGLE, StyleGuide.MICROSOFT, StyleGuide.REDHAT)

# Rule id prefixes owned by built-in checks
BUILTIN_NAMESPACES = frozenset({"style", "google", "microsoft", "redhat"})


class EnglishVariant(Enum):
    """English spelling variants (accepted, not yet used by any rule)."""
    US = "us"
    UK = "uk"
    AU = "au"
    IN = "in"

    @property
    def label(self) -> str:
        return _VARIANT_INFO[self]


_VARIANT_INFO = {
    EnglishVariant.US: "US English",
    EnglishVariant.UK: "UK English",
    EnglishVariant.AU: "Australian English",
    EnglishVariant.IN: "Indian English",
}


@dataclass(frozen=True)
class Fix:
    """A replacement span within a single line."""
    column: int   # 0-based start of `old` in the line
    old: str
    new: str


@dataclass(frozen=True)
class LintIssue:
    """A single lint issue found in the document."""
    rule: str
    severity: Severity
    line: int
    column: int
    message: str
    suggestion: Optional[str] = None
    explanation: Optional[str] = None
    fix: Optional[Fix] = None
    id: str = ""

    @property
    def fixable(self) -> bool:
        """
        True when auto-fix can act on this issue.

        Built-in rules only offer a fix through a `Fix` span; their other
        suggestions are instructions. Free-form issues (custom rules) are
        fixable whenever they carry a suggestion.
        """
        if not self.suggestion:
            return False
        if self.rule.split(":", 1)[0] in BUILTIN_NAMESPACES:
            return self.fix is not None
        return True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "line": self.line,
            "column": self.column,
            "rule": self.rule,
            "level": self.severity.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "explanation": self.explanation,
            "has_fix": self.fix is not None
        }


@dataclass
class LintReport:
    """Complete lint report for a document."""
    source_path: str
    style_guide: str = StyleGuide.GOOGLE.value
    total_issues: int = 0
    errors: int = 0
    warnings: int = 0
    infos: int = 0
    fixable: int = 0
    readability: int = 100
    readability_label: str = ""
    issues: list[LintIssue] = field(default_factory=list)
    fixed: int = 0

    def add_issue(self, issue: LintIssue) -> None:
        """Add an issue to the report and update counts."""
        self.issues.append(issue)
        self.total_issues += 1

        if issue.severity == Severity.ERROR:
            self.errors += 1
        elif issue.severity == Severity.WARNING:
            self.warnings += 1
        elif issue.severity == Severity.INFO:
            self.infos += 1

        if issue.fixable:
            self.fixable += 1

    def to_dict(self) -> dict:
        return {
            "source_path": self.source_path,
            "style_guide": self.style_guide,
            "summary": {
                "total_issues": self.total_issues,
                "errors": self.errors,
                "warnings": self.warnings,
                "infos": self.infos,
                "fixable": self.fixable,
                "readability": self.readability,
                "readability_label": self.readability_label,
            },
            "issues": [i.to_dict() for i in self.issues],
            "fixed": self.fixed
        }
