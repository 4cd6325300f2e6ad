"""Pattern engine for user-defined rules."""
from dataclasses import dataclass
from typing import Iterable
import logging
import re

from .rules_config import CustomRule
from .catalogue import explain_custom
from .models import LintIssue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledRule:
    """A custom rule with its pattern compiled."""
    rule: CustomRule
    regex: re.Pattern


def compile_rules(rules: Iterable[CustomRule]) -> list[CompiledRule]:
    """
    Compile every rule that has a pattern, case-insensitively.

    Plain phrases work as-is. Rules whose pattern is not valid regex are
    logged and skipped; the rest still compile.
    """
    compiled = []
    for rule in rules:
        if not rule.pattern:
            continue

        try:
            regex = re.compile(rule.pattern, re.IGNORECASE)
        except re.error as e:
            logger.warning(f"Custom rule {rule.name!r} skipped, invalid pattern {rule.pattern!r}: {e}")
            continue

        compiled.append(CompiledRule(rule=rule, regex=regex))

    return compiled


def apply_rules(content: str, rules: Iterable[CustomRule]) -> list[LintIssue]:
    """
    Scan content line by line against custom rules.

    Args:
        content: Document text
        rules: Custom rules in config order

    Returns:
        One issue per non-overlapping match, in line order then rule order
    """
    compiled = compile_rules(rules)
    issues: list[LintIssue] = []

    if not compiled:
        return issues

    for i, line in enumerate(content.split('\n'), 1):
        for entry in compiled:
            try:
                issues.extend(_match_line(entry, line, i))
            except Exception as e:
                logger.error(f"Custom rule {entry.rule.name!r} failed on line {i}: {e}")

    return issues


def _match_line(entry: CompiledRule, line: str, line_num: int) -> list[LintIssue]:
    rule = entry.rule
    issues = []

    for match in entry.regex.finditer(line):
        # Zero-width matches ("x*", "^") would flag every position
        if match.start() == match.end():
            continue

        issues.append(LintIssue(
            rule=f"custom:{rule.name}",
            severity=rule.severity,
            line=line_num,
            column=match.start(),
            message=rule.message,
            suggestion=rule.suggestion,
            explanation=explain_custom(rule.name),
        ))

    return issues
