"""Apply suggested fixes to document text."""
import logging
import re
from typing import Iterable, Optional

from .models import LintIssue

logger = logging.getLogger(__name__)

# First token wrapped in single, double or back-tick quotes
QUOTED_TOKEN = re.compile(r"""['"`]([^'"`]+)['"`]""")


def extract_quoted_token(message: str) -> Optional[str]:
    """Return the first quoted token in an issue message, if any."""
    match = QUOTED_TOKEN.search(message)
    return match.group(1) if match else None


def fix_line(line: str, issue: LintIssue, whole_line: bool = True) -> str:
    """
    Rewrite a single line for an issue.

    Issues with a `Fix` span are applied exactly, and skipped if the line
    no longer holds the flagged text. Other issues fall back to the message
    heuristic: whole-word, case-insensitive replacement of the quoted token
    with the first comma-separated suggestion, or the whole line replaced
    by the suggestion when the message quotes nothing and `whole_line` is set.
    """
    if not issue.fixable:
        return line

    fix = issue.fix
    if fix is not None:
        end = fix.column + len(fix.old)
        if line[fix.column:end] != fix.old:
            logger.debug(f"Stale fix for {issue.rule} on line {issue.line}, skipping")
            return line
        return line[:fix.column] + fix.new + line[end:]

    token = extract_quoted_token(issue.message)
    if token is None:
        if not whole_line:
            return line
        return issue.suggestion.replace('\n', ' ')

    # Known limitation: every occurrence on the line is replaced
    replacement = issue.suggestion.split(',')[0].strip()
    pattern = re.compile(rf'(?<!\w){re.escape(token)}(?!\w)', re.IGNORECASE)
    return pattern.sub(lambda _: replacement, line)


def apply_fix(content: str, issue: LintIssue) -> str:
    """
    Apply one issue's suggestion to content.

    Unfixable issues and out-of-range lines leave content unchanged.
    """
    fixed, _ = apply_fixes(content, [issue], whole_line=True)
    return fixed


def apply_fixes(
    content: str,
    issues: Iterable[LintIssue],
    whole_line: bool = False
) -> tuple[str, int]:
    """
    Apply fixes for all fixable issues.

    Works from the last (line, column) backwards so each fix sees the text
    it was reported against. Lines are only rewritten, never added or
    removed.

    Args:
        content: Original content
        issues: Issues from linting
        whole_line: Let issues without a quoted token replace their whole
            line. Off for batches, which write back without review.

    Returns:
        Tuple of (fixed_content, number_of_fixes_applied)
    """
    fixable = [i for i in issues if i.fixable]
    if not fixable:
        return content, 0

    fixable.sort(key=lambda i: (i.line, i.column), reverse=True)

    lines = content.split('\n')
    applied = 0

    for issue in fixable:
        idx = issue.line - 1
        if not 0 <= idx < len(lines):
            continue

        new_line = fix_line(lines[idx], issue, whole_line)
        if new_line != lines[idx]:
            lines[idx] = new_line
            applied += 1

    return '\n'.join(lines), applied
