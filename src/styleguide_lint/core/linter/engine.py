"""Lint engine - runs style-guide and custom rules, applies fixes."""
import logging
import re
from dataclasses import replace
from functools import partial
from pathlib import Path
from typing import Optional, Union

from styleguide_lint.core.readability import readability_band, readability_score
from . import custom
from .autofix import apply_fixes
from .catalogue import explain
from .models import (
    EnglishVariant, LintConfigError, LintIssue, LintReport, StyleGuide,
)
from .rules import LINE_RULES, rules_for_guide
from .rules.common import LONG_SENTENCE_WORDS
from .rules_config import CustomRulesConfig

logger = logging.getLogger(__name__)

_FENCE = re.compile(r'^\s*(```|~~~)')


async def lint(
    content: str,
    style_guide: Union[StyleGuide, str] = StyleGuide.GOOGLE,
    custom_config: Optional[CustomRulesConfig] = None,
    english_variant: Union[EnglishVariant, str, None] = None,
    max_sentence_words: int = LONG_SENTENCE_WORDS
) -> list[LintIssue]:
    """
    Lint markdown prose against a style guide.

    Args:
        content: The markdown content to lint
        style_guide: Guide to check against; "custom" requires custom_config
        custom_config: Custom rules; its base guide replaces style_guide
        english_variant: Accepted for future spelling checks, no effect yet
        max_sentence_words: Word limit for the long sentence check

    Returns:
        Issues sorted by (line, column), each with a unique id

    Raises:
        LintConfigError: if the guide or variant cannot be used
    """
    guide = resolve_style_guide(style_guide, custom_config)
    if english_variant is not None:
        coerce_english_variant(english_variant)

    checks = rules_for_guide(guide)
    checks["style:long-sentence"] = partial(
        checks["style:long-sentence"], max_words=max_sentence_words
    )

    lines = content.split('\n')
    ignore_words = custom_config.ignore_words if custom_config else frozenset()
    issues: list[LintIssue] = []

    # Built-in checks see prose only; frontmatter and code become blank lines
    prose = _prose_view(lines, skip_code=True)

    for rule_id, check in checks.items():
        try:
            for issue in check(prose):
                if ignore_words and _is_ignored(issue, lines, ignore_words):
                    continue
                issues.append(issue)
        except Exception as e:
            logger.error(f"Rule {rule_id} failed: {e}")

    if custom_config and custom_config.rules:
        try:
            issues.extend(
                custom.apply_rules(_prose_view(lines, skip_code=False), custom_config.rules)
            )
        except Exception as e:
            logger.error(f"Custom rules failed: {e}")

    return _finalize(issues)


async def lint_content(
    content: str,
    source_path: str = "<string>",
    style_guide: Union[StyleGuide, str] = StyleGuide.GOOGLE,
    custom_config: Optional[CustomRulesConfig] = None,
    english_variant: Union[EnglishVariant, str, None] = None,
    max_sentence_words: int = LONG_SENTENCE_WORDS
) -> LintReport:
    """
    Lint markdown content into a report.

    Args:
        content: The markdown content to lint
        source_path: Path for reporting (doesn't need to exist)
        style_guide, custom_config, english_variant, max_sentence_words: see lint()

    Returns:
        LintReport with all issues and the readability score
    """
    guide = resolve_style_guide(style_guide, custom_config)
    report = LintReport(
        source_path=source_path,
        style_guide=StyleGuide.CUSTOM.value if custom_config else guide.value
    )

    issues = await lint(
        content,
        guide,
        custom_config=custom_config,
        english_variant=english_variant,
        max_sentence_words=max_sentence_words
    )
    for issue in issues:
        report.add_issue(issue)

    report.readability = readability_score(content)
    report.readability_label = readability_band(report.readability).label

    return report


async def lint_file(
    path: Path,
    style_guide: Union[StyleGuide, str] = StyleGuide.GOOGLE,
    custom_config: Optional[CustomRulesConfig] = None,
    english_variant: Union[EnglishVariant, str, None] = None,
    fix: bool = False,
    max_sentence_words: int = LONG_SENTENCE_WORDS
) -> LintReport:
    """
    Lint a markdown file.

    Args:
        path: Path to the .md file
        fix: If True, apply suggested fixes and write back
        style_guide, custom_config, english_variant, max_sentence_words: see lint()

    Returns:
        LintReport for the content as it was before fixing
    """
    content = path.read_text(encoding='utf-8')

    report = await lint_content(
        content,
        str(path),
        style_guide=style_guide,
        custom_config=custom_config,
        english_variant=english_variant,
        max_sentence_words=max_sentence_words
    )

    if fix and report.fixable > 0:
        fixed_content, report.fixed = apply_fixes(content, report.issues)

        if fixed_content != content:
            path.write_text(fixed_content, encoding='utf-8')
            logger.info(f"Wrote {report.fixed} fixes to {path}")

    return report


def resolve_style_guide(
    style_guide: Union[StyleGuide, str],
    custom_config: Optional[CustomRulesConfig] = None
) -> StyleGuide:
    """
    Get the built-in guide whose rules will run.

    A custom config always wins: its base guide is used whatever
    style_guide says.

    Raises:
        LintConfigError: for an unknown guide, or "custom" with no config
    """
    if custom_config is not None:
        return custom_config.base_style_guide

    guide = coerce_style_guide(style_guide)
    if guide == StyleGuide.CUSTOM:
        raise LintConfigError(
            "Style guide 'custom' needs a custom rules config (baseStyleGuide + rules)"
        )
    return guide


def coerce_style_guide(value: Union[StyleGuide, str]) -> StyleGuide:
    """Convert a guide name to StyleGuide."""
    if isinstance(value, StyleGuide):
        return value
    try:
        return StyleGuide(str(value).lower())
    except ValueError:
        choices = ", ".join(g.value for g in StyleGuide)
        raise LintConfigError(f"Unknown style guide {value!r} (expected one of: {choices})") from None


def coerce_english_variant(value: Union[EnglishVariant, str]) -> EnglishVariant:
    """Convert a variant code to EnglishVariant."""
    if isinstance(value, EnglishVariant):
        return value
    try:
        return EnglishVariant(str(value).lower())
    except ValueError:
        choices = ", ".join(v.value for v in EnglishVariant)
        raise LintConfigError(f"Unknown English variant {value!r} (expected one of: {choices})") from None


def _finalize(issues: list[LintIssue]) -> list[LintIssue]:
    """Attach ids and explanations, then sort by position."""
    finalized = [
        replace(
            issue,
            id=f"{issue.line}-{issue.column}-{issue.rule}-{ordinal}",
            explanation=issue.explanation or explain(issue.rule)
        )
        for ordinal, issue in enumerate(issues)
    ]

    # list.sort is stable: equal positions keep emission order
    finalized.sort(key=lambda i: (i.line, i.column))
    return finalized


def _is_ignored(issue: LintIssue, lines: list[str], ignore_words: frozenset[str]) -> bool:
    """True when the flagged text begins with one of the ignored words as a whole word."""
    if issue.rule in LINE_RULES:
        return False

    flagged = lines[issue.line - 1][issue.column:]
    return any(
        re.match(rf'{re.escape(word)}(?!\w)', flagged, re.IGNORECASE)
        for word in ignore_words
    )


def _prose_view(lines: list[str], skip_code: bool) -> str:
    """
    Blank out frontmatter (and optionally fenced code) lines.

    Line numbering is preserved so issues point at the original document.
    """
    frontmatter_lines = _frontmatter_line_count('\n'.join(lines))
    in_code_block = False
    view = []

    for i, line in enumerate(lines):
        if i < frontmatter_lines:
            view.append('')
            continue

        if skip_code:
            if _FENCE.match(line):
                in_code_block = not in_code_block
                view.append('')
                continue
            if in_code_block:
                view.append('')
                continue

        view.append(line)

    return '\n'.join(view)


def _frontmatter_line_count(content: str) -> int:
    """Number of lines taken by leading YAML frontmatter (0 if none)."""
    if not content.startswith('---'):
        return 0

    # Find the closing ---
    match = re.match(r'^---\s*\n.*?\n---\s*\n', content, re.DOTALL)
    if not match:
        return 0

    return match.group().count('\n')
