"""Lint rules for prose in markdown documents."""
from typing import Callable, Iterable

from ..models import LintConfigError, LintIssue, StyleGuide
from . import common, guides

Rule = Callable[[str], Iterable[LintIssue]]

# Rules run for every built-in guide
COMMON_RULES: dict[str, Rule] = {
    "style:passive": common.passive_voice,
    "style:wordy": common.wordy_phrases,
    "style:long-sentence": common.long_sentence,
}

# Word-choice rules per guide
GUIDE_RULES: dict[StyleGuide, dict[str, Rule]] = {
    StyleGuide.GOOGLE: {"google:click-on": guides.click_on},
    StyleGuide.MICROSOFT: {"microsoft:please": guides.please},
    StyleGuide.REDHAT: {"redhat:utilize": guides.utilize},
}

# Rules that judge a whole line rather than a word
LINE_RULES = {"style:long-sentence"}


def rules_for_guide(guide: StyleGuide) -> dict[str, Rule]:
    """
    Get the full rule set for a built-in guide.

    Raises:
        LintConfigError: for StyleGuide.CUSTOM, which has no rules of its own
    """
    if guide not in GUIDE_RULES:
        raise LintConfigError(
            f"No built-in rules for style guide '{guide.value}'; "
            "custom rules must name a baseStyleGuide"
        )
    return {**COMMON_RULES, **GUIDE_RULES[guide]}


__all__ = [
    "COMMON_RULES", "GUIDE_RULES", "LINE_RULES", "Rule", "rules_for_guide",
    "common", "guides",
]
