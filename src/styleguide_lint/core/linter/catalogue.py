"""Explanations for lint rules."""

DEFAULT_EXPLANATION = "This issue may affect readability or style consistency."

EXPLANATIONS = {
    # Checks shared by every guide
    "style:passive": "Active voice is more direct and engaging than passive voice.",
    "style:wordy": "Concise writing improves readability and clarity.",
    "style:long-sentence": (
        "Long sentences are harder to follow. Consider breaking them into shorter ones."
    ),

    # Guide-specific word choice
    "google:click-on": "Google style prefers direct action verbs: write \"click\", not \"click on\".",
    "microsoft:please": "Microsoft style considers instructions inherently polite; \"please\" adds nothing.",
    "redhat:utilize": "Red Hat style prefers simple, common words over complex alternatives.",
}

# One-line descriptions for rule listings
DESCRIPTIONS = {
    "style:passive": "Auxiliary verb followed by a past participle (passive voice).",
    "style:wordy": "Wordy phrase with a shorter equivalent.",
    "style:long-sentence": "Line with more words than the sentence limit.",
    "google:click-on": "Google: \"click on\" instead of \"click\".",
    "microsoft:please": "Microsoft: \"please\" in instructions.",
    "redhat:utilize": "Red Hat: \"utilize\" instead of \"use\".",
}


def explain(rule_id: str) -> str:
    """Return the explanation for a rule id, or a generic one."""
    return EXPLANATIONS.get(rule_id, DEFAULT_EXPLANATION)


def explain_custom(name: str) -> str:
    """Explanation attached to issues raised by a custom rule."""
    return f"Custom rule: {name}"


def get_available_rules() -> dict[str, str]:
    """
    Get built-in rules with descriptions.

    Returns:
        Dict mapping rule id to one-line description
    """
    return dict(DESCRIPTIONS)
