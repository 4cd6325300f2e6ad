"""Case helpers for replacement text."""


def match_case(original: str, replacement: str) -> str:
    """Capitalize `replacement` when `original` starts with a capital."""
    if not replacement:
        return replacement
    if original[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement[0].lower() + replacement[1:]
