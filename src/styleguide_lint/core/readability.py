"""Flesch Reading Ease scoring for prose."""
from dataclasses import dataclass
import math
import re

_SENTENCE_SPLIT = re.compile(r'[.!?]+')
_NON_ALPHA = re.compile(r'[^a-z]')
_VOWELS = frozenset("aeiouy")

# Score used when there is nothing to penalize
EMPTY_SCORE = 100


@dataclass(frozen=True)
class ReadabilityBand:
    """Human-readable interpretation of a readability score."""
    label: str
    description: str
    style: str  # rich colour for terminal output


# (minimum score, band); checked top-down, lower bound inclusive
_BANDS = [
    (90, ReadabilityBand("Very Easy", "Easily understood by 11-year-olds", "bright_green")),
    (80, ReadabilityBand("Easy", "Conversational English for consumers", "green")),
    (70, ReadabilityBand("Fairly Easy", "Easily understood by 13-year-olds", "chartreuse3")),
    (60, ReadabilityBand("Standard", "Easily understood by 15-year-olds", "yellow")),
    (50, ReadabilityBand("Fairly Difficult", "High school level", "orange1")),
    (30, ReadabilityBand("Difficult", "College level", "dark_orange3")),
]
_FLOOR_BAND = ReadabilityBand("Very Difficult", "College graduate level", "red")


def count_syllables(word: str) -> int:
    """
    Estimate the syllables in a word.

    Counts groups of consecutive vowels, drops a trailing silent 'e',
    and never returns less than 1.
    """
    word = _NON_ALPHA.sub('', word.lower())
    if len(word) <= 3:
        return 1

    count = 0
    previous_was_vowel = False
    for char in word:
        is_vowel = char in _VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith('e'):
        count -= 1

    return max(1, count)


def readability_score(text: str) -> int:
    """
    Compute a Flesch Reading Ease score clamped to 0-100.

    Higher scores are easier to read. Empty text scores 100.

    Args:
        text: Raw document text (markdown is scored as-is)

    Returns:
        Integer score between 0 and 100
    """
    if not text.strip():
        return EMPTY_SCORE

    sentences = [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]
    words = text.split()

    if not sentences or not words:
        return EMPTY_SCORE

    syllables = sum(count_syllables(w) for w in words)
    words_per_sentence = len(words) / len(sentences)
    syllables_per_word = syllables / len(words)

    score = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word

    # Halves round up, matching the usual Flesch tables
    return max(0, min(100, math.floor(score + 0.5)))


def readability_band(score: int) -> ReadabilityBand:
    """Map a score to its readability band."""
    for minimum, band in _BANDS:
        if score >= minimum:
            return band
    return _FLOOR_BAND
