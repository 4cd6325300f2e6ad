"""Prose rules shared by every style guide."""
import re
from typing import Generator

from ..models import LintIssue, Severity, Fix
from ._case import match_case

PASSIVE_PATTERN = re.compile(
    r'\b(was|were|is|are|been|being|be)\s+\w+ed\b',
    re.IGNORECASE
)

WORDY_PHRASES = {
    "in order to": "to",
    "due to the fact that": "because",
    "at this point in time": "now",
    "for the purpose of": "to",
}

LONG_SENTENCE_WORDS = 25
_WORD_CHAR = re.compile(r'\w')


def passive_voice(content: str) -> Generator[LintIssue, None, None]:
    """
    Flag an auxiliary verb followed by a word ending in "ed".

    A rough passive-voice heuristic: "was created", "is deployed".
    Rewriting takes judgement, so no fix is offered.
    """
    for i, line in enumerate(content.split('\n'), 1):
        for match in PASSIVE_PATTERN.finditer(line):
            yield LintIssue(
                rule="style:passive",
                severity=Severity.WARNING,
                line=i,
                column=match.start(),
                message=f"'{match.group()}' may be passive voice; consider using active voice",
                suggestion="Rewrite using active voice",
            )


def wordy_phrases(content: str) -> Generator[LintIssue, None, None]:
    """
    Flag wordy phrases that have a shorter equivalent.

    Only the first occurrence of each phrase on a line is reported. Matches
    are plain substrings; a fix is only offered when the phrase stands as
    whole words ("within order to" is flagged, not rewritten).
    """
    for i, line in enumerate(content.split('\n'), 1):
        lowered = line.lower()

        for wordy, concise in WORDY_PHRASES.items():
            index = lowered.find(wordy)
            if index == -1:
                continue

            end = index + len(wordy)
            found = line[index:end]
            whole_words = _is_word_edge(line, index) and _is_word_edge(line, end)
            yield LintIssue(
                rule="style:wordy",
                severity=Severity.INFO,
                line=i,
                column=index,
                message=f'Replace "{wordy}" with "{concise}"',
                suggestion=concise,
                fix=Fix(column=index, old=found, new=match_case(found, concise)) if whole_words else None
            )


def _is_word_edge(line: str, pos: int) -> bool:
    """True when `pos` does not split a word."""
    if pos == 0 or pos == len(line):
        return True
    return not (_WORD_CHAR.match(line[pos - 1]) and _WORD_CHAR.match(line[pos]))


def long_sentence(
    content: str,
    max_words: int = LONG_SENTENCE_WORDS
) -> Generator[LintIssue, None, None]:
    """
    Flag lines with more than `max_words` words.

    Informational only; splitting a sentence is left to the writer.
    """
    for i, line in enumerate(content.split('\n'), 1):
        words = line.split()
        if len(words) > max_words:
            yield LintIssue(
                rule="style:long-sentence",
                severity=Severity.INFO,
                line=i,
                column=0,
                message=f"Sentence may be too long ({len(words)} words, max {max_words})",
            )
