"""Word-choice rules specific to one style guide."""
import re
from typing import Generator

from ..models import LintIssue, Severity, Fix
from ._case import match_case

CLICK_ON_PATTERN = re.compile(r'\bclick on\b', re.IGNORECASE)
# Trailing comma/space and the next character go with the word, so that
# removing a leading "Please" can re-capitalize the sentence
PLEASE_PATTERN = re.compile(r'\b(please)\b,?[ \t]*(\w?)', re.IGNORECASE)
# A "please" ending the sentence takes its leading comma or space with it
SENTENCE_END = re.compile(r'[.!?]|\s*$')
TRAILING_SEPARATOR = re.compile(r',?[ \t]*$')
UTILIZE_PATTERN = re.compile(r'\butilize', re.IGNORECASE)


def click_on(content: str) -> Generator[LintIssue, None, None]:
    """
    Google: write "click", not "click on".

    First occurrence per line.
    """
    for i, line in enumerate(content.split('\n'), 1):
        match = CLICK_ON_PATTERN.search(line)
        if not match:
            continue

        yield LintIssue(
            rule="google:click-on",
            severity=Severity.WARNING,
            line=i,
            column=match.start(),
            message='Use "Click" instead of "Click on"',
            suggestion="Click",
            fix=Fix(column=match.start(), old=match.group(), new=match_case(match.group(), "click"))
        )


def please(content: str) -> Generator[LintIssue, None, None]:
    """Microsoft: avoid "please" in instructions."""
    for i, line in enumerate(content.split('\n'), 1):
        match = PLEASE_PATTERN.search(line)
        if not match:
            continue

        word, following = match.groups()
        if word[0].isupper():
            following = following.upper()

        start = match.start()
        if not following and SENTENCE_END.match(line, match.end()):
            start = TRAILING_SEPARATOR.search(line, 0, start).start()

        yield LintIssue(
            rule="microsoft:please",
            severity=Severity.INFO,
            line=i,
            column=match.start(),
            message='Avoid using "please" in instructions',
            suggestion="Remove 'please'",
            fix=Fix(column=start, old=line[start:match.end()], new=following)
        )


def utilize(content: str) -> Generator[LintIssue, None, None]:
    """
    Red Hat: "use" instead of "utilize".

    Also catches "utilized" and "utilizes"; the fix keeps the suffix.
    """
    for i, line in enumerate(content.split('\n'), 1):
        match = UTILIZE_PATTERN.search(line)
        if not match:
            continue

        yield LintIssue(
            rule="redhat:utilize",
            severity=Severity.WARNING,
            line=i,
            column=match.start(),
            message='Use "use" instead of "utilize"',
            suggestion="use",
            fix=Fix(column=match.start(), old=match.group(), new=match_case(match.group(), "use"))
        )
