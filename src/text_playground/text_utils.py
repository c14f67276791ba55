"""Text utility functions for string manipulation."""

import re
from dataclasses import dataclass
from string import ascii_letters

# Function words kept lowercase unless they open or close the text.
SMALL_WORDS: frozenset[str] = frozenset(
    {
        "a",
        "an",
        "and",
        "as",
        "at",
        "but",
        "by",
        "for",
        "in",
        "nor",
        "of",
        "on",
        "or",
        "per",
        "so",
        "the",
        "to",
        "up",
        "via",
        "yet",
    }
)

# Letters with at most one apostrophe-joined tail: "don't", "O'Brien".
# Hyphens are not part of the pattern, so "rock-n-roll" is three tokens.
_WORD_TOKEN = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)?")
_WHITESPACE_RUN = re.compile(r"(\s+)")

_ASCII_LETTERS = frozenset(ascii_letters)


@dataclass(frozen=True)
class WordLetterCount:
    word: str
    count: int


def to_upper_case(text: str) -> str:
    return text.upper()


def to_lower_case(text: str) -> str:
    return text.lower()


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_title_case(text: str) -> str:
    """
    AP-style title case.

    Every word token is lower-cased, then capitalized unless it is a small
    word sitting somewhere other than the first or last position. Whitespace
    and any character outside a word token are kept exactly as given.
    """
    if not text:
        return text

    total = len(_WORD_TOKEN.findall(text))
    if total == 0:
        return text

    position = 0

    def case_token(match: re.Match[str]) -> str:
        nonlocal position
        index = position
        position += 1

        word = match.group(0).lower()
        if index in (0, total - 1):
            return _capitalize_first(word)
        if word in SMALL_WORDS:
            return word
        return _capitalize_first(word)

    # Splitting with a capture group keeps whitespace runs at odd indices
    segments = _WHITESPACE_RUN.split(text)
    result: list[str] = []
    for segment in segments:
        if not segment or segment.isspace():
            result.append(segment)
        else:
            result.append(_WORD_TOKEN.sub(case_token, segment))

    return "".join(result)


def count_letters(text: str) -> int:
    """Counts ASCII letters (a-z, A-Z) anywhere in the string."""
    return sum(1 for char in text if char in _ASCII_LETTERS)


def count_letters_per_word(text: str) -> list[WordLetterCount]:
    """
    Splits on whitespace runs and counts the letters of each word.

    Words keep their original case and any embedded digits or punctuation.
    """
    return [
        WordLetterCount(word=word, count=count_letters(word)) for word in text.split()
    ]
