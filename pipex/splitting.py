"""Splitting of command strings into argument vectors.

Words are separated by spaces. A single-quoted run forms one word,
spaces included. Empty quoted runs produce no word. A quote directly
after an unquoted run starts a new word.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

__all__ = ["QuoteError", "count_words", "split_command"]

_WORD_PATTERN = re.compile(r"'([^']*)'|[^ ']+")


class QuoteError(ValueError):
    """Raised when a command string holds an unbalanced single quote."""

    def __init__(self, text: str) -> None:
        super().__init__(f"unbalanced quote in command: {text!r}")
        self.text = text


def _balanced(text: str) -> bool:
    return text.count("'") % 2 == 0


def _words(text: str) -> Iterator[str]:
    for match in _WORD_PATTERN.finditer(text):
        quoted = match.group(1)
        if quoted is None:
            yield match.group(0)
        elif quoted:
            yield quoted


def count_words(text: str | None) -> int:
    """Return the number of words in *text*, or 0 if its quotes are unbalanced."""
    if not text or not _balanced(text):
        return 0
    return sum(1 for _ in _words(text))


def split_command(text: str) -> list[str]:
    """Split *text* into a list of words, honouring single quotes."""
    if not _balanced(text):
        raise QuoteError(text)
    return list(_words(text))