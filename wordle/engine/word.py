"""
Playable word value type.

A Word is exactly WORD_LENGTH letters from the basic Latin alphabet, stored
uppercase so every word has a single representation:

    Word.parse("Adieu")      -> Word("ADIEU")
    Word.parse("hen")        -> raises InvalidLengthError
    Word.parse("OBÉIR")      -> raises InvalidCharactersError

Parsing does not trim input; whitespace counts toward the length.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_letters, ascii_uppercase
from typing import Tuple

# Single source of truth for word length.
WORD_LENGTH = 5

# Seeds the "unknown" letter set of every new game.
ALPHABET = frozenset(ascii_uppercase)

_ASCII_LETTERS = frozenset(ascii_letters)


class WordParseError(ValueError):
    """Raw text could not be turned into a Word."""


class InvalidLengthError(WordParseError):
    def __init__(self, raw: str):
        super().__init__("Word must be five letters long.")
        self.raw = raw


class InvalidCharactersError(WordParseError):
    def __init__(self, raw: str):
        super().__init__("Word must contain only letters from the English alphabet.")
        self.raw = raw


@dataclass(frozen=True)
class Word:
    value: str

    def __post_init__(self):
        # Direct construction goes through the same checks as parse().
        if len(self.value) != WORD_LENGTH:
            raise InvalidLengthError(self.value)
        if any(c not in _ASCII_LETTERS for c in self.value):
            raise InvalidCharactersError(self.value)
        object.__setattr__(self, "value", self.value.upper())

    @classmethod
    def parse(cls, raw: str) -> "Word":
        """
        Validate and normalize raw text.

        Length is counted in characters (code points), not bytes, and is
        checked before the character class.
        """
        return cls(raw)

    def letters(self) -> Tuple[str, ...]:
        return tuple(self.value)

    def __str__(self) -> str:
        return self.value
