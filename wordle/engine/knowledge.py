"""
Letter knowledge gathered from the guesses played so far.

Every letter of the alphabet is in exactly one bucket:
  - good    : guessed, and occurs somewhere in the secret
  - bad     : guessed, and does not occur in the secret
  - unknown : never guessed

Classification is by membership only (position is ignored), so a letter can
never land in both good and bad.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from .word import ALPHABET, Word


@dataclass(frozen=True)
class LetterKnowledge:
    good: FrozenSet[str] = frozenset()
    bad: FrozenSet[str] = frozenset()
    unknown: FrozenSet[str] = ALPHABET

    @classmethod
    def initial(cls) -> "LetterKnowledge":
        return cls()

    def update(self, secret: Word, guess: Word) -> "LetterKnowledge":
        return update_knowledge(self, secret, guess)


def update_knowledge(current: LetterKnowledge, secret: Word, guess: Word) -> LetterKnowledge:
    """
    Classify every distinct letter of `guess` and return the new knowledge.

    Letters already classified are re-inserted into the same bucket, so
    replaying a guess changes nothing.
    """
    in_secret = set(secret.letters())
    guessed = set(guess.letters())

    hits = guessed & in_secret
    misses = guessed - in_secret

    return LetterKnowledge(
        good=current.good | hits,
        bad=current.bad | misses,
        unknown=current.unknown - guessed,
    )
