"""
Wordle-style scoring (feedback) for a single (secret, guess) pair.

Conventions (display glyphs):
  - 'X' : placed correctly   = letter matches the secret at this position
  - 'O' : present elsewhere  = letter occurs somewhere else in the secret
  - '_' : not present        = letter does not occur in the secret

Two scorers are registered:
  - "simple"   (default): membership rule. A guessed letter that is not in
    its exact spot is PRESENT_ELSEWHERE whenever it occurs anywhere in the
    secret, however many times it was guessed. Secret CRANE, guess EERIE
    scores "OOO_X" (both misplaced E's count).
  - "standard": the two-pass Wordle rule that caps PRESENT_ELSEWHERE by
    the number of unmatched copies left in the secret.

Both are pure and total over two valid Words.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Callable, Dict, Iterator, List, Mapping, Tuple

from .word import WORD_LENGTH, Word


class LetterVerdict(Enum):
    PLACED_CORRECTLY = "placed_correctly"
    PRESENT_ELSEWHERE = "present_elsewhere"
    NOT_PRESENT = "not_present"


DEFAULT_GLYPHS: Mapping[LetterVerdict, str] = {
    LetterVerdict.PLACED_CORRECTLY: "X",
    LetterVerdict.PRESENT_ELSEWHERE: "O",
    LetterVerdict.NOT_PRESENT: "_",
}


class WordScore:
    """Verdicts for one guess, one per position in guess order."""

    __slots__ = ("_verdicts",)

    def __init__(self, verdicts):
        verdicts = tuple(verdicts)
        if len(verdicts) != WORD_LENGTH:
            raise ValueError(f"a word score needs {WORD_LENGTH} verdicts, got {len(verdicts)}")
        self._verdicts: Tuple[LetterVerdict, ...] = verdicts

    @property
    def verdicts(self) -> Tuple[LetterVerdict, ...]:
        return self._verdicts

    def is_winner(self) -> bool:
        return all(v is LetterVerdict.PLACED_CORRECTLY for v in self._verdicts)

    def __iter__(self) -> Iterator[LetterVerdict]:
        return iter(self._verdicts)

    def __len__(self) -> int:
        return len(self._verdicts)

    def __getitem__(self, i: int) -> LetterVerdict:
        return self._verdicts[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordScore):
            return NotImplemented
        return self._verdicts == other._verdicts

    def __hash__(self) -> int:
        return hash(self._verdicts)

    def __str__(self) -> str:
        return render_score(self)

    def __repr__(self) -> str:
        return f"WordScore({render_score(self)!r})"


def render_score(score: WordScore, glyphs: Mapping[LetterVerdict, str] = DEFAULT_GLYPHS) -> str:
    """Concatenate one glyph per verdict, e.g. "_X__O"."""
    return "".join(glyphs[v] for v in score)


def score(secret: Word, guess: Word) -> WordScore:
    """
    Compare `guess` against `secret` with the membership rule.

    Per position: exact match first, then membership anywhere in the
    secret, else absent. Duplicate guessed letters are not budgeted.

    Examples:
      score(CRANE, BROWN) -> "_X__O"
      score(SPICE, SPACE) -> "XX_XX"
    """
    target = secret.letters()
    present = set(target)

    verdicts: List[LetterVerdict] = []
    for i, g in enumerate(guess.letters()):
        if target[i] == g:
            verdicts.append(LetterVerdict.PLACED_CORRECTLY)
        elif g in present:
            verdicts.append(LetterVerdict.PRESENT_ELSEWHERE)
        else:
            verdicts.append(LetterVerdict.NOT_PRESENT)
    return WordScore(verdicts)


def score_standard(secret: Word, guess: Word) -> WordScore:
    """
    Compare `guess` against `secret` with duplicate budgeting.

    Algorithm (two-pass):
      1) Mark exact matches and count the secret's unmatched letters.
      2) Mark PRESENT_ELSEWHERE only while the letter still has a count.

    Examples:
      score_standard(LEVEL, BELLE) -> "_XOOO"
      score_standard(CRANE, EERIE) -> "__O_X"
    """
    target = secret.letters()
    letters = guess.letters()
    verdicts = [LetterVerdict.NOT_PRESENT] * WORD_LENGTH

    # Pass 1: exact matches; leftover secret letters feed pass 2.
    remaining: Counter = Counter()
    for i, (g, s) in enumerate(zip(letters, target)):
        if g == s:
            verdicts[i] = LetterVerdict.PLACED_CORRECTLY
        else:
            remaining[s] += 1

    # Pass 2: consume one leftover copy per PRESENT_ELSEWHERE.
    for i, g in enumerate(letters):
        if verdicts[i] is LetterVerdict.PLACED_CORRECTLY:
            continue
        if remaining[g] > 0:
            verdicts[i] = LetterVerdict.PRESENT_ELSEWHERE
            remaining[g] -= 1

    return WordScore(verdicts)


Scorer = Callable[[Word, Word], WordScore]

# ---- Scorer registry ----
SCORERS: Dict[str, Scorer] = {
    "simple": score,
    "standard": score_standard,
}

DEFAULT_SCORING = "simple"


def get_scorer(name: str) -> Scorer:
    """
    Look up a registered scorer by name.
    """
    try:
        return SCORERS[name]
    except KeyError as e:
        raise ValueError(f"Unknown scoring: {name}. Available: {sorted(SCORERS)}") from e
