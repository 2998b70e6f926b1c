"""
Candidate filtering given game history.

Given:
  - a pool of Words
  - the turns played so far, as (guess, score) pairs
  - the scorer that produced those scores

Return:
  - the Words that would have produced exactly the recorded scores.

Filtering must use the same scorer the game used; a "simple" score and a
"standard" score for the same pair can differ on repeated letters.
"""

from typing import Iterable, List, Tuple

from .scoring import Scorer, WordScore, score
from .word import Word

History = Iterable[Tuple[Word, WordScore]]


def filter_candidates(words: Iterable[Word], history: History, scorer: Scorer = score) -> List[Word]:
    """
    Keep only words consistent with every (guess, score) in `history`.
    Order is preserved as in `words`.
    """
    history = list(history)
    out: List[Word] = []
    for w in words:
        # If w were the secret, would each old guess have scored the same?
        if all(scorer(w, g) == s for g, s in history):
            out.append(w)
    return out
