"""
Secret-word source.

Supplies valid Words for new games, either from the built-in list or from a
word-list file (one word per line, any case, blank lines ignored). The
engine trusts whatever comes out of here and does not re-validate it.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Sequence

from wordle.engine import Word, WordParseError

logger = logging.getLogger(__name__)

DEFAULT_WORDS: Sequence[str] = (
    "CIGAR", "REBUT", "SISSY", "HUMPH", "AWAKE", "BLUSH", "FOCAL", "EVADE", "NAVAL", "SERVE",
    "HEATH", "DWARF", "MODEL", "KARMA", "STINK", "GRADE", "QUIET", "BENCH", "ABATE", "FEIGN",
)


class WordListError(ValueError):
    """A word-list file holds an entry that is not a playable word."""

    def __init__(self, path: str, line_no: int, cause: WordParseError):
        super().__init__(f"{path}:{line_no}: {cause}")
        self.path = path
        self.line_no = line_no


def default_words() -> List[Word]:
    return [Word.parse(w) for w in DEFAULT_WORDS]


def load_words(path: Path | str) -> List[Word]:
    """
    Parse a word list. Surrounding whitespace is stripped per line.

    Raises:
      FileNotFoundError if `path` is missing.
      WordListError on the first entry that does not parse.
    """
    words: List[Word] = []
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    for line_no, raw in enumerate(lines, start=1):
        w = raw.strip()
        if not w:
            continue
        try:
            words.append(Word.parse(w))
        except WordParseError as e:
            raise WordListError(str(path), line_no, e) from e
    logger.debug("loaded %d word(s) from %s", len(words), path)
    return words


def random_word(
        words: Sequence[Word] | None = None,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
) -> Word:
    """
    Pick a secret uniformly from `words` (built-in list if omitted).

    Pass `rng` to share a generator, or `seed` for a reproducible pick.
    """
    pool = list(words) if words is not None else default_words()
    if not pool:
        raise ValueError("cannot pick a secret word from an empty word list")
    if rng is None:
        rng = random.Random(seed)
    return rng.choice(pool)
