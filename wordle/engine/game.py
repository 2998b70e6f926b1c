"""
Game state machine.

A Game holds the secret word, the ordered turns played so far and the
letter knowledge derived from them. It is immutable: submit_guess returns a
new Game and leaves the old one untouched.

Status is derived from the history, never stored:
  - WON    : the last score is all PLACED_CORRECTLY
  - LOST   : not won, and MAX_GUESSES turns have been played
  - ACTIVE : otherwise (including before the first guess)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .knowledge import LetterKnowledge
from .scoring import DEFAULT_SCORING, WordScore, get_scorer
from .word import Word

logger = logging.getLogger(__name__)

# Single source of truth for the Wordle turn budget.
MAX_GUESSES = 6


class GameStatus(Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class GameOverError(RuntimeError):
    """A guess was submitted to a game that is already won or lost."""


class Turn(NamedTuple):
    guess: Word
    score: WordScore


@dataclass(frozen=True)
class Game:
    secret: Word
    turns: Tuple[Turn, ...] = ()
    knowledge: LetterKnowledge = field(default_factory=LetterKnowledge.initial)
    scoring: str = DEFAULT_SCORING

    def __post_init__(self):
        # Fail at construction rather than on the first guess.
        get_scorer(self.scoring)

    @property
    def guesses(self) -> Tuple[Word, ...]:
        return tuple(t.guess for t in self.turns)

    def remaining_guesses(self) -> int:
        return MAX_GUESSES - len(self.turns)

    def last_score(self) -> Optional[WordScore]:
        return self.turns[-1].score if self.turns else None

    def status(self) -> GameStatus:
        last = self.last_score()
        if last is not None and last.is_winner():
            return GameStatus.WON
        if self.remaining_guesses() <= 0:
            return GameStatus.LOST
        return GameStatus.ACTIVE

    def is_over(self) -> bool:
        return self.status() is not GameStatus.ACTIVE

    def submit_guess(self, guess: Word) -> "Game":
        """
        Play one turn: score `guess`, fold it into the letter knowledge and
        append it to the history. Repeated guesses are recorded again.

        Raises GameOverError if the game is already won or lost.
        """
        current = self.status()
        if current is not GameStatus.ACTIVE:
            raise GameOverError(f"game is {current.value}; no further guesses accepted")

        result = get_scorer(self.scoring)(self.secret, guess)
        updated = replace(
            self,
            turns=self.turns + (Turn(guess, result),),
            knowledge=self.knowledge.update(self.secret, guess),
        )
        logger.debug("turn %d: %s -> %s", len(updated.turns), guess, result)

        final = updated.status()
        if final is not GameStatus.ACTIVE:
            logger.info("game %s after %d guess(es); secret was %s",
                        final.value, len(updated.turns), self.secret)
        return updated


# ---- Functional API ----

def new_game(secret: Word, scoring: str = DEFAULT_SCORING) -> Game:
    """Start a game with an empty history and initial knowledge."""
    return Game(secret=secret, scoring=scoring)


def submit_guess(game: Game, guess: Word) -> Game:
    return game.submit_guess(guess)


def remaining_guesses(game: Game) -> int:
    return game.remaining_guesses()


def last_score(game: Game) -> Optional[WordScore]:
    return game.last_score()


def calculate_status(game: Game) -> GameStatus:
    return game.status()
