# apps/cli/play.py
"""
Terminal Wordle.

Each turn prints the guesses left and reads one line. A blank line is
ignored, 'help' prints the rules and '?' shows the secret. Anything else is
scored, or explained and asked again if it is not a playable word. After
each scored guess the letters learned so far are shown:

    6 brown
      _X__O | good: NR | bad: BOW | unknown: ACDEFGHIJKLMPQSTUVXYZ
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List

from wordle.datasets import WordListError, load_words, random_word
from wordle.engine import (
    SCORERS, DEFAULT_SCORING, MAX_GUESSES, Game, GameStatus, Word, WordParseError, new_game,
)

logger = logging.getLogger(__name__)

HELP_MESSAGE = f"""\
Guess the secret word, a random five-letter English word.

Make up to ({MAX_GUESSES}) guesses. Type 'help' to see this again, or '?' to reveal the word.

An 'X' under a letter means you guessed the right letter in the right spot.
An 'O' means the letter you guessed there is in the word, but somewhere else.
An '_' means the letter you guessed there isn't in the word."""


def _letters(s) -> str:
    return "".join(sorted(s))


def knowledge_line(game: Game) -> str:
    """Last score followed by the good, bad and unknown letters."""
    k = game.knowledge
    return (f"  {game.last_score()} | good: {_letters(k.good)} | bad: {_letters(k.bad)} "
            f"| unknown: {_letters(k.unknown)}")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle — guess the five-letter word in six tries")
    ap.add_argument("--words", help="word list to draw the secret from (default: built-in list)")
    ap.add_argument("--secret", help="play against this word instead of a random one")
    ap.add_argument("--seed", type=int, help="RNG seed for the secret pick")
    ap.add_argument("--scoring", choices=sorted(SCORERS), default=DEFAULT_SCORING,
                    help="duplicate-letter rule (simple = membership, standard = budgeted)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def play(game: Game, read_line: Callable[[], str] | None = None) -> Game:
    """
    Run the prompt loop until the game is won or lost, or input ends.
    Lines come from `read_line` (stdin by default).
    """
    read_line = read_line or input
    while game.status() is GameStatus.ACTIVE:
        print(f"{game.remaining_guesses()} ", end="", flush=True)
        try:
            raw = read_line().strip()
        except EOFError:
            print()
            logger.warning("input closed with %d guess(es) left", game.remaining_guesses())
            return game

        # Commands that leave the game untouched
        if not raw:
            continue
        if raw.lower() == "help":
            print(HELP_MESSAGE)
            continue
        if raw == "?":
            print(f"  {game.secret}")
            continue

        try:
            guess = Word.parse(raw)
        except WordParseError as e:
            print(f"Input error: {e}")
            continue

        game = game.submit_guess(guess)
        print(knowledge_line(game))

    return game


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(name)s: %(message)s")

    try:
        if args.secret:
            secret = Word.parse(args.secret)
        else:
            words = load_words(args.words) if args.words else None
            secret = random_word(words, seed=args.seed)
    except (WordParseError, WordListError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("WORDLE!")
    game = play(new_game(secret, scoring=args.scoring))

    status = game.status()
    if status is GameStatus.WON:
        print("You're a winner, baby!")
    elif status is GameStatus.LOST:
        print(f"You lost. :( The word was {game.secret}.")
    else:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
