# apps/cli/simulate.py
"""
Self-play runner.

  1) Loads the word list (built-in list if --words is omitted) and, for a
     file, prints its validation summary.
  2) Plays one random-consistent game per secret with the chosen scoring.
  3) Prints win rate, mean guesses and the guess distribution.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List

from wordle.datasets import default_words, load_words, pretty_summary, validate_wordlist
from wordle.engine import SCORERS, DEFAULT_SCORING, MAX_GUESSES
from wordle.harness import run_batch, summarize


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordle — self-play statistics")
    ap.add_argument("--words", help="word list used as secrets and guesses (default: built-in list)")
    ap.add_argument("--scoring", choices=sorted(SCORERS), default=DEFAULT_SCORING)
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--sample", type=int, help="play only this many secrets (deterministic by seed)")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only when stderr is a terminal)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(name)s: %(message)s")

    if args.words:
        rep = validate_wordlist(args.words)
        print(pretty_summary(rep))
        if not rep["passed"]:
            for msg in rep["issues"]:
                print(f"  - {msg}", file=sys.stderr)
            return 2
        words = load_words(args.words)
    else:
        words = default_words()

    secrets = list(words)
    if args.sample and args.sample < len(secrets):
        random.Random(args.seed).shuffle(secrets)
        secrets = secrets[: args.sample]

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_batch(secrets, words, scoring=args.scoring, seed=args.seed, progress=progress)
    s = summarize(results)

    print(f"scoring={args.scoring} | games={s['games']} | wins={s['wins']} "
          f"| win_rate={s['win_rate']:.3f} | mean_guesses={s['mean_guesses']:.2f}")
    for n, count in zip(range(1, MAX_GUESSES + 1), s["distribution"]):
        print(f"  {n}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
