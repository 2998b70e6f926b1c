"""
Self-play harness.

- run_case:  play one game against a known secret by guessing uniformly
             among the words still consistent with the feedback so far.
- run_batch: run many games back to back with a progress bar.
- summarize: aggregate a batch into win rate and guess distribution.

Games are driven through Game.submit_guess, so the turn budget and win/loss
rules are exactly those of the engine.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Sequence

import numpy as np
from tqdm import tqdm

from wordle.engine import DEFAULT_SCORING, MAX_GUESSES, GameStatus, Word, get_scorer, new_game
from wordle.engine.constraints import filter_candidates

logger = logging.getLogger(__name__)


def run_case(
        secret: Word,
        candidates: Sequence[Word],
        *,
        scoring: str = DEFAULT_SCORING,
        seed: int | None = None,
) -> Dict:
    """
    Play one game to completion.

    Args:
        secret:     the hidden word for this case
        candidates: the word pool guesses are drawn from
        scoring:    registered scorer name
        seed:       RNG seed for reproducible picks

    Returns:
        dict with keys: answer (str), success (bool), guesses (int),
        history (list[(guess, score)] as strings)
    """
    rng = random.Random(seed)
    scorer = get_scorer(scoring)
    game = new_game(secret, scoring=scoring)
    pool: List[Word] = list(candidates)

    while not game.is_over():
        # Fall back to the full pool if the secret was not in it.
        guess = rng.choice(pool or list(candidates))
        game = game.submit_guess(guess)
        pool = filter_candidates(pool, game.turns[-1:], scorer)

    return {
        "answer": str(secret),
        "success": game.status() is GameStatus.WON,
        "guesses": len(game.turns),
        "history": [(str(t.guess), str(t.score)) for t in game.turns],
    }


def run_batch(
        secrets: Sequence[Word],
        candidates: Sequence[Word],
        *,
        scoring: str = DEFAULT_SCORING,
        seed: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run one case per secret. Each case's seed is derived from the base seed
    (seed + index) so runs are reproducible but not identical across cases.
    """
    out: List[Dict] = []
    iterator = tqdm(secrets, ncols=80, desc="Playing", unit="game", disable=not progress)
    for idx, secret in enumerate(iterator, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(secret, candidates, scoring=scoring, seed=case_seed))
    logger.info("played %d game(s) with %s scoring", len(out), scoring)
    return out


def summarize(results: Sequence[Dict]) -> Dict:
    """
    Returns:
        dict with keys: games, wins, win_rate, mean_guesses (over wins,
        NaN if none), distribution (wins per guess count 1..MAX_GUESSES)
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": float("nan"),
                "distribution": [0] * MAX_GUESSES}

    guesses = np.array([r["guesses"] for r in results], dtype=int)
    wins = np.array([r["success"] for r in results], dtype=bool)
    won_in = guesses[wins]

    dist = np.bincount(won_in, minlength=MAX_GUESSES + 1)[1:MAX_GUESSES + 1]
    return {
        "games": int(len(results)),
        "wins": int(wins.sum()),
        "win_rate": float(wins.mean()),
        "mean_guesses": float(won_in.mean()) if won_in.size else float("nan"),
        "distribution": dist.tolist(),
    }
