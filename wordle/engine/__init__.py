from .word import ALPHABET, WORD_LENGTH, Word, WordParseError, InvalidLengthError, InvalidCharactersError
from .scoring import (
    DEFAULT_GLYPHS, DEFAULT_SCORING, SCORERS, LetterVerdict, WordScore,
    get_scorer, render_score, score, score_standard,
)
from .knowledge import LetterKnowledge, update_knowledge
from .game import (
    MAX_GUESSES, Game, GameOverError, GameStatus, Turn,
    calculate_status, last_score, new_game, remaining_guesses, submit_guess,
)

__all__ = [
    "ALPHABET", "WORD_LENGTH", "Word", "WordParseError", "InvalidLengthError",
    "InvalidCharactersError",
    "DEFAULT_GLYPHS", "DEFAULT_SCORING", "SCORERS", "LetterVerdict", "WordScore",
    "get_scorer", "render_score", "score", "score_standard",
    "LetterKnowledge", "update_knowledge",
    "MAX_GUESSES", "Game", "GameOverError", "GameStatus", "Turn",
    "calculate_status", "last_score", "new_game", "remaining_guesses", "submit_guess",
]
