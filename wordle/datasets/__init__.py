from .validator import validate_wordlist, pretty_summary
from .dictionary import DEFAULT_WORDS, WordListError, default_words, load_words, random_word

__all__ = [
    "validate_wordlist", "pretty_summary",
    "DEFAULT_WORDS", "WordListError", "default_words", "load_words", "random_word",
]
