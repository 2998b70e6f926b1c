import pytest
from wordle.engine import (
    LetterVerdict, Word, WordScore, get_scorer, render_score, score, score_standard,
)

X = LetterVerdict.PLACED_CORRECTLY
O = LetterVerdict.PRESENT_ELSEWHERE
U = LetterVerdict.NOT_PRESENT


def W(s):
    return Word.parse(s)


# --- golden tests for the membership rule ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("CRANE", "BROWN", "_X__O"),
    ("SPICE", "SPACE", "XX_XX"),
    ("JANUS", "JANUS", "XXXXX"),
    ("CRANE", "EERIE", "OOO_X"),
    ("LEVEL", "BELLE", "_XOOO"),
    ("ABBEY", "BOBBY", "O_XOX"),
])
def test_score_golden(secret, guess, expected):
    assert str(score(W(secret), W(guess))) == expected


# --- golden tests for the budgeted rule ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("CRANE", "BROWN", "_X__O"),
    ("CRANE", "EERIE", "__O_X"),
    ("LEVEL", "BELLE", "_XOOO"),
    ("LEVEL", "LEMON", "XX___"),
    ("SCOOP", "COOLS", "OOX_O"),
    ("ABBEY", "BOBBY", "O_X_X"),
])
def test_score_standard_golden(secret, guess, expected):
    assert str(score_standard(W(secret), W(guess))) == expected


def test_simple_rule_does_not_budget_duplicates():
    # one E in the secret, two misplaced E's in the guess
    s = score(W("THOSE"), W("EERIE"))
    assert [s[0], s[1]] == [O, O]
    assert str(score_standard(W("THOSE"), W("EERIE"))) == "____X"


@pytest.mark.parametrize("word", ["CRANE", "SISSY", "AAAAA", "QUIET"])
@pytest.mark.parametrize("scorer", [score, score_standard])
def test_self_guess_is_a_win(word, scorer):
    result = scorer(W(word), W(word))
    assert result.is_winner()
    assert len(result) == 5


def test_winner_requires_every_letter_placed():
    assert WordScore([X, X, X, X, X]).is_winner()
    for verdicts in ([X, X, U, O, U], [O] * 5, [U] * 5, [X, X, X, X, O], [U, X, X, X, X]):
        assert not WordScore(verdicts).is_winner()


def test_word_score_length_is_fixed():
    with pytest.raises(ValueError):
        WordScore([X, X, X])


def test_render_score_glyphs_are_swappable():
    s = WordScore([X, O, U, O, O])
    assert str(s) == "XO_OO"
    emoji = {X: "G", O: "Y", U: "-"}
    assert render_score(s, emoji) == "GY-YY"


def test_get_scorer_registry():
    assert get_scorer("simple") is score
    assert get_scorer("standard") is score_standard
    with pytest.raises(ValueError, match="Unknown scoring"):
        get_scorer("absurdle")
