from pathlib import Path

from apps.cli import play as play_cli
from apps.cli import simulate as simulate_cli
from wordle.engine import GameStatus, Word, new_game


def _feed(lines):
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


def test_play_reprompts_on_bad_input_and_wins(capsys):
    game = play_cli.play(new_game(Word.parse("CRANE")), _feed(["hen", "cr4ne", " brown ", "crane"]))
    out = capsys.readouterr().out
    assert game.status() is GameStatus.WON
    assert "Input error: Word must be five letters long." in out
    assert "Input error: Word must contain only letters from the English alphabet." in out
    assert "_X__O | good: NR | bad: BOW" in out
    assert len(game.turns) == 2


def test_play_stops_when_input_ends(capsys):
    game = play_cli.play(new_game(Word.parse("CRANE")), _feed(["slate"]))
    assert game.status() is GameStatus.ACTIVE
    assert game.remaining_guesses() == 5


def test_main_with_secret(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _feed(["drake"]))
    assert play_cli.main(["--secret", "drake"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("WORDLE!")
    assert "You're a winner, baby!" in out


def test_main_reports_loss(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _feed(["crane"] * 6))
    assert play_cli.main(["--secret", "drake", "--scoring", "standard"]) == 0
    assert "You lost. :( The word was DRAKE." in capsys.readouterr().out


def test_main_rejects_bad_secret(capsys):
    assert play_cli.main(["--secret", "prairie"]) == 2
    assert "five letters" in capsys.readouterr().err


def test_simulate_main(tmp_path: Path, capsys):
    p = tmp_path / "words.txt"
    p.write_text("crane\nraise\nstare\n", encoding="utf-8")
    assert simulate_cli.main(["--words", str(p), "--progress", "off", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "words=3" in out
    assert "games=3 | wins=3" in out


def test_simulate_rejects_invalid_wordlist(tmp_path: Path, capsys):
    p = tmp_path / "words.txt"
    p.write_text("crane\n???\n", encoding="utf-8")
    assert simulate_cli.main(["--words", str(p), "--progress", "off"]) == 2
    assert "FAIL" in capsys.readouterr().out


def test_play_commands_do_not_use_a_turn(capsys):
    game = play_cli.play(new_game(Word.parse("CRANE")), _feed(["", "   ", "HELP", "?", "brown"]))
    out = capsys.readouterr().out
    assert "Input error" not in out
    assert play_cli.HELP_MESSAGE in out
    assert "  CRANE\n" in out
    assert len(game.turns) == 1


def test_play_help_is_case_insensitive(capsys):
    play_cli.play(new_game(Word.parse("CRANE")), _feed(["Help"]))
    assert "right letter in the right spot" in capsys.readouterr().out


def test_play_shows_unknown_letters(capsys):
    play_cli.play(new_game(Word.parse("CRANE")), _feed(["brown"]))
    out = capsys.readouterr().out
    assert "_X__O | good: NR | bad: BOW | unknown: ACDEFGHIJKLMPQSTUVXYZ" in out
