from pathlib import Path
import pytest
from apps.cli import play


@pytest.fixture
def words_file(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("crane\nraise\nstare\n", encoding="utf-8")
    return str(p)


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr(play, "_ask", lambda prompt: next(it))


def test_play_against_known_answer(words_file, capsys):
    assert play.main(["--words", words_file, "--answer", "crane"]) == 0
    out = capsys.readouterr().out
    assert "stare --GYG" in out
    assert "crane GGGGG" in out
    assert "Solved! The word was crane." in out


def test_play_reprompts_on_bad_feedback(words_file, monkeypatch, capsys):
    # accept the suggestion, mistype the row once, then enter it properly
    _feed(monkeypatch, ["", "gg", "--gyg"])
    assert play.main(["--words", words_file]) == 0
    out = capsys.readouterr().out
    assert "try again" in out
    assert "Solved! The word was crane." in out


def test_play_rejects_unknown_played_word(words_file, monkeypatch, capsys):
    _feed(monkeypatch, ["zzzzz", "raise", "ggggg"])
    assert play.main(["--words", words_file]) == 0
    out = capsys.readouterr().out
    assert "'zzzzz' is not a word I know" in out
    assert "Solved! The word was raise." in out


def test_play_reports_contradictory_feedback(words_file, monkeypatch, capsys):
    _feed(monkeypatch, ["", "-----"])
    assert play.main(["--words", words_file]) == 1
    assert "None of the words I know match" in capsys.readouterr().out


def test_play_bad_dictionary(tmp_path: Path, capsys):
    p = tmp_path / "words.txt"
    p.write_text("crane\ncranes\n", encoding="utf-8")
    assert play.main(["--words", str(p)]) == 2
    assert "Bad dictionary" in capsys.readouterr().err


def test_play_known_answer_outside_dictionary(words_file, capsys):
    # one word is left after the opener, but it is not the answer
    assert play.main(["--words", words_file, "--answer", "brane"]) == 1
    out = capsys.readouterr().out
    assert "stare --GYG" in out
    assert "crane -GGGG" in out
    assert "Solved!" not in out
    assert "None of the words I know match" in out


def test_play_rejects_bad_answer(words_file, capsys):
    assert play.main(["--words", words_file, "--answer", "cranes"]) == 2
    captured = capsys.readouterr()
    assert "Bad answer" in captured.err
    assert captured.out == ""
