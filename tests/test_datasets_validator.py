from pathlib import Path
import pytest
from bigbrain.datasets import validate_wordlists, pretty_summary, load_words
from bigbrain.engine import MalformedDictionaryEntry, Word


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    # all lowercase alpha; allowed holds extra guesses only
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["trace", "cared", "soare"])

    rep = validate_wordlists(str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["overlap"] == 0
    assert rep["answers"]["count"] == 3
    s = pretty_summary(rep)
    assert "answers=3" in s and "overlap=0" in s and s.endswith("OK")


def test_validate_dictionary_alone(tmp_path: Path):
    ans = tmp_path / "words.txt"
    _write(ans, ["crane", "raise"])
    rep = validate_wordlists(str(ans))
    assert rep["passed"] is True
    assert rep["allowed"] is None
    assert "allowed=" not in pretty_summary(rep)


def test_validate_wordlists_flags_errors(tmp_path: Path):
    # wrong length, invalid chars and uppercase are flagged
    ans = tmp_path / "answers.txt"
    ans.write_text("crane\ncranes\n???\nRAISE\ncrane\n", encoding="utf-8")

    rep = validate_wordlists(str(ans))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_overlap_is_reported_not_failed(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare", "trace"])

    rep = validate_wordlists(str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["overlap"] == 2
    assert rep["issues"] == []


def test_validate_missing_allowed_file(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    _write(ans, ["crane"])
    rep = validate_wordlists(str(ans), str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert any("allowed file not found" in msg for msg in rep["issues"])


def test_validate_missing_file(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_words_normalizes(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\n\n  raise \r\nSTARE\n", encoding="utf-8")
    words = load_words(p)
    assert words == ["crane", "raise", "stare"]
    assert all(isinstance(w, Word) for w in words)


def test_load_words_fails_on_bad_entry(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stares"])
    with pytest.raises(MalformedDictionaryEntry) as exc:
        load_words(p)
    assert exc.value.line == 3
    assert "stares" in str(exc.value)


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "missing.txt")
