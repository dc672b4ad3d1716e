import pytest
from bigbrain.engine import (
    Feedback, Correct, Misplaced, Absent, MalformedFeedbackInput,
    score, parse_feedback, filter_candidates,
)


def _fb(*marks):
    return Feedback(marks)


def test_correct_fixes_position():
    words = ["aaaab", "baaab"]
    fb = _fb(Correct("a"), Absent("x"), Absent("x"), Absent("x"), Absent("x"))
    assert filter_candidates(words, "axxxx", fb) == ["aaaab"]


def test_absent_letter_removed():
    words = ["aaxab", "aaaab"]
    fb = _fb(Correct("a"), Absent("x"), Absent("x"), Absent("x"), Absent("x"))
    assert filter_candidates(words, "axxxx", fb) == ["aaaab"]


def test_misplaced_excludes_its_position():
    words = ["aaxab", "abbab"]
    fb = _fb(Correct("a"), Misplaced("a"), Absent("x"), Absent("x"), Absent("x"))
    assert filter_candidates(words, "aaxxx", fb) == ["abbab"]


def test_misplaced_and_absent_same_letter():
    words = ["bannn", "bnnan", "bnann", "bnanx"]
    fb = _fb(Correct("b"), Misplaced("a"), Absent("a"), Absent("x"), Absent("x"))
    assert filter_candidates(words, "baaxx", fb) == ["bnnan"]


def test_allot_against_total():
    fb = score("allot", "total")
    words = ["total", "stoal", "allot", "tally", "alloy", "atoll", "tolls"]
    remaining = filter_candidates(words, "allot", fb)
    assert remaining == ["total", "stoal"]


def test_minimum_occurrences():
    # 'e' is credited twice (Misplaced + Correct), so one 'e' is not enough
    fb = score("eerie", "there")
    assert list(fb) == [Misplaced("e"), Absent("e"), Misplaced("r"), Absent("i"), Correct("e")]
    words = ["there", "where", "roate", "three"]
    assert filter_candidates(words, "eerie", fb) == ["there", "where"]


def test_absent_only_letter_banned_across_whole_mask():
    # 'c' is Absent at position 2 but is also banned at the Misplaced slot 1
    # and every other non-Correct slot of the row.
    fb = parse_feedback("-y---", "abcde")
    words = ["qcbqq", "cqbqq", "qqbqq", "qqbqc"]
    assert filter_candidates(words, "abcde", fb) == ["qqbqq"]


def test_survivors_keep_input_order():
    words = ["zzbzz", "qqbqq", "wwbww"]
    fb = parse_feedback("-y---", "abcde")
    assert filter_candidates(words, "abcde", fb) == ["zzbzz", "qqbqq", "wwbww"]


WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop",
         "level", "lemon", "belle", "total", "allot", "manas", "modem"]


@pytest.mark.parametrize("guess,answer", [
    ("crane", "trace"), ("raise", "stare"), ("belle", "level"),
    ("allot", "total"), ("modem", "manas"), ("scoop", "cared"),
])
def test_pruning_is_monotonic_and_keeps_answer(guess, answer):
    fb = score(guess, answer)
    once = filter_candidates(WORDS, guess, fb)
    assert set(once) <= set(WORDS)
    assert answer in once


@pytest.mark.parametrize("guess,answer", [
    ("crane", "trace"), ("belle", "level"), ("allot", "total"),
])
def test_pruning_is_idempotent(guess, answer):
    fb = score(guess, answer)
    once = filter_candidates(WORDS, guess, fb)
    assert filter_candidates(once, guess, fb) == once


def test_more_feedback_never_grows_the_set():
    rem1 = filter_candidates(WORDS, "raise", score("raise", "trace"))
    rem2 = filter_candidates(rem1, "crane", score("crane", "trace"))
    assert set(rem2) <= set(rem1)
    assert rem2 == ["trace"]


def test_feedback_must_match_guess():
    fb = score("crane", "trace")
    with pytest.raises(MalformedFeedbackInput):
        filter_candidates(WORDS, "stare", fb)
