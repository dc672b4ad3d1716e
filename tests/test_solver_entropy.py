import math
import pytest
from bigbrain.engine import NoCandidates
from bigbrain.solvers import score_guess, rank, best


def test_two_distinct_patterns_is_one_bit():
    cands = ["aaaaa", "aabaa"]
    assert score_guess("aaaaa", cands) == 1.0
    result = rank(cands, cands)
    assert [bits for _, bits in result] == [1.0, 1.0]


def test_distinct_patterns_reach_log2_n():
    cands = ["aaaaa", "baaaa", "abaaa", "aabaa"]
    assert score_guess("aaaaa", cands) == pytest.approx(math.log2(4))


def test_equal_groups_give_log2_k():
    # 'z' splits the candidates into two groups of two
    cands = ["aaaaa", "aaaab", "zaaaa", "zaaab"]
    assert score_guess("zqqqq", cands) == pytest.approx(1.0)


def test_uninformative_guess_scores_zero():
    assert score_guess("qqqqq", ["aaaaa", "bbbbb", "ccccc"]) == 0.0
    assert score_guess("aaaaa", ["aaaaa"]) == 0.0
    assert score_guess("aaaaa", []) == 0.0


def test_rank_is_ascending_with_stable_ties():
    words = ["aaaaa", "aabaa", "zzzzz"]
    result = rank(words, words)
    assert result[0][0] == "zzzzz"
    assert result[0][1] < result[1][1]
    assert result[1][1] == result[2][1]
    # ties keep universe order, so the later word is picked
    assert [w for w, _ in result] == ["zzzzz", "aaaaa", "aabaa"]
    assert best(words, words) == "aabaa"
    assert best(list(reversed(words)), words) == "aaaaa"


def test_universe_word_outside_candidates_can_win():
    cands = ["aaaab", "aaaac", "aaaad"]
    universe = cands + ["bcdzz"]
    assert best(universe, cands) == "bcdzz"
    assert score_guess("bcdzz", cands) == pytest.approx(math.log2(3))


def test_parallel_ranking_matches_serial():
    cands = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "level"]
    universe = cands + ["slate", "adieu", "roate", "lemon"]
    serial = rank(universe, cands)
    parallel = rank(universe, cands, workers=2, chunksize=3)
    assert parallel == serial


def test_best_without_candidates_fails():
    with pytest.raises(NoCandidates):
        best(["crane"], [])
    with pytest.raises(NoCandidates):
        best([], ["crane"])
