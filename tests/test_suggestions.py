import itertools

import pytest
from wordle_advisor.analysis import (DEFAULT_CONFIG, AdvisorConfig, GamePhase, calculate_best_guesses,
                                     calculate_info_gathering_words, compute_suggestions, coverage_weights,
                                     elimination_fraction, expected_remaining, game_phase)
from wordle_advisor.analysis.suggestions import select_pool


def _synthetic(n, tail="xy"):
    words = ("".join(p) + tail for p in itertools.product("abcdefghijklm", repeat=3))
    return list(itertools.islice(words, n))


def test_expected_remaining_and_elimination():
    cands = ["slate", "plate", "elate"]
    assert expected_remaining("slate", cands) == pytest.approx(5 / 3)
    assert elimination_fraction("slate", ["slate", "plate"]) == pytest.approx(0.5)


@pytest.mark.parametrize("n", [0, 1, 301])
def test_suggestions_unavailable_outside_range(n):
    cands = _synthetic(n)
    assert compute_suggestions(cands, cands, turn=3) == []


def test_suggestions_capped_at_ten():
    cands = _synthetic(60)
    out = compute_suggestions(cands, cands + _synthetic(100, tail="zq"), turn=1)
    assert 0 < len(out) <= 10
    scores = [s.blended_score for s in out]
    assert scores == sorted(scores, reverse=True)


def test_two_way_tie_breaks_alphabetically():
    out = compute_suggestions(["slate", "plate"], ["slate", "plate"], turn=1)
    assert [s.word for s in out] == ["plate", "slate"]
    for s in out:
        assert s.elimination_fraction == pytest.approx(0.5)
        assert s.answer_flag == 1
        # 1.0*0.5 + 0.4*0.5 (degenerate coverage range) + 0.3*1
        assert s.blended_score == pytest.approx(1.0)


def test_duplicate_penalty_and_coverage_normalization():
    out = compute_suggestions(["geese", "siege"], [], turn=1)
    by_word = {s.word: s for s in out}
    assert by_word["geese"].coverage_score == 6
    assert by_word["siege"].coverage_score == 7
    assert by_word["geese"].blended_score == pytest.approx(0.5 + 0.0 + 0.3 - 0.25)
    assert by_word["siege"].blended_score == pytest.approx(0.5 + 0.4 + 0.3)
    assert out[0].word == "siege"


def test_phase_shifts_from_probe_to_possible_answer():
    cands = ["bills", "fills", "hills", "mills"]
    # splits all four apart but can never be the answer
    probe = "bfhmz"
    cfg = AdvisorConfig(candidate_only_limit=1)
    known = {"i", "l", "s"}

    early = compute_suggestions(cands, [probe] + cands, turn=1, known=known, config=cfg)
    assert early[0].word == probe
    assert early[0].elimination_fraction == pytest.approx(0.75)
    assert early[0].answer_flag == 0

    late = compute_suggestions(cands, [probe] + cands, turn=5, known=known, config=cfg)
    assert late[0].word == "bills"
    assert late[0].answer_flag == 1
    assert late[-1].word == probe


def test_pool_keeps_every_candidate_when_large():
    cands = _synthetic(50)
    dictionary = _synthetic(200, tail="zq")
    weights = coverage_weights(cands, set())
    pool = select_pool(cands, dictionary, weights, set())
    assert len(pool) == DEFAULT_CONFIG.probe_pool_cap + len(cands)
    assert set(cands) <= set(pool)


def test_pool_is_candidates_when_small():
    cands = _synthetic(40)
    assert select_pool(cands, _synthetic(200, tail="zq"), {}, set()) == cands


def test_phase_table():
    assert game_phase(1) is GamePhase.EARLY and game_phase(2) is GamePhase.EARLY
    assert game_phase(3) is GamePhase.MID and game_phase(4) is GamePhase.MID
    assert game_phase(5) is GamePhase.LATE and game_phase(9) is GamePhase.LATE
    assert DEFAULT_CONFIG.phase_for(2).elimination == 1.0
    assert DEFAULT_CONFIG.phase_for(4).answer == 0.7
    assert DEFAULT_CONFIG.phase_for(6).duplicate_penalty == 0.05


def test_config_changes_limits():
    cfg = AdvisorConfig(suggestion_limit=2)
    assert compute_suggestions(["slate", "plate", "elate"], [], turn=1, config=cfg) == []


def test_best_guesses():
    out = calculate_best_guesses(["slate", "plate", "elate"])
    assert [b.word for b in out] == ["elate", "plate", "slate"]
    assert out[0].elimination_pct == pytest.approx(100 * (3 - 5 / 3) / 3)
    assert calculate_best_guesses(["slate"]) == []
    assert calculate_best_guesses(_synthetic(151)) == []
    assert len(calculate_best_guesses(_synthetic(20))) == 8


def test_info_gathering_words():
    cands = ["slate", "plate", "elate", "skate"]
    dictionary = ["split", "stalk", "plate", "tulip", "kelps", "mulch"]
    out = calculate_info_gathering_words(cands, dictionary, known=set("crane"))
    assert [iw.word for iw in out] == ["kelps", "split", "stalk", "plate", "tulip"]
    assert out[1].matching_letters == ("s", "p", "l", "t")
    assert out[3].could_be_answer is True
    assert calculate_info_gathering_words(cands[:2], dictionary, known=set()) == []
