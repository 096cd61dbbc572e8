from wordle_advisor.analysis import (common_letters, compute_letter_statistics, coverage_score, coverage_weights,
                                     position_frequencies)


def test_position_frequencies_counts_and_percentages():
    cands = ["slate", "plate", "elate", "skate"]
    table = position_frequencies(cands)
    assert len(table) == 5
    first = {lf.letter: (lf.count, lf.percentage) for lf in table[0]}
    assert first == {"s": (2, 50), "p": (1, 25), "e": (1, 25)}
    # sorted by count desc, then letter
    assert [lf.letter for lf in table[0]] == ["s", "e", "p"]
    assert table[2][0].letter == "a" and table[2][0].percentage == 100


def test_position_frequencies_top_eight_and_empty():
    cands = [ch + "ight" for ch in "bfhlmnrstw"]
    assert len(position_frequencies(cands)[0]) == 8
    assert position_frequencies([]) == [[], [], [], [], []]


def test_percentage_rounds_half_up():
    cands = ["slate"] + ["plate"] * 7
    row = {lf.letter: lf.percentage for lf in position_frequencies(cands)[0]}
    assert row["s"] == 13  # 12.5%


def test_coverage_counts_letter_once_per_word_and_skips_known():
    w = coverage_weights(["geese", "eerie", "siege"], known={"s"})
    assert w["e"] == 3
    assert w["g"] == 2
    assert "s" not in w


def test_common_letters_ranked():
    rows = common_letters(["slate", "plate", "elate"], known=set("crane"))
    assert [r.letter for r in rows] == ["l", "t", "p", "s"]
    assert rows[0].percentage == 100
    assert common_letters([], known=set()) == []


def test_coverage_score_distinct_untested_letters():
    weights = {"s": 5, "l": 3, "e": 2}
    assert coverage_score("sleet", weights) == 10
    assert coverage_score("sleet", weights, known={"s"}) == 5


def test_compute_letter_statistics_bundle():
    stats = compute_letter_statistics(["slate", "plate"], known=set("crane"))
    assert dict(stats.coverage_weights) == {"s": 1, "l": 2, "t": 2, "p": 1}
    assert stats.position_frequencies[1][0].letter == "l"
    assert stats.common_letters[0].letter in ("l", "t")
