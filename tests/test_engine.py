import pytest
from wordle_advisor.engine import (Constraint, InvalidGuessError, InvalidPatternError, Mark, filter_candidates,
                                   format_pattern, known_letters, normalize_guess, parse_pattern, score,
                                   validate_guess)

G, Y, X = Mark.GREEN, Mark.YELLOW, Mark.GRAY

WORDS = ["crane", "slate", "plate", "spilt", "allow", "loyal", "sassy", "chess",
         "belle", "level", "lemon", "cools", "scoop", "geese", "eerie", "abbey"]


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("crane", "slate", "--G-G"),
    ("allow", "loyal", "YYYY-"),
    ("sassy", "chess", "Y--G-"),
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("eerie", "geese", "YG--G"),
])
def test_score_golden(guess, answer, expected):
    assert format_pattern(score(guess, answer)) == expected


def test_score_marks_and_case():
    assert score("CRANE", "slate") == (X, X, G, X, G)
    assert score("sassy", "chess") == (Y, X, X, G, X)


@pytest.mark.parametrize("w", WORDS)
def test_score_self_is_all_green(w):
    assert score(w, w) == (G,) * 5


def test_score_not_symmetric():
    assert score("allow", "loyal") != score("loyal", "allow")


def test_repeated_letter_marks_capped_by_answer_multiplicity():
    patt = score("sassy", "chess")
    s_marks = [m for ch, m in zip("sassy", patt) if ch == "s"]
    assert sorted(m.value for m in s_marks) == sorted(["G", "Y", "-"])


def test_filter_keeps_slate_and_plate_drops_c_r_n():
    words = ["slate", "plate", "crane", "rates", "notes", "blame", "grate"]
    cand = filter_candidates(words, [Constraint("crane", parse_pattern("--G-G"))])
    assert "slate" in cand and "plate" in cand
    assert not any(set(w) & {"c", "r", "n"} for w in cand)


def test_filter_preserves_dictionary_order():
    words = ["plate", "slate", "blame", "elate"]
    cand = filter_candidates(words, [Constraint("crane", parse_pattern("--G-G"))])
    assert cand == [w for w in words if w in cand]


@pytest.mark.parametrize("guess", ["sassy", "allow", "eerie", "crane"])
def test_filter_self_consistency_and_separation(guess):
    for a in WORDS:
        c = Constraint(guess, score(guess, a))
        kept = filter_candidates(WORDS, [c])
        assert a in kept
        for b in WORDS:
            if score(guess, b) != c.pattern:
                assert b not in kept


def test_filter_triple_letter_guess_is_exact():
    # three e's in the guess; the answer has two
    c = Constraint("eerie", score("eerie", "geese"))
    assert filter_candidates(["geese", "eerie", "where", "emcee"], [c]) == ["geese"]


def test_filter_skips_malformed_dictionary_entries():
    assert filter_candidates(["slate", "slates", "sl4te", " PLATE "], []) == ["slate", "plate"]


def test_known_letters_include_gray():
    log = [Constraint("crane", parse_pattern("--G-G")), Constraint("spilt", parse_pattern("-----"))]
    assert known_letters(log) == set("cranespilt")


@pytest.mark.parametrize("text,expected", [
    ("--G-G", (X, X, G, X, G)),
    ("bbgyb", (X, X, G, Y, X)),
    ("..GY.", (X, X, G, Y, X)),
])
def test_parse_pattern(text, expected):
    assert parse_pattern(text) == expected


@pytest.mark.parametrize("bad", ["--G-", "--G-GG", "--Q-G"])
def test_parse_pattern_rejects(bad):
    with pytest.raises(InvalidPatternError):
        parse_pattern(bad)


def test_validate_guess():
    assert validate_guess("CRANE") is True
    assert validate_guess("crane", ["crane", "raise"]) is True
    assert validate_guess("stare", ["crane", "raise"]) is False
    assert validate_guess("cranes") is False
    assert validate_guess("???") is False
    assert validate_guess(12345) is False


def test_normalize_guess_raises_value_error():
    assert normalize_guess(" Crane ") == "crane"
    with pytest.raises(InvalidGuessError):
        normalize_guess("cran")
    assert issubclass(InvalidGuessError, ValueError)
