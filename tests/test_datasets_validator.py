from pathlib import Path

import pytest
from wordle_advisor.datasets import load_words, pretty_summary, validate_dictionaries, write_lines


def test_validate_dictionaries_happy_path(tmp_path: Path):
    prim = write_lines(["crane", "raise", "stare"], tmp_path / "primary_5.txt")
    fall = write_lines(["crane", "raise", "stare", "trace", "cared"], tmp_path / "fallback_5.txt")

    rep = validate_dictionaries(5, prim, fall)
    assert rep["passed"] is True
    assert rep["primary_subset_fallback"] is True
    s = pretty_summary(rep)
    assert "N=5" in s and "primary⊆fallback=True" in s and s.endswith("OK")


def test_validate_primary_only(tmp_path: Path):
    prim = write_lines(["crane", "raise"], tmp_path / "primary_5.txt")
    rep = validate_dictionaries(5, prim)
    assert rep["passed"] is True
    assert rep["fallback"] is None and rep["primary_subset_fallback"] is None
    assert "fallback" not in pretty_summary(rep)


def test_validate_flags_invalid_lines(tmp_path: Path):
    prim = tmp_path / "primary_5.txt"
    prim.write_text("crane\nCRANE\ncranes\n???\n\n", encoding="utf-8")

    rep = validate_dictionaries(5, str(prim))
    assert rep["passed"] is False
    assert rep["primary"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_subset_violation_and_missing(tmp_path: Path):
    prim = write_lines(["crane", "raise", "stare"], tmp_path / "primary_5.txt")
    fall = write_lines(["crane", "stare"], tmp_path / "fallback_5.txt")

    rep = validate_dictionaries(5, prim, fall)
    assert rep["passed"] is False
    assert rep["primary_subset_fallback"] is False
    assert any("subset" in msg for msg in rep["issues"])

    rep = validate_dictionaries(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_words_cleans_and_dedupes(tmp_path: Path):
    p = write_lines(["Crane", "slate", "", "cranes", "crane", "pl4te", "plate"], tmp_path / "w.txt")
    assert load_words(p) == ["crane", "slate", "plate"]
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "missing.txt")
