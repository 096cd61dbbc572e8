"""
Dictionary validator for the advisor.

What this module does:
- Validate the primary word list (answers are drawn from here) and, when
  given, the extended fallback list (consulted when the primary list runs dry).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that primary ⊆ fallback, so falling back never loses a word.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordle_advisor.datasets import validate_dictionaries, pretty_summary
    rep = validate_dictionaries(5, "data/primary_5.txt", "data/fallback_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib
import logging

log = logging.getLogger(__name__)


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (primary, fallback) pair."""
    N: int
    primary: FileReport
    fallback: Optional[FileReport]
    primary_subset_fallback: Optional[bool]   # None when no fallback list
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _check_file(label: str, path_str: str, N: int, issues: List[str]) -> Tuple[FileReport, List[str]]:
    p = Path(path_str)
    if not p.exists():
        issues.append(f"{label} file not found: {path_str}")
        return FileReport(path_str, False, 0, "", 0, 0), []

    words, invalid = _load_and_check(p, N)
    rep = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def validate_dictionaries(N: int, primary_path: str, fallback_path: Optional[str] = None) -> Dict:
    """
    Validate the primary (and optional fallback) word lists for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, duplicate/invalid flags, the primary ⊆ fallback
        check, a strict `passed` flag and the list of `issues`.
    """
    issues: List[str] = []

    primary, primary_words = _check_file("primary", primary_path, N, issues)

    fallback: Optional[FileReport] = None
    subset_ok: Optional[bool] = None
    if fallback_path is not None:
        fallback, fallback_words = _check_file("fallback", fallback_path, N, issues)
        if primary.exists and fallback.exists:
            missing = set(primary_words) - set(fallback_words)
            subset_ok = not missing
            if missing:
                # Surface a few examples to debug quickly
                issues.append(f"primary not subset of fallback (e.g., {sorted(missing)[:5]})")

    files = [primary] + ([fallback] if fallback is not None else [])
    passed = (
            all(f.exists and f.count > 0 and f.invalid_lines == 0 for f in files)
            and subset_ok is not False
    )

    for msg in issues:
        log.warning("dictionary check: %s", msg)

    rep = ValidationReport(
        N=N,
        primary=primary,
        fallback=fallback,
        primary_subset_fallback=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | primary=2315 (uniq=2315, sha=abc123...) | fallback=12972 (uniq=12972, sha=def456...) | primary⊆fallback=True | OK
    """
    a = report["primary"]
    parts = [
        f"N={report['N']}",
        f"primary={a['count']} (uniq={a['unique_count']}, sha={(a.get('sha256') or '')[:12]})",
    ]
    b = report.get("fallback")
    if b is not None:
        parts.append(f"fallback={b['count']} (uniq={b['unique_count']}, sha={(b.get('sha256') or '')[:12]})")
        parts.append(f"primary⊆fallback={report['primary_subset_fallback']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
