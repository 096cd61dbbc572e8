"""
Candidate filtering given game history.

Given:
  - a pool of words (the primary dictionary, or the fallback one)
  - a log of Constraint records (guess + the marks it received)

Return:
  - words that are consistent with ALL feedback seen so far.

A word w survives a constraint c iff score(c.guess, w) == c.pattern. This
feedback-equivalence check is exact for every duplicate-letter layout; the
position-by-position shortcut (green = fixed, yellow = elsewhere, gray =
absent) drifts once a guess repeats a letter three times.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set

from .scoring import Pattern, format_pattern, score


@dataclass(frozen=True)
class Constraint:
    """One logged guess and the feedback it produced."""
    guess: str
    pattern: Pattern

    def __str__(self) -> str:
        return f"{self.guess}:{format_pattern(self.pattern)}"


def filter_candidates(words: Iterable[str], constraints: Iterable[Constraint], N: int = 5) -> List[str]:
    """
    Keep only words (length == N) that would produce exactly the recorded
    patterns for every constraint.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    constraints = list(constraints)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip anything that isn't a clean N-letter alpha token
        if len(w) != N or not w.isalpha():
            continue

        if all(score(c.guess, w) == c.pattern for c in constraints):
            out.append(w)

    return out


def known_letters(constraints: Iterable[Constraint]) -> Set[str]:
    """Every letter already played, whatever mark it got."""
    known: Set[str] = set()
    for c in constraints:
        known.update(c.guess)
    return known
