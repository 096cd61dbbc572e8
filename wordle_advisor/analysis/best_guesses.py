"""
Best guesses among the remaining words only.

Unlike the blended suggestions, every guess here could still win: each
candidate is scored by expected remaining candidates and the smallest
values come first. Skipped (empty) above best_guess_limit candidates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .config import DEFAULT_CONFIG, AdvisorConfig
from .partition import expected_remaining


@dataclass(frozen=True)
class BestGuess:
    word: str
    expected_remaining: float
    elimination_pct: float


def calculate_best_guesses(candidates: Sequence[str], *, config: AdvisorConfig = DEFAULT_CONFIG) -> List[BestGuess]:
    n = len(candidates)
    if n <= 1 or n > config.best_guess_limit:
        return []

    scored: List[BestGuess] = []
    for g in candidates:
        left = expected_remaining(g, candidates)
        scored.append(BestGuess(g, left, (n - left) / n * 100))

    scored.sort(key=lambda b: (b.expected_remaining, b.word))
    return scored[: config.max_best_guesses]
