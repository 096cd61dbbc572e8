"""
Expected Remaining Candidates (ERC).

For guess g, if the current candidates partition into buckets of sizes
{s_i} by feedback pattern, the expected leftover after seeing the pattern
(uniform prior over the true answer) is:

    E[left | g] = sum_i (s_i / n) * s_i = (1/n) * sum_i s_i^2

This is not Shannon entropy. The phase weights in config.py were tuned
against this metric.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence

from ..engine import Pattern, score as score_fn


def bucket_sizes(guess: str, candidates: Sequence[str]) -> List[int]:
    buckets: Dict[Pattern, int] = defaultdict(int)
    _score = score_fn
    for ans in candidates:
        buckets[_score(guess, ans)] += 1
    return list(buckets.values())


def expected_remaining(guess: str, candidates: Sequence[str]) -> float:
    n = len(candidates)
    if n == 0:
        return 0.0
    return sum(s * s for s in bucket_sizes(guess, candidates)) / n


def elimination_fraction(guess: str, candidates: Sequence[str]) -> float:
    """Expected share of `candidates` ruled out by playing `guess`."""
    n = len(candidates)
    if n == 0:
        return 0.0
    return (n - expected_remaining(guess, candidates)) / n
