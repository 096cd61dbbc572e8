"""
Letter statistics over the CURRENT candidate set.

Two views:
  - per-position histograms (what tends to sit in slot i)
  - whole-word coverage: how many candidates contain each untested letter,
    counting a letter once per word ('geese' adds one 'e', not three)

Letters already played are excluded from coverage whatever mark they got;
guessing a gray letter again tells you nothing new.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .config import DEFAULT_CONFIG, AdvisorConfig


@dataclass(frozen=True)
class LetterFrequency:
    letter: str
    count: int
    percentage: int


@dataclass(frozen=True)
class LetterStatistics:
    """Read-only bundle; the session caches and shares these."""
    position_frequencies: Tuple[Tuple[LetterFrequency, ...], ...]
    coverage_weights: Mapping[str, int]
    common_letters: Tuple[LetterFrequency, ...] = ()


def _percent(count: int, total: int) -> int:
    # half-up in integer arithmetic (round() would send 12.5 to 12)
    return (count * 200 + total) // (2 * total) if total > 0 else 0


def position_frequencies(candidates: Sequence[str], N: int = 5, top: int = 8) -> List[List[LetterFrequency]]:
    """Top `top` letters per slot by count (ties broken alphabetically)."""
    counts = [Counter() for _ in range(N)]
    for w in candidates:
        for i, ch in enumerate(w):
            counts[i][ch] += 1

    total = len(candidates)
    table: List[List[LetterFrequency]] = []
    for c in counts:
        ranked = sorted(c.items(), key=lambda kv: (-kv[1], kv[0]))[:top]
        table.append([LetterFrequency(ch, n, _percent(n, total)) for ch, n in ranked])
    return table


def coverage_weights(candidates: Iterable[str], known: Iterable[str] = ()) -> Dict[str, int]:
    """letter -> number of candidates containing it, skipping `known` letters."""
    known = set(known)
    c: Counter = Counter()
    for w in candidates:
        for ch in set(w):
            if ch not in known:
                c[ch] += 1
    return dict(c)


def common_letters(candidates: Sequence[str], known: Iterable[str] = ()) -> List[LetterFrequency]:
    """Coverage weights as ranked rows, most widespread untested letter first."""
    weights = coverage_weights(candidates, known)
    total = len(candidates)
    ranked = sorted(weights.items(), key=lambda kv: (-kv[1], kv[0]))
    return [LetterFrequency(ch, n, _percent(n, total)) for ch, n in ranked]


def coverage_score(word: str, weights: Dict[str, int], known: Iterable[str] = ()) -> int:
    """
    Sum coverage weights over the word's DISTINCT untested letters
    (prefer 'slate' over 'sleet' when counts are similar).
    """
    known = set(known)
    return sum(weights.get(ch, 0) for ch in set(word) if ch not in known)


def compute_letter_statistics(
        candidates: Sequence[str],
        known: Iterable[str] = (),
        *,
        N: int = 5,
        config: AdvisorConfig = DEFAULT_CONFIG,
) -> LetterStatistics:
    known = set(known)
    return LetterStatistics(
        position_frequencies=tuple(
            tuple(row) for row in position_frequencies(candidates, N, config.top_position_letters)
        ),
        coverage_weights=MappingProxyType(coverage_weights(candidates, known)),
        common_letters=tuple(common_letters(candidates, known)),
    )
