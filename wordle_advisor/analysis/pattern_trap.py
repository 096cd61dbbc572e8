"""
Pattern-trap detection.

The classic endgame trap: _IGHT with {l, m, n, r, s, t} still open. Most
slots are settled, one or two vary, and guessing candidates one at a time
can burn every remaining turn. The way out is a probe word that tests
several of the open letters at once, even if it cannot be the answer.

A slot is "locked" when its most common letter covers >= lock_threshold of
the candidates and at most lock_max_letters distinct letters occur there.
The state is trapped when >= 3 slots are locked and 1 or 2 vary.
Only evaluated for trap_min_candidates..trap_max_candidates candidates.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import DEFAULT_CONFIG, AdvisorConfig
from .partition import expected_remaining

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternTrapInfo:
    is_trapped: bool
    locked_positions: Tuple[int, ...] = ()
    variable_positions: Tuple[int, ...] = ()
    variable_letters: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PatternBreaker:
    word: str
    matched_letters: Tuple[str, ...]
    narrows_to: int             # even-split estimate: ceil(n / (matched + 1))
    expected_remaining: float   # exact, from the feedback partition

    @property
    def matched_count(self) -> int:
        return len(self.matched_letters)


NOT_TRAPPED = PatternTrapInfo(is_trapped=False)


def detect_pattern_trap(
        candidates: Sequence[str],
        N: int = 5,
        *,
        config: AdvisorConfig = DEFAULT_CONFIG,
) -> PatternTrapInfo:
    n = len(candidates)
    if n < config.trap_min_candidates or n > config.trap_max_candidates:
        return NOT_TRAPPED

    locked: List[int] = []
    variable: List[int] = []
    for i in range(N):
        counts = Counter(w[i] for w in candidates)
        top = counts.most_common(1)[0][1]
        if top / n >= config.lock_threshold and len(counts) <= config.lock_max_letters:
            locked.append(i)
        else:
            variable.append(i)

    letters = sorted({w[i] for w in candidates for i in variable})
    trapped = len(locked) >= 3 and 1 <= len(variable) <= 2
    if trapped:
        log.debug("pattern trap: locked=%s variable=%s letters=%s", locked, variable, letters)

    return PatternTrapInfo(
        is_trapped=trapped,
        locked_positions=tuple(locked),
        variable_positions=tuple(variable),
        variable_letters=tuple(letters),
    )


def find_pattern_breakers(
        candidates: Sequence[str],
        dictionary: Sequence[str],
        trap: PatternTrapInfo,
        *,
        config: AdvisorConfig = DEFAULT_CONFIG,
) -> List[PatternBreaker]:
    """
    Probe words testing as many open letters as possible.

    Candidates themselves are skipped; a probe only has to split the family.
    Ranked by matched-letter count (desc), then alphabetically.
    """
    if not trap.is_trapped or not trap.variable_letters:
        return []

    wanted = set(trap.variable_letters)
    need = min(2, len(wanted))
    candidate_set = set(candidates)
    n = len(candidates)

    hits: List[Tuple[str, Tuple[str, ...]]] = []
    for w in dict.fromkeys(dictionary):
        if w in candidate_set:
            continue
        matched = tuple(sorted(set(w) & wanted))
        if len(matched) >= need:
            hits.append((w, matched))

    hits.sort(key=lambda h: (-len(h[1]), h[0]))
    return [
        PatternBreaker(
            word=w,
            matched_letters=matched,
            narrows_to=math.ceil(n / (len(matched) + 1)),
            expected_remaining=expected_remaining(w, candidates),
        )
        for w, matched in hits[: config.max_breakers]
    ]
