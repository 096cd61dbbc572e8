"""
Blended suggestions.

Each guess in the scored pool gets three signals:
  - elimination : expected share of candidates it rules out (partition.py)
  - answer      : 1 if it could itself be the answer, else 0
  - coverage    : sum of coverage weights of its distinct untested letters,
                  min-max normalized across the pool (0.5 if all equal)

and a phase-dependent blend of them, minus a small penalty for repeated
letters. Early turns lean on elimination and coverage; late turns lean on
hitting a possible answer.

Pool selection:
  - Few candidates (<= candidate_only_limit): score the candidates only.
  - Otherwise: rank the full dictionary by raw coverage score, keep the top
    probe_pool_cap, then union in every candidate so that no possible answer
    is left out of the ranking.

Above suggestion_limit candidates nothing is computed; the empty result
means "not computed", not "nothing worth guessing".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .config import DEFAULT_CONFIG, AdvisorConfig
from .letter_stats import coverage_score, coverage_weights
from .partition import elimination_fraction

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionRecord:
    word: str
    elimination_fraction: float
    answer_flag: int
    coverage_score: int
    blended_score: float


def _normalize(x: float, lo: float, hi: float) -> float:
    if hi == lo:
        return 0.5
    return (x - lo) / (hi - lo)


def select_pool(
        candidates: Sequence[str],
        dictionary: Sequence[str],
        weights: dict,
        known: set,
        config: AdvisorConfig = DEFAULT_CONFIG,
) -> List[str]:
    if len(candidates) <= config.candidate_only_limit:
        return list(candidates)

    # Rank dictionary by distinct untested-letter coverage; word order breaks ties.
    ranked = sorted(
        dict.fromkeys(dictionary),
        key=lambda w: (-coverage_score(w, weights, known), w),
    )
    pool = ranked[: config.probe_pool_cap]

    seen = set(pool)
    for w in candidates:
        if w not in seen:
            seen.add(w)
            pool.append(w)
    return pool


def compute_suggestions(
        candidates: Sequence[str],
        dictionary: Sequence[str],
        turn: int,
        known: Iterable[str] = (),
        *,
        config: AdvisorConfig = DEFAULT_CONFIG,
) -> List[SuggestionRecord]:
    """
    Rank next guesses by blended score (descending, then word).

    Returns at most config.max_suggestions records; empty when there is at
    most one candidate or more than config.suggestion_limit.
    """
    n = len(candidates)
    if n <= 1 or n > config.suggestion_limit:
        log.debug("suggestions skipped for %d candidates", n)
        return []

    known = set(known)
    weights = coverage_weights(candidates, known)
    phase = config.phase_for(turn)
    candidate_set = set(candidates)

    pool = select_pool(candidates, dictionary, weights, known, config)
    log.debug("scoring %d guesses against %d candidates (turn %d)", len(pool), n, turn)

    raw = [(g, elimination_fraction(g, candidates), coverage_score(g, weights, known)) for g in pool]
    lo = min(cov for _, _, cov in raw)
    hi = max(cov for _, _, cov in raw)

    out: List[SuggestionRecord] = []
    for g, elim, cov in raw:
        answer_flag = 1 if g in candidate_set else 0
        dup = phase.duplicate_penalty if len(set(g)) < len(g) else 0.0
        blended = (
            phase.elimination * elim
            + phase.coverage * _normalize(cov, lo, hi)
            + phase.answer * answer_flag
            - dup
        )
        out.append(SuggestionRecord(g, elim, answer_flag, cov, blended))

    out.sort(key=lambda r: (-r.blended_score, r.word))
    return out[: config.max_suggestions]
