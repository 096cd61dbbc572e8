"""
Tunable knobs for the analysis layer.

The phase-weight table encodes game-strategy assumptions (how much to
value splitting the candidate set vs. simply trying a possible answer), so
it lives here rather than inside the scorer. Every threshold that bounds
interactive latency is also collected here.

Override any subset from a JSON file:

    {
      "suggestion_limit": 250,
      "phases": [
        {"max_turn": 2, "elimination": 1.0, "answer": 0.3, "coverage": 0.4, "duplicate_penalty": 0.25},
        {"max_turn": null, "elimination": 0.5, "answer": 1.0, "coverage": 0.2, "duplicate_penalty": 0.05}
      ]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class GamePhase(Enum):
    EARLY = "early"
    MID = "mid"
    LATE = "late"


@dataclass(frozen=True)
class PhaseWeights:
    """One row of the blend table; `max_turn=None` means open-ended."""
    max_turn: Optional[int]
    elimination: float
    answer: float
    coverage: float
    duplicate_penalty: float


DEFAULT_PHASES: Tuple[PhaseWeights, ...] = (
    PhaseWeights(max_turn=2, elimination=1.0, answer=0.3, coverage=0.4, duplicate_penalty=0.25),
    PhaseWeights(max_turn=4, elimination=0.8, answer=0.7, coverage=0.3, duplicate_penalty=0.15),
    PhaseWeights(max_turn=None, elimination=0.4, answer=1.0, coverage=0.15, duplicate_penalty=0.05),
)


def game_phase(turn: int) -> GamePhase:
    if turn <= 2:
        return GamePhase.EARLY
    if turn <= 4:
        return GamePhase.MID
    return GamePhase.LATE


@dataclass(frozen=True)
class AdvisorConfig:
    # Blended suggestions
    suggestion_limit: int = 300       # skip scoring above this many candidates
    candidate_only_limit: int = 40    # at or below this, score candidates only
    probe_pool_cap: int = 120         # dictionary words kept by coverage prefilter
    max_suggestions: int = 10

    # Best guesses among remaining words
    best_guess_limit: int = 150
    max_best_guesses: int = 8

    # Info-gathering words
    info_min_candidates: int = 3
    info_top_letters: int = 10
    info_min_matches: int = 3
    max_info_words: int = 8

    # Position table
    top_position_letters: int = 8

    # Pattern trap
    trap_min_candidates: int = 2
    trap_max_candidates: int = 20
    lock_threshold: float = 0.8
    lock_max_letters: int = 2
    max_breakers: int = 5

    phases: Tuple[PhaseWeights, ...] = field(default=DEFAULT_PHASES)

    def phase_for(self, turn: int) -> PhaseWeights:
        """Pick the first row whose max_turn covers `turn` (last row is the catch-all)."""
        for row in self.phases:
            if row.max_turn is None or turn <= row.max_turn:
                return row
        return self.phases[-1]


DEFAULT_CONFIG = AdvisorConfig()


def load_config(path: str | Path, base: AdvisorConfig = DEFAULT_CONFIG) -> AdvisorConfig:
    """
    Read a JSON object of overrides and apply it on top of `base`.
    Unknown keys raise ValueError so typos don't silently fall back to defaults.
    """
    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{p}: config must be a JSON object")

    known = {f.name for f in fields(AdvisorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"{p}: unknown config keys {unknown}")

    if "phases" in data:
        rows = data["phases"]
        if not rows:
            raise ValueError(f"{p}: 'phases' must contain at least one row")
        try:
            data["phases"] = tuple(PhaseWeights(**row) for row in rows)
        except TypeError as e:
            raise ValueError(f"{p}: bad phase row ({e})") from e

    return replace(base, **data)
