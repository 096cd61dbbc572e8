"""
Game session: the constraint log and everything derived from it.

The log is the only mutable state. It is an ordered list of immutable
Constraint records supporting append, remove-at-index and reset; candidates,
statistics, suggestions and trap info are recomputed from (dictionaries,
log) on demand. Results are memoized on the tuple of constraints, so asking
twice without touching the log is free and any mutation invalidates them
automatically.

Dictionary choice: the primary list is filtered first. Only when nothing in
it survives is the fallback list filtered instead; that list then also
serves as the probe dictionary for suggestions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from ..analysis import (DEFAULT_CONFIG, AdvisorConfig, BestGuess, GamePhase, InfoWord, LetterStatistics,
                        PatternBreaker, PatternTrapInfo, SuggestionRecord, calculate_best_guesses,
                        calculate_info_gathering_words, compute_letter_statistics, compute_suggestions,
                        detect_pattern_trap, find_pattern_breakers, game_phase)
from ..engine import Constraint, filter_candidates, known_letters, normalize_guess, parse_pattern

log = logging.getLogger(__name__)

LogKey = Tuple[Constraint, ...]


def _clean(words: Iterable[str], N: int) -> Tuple[str, ...]:
    """N-letter a-z words only, lowercased, first occurrence kept."""
    return tuple(dict.fromkeys(filter_candidates(words, (), N)))


@dataclass(frozen=True)
class Analysis:
    """Snapshot of everything derived from one state of the log."""
    turn: int
    phase: GamePhase
    candidates: Tuple[str, ...]
    used_fallback: bool
    known_letters: FrozenSet[str]
    statistics: LetterStatistics
    suggestions: Tuple[SuggestionRecord, ...] = ()
    best_guesses: Tuple[BestGuess, ...] = ()
    info_words: Tuple[InfoWord, ...] = ()
    trap: PatternTrapInfo = PatternTrapInfo(is_trapped=False)
    breakers: Tuple[PatternBreaker, ...] = ()


class GameSession:
    def __init__(
            self,
            primary: Iterable[str],
            fallback: Optional[Iterable[str]] = None,
            *,
            N: int = 5,
            config: AdvisorConfig = DEFAULT_CONFIG,
    ):
        self.N = int(N)
        # cleaned once: these double as probe dictionaries, where every word is scored
        self.primary: Tuple[str, ...] = _clean(primary, self.N)
        self.fallback: Tuple[str, ...] = _clean(fallback or (), self.N)
        self.config = config
        self._log: List[Constraint] = []
        self._candidates_cache: Dict[LogKey, Tuple[Tuple[str, ...], bool]] = {}
        self._analysis_cache: Dict[LogKey, Analysis] = {}

    # ---- constraint log ----

    @property
    def constraints(self) -> LogKey:
        return tuple(self._log)

    def add_guess(self, word: str, pattern) -> Constraint:
        """
        Validate and append one guess. `pattern` may be text ("--G-G") or Marks.
        Raises InvalidGuessError / InvalidPatternError before touching the log.
        """
        c = Constraint(normalize_guess(word, self.N), parse_pattern(pattern, self.N))
        self._log.append(c)
        log.info("guess %d added: %s", len(self._log), c)
        return c

    def remove_guess(self, index: int) -> Constraint:
        if not 0 <= index < len(self._log):
            raise IndexError(f"no guess at index {index} (have {len(self._log)})")
        c = self._log.pop(index)
        log.info("guess %d removed: %s", index + 1, c)
        return c

    def reset(self) -> None:
        self._log.clear()
        self._candidates_cache.clear()
        self._analysis_cache.clear()
        log.info("session reset")

    # ---- derived values ----

    @property
    def turn(self) -> int:
        return len(self._log) + 1

    @property
    def phase(self) -> GamePhase:
        return game_phase(self.turn)

    @property
    def known_letters(self) -> Set[str]:
        return known_letters(self._log)

    def _resolve(self) -> Tuple[Tuple[str, ...], bool]:
        key = self.constraints
        hit = self._candidates_cache.get(key)
        if hit is not None:
            return hit

        cands = filter_candidates(self.primary, key, self.N)
        used_fallback = False
        if not cands and self.fallback:
            cands = filter_candidates(self.fallback, key, self.N)
            used_fallback = True
            log.info("primary list exhausted; %d candidates from fallback list", len(cands))

        hit = (tuple(cands), used_fallback)
        self._candidates_cache[key] = hit
        return hit

    @property
    def candidates(self) -> List[str]:
        return list(self._resolve()[0])

    @property
    def used_fallback(self) -> bool:
        return self._resolve()[1]

    @property
    def dictionary(self) -> Sequence[str]:
        """The list candidates are currently drawn from."""
        return self.fallback if self.used_fallback else self.primary

    def analyze(self) -> Analysis:
        key = self.constraints
        hit = self._analysis_cache.get(key)
        if hit is not None:
            log.debug("analysis cache hit (%d constraints)", len(key))
            return hit

        cands, used_fallback = self._resolve()
        dictionary = self.dictionary
        known = self.known_letters
        cfg = self.config

        trap = detect_pattern_trap(cands, self.N, config=cfg)
        result = Analysis(
            turn=self.turn,
            phase=self.phase,
            candidates=cands,
            used_fallback=used_fallback,
            known_letters=frozenset(known),
            statistics=compute_letter_statistics(cands, known, N=self.N, config=cfg),
            suggestions=tuple(compute_suggestions(cands, dictionary, self.turn, known, config=cfg)),
            best_guesses=tuple(calculate_best_guesses(cands, config=cfg)),
            info_words=tuple(calculate_info_gathering_words(cands, dictionary, known, config=cfg)),
            trap=trap,
            breakers=tuple(find_pattern_breakers(cands, dictionary, trap, config=cfg)),
        )
        self._analysis_cache[key] = result
        log.debug("analysis computed: %d candidates, %d suggestions", len(cands), len(result.suggestions))
        return result
