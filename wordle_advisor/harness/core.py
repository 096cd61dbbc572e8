"""
Self-play harness: how well does the advisor do if you just follow it?

- run_case:  play one hidden answer, always taking the advisor's first pick.
- run_batch: run many answers in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

Pick order each turn: top blended suggestion, then top best-guess, then top
info-gathering word, then the first remaining candidate. Suggestions are
"unavailable" above their candidate ceiling, so early turns on a full
dictionary usually come from the info-gathering list.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Optional, Sequence

from ..analysis import DEFAULT_CONFIG, AdvisorConfig
from ..engine import all_green, format_pattern, score
from ..session import Analysis, GameSession

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def pick_guess(analysis: Analysis, played: Iterable[str] = ()) -> Optional[str]:
    """First word the advisor recommends that hasn't been played yet."""
    played = set(played)
    ranked = (
        [s.word for s in analysis.suggestions]
        + [b.word for b in analysis.best_guesses]
        + [i.word for i in analysis.info_words]
        + list(analysis.candidates)
    )
    for w in ranked:
        if w not in played:
            return w
    return None


def run_case(
        answer: str,
        *,
        primary: Sequence[str],
        fallback: Sequence[str] = (),
        N: int = 5,
        config: AdvisorConfig = DEFAULT_CONFIG,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Execute one game until the advisor wins, runs out of ideas, or the turn
    budget is exhausted.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern_text)]), answer (str)
    """
    _assert_wordle_turns(max_turns)

    session = GameSession(primary, fallback, N=N, config=config)
    history: List = []
    success = False
    win = all_green(N)

    t0 = time.perf_counter()
    for _ in range(max_turns):
        guess = pick_guess(session.analyze(), (g for g, _ in history))
        if guess is None:
            break

        patt = score(guess, answer)
        history.append((guess, format_pattern(patt)))
        if patt == win:
            success = True
            break

        session.add_guess(guess, patt)

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
    }


def run_batch(
        answers: Sequence[str],
        *,
        primary: Sequence[str],
        fallback: Sequence[str] = (),
        N: int = 5,
        config: AdvisorConfig = DEFAULT_CONFIG,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers (after filtering to length N) are used for quick experiments.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    return [
        run_case(ans, primary=primary, fallback=fallback, N=N, config=config, max_turns=max_turns)
        for ans in pool
    ]
