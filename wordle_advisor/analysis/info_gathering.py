"""
Info-gathering words: dictionary words that test the most widespread
untested letters at once, whether or not they can be the answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .config import DEFAULT_CONFIG, AdvisorConfig
from .letter_stats import common_letters


@dataclass(frozen=True)
class InfoWord:
    word: str
    score: int
    matching_letters: Tuple[str, ...]
    could_be_answer: bool


def calculate_info_gathering_words(
        candidates: Sequence[str],
        dictionary: Sequence[str],
        known: Iterable[str] = (),
        *,
        config: AdvisorConfig = DEFAULT_CONFIG,
) -> List[InfoWord]:
    if len(candidates) < config.info_min_candidates:
        return []

    top = {lf.letter for lf in common_letters(candidates, known)[: config.info_top_letters]}
    if not top:
        return []

    candidate_set = set(candidates)
    out: List[InfoWord] = []
    for w in dict.fromkeys(dictionary):
        # distinct letters in the order they appear in the word
        matching = tuple(ch for ch in dict.fromkeys(w) if ch in top)
        if len(matching) >= config.info_min_matches:
            out.append(InfoWord(w, len(matching), matching, w in candidate_set))

    out.sort(key=lambda iw: (-iw.score, not iw.could_be_answer, iw.word))
    return out[: config.max_info_words]
