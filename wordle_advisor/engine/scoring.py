"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (text form of a Mark):
  - 'G'  : GREEN  = correct letter in the correct position
  - 'Y'  : YELLOW = correct letter in the wrong position
  - '-'  : GRAY   = letter not present (or present fewer times than guessed)

A pattern is a tuple of Marks, one per position. Tuples are hashable, so
patterns can be used directly as bucket keys when partitioning candidates.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass walks the guess left-to-right and marks yellows only while
     the letter still has remaining count.

A letter guessed k times therefore receives at most min(k, occurrences in
answer) GREEN+YELLOW marks; the excess repeats stay GRAY.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple

from .validation import InvalidPatternError


class Mark(Enum):
    GREEN = "G"
    YELLOW = "Y"
    GRAY = "-"

    def __str__(self) -> str:
        return self.value


Pattern = Tuple[Mark, ...]

# Extra spellings accepted for GRAY when reading user input.
_GRAY_ALIASES = {"-", ".", "x", "b", "_"}


def score(guess: str, answer: str) -> Pattern:
    """
    Compute Wordle feedback pattern for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      format_pattern(score("crane", "slate")) -> "--G-G"
      format_pattern(score("sassy", "chess")) -> "Y--G-"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    pattern = [Mark.GRAY] * len(guess)

    # Pass 1: greens consume their answer slot; everything else is available.
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = Mark.GREEN
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by what is left of each letter.
    for i, g in enumerate(guess):
        if pattern[i] is Mark.GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = Mark.YELLOW
            remaining[g] -= 1

    return tuple(pattern)


# Name used by the presentation layer.
encode_feedback = score


def all_green(N: int = 5) -> Pattern:
    return (Mark.GREEN,) * N


def parse_pattern(text: str | Iterable[Mark], N: int = 5) -> Pattern:
    """
    Turn user input into a Pattern.

    Accepts either a string such as "--G-G" / "bbgyb" (case-insensitive;
    '.', 'x', 'b', '_' are read as GRAY) or an iterable of Marks.
    Raises InvalidPatternError for a wrong length or an unknown symbol.
    """
    if not isinstance(text, str):
        marks = tuple(text)
        if len(marks) != N or not all(isinstance(m, Mark) for m in marks):
            raise InvalidPatternError(f"pattern must be {N} Marks; got {marks!r}")
        return marks

    raw = text.strip()
    if len(raw) != N:
        raise InvalidPatternError(f"pattern must have {N} symbols; got {text!r}")

    marks = []
    for ch in raw.lower():
        if ch == "g":
            marks.append(Mark.GREEN)
        elif ch == "y":
            marks.append(Mark.YELLOW)
        elif ch in _GRAY_ALIASES:
            marks.append(Mark.GRAY)
        else:
            raise InvalidPatternError(f"unknown mark {ch!r} in pattern {text!r}")
    return tuple(marks)


def format_pattern(pattern: Iterable[Mark]) -> str:
    """Pattern -> compact text form, e.g. "--G-G"."""
    return "".join(m.value for m in pattern)
