"""
Lightweight guess validation.

This module answers the question: "Can this guess go into the log?"
A guess is well-formed iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exact length N
  - it exists in the provided `allowed` list/set (only when one is given)

The engine itself assumes well-formed input; rejection happens here, at the
boundary, before a Constraint is recorded.
"""

from typing import Iterable, Optional, Set


class InvalidGuessError(ValueError):
    """A guess that is not exactly N lowercase letters."""


class InvalidPatternError(ValueError):
    """A mark pattern with the wrong length or an unknown symbol."""


def validate_guess(word: str, allowed: Optional[Iterable[str]] = None, N: int = 5) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : optional iterable of allowed words; None skips the
                dictionary check (the advisor accepts any N-letter word)
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != N or not w.isascii() or not w.isalpha():
        return False

    if allowed is None:
        return True

    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set


def normalize_guess(word: str, N: int = 5) -> str:
    """Lowercase/strip `word`, raising InvalidGuessError if it is malformed."""
    if not validate_guess(word, None, N):
        raise InvalidGuessError(f"Enter a {N}-letter word (a-z); got {word!r}")
    return word.strip().lower()
