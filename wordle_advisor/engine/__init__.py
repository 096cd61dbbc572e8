from .scoring import Mark, Pattern, score, encode_feedback, all_green, parse_pattern, format_pattern
from .constraints import Constraint, filter_candidates, known_letters
from .validation import validate_guess, normalize_guess, InvalidGuessError, InvalidPatternError

__all__ = [
    "Mark", "Pattern", "score", "encode_feedback", "all_green", "parse_pattern", "format_pattern",
    "Constraint", "filter_candidates", "known_letters",
    "validate_guess", "normalize_guess", "InvalidGuessError", "InvalidPatternError",
]
