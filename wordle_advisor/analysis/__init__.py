from .config import AdvisorConfig, PhaseWeights, GamePhase, DEFAULT_CONFIG, game_phase, load_config
from .letter_stats import (LetterFrequency, LetterStatistics, compute_letter_statistics,
                           position_frequencies, coverage_weights, common_letters, coverage_score)
from .partition import expected_remaining, elimination_fraction
from .suggestions import SuggestionRecord, compute_suggestions
from .best_guesses import BestGuess, calculate_best_guesses
from .info_gathering import InfoWord, calculate_info_gathering_words
from .pattern_trap import PatternTrapInfo, PatternBreaker, detect_pattern_trap, find_pattern_breakers

__all__ = [
    "AdvisorConfig", "PhaseWeights", "GamePhase", "DEFAULT_CONFIG", "game_phase", "load_config",
    "LetterFrequency", "LetterStatistics", "compute_letter_statistics",
    "position_frequencies", "coverage_weights", "common_letters", "coverage_score",
    "expected_remaining", "elimination_fraction",
    "SuggestionRecord", "compute_suggestions",
    "BestGuess", "calculate_best_guesses",
    "InfoWord", "calculate_info_gathering_words",
    "PatternTrapInfo", "PatternBreaker", "detect_pattern_trap", "find_pattern_breakers",
]
