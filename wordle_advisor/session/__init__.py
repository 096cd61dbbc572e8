from .core import GameSession, Analysis

__all__ = ["GameSession", "Analysis"]
