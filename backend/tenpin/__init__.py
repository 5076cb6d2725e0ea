"""Ten-pin bowling scoring engine."""

from .exceptions import GameOverError, InvalidRollError, ScoringError
from .scoring import Cursor, Frame, FrameBonusType, Game, Score

__all__ = [
    "Cursor",
    "Frame",
    "FrameBonusType",
    "Game",
    "GameOverError",
    "InvalidRollError",
    "Score",
    "ScoringError",
]
