"""Bowling scoring engine."""

from .cursor import Cursor
from .frame import Frame, FrameBonusType, Score
from .game import Game

__all__ = [
    "Cursor",
    "Frame",
    "FrameBonusType",
    "Game",
    "Score",
]
