"""A single bowling frame.

A frame's ``bonus`` tag is written by the *previous* frame: when frame ``n``
ends in a strike or spare, frame ``n + 1`` is tagged and its own rolls are
counted a second time on its score.  ``double_bonus`` covers back-to-back
strikes, where the first roll of frame ``n + 2`` is still owed to frame ``n``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from ..config import PIN_COUNT

logger = logging.getLogger(__name__)


class Score(Protocol):
    def score(self) -> int:
        ...


class FrameBonusType(str, Enum):
    SPARE = "spare"
    STRIKE = "strike"


@dataclass
class Frame:
    first_roll_pins: int = 0
    second_roll_pins: Optional[int] = None
    bonus: Optional[FrameBonusType] = None
    double_bonus: bool = False

    @property
    def is_strike(self) -> bool:
        return self.first_roll_pins == PIN_COUNT

    @property
    def is_spare(self) -> bool:
        return (
            not self.is_strike
            and self.second_roll_pins is not None
            and self.first_roll_pins + self.second_roll_pins == PIN_COUNT
        )

    def rolls_score(self) -> int:
        if self.second_roll_pins is None:
            return self.first_roll_pins
        return self.first_roll_pins + self.second_roll_pins

    def score(self) -> int:
        score = self.rolls_score()
        if self.bonus is FrameBonusType.SPARE:
            score += self.first_roll_pins
        elif self.bonus is FrameBonusType.STRIKE:
            score += self.rolls_score()
        if self.double_bonus:
            score += self.first_roll_pins

        logger.info(
            "Score for frame is %d",
            score,
            extra={
                "frame_score": score,
                "frame_bonus": self.bonus.value if self.bonus else None,
                "frame_double_bonus": self.double_bonus,
            },
        )
        return score
