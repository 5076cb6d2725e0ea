"""Single-player ten-pin bowling game.

Rolls are fed one at a time through :meth:`Game.roll`; :meth:`Game.score`
may be called at any point for the running total.
"""

import logging
from typing import Iterable, List, Optional

from ..config import FRAME_COUNT, LAST_FRAME_INDEX, PIN_COUNT, strict_pins_enabled
from ..exceptions import GameOverError
from ..schemas import FrameOut, GameSummary
from ..validation import validate_pins
from .cursor import Cursor
from .frame import Frame, FrameBonusType

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, *, strict: Optional[bool] = None) -> None:
        """Create an empty game.

        ``strict`` turns on pin validation; when omitted it follows the
        ``TENPIN_STRICT_PINS`` environment variable.
        """

        self.frames: List[Frame] = [Frame() for _ in range(FRAME_COUNT)]
        self.cursor = Cursor()
        self.bonus_tenth_frame_third_roll: Optional[int] = None
        self.rolls: List[int] = []
        self.strict = strict_pins_enabled() if strict is None else strict

    @classmethod
    def default(cls) -> "Game":
        return cls()

    @classmethod
    def from_rolls(cls, rolls: Iterable[int], *, strict: Optional[bool] = None) -> "Game":
        """Replay ``rolls`` into a new game and return it."""

        game = cls(strict=strict)
        for pins in rolls:
            game.roll(pins)
        return game

    @property
    def current_frame_index(self) -> int:
        return self.cursor.frame_index

    @property
    def current_roll_index(self) -> int:
        return self.cursor.roll_index

    @property
    def is_finished(self) -> bool:
        return self.cursor.finished

    def roll(self, pins: int) -> None:
        cursor = self.cursor
        if cursor.finished:
            raise GameOverError(cursor.frame_index, cursor.roll_index)

        frame = self.frames[cursor.frame_index]
        if self.strict:
            pins = validate_pins(
                pins,
                frame_index=cursor.frame_index,
                roll_index=cursor.roll_index,
                first_roll_pins=frame.first_roll_pins,
                second_roll_pins=frame.second_roll_pins,
            )

        next_frame = (
            self.frames[cursor.frame_index + 1]
            if cursor.frame_index + 1 < FRAME_COUNT
            else None
        )
        bonus: Optional[FrameBonusType] = None

        if cursor.roll_index == 0:
            frame.first_roll_pins = pins
            if pins == PIN_COUNT:
                bonus = FrameBonusType.STRIKE
                # two strikes in a row: the next frame's first roll is also
                # owed to the frame before this one
                if frame.bonus is FrameBonusType.STRIKE and next_frame is not None:
                    next_frame.double_bonus = True
        elif cursor.roll_index == 1:
            frame.second_roll_pins = pins
            if frame.first_roll_pins + pins == PIN_COUNT:
                bonus = FrameBonusType.SPARE
        else:
            self.bonus_tenth_frame_third_roll = pins

        if next_frame is not None:
            next_frame.bonus = bonus

        fill_ball_earned = cursor.frame_index == LAST_FRAME_INDEX and (
            frame.is_strike or bonus is FrameBonusType.SPARE
        )
        self.cursor = cursor.advance(bonus, fill_ball_earned=fill_ball_earned)
        self.rolls.append(pins)

        logger.debug(
            "Rolled %d in frame %d roll %d",
            pins,
            cursor.frame_index + 1,
            cursor.roll_index + 1,
        )
        if self.cursor.finished:
            logger.debug("Game finished after %d rolls", len(self.rolls))

    def frame_scores(self) -> List[int]:
        return [frame.score() for frame in self.frames]

    def score(self) -> int:
        total_score = sum(self.frame_scores())
        if self.bonus_tenth_frame_third_roll is not None:
            total_score += self.bonus_tenth_frame_third_roll
        return total_score

    def summary(self) -> GameSummary:
        frames = [
            FrameOut(
                number=index + 1,
                first_roll_pins=frame.first_roll_pins,
                second_roll_pins=frame.second_roll_pins,
                bonus=frame.bonus.value if frame.bonus else None,
                double_bonus=frame.double_bonus,
                score=frame.score(),
            )
            for index, frame in enumerate(self.frames)
        ]
        total = sum(f.score for f in frames)
        if self.bonus_tenth_frame_third_roll is not None:
            total += self.bonus_tenth_frame_third_roll
        return GameSummary(
            frames=frames,
            rolls=list(self.rolls),
            fill_ball=self.bonus_tenth_frame_third_roll,
            current_frame_index=self.current_frame_index,
            current_roll_index=self.current_roll_index,
            finished=self.is_finished,
            total=total,
        )
