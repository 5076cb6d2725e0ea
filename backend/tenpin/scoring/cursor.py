"""Roll cursor state machine.

States are ``(frame_index, roll_index)`` pairs plus a terminal flag.  Every
frame but the last closes after a strike or after its second roll; the tenth
frame opens a third roll (the fill ball) only when a strike or spare was
earned in it.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..config import LAST_FRAME_INDEX
from ..exceptions import GameOverError
from .frame import FrameBonusType


@dataclass(frozen=True)
class Cursor:
    frame_index: int = 0
    roll_index: int = 0
    finished: bool = False

    @property
    def is_last_frame(self) -> bool:
        return self.frame_index == LAST_FRAME_INDEX

    @property
    def is_fill_ball(self) -> bool:
        return self.roll_index == 2

    def advance(
        self, bonus: Optional[FrameBonusType], *, fill_ball_earned: bool = False
    ) -> "Cursor":
        """Return the cursor for the roll after this one.

        ``bonus`` is the outcome of the roll just recorded.  ``fill_ball_earned``
        only matters on the second roll of the tenth frame.
        """

        if self.finished:
            raise GameOverError(self.frame_index, self.roll_index)

        if self.roll_index == 0:
            if bonus is not FrameBonusType.STRIKE:
                return replace(self, roll_index=1)
            if self.is_last_frame:
                # the rack is reset and the tenth frame carries on
                return replace(self, roll_index=1)
            return Cursor(frame_index=self.frame_index + 1)

        if self.roll_index == 1:
            if not self.is_last_frame:
                return Cursor(frame_index=self.frame_index + 1)
            if fill_ball_earned:
                return replace(self, roll_index=2)
            return replace(self, finished=True)

        return replace(self, finished=True)
