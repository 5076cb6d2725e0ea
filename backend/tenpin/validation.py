from typing import Any, Optional

from .config import LAST_FRAME_INDEX, PIN_COUNT
from .exceptions import InvalidRollError


def validate_pins(
    pins: Any,
    *,
    frame_index: int,
    roll_index: int,
    first_roll_pins: int = 0,
    second_roll_pins: Optional[int] = None,
) -> int:
    """Validate a single roll against the pins left standing.

    Rules:
    - ``pins`` must be an integer (booleans are rejected)
    - ``0 <= pins <= 10``
    - a second roll may not take the frame past 10 pins, except in the tenth
      frame after a strike (the rack is reset)
    - a tenth-frame fill ball after a strike and an open second roll may not
      take those two rolls past 10 pins
    """

    # bool is a subclass of int
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidRollError(
            f"Frame {frame_index + 1} roll {roll_index + 1}: pins must be an integer."
        )
    if pins < 0:
        raise InvalidRollError(
            f"Frame {frame_index + 1} roll {roll_index + 1}: pins must be >= 0."
        )
    if pins > PIN_COUNT:
        raise InvalidRollError(
            f"Frame {frame_index + 1} roll {roll_index + 1}: pins must be <= {PIN_COUNT}."
        )

    if roll_index == 1:
        reset = frame_index == LAST_FRAME_INDEX and first_roll_pins == PIN_COUNT
        if not reset and first_roll_pins + pins > PIN_COUNT:
            raise InvalidRollError(
                f"Frame {frame_index + 1}: {first_roll_pins} + {pins} pins "
                f"exceeds {PIN_COUNT}."
            )
    elif roll_index == 2:
        second = second_roll_pins or 0
        if first_roll_pins == PIN_COUNT and second < PIN_COUNT:
            if second + pins > PIN_COUNT:
                raise InvalidRollError(
                    f"Frame {frame_index + 1}: fill ball {pins} with {second} "
                    f"pins down exceeds {PIN_COUNT}."
                )

    return pins
