import os

FRAME_COUNT = 10
PIN_COUNT = 10
LAST_FRAME_INDEX = FRAME_COUNT - 1


def strict_pins_enabled() -> bool:
    """
    Whether new games validate pin counts by default.
      - controlled by TENPIN_STRICT_PINS
      - only the literal 'true' (any case) turns it on
    """
    return (os.getenv("TENPIN_STRICT_PINS") or "").strip().lower() == "true"
