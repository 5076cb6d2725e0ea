class ScoringError(Exception):
    """Base class for scoring engine errors."""

    def __init__(self, detail: str, *, code: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.code = code


class GameOverError(ScoringError):
    def __init__(self, frame_index: int, roll_index: int) -> None:
        super().__init__(
            f"game is finished (frame {frame_index + 1}, roll {roll_index + 1}); "
            "no further rolls are accepted",
            code="game_over",
        )
        self.frame_index = frame_index
        self.roll_index = roll_index


class InvalidRollError(ScoringError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail, code="invalid_roll")
