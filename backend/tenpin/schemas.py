from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FrameOut(BaseModel):
    number: int = Field(..., ge=1, le=10)
    first_roll_pins: int
    second_roll_pins: Optional[int] = None
    bonus: Optional[Literal["spare", "strike"]] = None
    double_bonus: bool = False
    score: int

    model_config = ConfigDict(extra="forbid", frozen=True)


class GameSummary(BaseModel):
    frames: List[FrameOut] = Field(..., min_length=10, max_length=10)
    rolls: List[int]
    fill_ball: Optional[int] = None
    current_frame_index: int = Field(..., ge=0, le=9)
    current_roll_index: int = Field(..., ge=0, le=2)
    finished: bool
    total: int

    model_config = ConfigDict(extra="forbid", frozen=True)
