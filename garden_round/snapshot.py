"""
Observable snapshot of a round, for whatever renders it.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CellView(BaseModel):
    """Read-only view of one cell."""

    row: int
    col: int
    plant_kind: Optional[str] = None
    stage: int = 0
    watered: bool = False
    glyph: str


class ActivePowerUpView(BaseModel):
    kind: str
    multiplier: int
    remaining_ms: int = Field(..., ge=0)


class ScoreEntryView(BaseModel):
    name: str
    score: int
    recorded_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GameSnapshot(BaseModel):
    """Everything a renderer needs after a tick or an action."""

    grid: list[list[CellView]]
    money: int = Field(..., ge=0)
    inventory: dict[str, int]
    power_up_uses: dict[str, int]
    active_power_up: Optional[ActivePowerUpView] = None
    elapsed_ms: int = Field(..., ge=0)
    remaining_ms: int = Field(..., ge=0)
    remaining_seconds: int = Field(..., ge=0)
    ended: bool
    last_refill_ms: Optional[int] = None
    leaderboard: list[ScoreEntryView] = Field(default_factory=list)
