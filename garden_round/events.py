"""
Events reported to the UI after ticks and actions.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Optional

from .plants import PowerUpKind


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class StageAdvancedEvent(GameEvent):
    """A planted cell reached a new growth stage."""
    row: int
    col: int
    stage: int


@dataclass
class HarvestedEvent(GameEvent):
    """A mature cell was harvested."""
    row: int
    col: int
    plant_kind: str
    value: int
    power_up: Optional[PowerUpKind] = None


@dataclass
class InventoryRefilledEvent(GameEvent):
    """Stock was reset for every plant kind."""
    elapsed_ms: int
    stock_level: int


@dataclass
class PowerUpActivatedEvent(GameEvent):
    kind: PowerUpKind
    expires_at: int


@dataclass
class PowerUpExpiredEvent(GameEvent):
    kind: PowerUpKind


@dataclass
class RoundEndedEvent(GameEvent):
    """The round clock ran out; in-progress plantings were forfeited."""
    final_money: int
    forfeited_cells: int
