"""
Plant and power-up catalogs.
NO UI DEPENDENCIES.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class PlantType:
    """
    Immutable definition of a crop.

    - cost: seed price, paid on planting
    - growth_duration_ms: unwatered time from seed to mature
    - value_range: inclusive (min, max) of the harvest roll
    - display_stages: one glyph per growth stage
    """
    id: str
    name: str
    cost: int
    growth_duration_ms: int
    value_range: Tuple[int, int]
    display_stages: Tuple[str, str, str]

    def __post_init__(self):
        low, high = self.value_range
        if not 0 < low <= high:
            raise ValueError(f"{self.id}: invalid value range {self.value_range}")
        if self.cost <= 0:
            raise ValueError(f"{self.id}: cost must be positive")
        if self.growth_duration_ms <= 0:
            raise ValueError(f"{self.id}: growth duration must be positive")
        if len(self.display_stages) != 3:
            raise ValueError(f"{self.id}: expected 3 display stages")

    @property
    def value_min(self) -> int:
        return self.value_range[0]

    @property
    def value_max(self) -> int:
        return self.value_range[1]


def _plant(id, name, cost, growth_ms, low, high, mature_glyph) -> PlantType:
    return PlantType(
        id=id,
        name=name,
        cost=cost,
        growth_duration_ms=growth_ms,
        value_range=(low, high),
        display_stages=("🌱", "🌿", mature_glyph),
    )


# Catalog order is display order
PLANT_TYPES: Dict[str, PlantType] = {
    p.id: p for p in [
        _plant("carrot", "Carrot", 25, 3000, 30, 60, "🥕"),
        _plant("cherry_blossom", "Cherry Blossom", 30000, 12000, 45000, 75000, "🌸"),
        _plant("corn", "Corn", 5000, 8000, 7500, 12000, "🌽"),
        _plant("sunflower", "Sunflower", 400, 7000, 600, 1000, "🌻"),
        _plant("pepper", "Pepper", 10000, 5500, 15000, 23000, "🌶️"),
        _plant("pumpkin", "Pumpkin", 2000, 10000, 2500, 4500, "🎃"),
    ]
}


def get_plant_type(kind: str) -> Optional[PlantType]:
    """Look up a plant by id, or None if unknown."""
    return PLANT_TYPES.get(kind)


class PowerUpKind(Enum):
    """Timed global harvest multipliers."""
    SUNLIGHT = "sunlight"
    FROZEN = "frozen"

    @classmethod
    def parse(cls, value: Union['PowerUpKind', str]) -> Optional['PowerUpKind']:
        """Accept an enum member or its string value; None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class PowerUpType:
    """Static rules for one power-up kind."""
    kind: PowerUpKind
    name: str
    uses_per_round: int
    multiplier: int
    duration_ms: int


POWER_UP_TYPES: Dict[PowerUpKind, PowerUpType] = {
    PowerUpKind.SUNLIGHT: PowerUpType(PowerUpKind.SUNLIGHT, "Sunlight", 2, 2, 8000),
    PowerUpKind.FROZEN: PowerUpType(PowerUpKind.FROZEN, "Frozen", 1, 3, 8000),
}
