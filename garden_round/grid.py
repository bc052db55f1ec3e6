"""
Garden grid and growth engine.
NO UI DEPENDENCIES.
"""
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterator, List, Optional, Tuple, Protocol

from .plants import PlantType, get_plant_type
from .constants import (
    STAGE_SEEDLING, STAGE_GROWING, STAGE_MATURE,
    WATERED_THRESHOLDS, UNWATERED_THRESHOLDS, WATER_BONUS,
)


class RandomSource(Protocol):
    """Anything with random.Random's randint()."""

    def randint(self, a: int, b: int) -> int:
        ...


@dataclass
class Cell:
    """
    A single plot in the garden.
    Empty iff plant_kind is None.
    """
    row: int
    col: int
    plant_kind: Optional[str] = None
    stage: int = STAGE_SEEDLING
    planted_at: Optional[int] = None  # round time (ms)
    watered: bool = False

    def is_empty(self) -> bool:
        return self.plant_kind is None

    def is_mature(self) -> bool:
        return not self.is_empty() and self.stage == STAGE_MATURE

    @property
    def plant_type(self) -> Optional[PlantType]:
        if self.plant_kind is None:
            return None
        return get_plant_type(self.plant_kind)

    def clear(self) -> None:
        """Reset to the empty state."""
        self.plant_kind = None
        self.stage = STAGE_SEEDLING
        self.planted_at = None
        self.watered = False


@dataclass(frozen=True)
class Harvest:
    """What a single harvest produced."""
    plant_kind: str
    value: int


def compute_stage(elapsed_ms: int, growth_duration_ms: int, watered: bool) -> int:
    """
    Stage reached after `elapsed_ms` of growth.

    Thresholds are percentages of the growth duration and are compared
    in integers, so 990ms of a 3000ms plant is exactly 33%.
    """
    first, second = WATERED_THRESHOLDS if watered else UNWATERED_THRESHOLDS
    progress_x100 = elapsed_ms * 100
    if progress_x100 >= second * growth_duration_ms:
        return STAGE_MATURE
    if progress_x100 >= first * growth_duration_ms:
        return STAGE_GROWING
    return STAGE_SEEDLING


def harvest_value(plant: PlantType, watered: bool, multiplier: int, rng: RandomSource) -> int:
    """
    Roll a harvest: uniform integer in the plant's value range, +30% if
    watered, times the active power-up multiplier, floored.
    """
    value = Fraction(rng.randint(plant.value_min, plant.value_max))
    if watered:
        value *= WATER_BONUS
    value *= multiplier
    return math.floor(value)


class GardenGrid:
    """
    The cell matrix. Owns every Cell exclusively.

    Coordinate system:
    - (0, 0) is top-left
    - row increases downward, col to the right
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._cells: Dict[Tuple[int, int], Cell] = {}

        for row in range(rows):
            for col in range(cols):
                self._cells[(row, col)] = Cell(row, col)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at coordinates, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[(row, col)]

    # =========================================================================
    # CELL OPERATIONS
    # =========================================================================

    def plant(self, row: int, col: int, kind: str, now_ms: int) -> bool:
        """
        Put a seed in an empty cell.
        Returns False if out of bounds, occupied or unknown kind.
        Payment is the caller's business.
        """
        cell = self.get_cell(row, col)
        if cell is None or not cell.is_empty() or get_plant_type(kind) is None:
            return False

        cell.plant_kind = kind
        cell.stage = STAGE_SEEDLING
        cell.planted_at = now_ms
        cell.watered = False
        return True

    def water(self, row: int, col: int) -> bool:
        """
        Water a planted cell. Once per planting; a second call is a no-op.
        """
        cell = self.get_cell(row, col)
        if cell is None or cell.is_empty() or cell.watered:
            return False
        cell.watered = True
        return True

    def harvest(self, row: int, col: int, multiplier: int, rng: RandomSource) -> Optional[Harvest]:
        """
        Harvest a mature cell and reset it to empty.
        Returns what was picked, or None if there is nothing to harvest.
        """
        cell = self.get_cell(row, col)
        if cell is None or not cell.is_mature():
            return None

        harvest = Harvest(
            plant_kind=cell.plant_kind,
            value=harvest_value(cell.plant_type, cell.watered, multiplier, rng),
        )
        cell.clear()
        return harvest

    def clear(self) -> int:
        """Empty every cell. Returns how many were occupied."""
        occupied = 0
        for cell in self._cells.values():
            if not cell.is_empty():
                occupied += 1
                cell.clear()
        return occupied

    # =========================================================================
    # GROWTH
    # =========================================================================

    def advance(self, now_ms: int) -> List[Cell]:
        """
        Recompute stages for every occupied cell at round time `now_ms`.
        Stages never move backward. Returns the cells that advanced.
        """
        advanced = []
        for cell in self.iter_occupied():
            plant = cell.plant_type
            computed = compute_stage(
                now_ms - cell.planted_at, plant.growth_duration_ms, cell.watered
            )
            if computed > cell.stage:
                cell.stage = computed
                advanced.append(cell)
        return advanced

    # =========================================================================
    # QUERIES
    # =========================================================================

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate row by row."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield self._cells[(row, col)]

    def iter_occupied(self) -> Iterator[Cell]:
        for cell in self.iter_cells():
            if not cell.is_empty():
                yield cell

    def mature_positions(self) -> List[Tuple[int, int]]:
        return [(c.row, c.col) for c in self.iter_occupied() if c.is_mature()]

    def empty_positions(self) -> List[Tuple[int, int]]:
        return [(c.row, c.col) for c in self.iter_cells() if c.is_empty()]

    def __repr__(self) -> str:
        return f"GardenGrid({self.rows}x{self.cols})"
