"""
Main Game class - one round of the garden, plus the leaderboard.
NO UI DEPENDENCIES.

Everything a renderer or input layer needs goes through GardenGame:
tick() is the only way time moves; player actions are synchronous
calls that read and write the state as of the last tick. A failed
precondition is never an error, the action just does nothing.
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Union

from .config import Settings, get_settings
from .plants import PLANT_TYPES, PowerUpKind, get_plant_type
from .constants import EMPTY_GLYPH
from .grid import GardenGrid, RandomSource
from .inventory import Inventory
from .economy import Economy
from .powerups import PowerUpController
from .clock import RoundClock
from .scoreboard import ScoreBoard
from .events import (
    GameEvent, StageAdvancedEvent, HarvestedEvent, InventoryRefilledEvent,
    PowerUpActivatedEvent, PowerUpExpiredEvent, RoundEndedEvent,
)
from .snapshot import (
    GameSnapshot, CellView, ActivePowerUpView, ScoreEntryView,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarvestSummary:
    """Result of harvesting every mature cell at once."""
    count: int
    total: int


class GardenGame:
    """
    A timed round: plant, water and harvest on a grid until the clock
    runs out.

    Usage:
        game = GardenGame()
        game.plant(0, 0, "carrot")
        while not game.ended:
            events = game.tick(100)
            # UI reads game.snapshot() and renders
        game.submit_score("Alice")
        game.reset()
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[RandomSource] = None,
        scoreboard: Optional[ScoreBoard] = None,
    ):
        self.settings = settings if settings is not None else get_settings()
        self.rng = rng if rng is not None else random.Random()

        # Process-wide, survives reset()
        self.scoreboard = scoreboard if scoreboard is not None else ScoreBoard(
            capacity=self.settings.leaderboard_size,
            max_name_length=self.settings.max_name_length,
        )

        self.clock = RoundClock(
            self.settings.round_duration_ms, self.settings.refill_interval_ms
        )
        self._events: List[GameEvent] = []
        self._new_round()

    def _new_round(self) -> None:
        """(Re)create every round-scoped store."""
        s = self.settings
        self.grid = GardenGrid(s.grid_rows, s.grid_cols)
        self.economy = Economy(money=s.initial_money)
        self.inventory = Inventory(PLANT_TYPES.keys(), s.refill_stock)
        self.power_ups = PowerUpController()
        self.clock.reset()
        self._events = []
        self._score_submitted = False

    def reset(self) -> None:
        """Start a fresh round. The leaderboard is kept."""
        self._new_round()
        logger.info("Round reset")

    # =========================================================================
    # STATE QUERIES
    # =========================================================================

    @property
    def money(self) -> int:
        return self.economy.money

    @property
    def now(self) -> int:
        """Current round time in ms."""
        return self.clock.elapsed_ms

    @property
    def ended(self) -> bool:
        return self.clock.ended

    def can_plant(self, kind: str) -> bool:
        """True if `kind` is in stock and affordable in an active round."""
        plant = get_plant_type(kind)
        return (
            plant is not None
            and not self.ended
            and self.inventory.can_afford(kind)
            and self.economy.can_spend(plant.cost)
        )

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def tick(self, delta_ms: int) -> List[GameEvent]:
        """
        Advance the round by delta_ms.
        Returns events from this tick plus any queued by actions since
        the previous one.
        """
        events = self.drain_events()
        if self.ended or delta_ms <= 0:
            return events

        result = self.clock.tick(delta_ms)
        now = result.elapsed_ms

        if result.refill:
            self.inventory.refill(now)
            events.append(InventoryRefilledEvent(now, self.inventory.stock_level))

        if result.round_ended:
            events.append(self._end_round())
            return events

        expired = self.power_ups.expire(now)
        if expired is not None:
            events.append(PowerUpExpiredEvent(expired.kind))

        for cell in self.grid.advance(now):
            events.append(StageAdvancedEvent(cell.row, cell.col, cell.stage))

        return events

    def _end_round(self) -> RoundEndedEvent:
        # Plantings are forfeited, nothing is credited
        forfeited = self.grid.clear()
        self.power_ups.discard()
        logger.info(
            f"Round ended with ${self.money} ({forfeited} plantings forfeited)"
        )
        return RoundEndedEvent(final_money=self.money, forfeited_cells=forfeited)

    def drain_events(self) -> List[GameEvent]:
        """Take the events queued by actions since the last tick."""
        events, self._events = self._events, []
        return events

    def simulate(self, duration_ms: int, step_ms: Optional[int] = None) -> List[GameEvent]:
        """
        Tick repeatedly for duration_ms (or until the round ends).
        Returns all events that occurred.
        """
        step = step_ms if step_ms is not None else self.settings.tick_interval_ms
        all_events = []
        elapsed = 0
        while elapsed < duration_ms and not self.ended:
            delta = min(step, duration_ms - elapsed)
            all_events.extend(self.tick(delta))
            elapsed += delta
        return all_events

    # =========================================================================
    # PLAYER ACTIONS
    # =========================================================================

    def plant(self, row: int, col: int, kind: str) -> bool:
        """Buy a seed of `kind` and plant it in an empty cell."""
        cell = self.grid.get_cell(row, col)
        if cell is None or not cell.is_empty() or not self.can_plant(kind):
            logger.debug(f"Plant {kind} at ({row}, {col}) rejected")
            return False

        plant = get_plant_type(kind)
        self.economy.spend(plant.cost)
        self.inventory.consume(kind)
        self.grid.plant(row, col, kind, self.now)
        return True

    def water(self, row: int, col: int) -> bool:
        """Water a planted cell (once per planting)."""
        if self.ended:
            return False
        return self.grid.water(row, col)

    def harvest(self, row: int, col: int) -> Optional[int]:
        """
        Harvest a mature cell.
        Returns the amount credited, or None if nothing was harvested.
        """
        if self.ended:
            return None

        harvest = self.grid.harvest(row, col, self.power_ups.multiplier, self.rng)
        if harvest is None:
            logger.debug(f"Harvest at ({row}, {col}) rejected")
            return None

        self.economy.credit(harvest.value)
        active = self.power_ups.active
        self._events.append(HarvestedEvent(
            row, col, harvest.plant_kind, harvest.value,
            active.kind if active is not None else None,
        ))
        return harvest.value

    def harvest_all(self) -> HarvestSummary:
        """Harvest every mature cell independently."""
        count = 0
        total = 0
        for row, col in self.grid.mature_positions():
            value = self.harvest(row, col)
            if value is not None:
                count += 1
                total += value
        return HarvestSummary(count=count, total=total)

    def activate_power_up(self, kind: Union[PowerUpKind, str]) -> bool:
        """Start a timed harvest multiplier."""
        parsed = PowerUpKind.parse(kind)
        if parsed is None or self.ended:
            return False
        if not self.power_ups.activate(parsed, self.now):
            return False

        self._events.append(
            PowerUpActivatedEvent(parsed, self.power_ups.active.expires_at)
        )
        return True

    def submit_score(self, name: str) -> bool:
        """
        Put this round's final money on the leaderboard.
        Accepted once per round, after it has ended, with a valid name.
        """
        if not self.ended or self._score_submitted:
            logger.debug("Score submission rejected: round running or already submitted")
            return False
        if self.scoreboard.submit(name, self.money) is None:
            return False
        self._score_submitted = True
        return True

    # =========================================================================
    # SNAPSHOT
    # =========================================================================

    def snapshot(self) -> GameSnapshot:
        """Plain-data view of the whole round for the renderer."""
        now = self.now
        grid = []
        for row in range(self.grid.rows):
            views = []
            for col in range(self.grid.cols):
                cell = self.grid.get_cell(row, col)
                plant = cell.plant_type
                views.append(CellView(
                    row=row,
                    col=col,
                    plant_kind=cell.plant_kind,
                    stage=cell.stage,
                    watered=cell.watered,
                    glyph=plant.display_stages[cell.stage] if plant else EMPTY_GLYPH,
                ))
            grid.append(views)

        active = self.power_ups.active
        active_view = None
        if active is not None:
            active_view = ActivePowerUpView(
                kind=active.kind.value,
                multiplier=active.multiplier,
                remaining_ms=active.remaining_ms(now),
            )

        return GameSnapshot(
            grid=grid,
            money=self.money,
            inventory=self.inventory.counts(),
            power_up_uses={k.value: v for k, v in self.power_ups.uses_remaining.items()},
            active_power_up=active_view,
            elapsed_ms=now,
            remaining_ms=self.clock.remaining_ms,
            remaining_seconds=self.clock.remaining_seconds,
            ended=self.ended,
            last_refill_ms=self.inventory.last_refill_ms,
            leaderboard=[
                ScoreEntryView.model_validate(e)
                for e in self.scoreboard.top(self.settings.leaderboard_display)
            ],
        )
