"""
Power-up controller - limited uses per round, one active at a time.
NO UI DEPENDENCIES.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .plants import PowerUpKind, PowerUpType, POWER_UP_TYPES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivePowerUp:
    """The power-up currently boosting harvests."""
    kind: PowerUpKind
    multiplier: int
    expires_at: int  # round time (ms)

    def remaining_ms(self, now_ms: int) -> int:
        return max(0, self.expires_at - now_ms)


class PowerUpController:
    """
    Tracks uses left per kind and the single active power-up.

    Expiry is a stored timestamp compared against the round clock on
    every tick, so discarding the active power-up is all a reset needs.
    """

    def __init__(self, types: Optional[Dict[PowerUpKind, PowerUpType]] = None):
        self.types = types if types is not None else POWER_UP_TYPES
        self.uses_remaining: Dict[PowerUpKind, int] = {
            kind: t.uses_per_round for kind, t in self.types.items()
        }
        self.active: Optional[ActivePowerUp] = None

    @property
    def multiplier(self) -> int:
        """Harvest multiplier right now (1 when nothing is active)."""
        return self.active.multiplier if self.active is not None else 1

    def can_activate(self, kind: PowerUpKind) -> bool:
        return self.active is None and self.uses_remaining.get(kind, 0) > 0

    def activate(self, kind: PowerUpKind, now_ms: int) -> bool:
        """
        Start a power-up.
        Rejected if no uses are left or another power-up is active.
        """
        if not self.can_activate(kind):
            logger.debug(f"Power-up {kind.value} rejected at {now_ms}ms")
            return False

        power_up = self.types[kind]
        self.uses_remaining[kind] -= 1
        self.active = ActivePowerUp(
            kind=kind,
            multiplier=power_up.multiplier,
            expires_at=now_ms + power_up.duration_ms,
        )
        logger.info(
            f"{power_up.name} active until {self.active.expires_at}ms "
            f"({self.uses_remaining[kind]} uses left)"
        )
        return True

    def expire(self, now_ms: int) -> Optional[ActivePowerUp]:
        """Clear the active power-up if its time is up. Returns what expired."""
        if self.active is None or now_ms < self.active.expires_at:
            return None
        expired = self.active
        self.active = None
        logger.info(f"{expired.kind.value} expired at {now_ms}ms")
        return expired

    def discard(self) -> None:
        """Drop the active power-up without firing its expiry."""
        self.active = None

    def remaining_ms(self, now_ms: int) -> int:
        if self.active is None:
            return 0
        return self.active.remaining_ms(now_ms)
