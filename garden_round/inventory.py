"""
Seed inventory - per-kind stock, reset on a schedule.
NO UI DEPENDENCIES.
"""
import logging
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class Inventory:
    """
    Remaining seed stock per plant kind.

    Stock only goes down through planting. The refill schedule
    resets every kind to a fixed level rather than adding to it.
    """

    def __init__(self, kinds: Iterable[str], stock_level: int):
        self.stock_level = stock_level
        self._stock: Dict[str, int] = {kind: stock_level for kind in kinds}
        self.last_refill_ms: Optional[int] = None

    def get_count(self, kind: str) -> int:
        """Get current stock for a kind (0 if unknown)."""
        return self._stock.get(kind, 0)

    def can_afford(self, kind: str) -> bool:
        """True if at least one seed of this kind is in stock."""
        return self.get_count(kind) > 0

    def consume(self, kind: str) -> bool:
        """
        Take one seed out of stock.
        Returns False (and changes nothing) if the kind is out of stock.
        """
        if not self.can_afford(kind):
            return False
        self._stock[kind] -= 1
        return True

    def refill(self, now_ms: Optional[int] = None) -> None:
        """Reset every kind to the fixed stock level."""
        for kind in self._stock:
            self._stock[kind] = self.stock_level
        self.last_refill_ms = now_ms
        logger.info(f"Inventory refilled to {self.stock_level} at {now_ms}ms")

    def counts(self) -> Dict[str, int]:
        """Copy of the stock mapping."""
        return dict(self._stock)
