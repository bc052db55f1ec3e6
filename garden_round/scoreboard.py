"""
Leaderboard of finished rounds.
NO UI DEPENDENCIES.

The scoreboard is process-wide: resetting a round never clears it.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ScoreEntry:
    """One submitted result."""
    name: str
    score: int
    recorded_at: datetime


class ScoreBoard:
    """
    Entries sorted descending by score, truncated to `capacity`.
    Ties keep submission order.
    """

    def __init__(
        self,
        capacity: int = 10,
        max_name_length: int = 20,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.capacity = capacity
        self.max_name_length = max_name_length
        self._clock = clock
        self._entries: List[ScoreEntry] = []

    def is_valid_name(self, name: str) -> bool:
        trimmed = name.strip() if isinstance(name, str) else ""
        return 0 < len(trimmed) <= self.max_name_length

    def submit(self, name: str, score: int) -> Optional[ScoreEntry]:
        """
        Record a score.
        Returns the new entry, or None if the name is empty or too long.
        The entry may fall straight off the bottom of a full board.
        """
        if not self.is_valid_name(name):
            logger.debug(f"Rejected leaderboard name {name!r}")
            return None

        entry = ScoreEntry(name=name.strip(), score=score, recorded_at=self._clock())
        self._entries.append(entry)
        self._entries.sort(key=lambda e: e.score, reverse=True)
        del self._entries[self.capacity:]
        logger.info(f"Score submitted: {entry.name} - {entry.score}")
        return entry

    def top(self, count: Optional[int] = None) -> List[ScoreEntry]:
        """Ordered entries, optionally only the first `count`."""
        if count is None:
            return list(self._entries)
        return self._entries[:count]

    def __len__(self) -> int:
        return len(self._entries)
