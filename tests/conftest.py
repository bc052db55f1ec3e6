"""
Pytest fixtures for Garden Round tests.
"""
from datetime import datetime, timedelta, timezone

import pytest

from garden_round.config import Settings
from garden_round.game import GardenGame
from garden_round.scoreboard import ScoreBoard


class ScriptedRandom:
    """
    Stand-in for random.Random that returns queued values from randint().
    Falls back to the low end of the range once the queue is empty.
    """

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if self.values:
            return self.values.pop(0)
        return a


class FixedClock:
    """Wall clock for scoreboard timestamps that advances a minute per call."""

    def __init__(self):
        self.current = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        value = self.current
        self.current += timedelta(minutes=1)
        return value


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def game(settings, rng):
    return GardenGame(settings=settings, rng=rng)


@pytest.fixture
def rich_game(rng):
    """A game with enough money to plant anything."""
    return GardenGame(settings=Settings(initial_money=1_000_000), rng=rng)


@pytest.fixture
def scoreboard():
    return ScoreBoard(capacity=10, max_name_length=20, clock=FixedClock())
