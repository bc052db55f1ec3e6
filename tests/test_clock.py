"""
Tests for the round clock.
"""
import pytest
from garden_round.clock import RoundClock


class TestRoundClock:
    """Tests for RoundClock class."""

    def test_tick_is_additive(self):
        clock = RoundClock(duration_ms=180_000, refill_interval_ms=30_000)
        clock.tick(100)
        clock.tick(250)
        assert clock.elapsed_ms == 350
        assert clock.remaining_ms == 179_650
        assert clock.remaining_seconds == 179

    def test_non_positive_tick_ignored(self):
        clock = RoundClock(duration_ms=180_000, refill_interval_ms=30_000)
        clock.tick(0)
        clock.tick(-500)
        assert clock.elapsed_ms == 0

    def test_refill_on_exact_multiple(self):
        clock = RoundClock(duration_ms=180_000, refill_interval_ms=30_000)
        assert not clock.tick(29_900).refill
        assert clock.tick(100).refill
        assert not clock.tick(100).refill

    def test_refill_checked_after_tick(self):
        """An irregular tick that steps over the boundary does not refill."""
        clock = RoundClock(duration_ms=180_000, refill_interval_ms=30_000)
        clock.tick(29_950)
        assert not clock.tick(100).refill

    def test_round_end_clamps(self):
        clock = RoundClock(duration_ms=1000, refill_interval_ms=30_000)
        result = clock.tick(1500)

        assert result.round_ended
        assert clock.ended
        assert clock.elapsed_ms == 1000
        assert clock.remaining_ms == 0

    def test_round_ends_exactly_at_duration(self):
        clock = RoundClock(duration_ms=1000, refill_interval_ms=30_000)
        assert not clock.tick(900).round_ended
        assert not clock.ended
        assert clock.tick(100).round_ended

    def test_round_end_signalled_once(self):
        clock = RoundClock(duration_ms=1000, refill_interval_ms=30_000)
        clock.tick(1000)

        result = clock.tick(100)
        assert not result.round_ended
        assert clock.ended
        assert clock.elapsed_ms == 1000

    def test_reset(self):
        clock = RoundClock(duration_ms=1000, refill_interval_ms=30_000)
        clock.tick(1000)
        clock.reset()

        assert not clock.ended
        assert clock.elapsed_ms == 0
        assert clock.duration_ms == 1000
