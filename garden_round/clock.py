"""
Round clock - the only thing in the game that advances time.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass


@dataclass
class RoundState:
    """Elapsed time and lifecycle of one round."""
    duration_ms: int
    elapsed_ms: int = 0
    ended: bool = False


@dataclass(frozen=True)
class ClockTick:
    """What a tick of the clock signalled."""
    elapsed_ms: int
    refill: bool = False
    round_ended: bool = False


class RoundClock:
    """
    Owns elapsed round time.

    Time is additive over whatever deltas the driver supplies. The
    refill check looks at the post-tick elapsed value only, so it fires
    on exact multiples of the refill interval.
    """

    def __init__(self, duration_ms: int, refill_interval_ms: int):
        self.refill_interval_ms = refill_interval_ms
        self.state = RoundState(duration_ms=duration_ms)

    @property
    def elapsed_ms(self) -> int:
        return self.state.elapsed_ms

    @property
    def duration_ms(self) -> int:
        return self.state.duration_ms

    @property
    def ended(self) -> bool:
        return self.state.ended

    @property
    def remaining_ms(self) -> int:
        return max(0, self.state.duration_ms - self.state.elapsed_ms)

    @property
    def remaining_seconds(self) -> int:
        """Whole seconds left, as a countdown shows them."""
        return self.remaining_ms // 1000

    def tick(self, delta_ms: int) -> ClockTick:
        """
        Advance by delta_ms.
        Non-positive deltas and ticks after the round ended change nothing.
        """
        state = self.state
        if state.ended or delta_ms <= 0:
            return ClockTick(elapsed_ms=state.elapsed_ms)

        new_time = state.elapsed_ms + delta_ms
        refill = new_time > 0 and new_time % self.refill_interval_ms == 0

        round_ended = False
        if new_time >= state.duration_ms:
            new_time = state.duration_ms
            state.ended = True
            round_ended = True

        state.elapsed_ms = new_time
        return ClockTick(elapsed_ms=new_time, refill=refill, round_ended=round_ended)

    def reset(self) -> None:
        self.state = RoundState(duration_ms=self.state.duration_ms)
