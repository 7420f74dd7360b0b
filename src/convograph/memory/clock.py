"""Injectable wall-clock used to stamp graph mutations."""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


def isoformat(clock: Clock) -> str:
    """Read a clock and render it as an ISO-8601 string."""
    return clock().isoformat()


class FixedClock:
    """Deterministic clock for tests and replays.

    Every call returns ``start`` advanced by ``step`` times the number of
    previous calls, so consecutive stamps stay ordered but predictable.

    Args:
        start: First instant returned.
        step: Amount added on each subsequent call.
    """

    def __init__(
        self,
        start: datetime | None = None,
        step: timedelta = timedelta(0),
    ) -> None:
        self.start = start or datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        now = self.start + self.step * self.calls
        self.calls += 1
        return now
