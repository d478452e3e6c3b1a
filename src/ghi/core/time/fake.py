"""Fake Time implementation for testing."""

from datetime import UTC, datetime

from ghi.core.time.abc import Time


class FakeTime(Time):
    """Clock frozen at a fixed instant.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, now: datetime | None = None) -> None:
        """Create FakeTime.

        Args:
            now: Instant returned by now() (default: 2024-01-15 12:00 UTC)
        """
        self._now = now or datetime(2024, 1, 15, 12, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self._now
