"""Real time implementation using the system clock."""

from datetime import UTC, datetime

from ghi.core.time.abc import Time


class RealTime(Time):
    """Production implementation using datetime.now()."""

    def now(self) -> datetime:
        return datetime.now(UTC)
