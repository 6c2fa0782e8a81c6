from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of "now" for message timestamps; must return an aware datetime."""

    def now(self) -> datetime: ...


class UtcClock:
    def now(self) -> datetime:
        return datetime.now(tz=timezone.utc)


default_clock: Clock = UtcClock()
