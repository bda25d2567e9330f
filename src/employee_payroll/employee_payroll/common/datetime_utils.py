from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

Clock = Callable[[], datetime]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_expired(*, now: datetime, created_at: datetime, ttl: timedelta) -> bool:
    """Lazy expiry: valid while ``now - created_at`` does not exceed ``ttl``."""
    return (now - created_at) > ttl


def epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch, used to stamp export file names."""
    return int(value.timestamp() * 1000)
