from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import is_expired, now_local
from ..core.constants import DOWNLOAD_TOKEN_TTL_SECONDS


@dataclass(frozen=True)
class DownloadToken:
    """Time-bound permission for one export."""

    created_at: datetime
    ttl: timedelta = timedelta(seconds=DOWNLOAD_TOKEN_TTL_SECONDS)

    @classmethod
    def issue(cls, *, now: Optional[datetime] = None, ttl: Optional[timedelta] = None) -> "DownloadToken":
        if ttl is None:
            return cls(created_at=now or now_local())
        return cls(created_at=now or now_local(), ttl=ttl)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return is_expired(now=now or now_local(), created_at=self.created_at, ttl=self.ttl)
