from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import is_expired, now_local
from ..core.constants import SESSION_TTL_SECONDS
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that can log in.

    ``role`` is the discriminant between the regular employee and manager variants.
    """

    username: str
    password_digest: str = field(repr=False)
    role: Role

    @classmethod
    def regular_employee(cls, username: str, password_digest: str) -> "User":
        return cls(username=username, password_digest=password_digest, role=Role.EMPLOYEE)

    @classmethod
    def manager(cls, username: str, password_digest: str) -> "User":
        return cls(username=username, password_digest=password_digest, role=Role.MANAGER)


@dataclass(frozen=True)
class Session:
    """What we hand back after login. Expires lazily, checked on read."""

    username: str
    created_at: datetime
    ttl: timedelta = timedelta(seconds=SESSION_TTL_SECONDS)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return is_expired(now=now or now_local(), created_at=self.created_at, ttl=self.ttl)

    def __str__(self) -> str:
        return f"Session active for user: {self.username}"
