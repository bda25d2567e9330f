from __future__ import annotations

import threading
from typing import Optional, Sequence

from ..common.hashing import PasswordHasher
from ..core.exceptions import ValidationError
from .model import User

DEMO_ACCOUNTS = (
    ("emp1", "Emp@1234", User.regular_employee),
    ("manager1", "Mng@1234", User.manager),
)


class InMemoryUserRepository:
    """Process-local username -> User map."""

    def __init__(self, users: Optional[dict[str, User]] = None):
        self._users: dict[str, User] = dict(users or {})
        self._lock = threading.Lock()

    def get_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return self._users.get(username)

    def add(self, user: User) -> None:
        with self._lock:
            if user.username in self._users:
                raise ValidationError("Username already exists", field="username")
            self._users[user.username] = user

    def list_all(self) -> Sequence[User]:
        with self._lock:
            return list(self._users.values())


def seed_demo_users(users: InMemoryUserRepository, hasher: PasswordHasher) -> InMemoryUserRepository:
    for username, password, make in DEMO_ACCOUNTS:
        if users.get_by_username(username) is None:
            users.add(make(username, hasher.digest(password)))
    return users
