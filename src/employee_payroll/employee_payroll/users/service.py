from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import Clock, now_local
from ..common.hashing import PasswordHasher
from ..core.constants import MAX_LOGIN_ATTEMPTS, SESSION_TTL_SECONDS
from ..core.enums import LoginState
from ..core.exceptions import AuthenticationError
from .model import Session, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginOutcome:
    state: LoginState
    attempts_used: int
    user: Optional[User] = None
    session: Optional[Session] = None

    @property
    def locked_out(self) -> bool:
        return self.state == LoginState.LOCKED_OUT


def credentials_match(user: User, username: str, password: str, hasher: PasswordHasher) -> bool:
    """Shared check for every user variant: same name and same digest."""
    return user.username == username and hasher.matches(password, user.password_digest)


class AuthService:
    """Use case: authenticate user (login) with a bounded number of attempts."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        *,
        max_attempts: int = MAX_LOGIN_ATTEMPTS,
        session_ttl: timedelta = timedelta(seconds=SESSION_TTL_SECONDS),
        clock: Clock = now_local,
    ):
        self._users = users
        self._hasher = hasher
        self._max_attempts = max_attempts
        self._session_ttl = session_ttl
        self._clock = clock

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def authenticate(self, username: str, password: str) -> User:
        user = self._users.get_by_username(username)
        if not user or not credentials_match(user, username, password, self._hasher):
            raise AuthenticationError("Invalid username or password")
        return user

    def open_session(self, user: User) -> Session:
        return Session(username=user.username, created_at=self._clock(), ttl=self._session_ttl)

    def login(
        self,
        attempts: Iterable[tuple[str, str]],
        *,
        on_failure: Optional[Callable[[int], None]] = None,
    ) -> LoginOutcome:
        """Try up to ``max_attempts`` credential pairs from ``attempts``.

        ``on_failure`` receives the number of attempts remaining after each miss.
        """
        used = 0
        for username, password in attempts:
            used += 1
            try:
                user = self.authenticate(username, password)
            except AuthenticationError:
                remaining = self._max_attempts - used
                logger.warning("Login failed for %r, %d attempt(s) remaining", username, remaining)
                if on_failure:
                    on_failure(remaining)
                if remaining <= 0:
                    logger.warning("Login locked after %d failed attempts", used)
                    return LoginOutcome(state=LoginState.LOCKED_OUT, attempts_used=used)
                continue

            logger.info("User %s logged in as %s", user.username, user.role.value)
            return LoginOutcome(
                state=LoginState.AUTHENTICATED,
                attempts_used=used,
                user=user,
                session=self.open_session(user),
            )

        return LoginOutcome(state=LoginState.AWAITING_CREDENTIALS, attempts_used=used)
