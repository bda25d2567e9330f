from __future__ import annotations

from typing import Protocol

from .model import Registration


class RegistrationLog(Protocol):
    """Where completed registrations are recorded.

    Note (DIP): the registration service depends on this interface, not on the file format.
    """

    def append(self, registration: Registration) -> str:
        """Persist ``registration`` and return where it was written."""
        raise NotImplementedError
