from __future__ import annotations

import logging
from pathlib import Path

from ..core.exceptions import PersistenceError
from .model import Registration

logger = logging.getLogger(__name__)


class FileRegistrationLog:
    """Append-only text log, one comma separated line per registration."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, registration: Registration) -> str:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as f:
                f.write(registration.to_log_line() + "\n")
        except OSError as e:
            logger.error("Could not write registration log %s: %s", self._path, e)
            raise PersistenceError("Error saving employee data!") from e

        logger.info("Registered %s in %s", registration.employee.emp_id, self._path)
        return str(self._path)
