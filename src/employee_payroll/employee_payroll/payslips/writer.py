from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from werkzeug.utils import secure_filename

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class DocumentWriter(Protocol):
    def write(self, name: str, text: str) -> str:
        """Store ``text`` under ``name`` and return its location."""
        raise NotImplementedError


class FileDocumentWriter:
    """Writes each document as a new file under ``out_dir``."""

    def __init__(self, out_dir: Path):
        self._out_dir = Path(out_dir)

    def write(self, name: str, text: str) -> str:
        file_name = secure_filename(name)
        if not file_name:
            raise PersistenceError(f"Unusable file name: {name!r}")

        path = self._out_dir / file_name
        try:
            self._out_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error("Could not write %s: %s", path, e)
            raise PersistenceError(f"Error writing {file_name}") from e
        return str(path)
