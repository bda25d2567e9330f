from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Optional

from ..core.constants import REGISTRATION_LOG_FILE
from ..core.exceptions import ConfigurationError


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


@dataclass(frozen=True)
class AppSettings:
    data_dir: Path
    export_dir: Path
    registration_log: Path
    hash_algorithm: str
    session_ttl: timedelta
    download_ttl: timedelta
    max_login_attempts: int
    log_level: str
    log_file: Optional[str]
    debug: bool


def load_settings(settings_module: Optional[str] = None) -> AppSettings:
    settings_module = settings_module or get_settings_module()
    try:
        # Settings modules read the environment on import.
        settings = importlib.import_module(settings_module)
    except (ImportError, ValueError) as e:
        raise ConfigurationError(f"Cannot load settings {settings_module!r}: {e}") from e

    try:
        data_dir = Path(getattr(settings, "DATA_DIR"))
        max_attempts = int(getattr(settings, "MAX_LOGIN_ATTEMPTS"))
        session_ttl = timedelta(seconds=int(getattr(settings, "SESSION_TTL_SECONDS")))
        download_ttl = timedelta(seconds=int(getattr(settings, "DOWNLOAD_TOKEN_TTL_SECONDS")))
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid settings in {settings.__name__}: {e}") from e

    if max_attempts < 1:
        raise ConfigurationError("MAX_LOGIN_ATTEMPTS must be at least 1")

    return AppSettings(
        data_dir=data_dir,
        export_dir=Path(getattr(settings, "EXPORT_DIR", data_dir)),
        registration_log=Path(getattr(settings, "REGISTRATION_LOG", data_dir / REGISTRATION_LOG_FILE)),
        hash_algorithm=str(getattr(settings, "HASH_ALGORITHM", "sha256")),
        session_ttl=session_ttl,
        download_ttl=download_ttl,
        max_login_attempts=max_attempts,
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        log_file=getattr(settings, "LOG_FILE", None),
        debug=bool(getattr(settings, "DEBUG", False)),
    )
