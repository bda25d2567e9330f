import os
from pathlib import Path

from ..core.constants import REGISTRATION_LOG_FILE

DATA_DIR = Path(os.getenv("PAYROLL_DATA_DIR", "data"))
EXPORT_DIR = Path(os.getenv("PAYROLL_EXPORT_DIR", str(DATA_DIR / "payslips")))
REGISTRATION_LOG = Path(os.getenv("PAYROLL_REGISTRATION_LOG", str(DATA_DIR / REGISTRATION_LOG_FILE)))

HASH_ALGORITHM = os.getenv("PAYROLL_HASH_ALGORITHM", "sha256")

SESSION_TTL_SECONDS = int(os.getenv("PAYROLL_SESSION_TTL", "120"))
DOWNLOAD_TOKEN_TTL_SECONDS = int(os.getenv("PAYROLL_DOWNLOAD_TTL", "60"))
MAX_LOGIN_ATTEMPTS = int(os.getenv("PAYROLL_MAX_LOGIN_ATTEMPTS", "3"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("LOG_FILE") or None

DEBUG = bool(int(os.getenv("DEBUG", "0")))
