import os
import tempfile
from pathlib import Path

from ..core.constants import REGISTRATION_LOG_FILE

DATA_DIR = Path(os.getenv("PAYROLL_DATA_DIR", tempfile.gettempdir())) / "employee_payroll_test"
EXPORT_DIR = DATA_DIR / "payslips"
REGISTRATION_LOG = DATA_DIR / REGISTRATION_LOG_FILE

HASH_ALGORITHM = "sha256"

SESSION_TTL_SECONDS = 120
DOWNLOAD_TOKEN_TTL_SECONDS = 60
MAX_LOGIN_ATTEMPTS = 3

LOG_LEVEL = "WARNING"
LOG_FILE = None

DEBUG = False
TESTING = True
