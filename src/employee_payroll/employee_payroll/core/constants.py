"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_LOGIN_ATTEMPTS = 3
SESSION_TTL_SECONDS = 2 * 60
DOWNLOAD_TOKEN_TTL_SECONDS = 60

PF_RATE = 0.12
TAX_RATE = 0.10

DASHBOARD_TOP_PAYSLIPS = 3

DEFAULT_HASH_ALGORITHM = "sha256"
REGISTRATION_LOG_FILE = "employee_data.txt"
PAYSLIP_FILE_PREFIX = "Payslip"
