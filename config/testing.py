import os
import tempfile

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_payroll_test"),
}

DEBUG = False
TESTING = True

HISTORY_STORE = "json"
HISTORY_JSON_PATH = os.getenv("HISTORY_JSON_PATH", os.path.join(tempfile.gettempdir(), "timesheet_payroll_test.json"))

AUTO_INIT_DB = False

MAX_CONTENT_LENGTH = 16 * 1024 * 1024
LOG_LEVEL = "WARNING"
