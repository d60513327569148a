import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_payroll"),
}

DEBUG = True

# "json" keeps history in a local file (data/db.json)
HISTORY_STORE = os.getenv("HISTORY_STORE", "json").lower()
HISTORY_JSON_PATH = os.getenv("HISTORY_JSON_PATH", os.path.join("data", "db.json"))

# If enabled (mysql store only), app applies database/schema.sql on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(16 * 1024 * 1024)))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
