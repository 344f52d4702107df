import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_bot_test"),
}

OFFICE = {
    "name": "Test office",
    "lat": 57.1521,
    "lon": 65.5921,
    "radius_m": 100,
}

BITRIX = {"domain": "", "webhook_token": ""}
TELEGRAM = {"token": ""}

CHAT_BACKEND = "emulator"
EMULATOR_URL = ""
MANAGER_DIALOG_IDS: list[str] = []

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
