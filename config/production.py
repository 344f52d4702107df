import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_bot"),
}

OFFICE = {
    "name": os.getenv("OFFICE_NAME", "Главный офис"),
    "lat": float(os.getenv("OFFICE_LAT", "57.1521")),
    "lon": float(os.getenv("OFFICE_LON", "65.5921")),
    "radius_m": float(os.getenv("OFFICE_RADIUS", "100")),
}

BITRIX = {
    "domain": os.getenv("BITRIX_DOMAIN", ""),
    "webhook_token": os.getenv("BITRIX_WEBHOOK_TOKEN", ""),
}

TELEGRAM = {
    "token": os.getenv("TELEGRAM_BOT_TOKEN", ""),
}

CHAT_BACKEND = os.getenv("CHAT_BACKEND", "bitrix")
EMULATOR_URL = os.getenv("EMULATOR_URL", "")

MANAGER_DIALOG_IDS = [d.strip() for d in os.getenv("MANAGER_DIALOG_IDS", "").split(",") if d.strip()]

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
