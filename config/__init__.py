"""Settings selection for the bot, the scripts and the tests."""

import os

DEFAULT_ENV = "development"

# APP_ENV value -> settings module
SETTINGS_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()
    return SETTINGS_MODULES.get(env, SETTINGS_MODULES[DEFAULT_ENV])
