import os

_SETTINGS_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; unknown or unset means development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _SETTINGS_BY_ENV.get(env, "config.development")
