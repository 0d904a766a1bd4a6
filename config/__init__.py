import os

SETTINGS_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV (development when unset).

    TIMESHEET_SETTINGS names a settings module directly and wins over APP_ENV.
    """
    explicit = os.getenv("TIMESHEET_SETTINGS", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "").strip().lower() or "development"
    try:
        return SETTINGS_MODULES[env]
    except KeyError:
        raise ValueError(f"Unknown APP_ENV {env!r}; expected one of {sorted(set(SETTINGS_MODULES))}")
