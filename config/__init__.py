import os

_ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module() -> str:
    """Dotted path of the settings module to load.

    CARECLOCK_SETTINGS names a module directly; otherwise APP_ENV picks one of
    the bundled environments (development when unset or unknown).
    """
    explicit = os.getenv("CARECLOCK_SETTINGS")
    if explicit:
        return explicit

    return _ENVIRONMENTS.get(os.getenv("APP_ENV", "development").strip().lower(), "config.development")
