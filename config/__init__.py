import os


def get_settings_module() -> str:
    """Pick the settings module from PAUSE_ENV (falls back to APP_ENV, then development)."""
    env = (os.getenv("PAUSE_ENV") or os.getenv("APP_ENV") or "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
