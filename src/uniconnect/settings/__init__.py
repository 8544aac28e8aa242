import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, default is development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "uniconnect.settings.production"

    if env in {"test", "testing"}:
        return "uniconnect.settings.testing"

    return "uniconnect.settings.development"


def split_origins(value: str) -> list[str]:
    return [o.strip() for o in value.split(",") if o.strip()]
