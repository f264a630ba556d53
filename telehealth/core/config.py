import os
from datetime import datetime

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), ["http://localhost:4200"])
CORS_ALLOW_CREDENTIALS = _get_bool(os.getenv("CORS_ALLOW_CREDENTIALS"), default=True)

# Pins the scheduling clock for demo/QA environments. Empty means the local wall clock.
SCHEDULE_FIXED_NOW = os.getenv("SCHEDULE_FIXED_NOW", "")


def get_fixed_now() -> datetime | None:
    if not SCHEDULE_FIXED_NOW:
        return None
    fixed_now = datetime.fromisoformat(SCHEDULE_FIXED_NOW)
    if fixed_now.tzinfo is not None:
        # Classification compares naive local wall-clock instants.
        return fixed_now.astimezone().replace(tzinfo=None)
    return fixed_now


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and SCHEDULE_FIXED_NOW:
        raise RuntimeError("SCHEDULE_FIXED_NOW must not be set in production.")
    try:
        get_fixed_now()
    except ValueError as exc:
        raise RuntimeError("SCHEDULE_FIXED_NOW must be an ISO 8601 datetime.") from exc
