import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _read_ttl(raw: str) -> float:
    try:
        ttl = float(raw)
    except ValueError:
        raise ValueError(f"TODO_NOTIFICATION_TTL must be a number of seconds, got {raw!r}")
    if ttl < 0:
        raise ValueError(f"TODO_NOTIFICATION_TTL must not be negative, got {ttl}")
    return ttl


APP_TITLE = os.getenv("TODO_APP_TITLE", "To-Do List")
NOTIFICATION_TTL = _read_ttl(os.getenv("TODO_NOTIFICATION_TTL", "3.0"))
LOG_LEVEL = os.getenv("TODO_LOG_LEVEL", "INFO").upper()
TEMPLATES_DIR = os.getenv("TODO_TEMPLATES_DIR", str(BASE_DIR / "templates"))
