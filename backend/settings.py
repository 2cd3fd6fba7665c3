import os
from typing import List

# Basic settings helper to read environment configuration.


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: str = "") -> List[str]:
    raw = val if val is not None else default
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.API_TITLE: str = os.getenv("API_TITLE", "Book Shelf API")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.CORS_ALLOW_ORIGINS: List[str] = _as_list(os.getenv("CORS_ALLOW_ORIGINS"), "*")
        self.SEED_SAMPLE_BOOKS: bool = _as_bool(os.getenv("SEED_SAMPLE_BOOKS"), False)


settings = Settings()
