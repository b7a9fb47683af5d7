import json
import os
from dataclasses import dataclass, field
from datetime import time
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


# Slot keyword -> (start, end) wall-clock range
DEFAULT_TIME_SLOTS = {
    "am": ("09:00", "12:00"),
    "pm": ("13:00", "17:00"),
    "udur": ("18:00", "22:00"),
}


def parse_time_slots(raw) -> dict[str, tuple[time, time]]:
    """Build the slot table from a mapping (or its JSON text) of keyword -> [start, end]."""
    if isinstance(raw, str):
        raw = json.loads(raw)

    if not isinstance(raw, dict) or not raw:
        raise ValueError("Time slot table must be a non-empty mapping")

    table = {}
    for keyword, bounds in raw.items():
        try:
            start_text, end_text = bounds
            start = time.fromisoformat(start_text)
            end = time.fromisoformat(end_text)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid range for time slot '{keyword}'") from exc

        if end <= start:
            raise ValueError(f"Time slot '{keyword}' must end after it starts")

        table[keyword] = (start, end)

    return table


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./halls.db"
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 20 * 24 * 60
    log_dir: str = "logs"
    time_slots: dict = field(default_factory=lambda: parse_time_slots(DEFAULT_TIME_SLOTS))

    @classmethod
    def from_env(cls):
        slots = os.getenv("BOOKING_TIME_SLOTS")

        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            jwt_secret=os.getenv("JWT_SECRET"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", cls.jwt_algorithm),
            access_token_expire_minutes=int(
                os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", cls.access_token_expire_minutes)
            ),
            log_dir=os.getenv("LOG_DIR", cls.log_dir),
            time_slots=parse_time_slots(slots if slots else DEFAULT_TIME_SLOTS),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
