# salon/config.py

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]

DEFAULT_BUSINESS_HOURS = [
    "09:00", "10:00", "11:00", "12:00", "13:00",
    "14:00", "15:00", "16:00", "17:00", "18:00",
]


class Settings(BaseSettings):
    database_url: str = "sqlite:///./salon.db"
    database_ssl: bool = False

    admin_password: str = ""
    reveal_password: str = ""

    session_ttl_hours: int = 24
    reveal_ttl_minutes: int = 30

    # Brasilia time, regardless of host timezone
    business_utc_offset_hours: int = -3
    business_hours: list[str] = DEFAULT_BUSINESS_HOURS
    slot_margin_minutes: int = 30

    review_identity: Literal["phone", "cpf"] = "phone"

    redis_url: str | None = None

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    seed_defaults: bool = True

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )

    @field_validator("business_hours")
    @classmethod
    def _sorted_hours(cls, value: list[str]) -> list[str]:
        for slot in value:
            hour, _, minute = slot.partition(":")
            if not (hour.isdigit() and minute.isdigit() and len(slot) == 5):
                raise ValueError(f"business hour must be HH:MM, got {slot!r}")
        return sorted(value)

    @property
    def resolved_database_url(self) -> str:
        url = self.database_url
        if url.startswith("sqlite:///./"):
            relative_path = url.replace("sqlite:///./", "")
            return f"sqlite:///{BASE_DIR / relative_path}"
        # Render/Heroku style URLs
        if url.startswith("postgres://"):
            return "postgresql://" + url[len("postgres://"):]
        return url

    @property
    def session_ttl_seconds(self) -> int:
        return self.session_ttl_hours * 3600

    @property
    def reveal_ttl_seconds(self) -> int:
        return self.reveal_ttl_minutes * 60


@lru_cache
def get_settings() -> Settings:
    return Settings()
