"""Configuration loader using pydantic-settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Companion configuration loaded from environment variables."""

    telegram_bot_token: str
    telegram_user_id: int

    openweather_api_key: str
    openweather_url: str = "http://api.openweathermap.org/data/2.5/weather"

    # Fixed position. When both are unset the position is looked up by IP.
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    geolocation_url: str = "http://ip-api.com/json/"

    location_timeout_ms: int = 15000
    location_maximum_age_ms: int = 60000
    http_timeout_s: float = 30.0

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @model_validator(mode="after")
    def _coordinates_come_in_pairs(self) -> "Settings":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        return self

    @property
    def has_fixed_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None
