"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables (or a ``.env`` file).
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dataset
    dataset_path: str = Field(
        default="data/sample-addresses.json",
        description="JSON array of geocoder-style address records used for local search",
    )

    # Reverse geocoding — Nominatim (OpenStreetMap)
    nominatim_enabled: bool = Field(
        default=True,
        description="Enable reverse geocoding of the device location via Nominatim",
    )
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Nominatim base URL (self-hostable)",
    )
    nominatim_email: str = Field(
        default="",
        description="Email for Nominatim usage policy compliance",
    )
    nominatim_user_agent: str = Field(
        default="address-resolver/0.1",
        description="User-Agent header sent to Nominatim",
    )
    nominatim_timeout: float = Field(
        default=10.0,
        description="Nominatim request timeout in seconds",
        gt=0,
    )

    @field_validator("nominatim_base_url")
    @classmethod
    def validate_nominatim_base_url(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            msg = "nominatim_base_url must be an http(s) URL"
            raise ValueError(msg)
        return v.rstrip("/")

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            msg = f"Invalid log_level: {v!r}. Expected one of {sorted(_LOG_LEVELS)}"
            raise ValueError(msg)
        return v.upper()


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
