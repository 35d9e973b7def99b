"""Configuration management using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default, so an empty environment reproduces the
    plain ``Value: 42`` run.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADJUSTED_VALUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Holder
    initial_value: int = Field(
        default=42,
        description="Value the entry point stores in its holder",
    )
    int_bits: int | None = Field(
        default=None,
        description="Signed integer width for the holder (unbounded when unset)",
    )

    # Output
    label: str = Field(
        default="Value",
        description="Label printed before the adjusted value",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application
    app_name: str = Field(
        default="adjusted-value",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    @field_validator("int_bits")
    @classmethod
    def _check_int_bits(cls, v: int | None) -> int | None:
        if v is not None and v < 2:
            raise ValueError("int_bits must be at least 2")
        return v

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def get_settings() -> Settings:
    """Get a settings instance.

    Settings are loaded from environment variables and .env file.
    """
    return Settings()
