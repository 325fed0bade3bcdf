"""Application configuration."""
from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flipbook.animation.frame_timing_generator import parse_iterations


class Settings(BaseSettings):
    """Runtime settings loaded from .env and FLIPBOOK_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="FLIPBOOK_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    default_frame_rate: float = Field(default=0.25, gt=0, allow_inf_nan=False)
    default_alternate: bool = True
    default_iterations: str = "infinite"
    percent_precision: int = Field(default=4, ge=0, le=10)
    output_dir: str = "outputs"
    log_level: str = "WARNING"

    @field_validator("default_iterations", mode="before")
    @classmethod
    def _check_iterations(cls, value):
        # InvalidArgument is a ValueError, reported as a ValidationError on load
        return str(parse_iterations(value))


settings = Settings()
