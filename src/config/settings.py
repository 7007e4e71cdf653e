# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Thresholds normally come from the input file; the two threshold fields here
override them when set.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Thresholds (override values read from input) ===
    strength_threshold: float | None = None
    min_close_friends: int | None = None

    # === Connection strength ===
    neighborhood_mode: Literal["closed", "open"] = "closed"

    # === Report ===
    tags_per_line: int = 5
    probe_user_a: int = 0
    probe_user_b: int = 1

    # === Logging ===
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: str | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("strength_threshold")
    @classmethod
    def validate_strength_threshold(cls, v: float | None) -> float | None:  # noqa: N805
        if v is not None and v < 0:
            raise ValueError("strength_threshold must be >= 0")
        return v

    @field_validator("min_close_friends")
    @classmethod
    def validate_min_close_friends(cls, v: int | None) -> int | None:  # noqa: N805
        if v is not None and v < 0:
            raise ValueError("min_close_friends must be >= 0")
        return v

    @field_validator("tags_per_line")
    @classmethod
    def validate_tags_per_line(cls, v: int) -> int:  # noqa: N805
        if v < 1:
            raise ValueError("tags_per_line must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.probe_user_a < 0 or self.probe_user_b < 0:
            errors.append("PROBE_USER_A and PROBE_USER_B must be >= 0")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def probe_pair(self) -> tuple[int, int]:
        """User pair reported in Stage 2."""
        return (self.probe_user_a, self.probe_user_b)


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
