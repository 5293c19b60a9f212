"""Lightweight configuration for the landbattle tools."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="LANDBATTLE_"
    )

    rules_version: str = Field(default="ftp-2e", description="Ruleset the CRT encodes")
    default_trials_exponent: int = Field(
        default=16,
        description="Monte Carlo trials are 2 ** exponent when a request does not choose",
        ge=0,
    )
    max_trials_exponent: int = Field(
        default=20,
        description="Largest Monte Carlo exponent a request may ask for",
        ge=0,
        le=24,
    )
    rng_seed: str | None = Field(
        default=None,
        description="Seed for the shared die-roll source; unset draws OS entropy",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> Settings:
        if self.default_trials_exponent > self.max_trials_exponent:
            raise ValueError("default_trials_exponent cannot exceed max_trials_exponent")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
