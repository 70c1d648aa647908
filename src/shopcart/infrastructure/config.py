"""Runtime settings read from ``SHOPCART_*`` environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHOPCART_", frozen=True)

    log_level: str = "WARNING"
    seed_catalog: bool = True

    @field_validator("log_level")
    @classmethod
    def _upper_case_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings() -> Settings:
    return Settings()
