"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, HttpUrl, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    base_url: HttpUrl = Field(
        default="https://sysbird.jp/toriko/api/",
        description="Confectionery search endpoint.",
    )
    api_key: SecretStr = SecretStr("guest")
    response_format: Literal["json"] = "json"
    max_results: int = Field(default=10, ge=1, le=100)
    order: str = Field(default="r", min_length=1)
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)


class OkashiSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OKASHI_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    open_links_in_browser: bool = True

    api: ApiSettings = Field(default_factory=ApiSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value


@lru_cache
def get_settings() -> OkashiSettings:
    """Return cached settings instance."""

    return OkashiSettings()


__all__ = [
    "ApiSettings",
    "OkashiSettings",
    "get_settings",
]
