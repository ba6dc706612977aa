"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DIRECTORY_URL = "https://backendsandbox.csean.org.ng/api/v1"


class DirectorySettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default=DEFAULT_DIRECTORY_URL,
        description="Root of the member directory API; /users/whois is appended.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)
    page_size: int = Field(default=20, ge=1, le=100)

    def whois_url(self) -> str:
        return f"{str(self.base_url).rstrip('/')}/users/whois"


class LookupSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOOKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    default_language: str = "en"

    directory: DirectorySettings = Field(default_factory=DirectorySettings)


@lru_cache
def get_settings() -> LookupSettings:
    """Return cached settings instance."""

    return LookupSettings()


__all__ = [
    "DEFAULT_DIRECTORY_URL",
    "DirectorySettings",
    "LookupSettings",
    "get_settings",
]
