"""Core configuration.

Centralizes environment variables (pydantic-settings) so that the CLI and the
adapters (HTTP, git) read the same validated values.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URI = "http://api.capsuleapp.cyou"
DEFAULT_REMOTE_NAME = "capsule"

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "capsule"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "capsule"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "capsule"
    return Path.home() / ".config" / "capsule"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Values come from `CAPSULE_*` environment variables, the project `.env`
    and the user `.env`, in that order of precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAPSULE_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_uri: str = Field(
        default=DEFAULT_API_URI,
        min_length=8,
        description="Base URI of the Capsule API server.",
    )
    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for the create-application request (seconds).",
    )
    user_agent: str = Field(
        default="capsule-cli/1.0",
        min_length=1,
        description="User-Agent sent to the API server.",
    )
    remote_name: str = Field(
        default=DEFAULT_REMOTE_NAME,
        min_length=1,
        description="Name of the git remote registered for new applications.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Base log level when no -v flag is given.",
    )

    @field_validator("api_uri")
    @classmethod
    def _valid_http_uri(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        try:
            url = httpx.URL(value)
        except (httpx.InvalidURL, ValueError) as exc:
            raise ValueError(f"invalid API URI {value!r}: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"API URI must be an http(s) URL with a host: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level
