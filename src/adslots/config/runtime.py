"""Pydantic-based runtime settings for the rotation engine.

Loads from environment variables (with optional .env file), prefixed
with ``ADSLOTS_``. Invalid values fail fast on first access.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_NAMESPACE_RE = re.compile(r"^[A-Z][A-Z0-9]*(_[A-Z0-9]+)*$")


class RuntimeSettings(BaseSettings):
    """All configuration for the ad slot engine, validated at startup."""

    model_config = {"env_prefix": "ADSLOTS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Content API ---
    api_base_url: str = Field(
        default="https://api.jharkhandbiharupdates.com/api/v1",
        description="Base URL of the content API serving /banner-ads/active/{size}",
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0, description="Per-request timeout")

    # --- Rotation ---
    rotation_interval_seconds: float = Field(
        default=10.0, gt=0, description="Interval between large-ad rotation ticks"
    )
    shuffle_ads: bool = Field(default=False, description="Shuffle each pool once at load time")

    # --- Persistence ---
    store_db_path: str = Field(
        default="data/adslots.db",
        description="SQLite path for persisted slot indices",
    )
    page_namespace: str = Field(default="LOCALNEWS", description="Slot key namespace of the page")

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Level of the adslots logger")

    @field_validator("api_base_url")
    @classmethod
    def _http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("page_namespace")
    @classmethod
    def _namespace_format(cls, v: str) -> str:
        if not _NAMESPACE_RE.match(v):
            raise ValueError(f"page_namespace must be upper snake case, got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def _level_name(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log_level {v!r}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
