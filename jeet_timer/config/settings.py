"""
Application settings and environment configuration.

Responsibilities:
- Load configuration from environment variables and .env files.
- Validate required settings and provide defaults for optional ones.
- Expose typed settings (Helius API key, payout address, host, port)
  for use by the API server and the analytics pipeline.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass

from jeet_timer.config.env import (
    DEFAULT_HELIUS_BASE_URL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    load_env,
)
from jeet_timer.core.exceptions import ConfigError


@dataclass(frozen=True)
class Settings:
    """Service settings, loaded once at process start."""

    helius_api_key: str
    pay_to_address: str
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    helius_base_url: str = DEFAULT_HELIUS_BASE_URL
    log_level: str = "INFO"


def _parse_port(raw: str | None, problems: list[str]) -> int:
    raw = (raw or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw, 10)
    except ValueError:
        problems.append(f"PORT must be a positive integer (got {raw!r})")
        return DEFAULT_PORT
    if port <= 0:
        problems.append(f"PORT must be a positive integer (got {raw!r})")
    return port


def load_settings() -> Settings:
    """
    Build Settings from the environment (after loading .env).

    Raises:
        ConfigError: listing every missing or invalid variable.
    """
    load_env()
    problems: list[str] = []

    api_key = (os.getenv("HELIUS_API_KEY") or "").strip()
    if not api_key:
        problems.append("HELIUS_API_KEY is required")
    pay_to = (os.getenv("PAY_TO_ADDRESS") or "").strip()
    if not pay_to:
        problems.append("PAY_TO_ADDRESS is required")
    port = _parse_port(os.getenv("PORT"), problems)

    if problems:
        raise ConfigError(problems)

    return Settings(
        helius_api_key=api_key,
        pay_to_address=pay_to,
        port=port,
        host=(os.getenv("API_HOST") or "").strip() or DEFAULT_HOST,
        helius_base_url=((os.getenv("HELIUS_BASE_URL") or "").strip() or DEFAULT_HELIUS_BASE_URL).rstrip("/"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings (cached after the first call).

    Used as a FastAPI dependency; tests override it via app.dependency_overrides
    or clear the cache with get_settings.cache_clear().
    """
    return load_settings()
