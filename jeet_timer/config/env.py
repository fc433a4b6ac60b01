"""
Environment variable loading for Jeet Timer.

- HELIUS_API_KEY: Helius API key (required)
- PAY_TO_ADDRESS: payout wallet echoed as creator_wallet (required)
- PORT: listening port (default: 3000)
- API_HOST: bind address (default: 0.0.0.0)
- HELIUS_BASE_URL: Helius REST base URL (default: mainnet)
- Loads .env from project root when available.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

# Project root: config is jeet_timer/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_HELIUS_BASE_URL = "https://api-mainnet.helius-rpc.com"


def load_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env vars win."""
    load_dotenv(_ENV_PATH, override=False)


def mask_api_key(url: str) -> str:
    """Mask the api-key query value so URLs can be logged."""
    if "api-key=" not in url:
        return url
    head, _, tail = url.partition("api-key=")
    _, amp, rest = tail.partition("&")
    return f"{head}api-key=***{amp}{rest}"
