"""
Pytest fixtures for Jeet Timer tests: Helius transaction builders, settings,
and a FastAPI TestClient with settings injected via dependency override.
"""

from __future__ import annotations

from typing import Any

import pytest

WALLET = "DstRVJCPsgZHLnW6mFcasHPdemYvFVbdm3LFZNv3Egrp"
MINT_A = "MintAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
MINT_B = "MintBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBB"
WSOL = "So11111111111111111111111111111111111111112"
USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"

PAY_TO = "PayToAddr111111111111111111111111111"


def _token(mint: str) -> dict[str, Any]:
    return {
        "userAccount": WALLET,
        "tokenAccount": "tokenAcct",
        "mint": mint,
        "rawTokenAmount": {"tokenAmount": "1000000", "decimals": 6},
    }


def raw_tx(
    signature: str,
    timestamp: int,
    input_mints: list[str] | None = None,
    output_mints: list[str] | None = None,
    swap: bool = True,
) -> dict[str, Any]:
    """Helius Enhanced Transaction JSON: input_mints sent by the wallet, output_mints received."""
    events: dict[str, Any] = {}
    if swap:
        events["swap"] = {
            "tokenInputs": [_token(m) for m in input_mints or []],
            "tokenOutputs": [_token(m) for m in output_mints or []],
            "tokenFees": [],
            "nativeFees": [],
            "innerSwaps": [],
        }
    return {
        "signature": signature,
        "timestamp": timestamp,
        "type": "SWAP",
        "source": "RAYDIUM",
        "fee": 5000,
        "feePayer": WALLET,
        "description": "swapped tokens",
        "tokenTransfers": [],
        "events": events,
    }


def make_tx(signature: str, timestamp: int, input_mints=None, output_mints=None, swap: bool = True):
    """Validated EnhancedTransaction built from raw_tx()."""
    from jeet_timer.ingestion.models import EnhancedTransaction

    return EnhancedTransaction.model_validate(raw_tx(signature, timestamp, input_mints, output_mints, swap))


def buy(signature: str, timestamp: int, mint: str = MINT_A):
    """Wallet spends USDC and receives mint."""
    return make_tx(signature, timestamp, [USDC], [mint])


def sell(signature: str, timestamp: int, mint: str = MINT_A):
    """Wallet sends mint and receives USDC."""
    return make_tx(signature, timestamp, [mint], [USDC])


@pytest.fixture
def settings():
    from jeet_timer.config.settings import Settings

    return Settings(
        helius_api_key="test-api-key",
        pay_to_address=PAY_TO,
        port=3000,
    )


@pytest.fixture
def client(settings):
    """FastAPI TestClient with settings overridden (no env needed)."""
    from fastapi.testclient import TestClient

    from jeet_timer.api_server.server import app
    from jeet_timer.config.settings import get_settings

    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
