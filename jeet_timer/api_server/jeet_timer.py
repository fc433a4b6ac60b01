"""
FastAPI router: GET/POST /api/v1/solana/jeet-timer.

GET returns static service metadata; POST analyzes one wallet's swap history.
Validation failures -> 400, upstream failures -> 502 (handlers in server.py).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from jeet_timer import __version__
from jeet_timer.analytics.analytics_pipeline import run_jeet_analysis
from jeet_timer.api_server.schemas import parse_jeet_timer_request
from jeet_timer.config.settings import Settings, get_settings
from jeet_timer.jeet_logging import bind_wallet

ROUTE_PREFIX = "/solana/jeet-timer"
API_PREFIX = "/api/v1"
ENDPOINT_PATH = API_PREFIX + ROUTE_PREFIX

RESPONSE_FIELDS = [
    "wallet",
    "avg_hold_seconds",
    "avg_hold_time",
    "jeet_level",
    "fastest_jeet",
    "fastest_exit",
    "total_trades_analyzed",
    "unmatched_buys",
    "image_base64",
    "creator_wallet",
    "trade_pairs",
]

router = APIRouter(prefix=ROUTE_PREFIX, tags=["jeet-timer"])


@router.get("")
def jeet_timer_info(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Static service metadata; no computation."""
    return {
        "name": "Jeet Timer",
        "description": (
            "Analyzes a Solana wallet's trade history to determine how quickly they sell (jeet) "
            "their tokens. Returns hold-time stats, jeet classification, and a speedometer image."
        ),
        "version": __version__,
        "pricing": "$0.01 per call",
        "pay_to_address": settings.pay_to_address,
        "endpoint": f"POST {ENDPOINT_PATH}",
        "request_schema": {
            "body": {
                "wallet": "string (Solana base58 address)",
            },
        },
        "response_fields": RESPONSE_FIELDS,
    }


@router.post("")
def jeet_timer_analyze(
    payload: Any = Body(default=None),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """
    Analyze a wallet: {"body": {"wallet": "<address>"}} -> {"status": "success", "data": {...}}.

    Runs in FastAPI's threadpool (sync handler); the Helius call blocks for at most
    timeout x attempts plus backoff.
    """
    wallet = parse_jeet_timer_request(payload)
    bind_wallet(wallet, __name__).info("jeet_timer_request")
    data = run_jeet_analysis(wallet, settings)
    return {"status": "success", "data": data}
