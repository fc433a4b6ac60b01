"""
Analytics pipeline: fetch -> analyze -> classify -> render for one wallet.

Single entrypoint for the API: returns the response `data` object. Upstream
failures propagate as HeliusError; no partial results are returned.
"""

from __future__ import annotations

from typing import Any

from jeet_timer.analytics.hold_time import analyze_hold_times
from jeet_timer.analytics.jeet_levels import format_hold_time, get_jeet_level
from jeet_timer.config.settings import Settings
from jeet_timer.ingestion.helius_client import fetch_swap_history
from jeet_timer.jeet_logging import bind_wallet
from jeet_timer.render.speedometer import generate_speedometer


def run_jeet_analysis(wallet: str, settings: Settings) -> dict[str, Any]:
    """
    Run full analysis for one (already validated) wallet.

    Returns dict: wallet, avg_hold_seconds, avg_hold_time, jeet_level,
    fastest_jeet, fastest_exit, total_trades_analyzed, unmatched_buys,
    image_base64, creator_wallet, trade_pairs.
    """
    log = bind_wallet(wallet, __name__)
    log.info("analytics_pipeline_start")

    transactions = fetch_swap_history(
        wallet,
        settings.helius_api_key,
        base_url=settings.helius_base_url,
    )
    summary = analyze_hold_times(transactions)
    level = get_jeet_level(summary.avg_hold_seconds)
    image = generate_speedometer(summary, wallet)

    log.info(
        "analytics_pipeline_done",
        tx_count=len(transactions),
        pairs=summary.total_trades_analyzed,
        unmatched_buys=summary.unmatched_buys,
        jeet_level=level.level,
    )
    return {
        "wallet": wallet,
        "avg_hold_seconds": summary.avg_hold_seconds,
        "avg_hold_time": format_hold_time(summary.avg_hold_seconds),
        "jeet_level": level.label,
        "fastest_jeet": summary.fastest_jeet,
        "fastest_exit": format_hold_time(summary.fastest_jeet),
        "total_trades_analyzed": summary.total_trades_analyzed,
        "unmatched_buys": summary.unmatched_buys,
        "image_base64": image,
        "creator_wallet": settings.pay_to_address,
        "trade_pairs": [p.to_dict() for p in summary.trade_pairs],
    }
