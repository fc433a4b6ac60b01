"""
Hold-time analysis: FIFO buy/sell matching per token mint.

A swap's tokenOutputs are tokens the wallet received (BUY), tokenInputs are
tokens it sent (SELL). Stable/reference mints (wSOL, USDC, USDT) are the price
side of a trade and never produce events. Per mint, each buy (chronological)
is paired with the earliest unconsumed sell at or after it; sells earlier than
the buy are skipped for good. Buys left without a sell count as unmatched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from jeet_timer.ingestion.models import EnhancedTransaction
from jeet_timer.jeet_logging import get_logger

logger = get_logger(__name__)

WSOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT_MINT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"
STABLE_MINTS = frozenset({WSOL_MINT, USDC_MINT, USDT_MINT})

BUY = "BUY"
SELL = "SELL"


@dataclass(frozen=True)
class MintEvent:
    """One non-stable mint moving in or out of the wallet in one transaction."""

    mint: str
    side: str  # BUY | SELL
    timestamp: int
    signature: str


@dataclass(frozen=True)
class TradePair:
    """A buy matched (FIFO) to a later-or-equal sell of the same mint."""

    mint: str
    buy_timestamp: int
    sell_timestamp: int
    hold_seconds: int
    buy_signature: str
    sell_signature: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "mint": self.mint,
            "buyTimestamp": self.buy_timestamp,
            "sellTimestamp": self.sell_timestamp,
            "holdSeconds": self.hold_seconds,
            "buySignature": self.buy_signature,
            "sellSignature": self.sell_signature,
        }


@dataclass(frozen=True)
class AnalysisSummary:
    """
    Aggregate hold-time result.

    trade_pairs are in mint-discovery order (not globally time-sorted);
    avg_hold_seconds and fastest_jeet are 0 when there are no pairs.
    """

    trade_pairs: tuple[TradePair, ...] = field(default_factory=tuple)
    avg_hold_seconds: float = 0
    fastest_jeet: int = 0
    total_trades_analyzed: int = 0
    unmatched_buys: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "trade_pairs": [p.to_dict() for p in self.trade_pairs],
            "avg_hold_seconds": self.avg_hold_seconds,
            "fastest_jeet": self.fastest_jeet,
            "total_trades_analyzed": self.total_trades_analyzed,
            "unmatched_buys": self.unmatched_buys,
        }


def extract_mint_events(transactions: Iterable[EnhancedTransaction]) -> list[MintEvent]:
    """
    Emit BUY/SELL events for non-stable mints, in the order given.

    Transactions without a swap event contribute nothing.
    """
    events: list[MintEvent] = []
    for tx in transactions:
        swap = tx.events.swap
        if swap is None:
            continue
        for output in swap.token_outputs:
            if output.mint not in STABLE_MINTS:
                events.append(MintEvent(output.mint, BUY, tx.timestamp, tx.signature))
        for token_input in swap.token_inputs:
            if token_input.mint not in STABLE_MINTS:
                events.append(MintEvent(token_input.mint, SELL, tx.timestamp, tx.signature))
    return events


def group_by_mint(events: Iterable[MintEvent]) -> dict[str, list[MintEvent]]:
    """Group events by mint; mints keep first-seen order, events keep their order."""
    by_mint: dict[str, list[MintEvent]] = {}
    for evt in events:
        by_mint.setdefault(evt.mint, []).append(evt)
    return by_mint


def match_trade_pairs(mint: str, events: Sequence[MintEvent]) -> tuple[list[TradePair], int]:
    """
    FIFO-match one mint's chronological events.

    Returns (pairs, unmatched_buy_count). Uses a forward-only cursor into the
    sell list: sells strictly before the current buy are skipped permanently.
    """
    buys = [e for e in events if e.side == BUY]
    sells = [e for e in events if e.side == SELL]

    pairs: list[TradePair] = []
    unmatched = 0
    sell_idx = 0
    for buy in buys:
        while sell_idx < len(sells) and sells[sell_idx].timestamp < buy.timestamp:
            sell_idx += 1
        if sell_idx < len(sells):
            sell = sells[sell_idx]
            pairs.append(
                TradePair(
                    mint=mint,
                    buy_timestamp=buy.timestamp,
                    sell_timestamp=sell.timestamp,
                    hold_seconds=sell.timestamp - buy.timestamp,
                    buy_signature=buy.signature,
                    sell_signature=sell.signature,
                )
            )
            sell_idx += 1
        else:
            unmatched += 1
    return pairs, unmatched


def analyze_hold_times(transactions: Sequence[EnhancedTransaction]) -> AnalysisSummary:
    """
    Pair buys and sells per mint and summarize hold durations.

    Input may be in any order and is not mutated; a stable sort by timestamp
    keeps same-second transactions in input order.
    """
    ordered = sorted(transactions, key=lambda tx: tx.timestamp)
    by_mint = group_by_mint(extract_mint_events(ordered))

    trade_pairs: list[TradePair] = []
    unmatched_buys = 0
    for mint, mint_events in by_mint.items():
        pairs, unmatched = match_trade_pairs(mint, mint_events)
        trade_pairs.extend(pairs)
        unmatched_buys += unmatched

    if not trade_pairs:
        summary = AnalysisSummary(unmatched_buys=unmatched_buys)
    else:
        holds = [p.hold_seconds for p in trade_pairs]
        summary = AnalysisSummary(
            trade_pairs=tuple(trade_pairs),
            avg_hold_seconds=sum(holds) / len(holds),
            fastest_jeet=min(holds),
            total_trades_analyzed=len(trade_pairs),
            unmatched_buys=unmatched_buys,
        )

    logger.debug(
        "hold_time_analysis_done",
        tx_count=len(transactions),
        mint_count=len(by_mint),
        pairs=summary.total_trades_analyzed,
        unmatched_buys=unmatched_buys,
    )
    return summary
