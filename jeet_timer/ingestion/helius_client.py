"""
Fetch a wallet's swap history from the Helius Enhanced Transactions API.

GET {base}/v0/addresses/{wallet}/transactions?api-key=...&type=SWAP&limit=50

Retry policy: only HTTP 429 is retried, at most MAX_RETRIES extra attempts with
exponential backoff (1s, 2s). Timeouts, transport errors, and every other
non-2xx status fail immediately.

Each attempt has a hard FETCH_TIMEOUT_SEC deadline. The requests timeout only
bounds the connect and each gap between reads, so the body is streamed and the
whole attempt is checked against a monotonic deadline.
"""

from __future__ import annotations

import json
import time
from typing import Any

import requests

from jeet_timer.config.env import DEFAULT_HELIUS_BASE_URL, mask_api_key
from jeet_timer.core.exceptions import (
    HeliusBadRequestError,
    HeliusForbiddenError,
    HeliusNetworkError,
    HeliusRateLimitError,
    HeliusResponseShapeError,
    HeliusTimeoutError,
    HeliusUnauthorizedError,
    HeliusUpstreamError,
)
from jeet_timer.ingestion.models import EnhancedTransaction, parse_transactions
from jeet_timer.jeet_logging import bind_wallet

MAX_RETRIES = 2
BASE_DELAY_SEC = 1.0
FETCH_TIMEOUT_SEC = 10.0
READ_CHUNK_BYTES = 64 * 1024
TX_TYPE = "SWAP"
TX_LIMIT = 50

# Statuses that are surfaced verbatim and never retried
_CLIENT_ERRORS = {
    400: HeliusBadRequestError,
    401: HeliusUnauthorizedError,
    403: HeliusForbiddenError,
}


def build_url(wallet: str, api_key: str, base_url: str = DEFAULT_HELIUS_BASE_URL) -> str:
    return (
        f"{base_url.rstrip('/')}/v0/addresses/{wallet}/transactions"
        f"?api-key={api_key}&type={TX_TYPE}&limit={TX_LIMIT}"
    )


def backoff_delay(attempt: int) -> float:
    """Delay before retry number attempt+1: 1s, 2s, 4s, ..."""
    return BASE_DELAY_SEC * (2 ** attempt)


def _timeout_error() -> HeliusTimeoutError:
    return HeliusTimeoutError(int(FETCH_TIMEOUT_SEC * 1000))


def _get(url: str, session: requests.Session | None) -> requests.Response:
    http: Any = session if session is not None else requests
    try:
        return http.get(url, timeout=FETCH_TIMEOUT_SEC, stream=True)
    except requests.Timeout as e:
        raise _timeout_error() from e
    except requests.RequestException as e:
        raise HeliusNetworkError(str(e)) from e


def _read_body(response: requests.Response, deadline: float) -> bytes:
    """Read the streamed body, failing once the attempt deadline has passed."""
    chunks: list[bytes] = []
    try:
        for chunk in response.iter_content(chunk_size=READ_CHUNK_BYTES):
            if time.monotonic() > deadline:
                raise _timeout_error()
            chunks.append(chunk)
    except requests.Timeout as e:
        raise _timeout_error() from e
    except requests.RequestException as e:
        raise HeliusNetworkError(str(e)) from e
    finally:
        response.close()
    return b"".join(chunks)


def fetch_swap_history(
    wallet: str,
    api_key: str,
    *,
    base_url: str = DEFAULT_HELIUS_BASE_URL,
    session: requests.Session | None = None,
) -> list[EnhancedTransaction]:
    """
    Return the wallet's recent swap transactions from Helius.

    Raises:
        HeliusTimeoutError, HeliusNetworkError, HeliusRateLimitError,
        HeliusBadRequestError, HeliusUnauthorizedError, HeliusForbiddenError,
        HeliusUpstreamError, HeliusResponseShapeError.
    """
    url = build_url(wallet, api_key, base_url)
    log = bind_wallet(wallet, __name__)
    log.info("helius_fetch_start", url=mask_api_key(url))

    for attempt in range(MAX_RETRIES + 1):
        deadline = time.monotonic() + FETCH_TIMEOUT_SEC
        try:
            response = _get(url, session)
            if response.ok:
                body = _read_body(response, deadline)
        except (HeliusTimeoutError, HeliusNetworkError) as e:
            log.warning("helius_fetch_failed", attempt=attempt + 1, error=str(e))
            raise

        if not response.ok:
            response.close()

        if response.status_code == 429:
            if attempt < MAX_RETRIES:
                delay = backoff_delay(attempt)
                log.warning("helius_rate_limit", attempt=attempt + 1, retry_in_sec=delay)
                time.sleep(delay)
                continue
            log.warning("helius_rate_limit_exhausted", attempts=attempt + 1)
            raise HeliusRateLimitError(attempt + 1)

        error_cls = _CLIENT_ERRORS.get(response.status_code)
        if error_cls is not None:
            log.warning("helius_fetch_rejected", status_code=response.status_code)
            raise error_cls()

        if not response.ok:
            log.warning("helius_fetch_failed", status_code=response.status_code, reason=response.reason)
            raise HeliusUpstreamError(response.status_code, response.reason or "")

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise HeliusResponseShapeError("response body is not valid JSON") from e
        transactions = parse_transactions(payload)
        log.info("helius_fetch_done", attempts=attempt + 1, tx_count=len(transactions))
        return transactions

    # range() always returns or raises above
    raise HeliusRateLimitError(MAX_RETRIES + 1)
