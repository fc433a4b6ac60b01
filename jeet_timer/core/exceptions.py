"""
Application-level exceptions.

Every upstream-dependent failure derives from HeliusError and surfaces as
HTTP 502; WalletValidationError is always client fault (HTTP 400);
ConfigError stops the process at startup.
"""

from __future__ import annotations

from typing import Any


class JeetTimerError(Exception):
    """Base class for all Jeet Timer errors."""


class ConfigError(JeetTimerError):
    """Required configuration is missing or invalid."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("Invalid environment variables: " + "; ".join(self.problems))


class WalletValidationError(JeetTimerError):
    """
    Request body or wallet address failed validation.

    message is caller-facing ("Invalid request format" / "Invalid wallet address");
    errors maps field path -> list of messages.
    """

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None):
        self.message = message
        self.errors = errors or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"status": "error", "message": self.message, "errors": self.errors}


class HeliusError(JeetTimerError):
    """Base class for failures talking to the Helius transaction-history API."""


class HeliusTimeoutError(HeliusError):
    """A request attempt exceeded the per-attempt timeout. Not retried."""

    def __init__(self, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(f"Helius API request timed out after {timeout_ms}ms")


class HeliusNetworkError(HeliusError):
    """Transport-level failure (DNS, connection reset, TLS, ...)."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Helius API network error: {cause}")


class HeliusRateLimitError(HeliusError):
    """Upstream kept answering 429 after all retries."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__("Helius API rate limited: max retries exceeded")


class HeliusBadRequestError(HeliusError):
    def __init__(self) -> None:
        super().__init__("Helius API bad request: invalid wallet address or parameters")


class HeliusUnauthorizedError(HeliusError):
    def __init__(self) -> None:
        super().__init__("Helius API unauthorized: invalid API key")


class HeliusForbiddenError(HeliusError):
    def __init__(self) -> None:
        super().__init__("Helius API forbidden: access denied")


class HeliusUpstreamError(HeliusError):
    """Any other non-2xx status from Helius."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Helius API error: {status_code} {reason}".rstrip())


class HeliusResponseShapeError(HeliusError):
    """Payload decoded but failed structural validation."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Helius API returned an unexpected response shape: {detail}")
