"""
Request models for POST /api/v1/solana/jeet-timer.

Body shape: {"body": {"wallet": "<base58 address>"}}.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from jeet_timer.core.exceptions import WalletValidationError
from jeet_timer.utils.wallet_utils import INVALID_ADDRESS_MESSAGE, is_valid_wallet

INVALID_REQUEST_FORMAT = "Invalid request format"
INVALID_WALLET_ADDRESS = "Invalid wallet address"


class WalletBody(BaseModel):
    wallet: str

    @field_validator("wallet")
    @classmethod
    def _check_base58(cls, v: str) -> str:
        if not is_valid_wallet(v):
            raise PydanticCustomError("solana_address", INVALID_ADDRESS_MESSAGE)
        return v


class JeetTimerRequest(BaseModel):
    body: WalletBody


def field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten pydantic errors to {"body.wallet": ["..."]}."""
    out: dict[str, list[str]] = {}
    for err in exc.errors():
        key = ".".join(str(part) for part in err.get("loc", ())) or "body"
        out.setdefault(key, []).append(err.get("msg", "Invalid value"))
    return out


def parse_jeet_timer_request(payload: Any) -> str:
    """
    Return the validated wallet from a decoded request payload.

    Raises:
        WalletValidationError: "Invalid request format" when the payload is not an object
        or has no "body" key; "Invalid wallet address" for any payload carrying
        a "body" key whose wallet is missing or not a base58 address
        (a null, string, or list body included).
    """
    try:
        return JeetTimerRequest.model_validate(payload).body.wallet
    except ValidationError as e:
        has_body = isinstance(payload, dict) and "body" in payload
        message = INVALID_WALLET_ADDRESS if has_body else INVALID_REQUEST_FORMAT
        raise WalletValidationError(message, field_errors(e)) from e
