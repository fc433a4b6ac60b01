"""
Pydantic models for Helius Enhanced Transaction API responses.

Only the fields the hold-time analysis depends on are required; everything
else Helius sends is kept as extra attributes (forward-compatible parsing).
Records are frozen once validated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from jeet_timer.core.exceptions import HeliusResponseShapeError


class _HeliusModel(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


class RawTokenAmount(_HeliusModel):
    token_amount: str = Field(alias="tokenAmount")
    decimals: int


class SwapTokenAmount(_HeliusModel):
    """One side of a swap: a mint the wallet sent (input) or received (output)."""

    mint: str
    raw_token_amount: RawTokenAmount = Field(alias="rawTokenAmount")
    user_account: str = Field("", alias="userAccount")
    token_account: str = Field("", alias="tokenAccount")


class SwapEvent(_HeliusModel):
    """events.swap: tokenInputs = tokens the wallet SENT, tokenOutputs = tokens it RECEIVED."""

    token_inputs: list[SwapTokenAmount] = Field(alias="tokenInputs")
    token_outputs: list[SwapTokenAmount] = Field(alias="tokenOutputs")
    native_input: dict[str, Any] | None = Field(None, alias="nativeInput")
    native_output: dict[str, Any] | None = Field(None, alias="nativeOutput")
    token_fees: list[Any] = Field(default_factory=list, alias="tokenFees")
    native_fees: list[Any] = Field(default_factory=list, alias="nativeFees")
    inner_swaps: list[Any] = Field(default_factory=list, alias="innerSwaps")


class TransactionEvents(_HeliusModel):
    swap: SwapEvent | None = None


class EnhancedTransaction(_HeliusModel):
    """Enhanced parsed transaction from Helius (one swap event for the wallet)."""

    signature: str
    timestamp: int  # unix seconds
    type: str  # "SWAP"
    source: str  # "RAYDIUM", "JUPITER", ...
    fee: int  # lamports
    fee_payer: str = Field(alias="feePayer")
    description: str
    token_transfers: list[dict[str, Any]] = Field(default_factory=list, alias="tokenTransfers")
    events: TransactionEvents


_TRANSACTIONS_ADAPTER = TypeAdapter(list[EnhancedTransaction])


def _describe_validation_error(exc: ValidationError) -> str:
    errors = exc.errors()
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{len(errors)} validation error(s), first at {loc or '<root>'}: {first.get('msg', 'invalid')}"


def parse_transactions(payload: Any) -> list[EnhancedTransaction]:
    """
    Validate a decoded JSON payload as a list of EnhancedTransaction.

    Raises:
        HeliusResponseShapeError: payload is not an array, or a record is missing required fields.
    """
    if not isinstance(payload, list):
        raise HeliusResponseShapeError(f"expected a JSON array, got {type(payload).__name__}")
    try:
        return _TRANSACTIONS_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise HeliusResponseShapeError(_describe_validation_error(e)) from e
