"""Wallet validation utilities."""

from __future__ import annotations

import re

# Base58 alphabet without 0, O, I, l; Solana addresses are 32-44 chars.
BASE58_ADDRESS_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")
INVALID_ADDRESS_MESSAGE = "Invalid Solana address: must be 32-44 base58 characters"


def is_valid_wallet(w: object) -> bool:
    """Return True if w is a string shaped like a base58 Solana address."""
    return isinstance(w, str) and BASE58_ADDRESS_RE.fullmatch(w) is not None


def truncate_wallet(wallet: str) -> str:
    """first4...last4 for wallets longer than 8 chars; shorter ones unchanged."""
    if len(wallet) > 8:
        return f"{wallet[:4]}...{wallet[-4:]}"
    return wallet
