"""
Pytest tests for wallet address validation and truncation.
"""

from __future__ import annotations

import pytest

from jeet_timer.utils.wallet_utils import is_valid_wallet, truncate_wallet

VALID_WALLET = "DstRVJCPsgZHLnW6mFcasHPdemYvFVbdm3LFZNv3Egrp"


def test_real_addresses_accepted():
    assert is_valid_wallet(VALID_WALLET)
    assert is_valid_wallet("So11111111111111111111111111111111111111112")
    assert is_valid_wallet("9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka")


def test_length_bounds():
    assert is_valid_wallet("1" * 32)
    assert is_valid_wallet("z" * 44)
    assert not is_valid_wallet("1" * 31)
    assert not is_valid_wallet("z" * 45)
    assert not is_valid_wallet("")


@pytest.mark.parametrize("bad_char", ["0", "O", "I", "l"])
def test_non_base58_chars_rejected(bad_char):
    assert not is_valid_wallet(bad_char + "1" * 35)


def test_other_bad_inputs():
    assert not is_valid_wallet("not-a-valid-address!")
    assert not is_valid_wallet(" " + VALID_WALLET)
    assert not is_valid_wallet(VALID_WALLET + "\n")
    assert not is_valid_wallet(None)
    assert not is_valid_wallet(12345)


def test_truncate_wallet():
    assert truncate_wallet(VALID_WALLET) == "DstR...Egrp"
    assert truncate_wallet("123456789") == "1234...6789"
    assert truncate_wallet("12345678") == "12345678"
    assert truncate_wallet("") == ""
