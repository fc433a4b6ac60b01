"""
Test that jeet_logging can be imported without circular import and logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from jeet_logging and use the logger."""
    from jeet_timer.jeet_logging import bind_wallet, get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "warning")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")
    bind_wallet("DstRVJCPsgZHLnW6mFcasHPdemYvFVbdm3LFZNv3Egrp").info("wallet_bound")


def test_short_wallet():
    from jeet_timer.jeet_logging.logger import short_wallet

    assert short_wallet("abc") == "abc"
    assert short_wallet("x" * 20) == "x" * 16 + "..."
