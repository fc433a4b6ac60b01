"""
Structured logging for Jeet Timer.

JSON logs with timestamp, event_type, and wallet where relevant.
Use get_logger() in all service modules.
"""

from jeet_timer.jeet_logging.logger import bind_wallet, get_logger

__all__ = ["bind_wallet", "get_logger"]
