"""
Ingestion: fetch swap history for a wallet from the Helius Enhanced
Transactions API and validate it into typed records.
"""

from jeet_timer.ingestion.helius_client import fetch_swap_history
from jeet_timer.ingestion.models import EnhancedTransaction, parse_transactions

__all__ = ["EnhancedTransaction", "fetch_swap_history", "parse_transactions"]
