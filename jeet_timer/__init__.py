"""
Jeet Timer — Solana wallet hold-time analysis service.

Fetches a wallet's swap history from Helius, pairs buys and sells per token
mint (FIFO), classifies how fast the wallet exits, and renders a speedometer
image. Modular layout: config, logging, ingestion, analytics, render, API server.
"""

__version__ = "1.0.0"
