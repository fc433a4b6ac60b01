"""
FastAPI/ASGI application entrypoint.

Build and configure the ASGI app; mount routes from server.
Run with: uvicorn jeet_timer.api_server.app:app --host 0.0.0.0 --port 3000
"""

from jeet_timer.api_server.server import app

__all__ = ["app"]
