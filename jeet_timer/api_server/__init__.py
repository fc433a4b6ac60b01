"""
API server: FastAPI app exposing the Jeet Timer endpoint.

Run with: uvicorn jeet_timer.api_server.app:app --host 0.0.0.0 --port 3000
"""
