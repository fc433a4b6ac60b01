"""
FastAPI server for the Jeet Timer API.

Mounts the jeet-timer router under /api/v1 and installs JSON error handlers
so every failure path returns {"status": "error", "message": ...}.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jeet_timer import __version__
from jeet_timer.api_server.jeet_timer import API_PREFIX, router as jeet_timer_router
from jeet_timer.api_server.schemas import INVALID_REQUEST_FORMAT
from jeet_timer.core.exceptions import HeliusError, WalletValidationError
from jeet_timer.jeet_logging import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Jeet Timer API",
    description="Solana wallet hold-time analysis: trade pairs, jeet level, speedometer image.",
    version=__version__,
)

app.include_router(jeet_timer_router, prefix=API_PREFIX)


@app.exception_handler(WalletValidationError)
async def wallet_validation_handler(request: Request, exc: WalletValidationError) -> JSONResponse:
    logger.info("request_validation_failed", path=request.url.path, message=exc.message, errors=exc.errors)
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or unreadable body."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        key = ".".join(str(part) for part in err.get("loc", ())) or "body"
        errors.setdefault(key, []).append(str(err.get("msg", "Invalid value")))
    logger.info("request_body_invalid", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=400,
        content={"status": "error", "message": INVALID_REQUEST_FORMAT, "errors": errors},
    )


@app.exception_handler(HeliusError)
async def helius_error_handler(request: Request, exc: HeliusError) -> JSONResponse:
    logger.warning("upstream_failed", path=request.url.path, error_type=type(exc).__name__, error=str(exc))
    return JSONResponse(
        status_code=502,
        content={"status": "error", "message": f"Failed to fetch swap history: {exc}"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=500,
        content={"status": "error", "message": "Internal server error"},
    )


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}
