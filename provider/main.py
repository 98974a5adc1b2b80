"""FastAPI application factory for the Emby proxy provider.

Wires together configuration, structured logging, lifespan management,
route registration, Emby error mapping and HTTP request logging middleware.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from emby.client import EmbyServer
from emby.exceptions import EmbyError
from provider import __version__
from provider.config import get_settings
from provider.logging_config import configure_logging
from provider.models import ErrorResponse
from provider.routes import health, items, web

logger = logging.getLogger(__name__)


async def _check_emby_connectivity(endpoint: str) -> bool:
    """Attempt a lightweight connectivity check against the Emby endpoint.

    Returns True if Emby responded with a non-5xx status, False on any
    connection or timeout error.
    """
    try:
        async with httpx.AsyncClient(timeout=5.0) as client:
            resp = await client.get(endpoint)
            reachable = resp.status_code < 500
    except httpx.HTTPError:
        reachable = False

    if reachable:
        logger.info("Emby reachable", extra={"emby_url": endpoint})
    else:
        logger.info(
            "Emby unreachable, will retry on requests",
            extra={"emby_url": endpoint},
        )

    return reachable


def _print_startup_banner(settings, endpoint: str, emby_ok: bool) -> None:  # type: ignore[no-untyped-def]
    """Log the startup banner at info level."""
    reachability = "reachable" if emby_ok else "unreachable"

    logger.info(
        "Emby proxy provider starting",
        extra={
            "version": __version__,
            "port": settings.provider_port,
            "emby_url": endpoint,
            "emby_reachable": emby_ok,
            "request_timeout": settings.request_timeout,
        },
    )
    # Also emit a human-readable summary for log tailing
    logger.info(
        f"Emby proxy provider v{__version__} | "
        f"Port: {settings.provider_port} | "
        f"Emby: {endpoint} [{reachability}]"
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """FastAPI lifespan context manager.

    Runs on startup: load config, configure logging, build the Emby client,
    check Emby connectivity, print startup banner. Closes the client on
    shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    emby = EmbyServer(
        settings.emby_url,
        settings.emby_api_key,
        timeout=settings.request_timeout,
    )
    app.state.emby = emby

    emby_ok = await _check_emby_connectivity(emby.endpoint)
    app.state.emby_reachable = emby_ok

    _print_startup_banner(settings, emby.endpoint, emby_ok)

    try:
        yield
    finally:
        await emby.close()
        logger.info("Emby proxy provider shutting down")


# ── Application factory ──────────────────────────────────────────────────────

app = FastAPI(
    lifespan=lifespan,
    docs_url=None,    # Machine-to-machine API, no Swagger UI
    redoc_url=None,
)

# Route registration
app.include_router(items.router)
app.include_router(web.router)
app.include_router(health.router)


# ── Error mapping ────────────────────────────────────────────────────────────

@app.exception_handler(EmbyError)
async def emby_error_handler(request: Request, exc: EmbyError) -> JSONResponse:
    """Report upstream Emby failures as 502 Bad Gateway."""
    logger.warning(
        "Emby call failed",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "item_id": exc.item_id,
        },
    )
    body = ErrorResponse(error=str(exc), type=type(exc).__name__)
    return JSONResponse(status_code=502, content=body.model_dump())


# ── Request logging middleware ────────────────────────────────────────────────

@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:  # type: ignore[no-untyped-def]
    """Log all incoming requests with method, path, status, and response time."""
    start = time.perf_counter()
    response: Response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.info(
        "HTTP request",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
        },
    )
    return response


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "provider.main:app",
        host="0.0.0.0",
        port=settings.provider_port,
        log_level=settings.log_level.lower(),
        access_log=False,  # We handle request logging ourselves
    )
