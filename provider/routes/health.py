"""GET /health — Health status endpoint.

Returns current provider status including version, uptime, Emby
reachability and the upstream server type.
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from provider import __version__
from provider.models import HealthResponse
from shared_lib.constants import MediaServerType

router = APIRouter()
logger = logging.getLogger(__name__)

# Module-level start time: records when the module was imported (proxy for app start)
_start_time = time.time()


@router.get("/health")
async def health(request: Request) -> JSONResponse:
    """Return provider health status."""
    uptime_seconds = int(time.time() - _start_time)

    # emby_reachable is set by the lifespan on app.state
    emby_reachable: bool = getattr(request.app.state, "emby_reachable", False)
    emby = getattr(request.app.state, "emby", None)
    server_type = emby.get_type() if emby is not None else MediaServerType.EMBY

    body = HealthResponse(
        version=__version__,
        uptime_seconds=uptime_seconds,
        emby_reachable=emby_reachable,
        server_type=server_type.value,
    )
    return JSONResponse(content=body.model_dump())
