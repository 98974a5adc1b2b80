"""GET /Items — Aggregated item lookup.

Accepts Emby's own query parameter names so existing Emby clients can be
pointed at the provider unchanged. Only ``Ids``, ``Limit`` and ``Fields`` are
honoured; the lookup is always recursive.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/Items")
async def query_items(
    request: Request,
    ids: str = Query(default="", alias="Ids"),
    limit: int = Query(default=0, alias="Limit"),
    fields: str = Query(default="", alias="Fields"),
) -> JSONResponse:
    """Resolve each ID individually and return the combined item collection."""
    emby = request.app.state.emby
    result = await emby.items_service_query_item(ids, limit=limit, fields=fields)

    logger.info(
        "Items query served",
        extra={"ids": ids, "limit": limit, "returned": result.TotalRecordCount},
    )
    return JSONResponse(content=result.to_payload())
