"""GET /web/index.html — Emby web client entry page, passed through as-is."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response

router = APIRouter()


@router.get("/web/index.html")
async def index_html(request: Request) -> Response:
    content = await request.app.state.emby.get_index_html()
    return Response(content=content, media_type="text/html")
