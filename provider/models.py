"""Pydantic response models for the provider's own endpoints.

Item lookups are returned in Emby's native envelope (see emby.models); the
models here cover health and error payloads.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    """Body of GET /health."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    version: str
    uptime_seconds: int
    emby_reachable: bool
    server_type: str


class ErrorResponse(BaseModel):
    """Body returned when an Emby call fails."""

    error: str
    type: str
