"""Structured JSON logging configuration for the Emby proxy provider.

Emby authenticates every /Items lookup through an ``api_key`` query
parameter. httpx logs each request URL at INFO, so the httpx and httpcore
loggers are held at WARNING unless the provider runs at DEBUG; otherwise
the key would land in the logs on every request.
"""

from __future__ import annotations

import logging

from pythonjsonlogger import json as jsonlogger

# Per-request loggers whose request lines carry the api_key
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(log_level: str) -> None:
    """Configure root logger with structured JSON output.

    Output format: {"ts": "...", "level": "...", "name": "...", "msg": "..."}

    httpx/httpcore stay at WARNING unless the provider itself runs at DEBUG,
    since their request lines would otherwise include the api_key query
    parameter.

    Args:
        log_level: Logging level string (e.g., "info", "debug", "warning").
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={
            "asctime": "ts",
            "levelname": "level",
            "message": "msg",
        },
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # Clear any existing handlers to avoid duplicate output
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)
