"""
shared_lib.endpoint — Media server address normalization.

Users configure server addresses in many shapes (``emby.lan:8096``,
``http://emby.lan:8096/``, ``https://media.example.com/emby/web``). Clients
need a single canonical form to append API paths to:

    scheme://host[:port]

Rules
-----
* Surrounding whitespace is ignored.
* An address without a scheme is assumed to be plain ``http``.
* Only ``http`` and ``https`` are accepted.
* Path, query string and fragment are discarded.

Usage::

    from shared_lib.endpoint import get_endpoint

    get_endpoint("emby.lan:8096")          # -> "http://emby.lan:8096"
    get_endpoint("HTTPS://emby.lan/web/")  # -> "https://emby.lan"
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

log = logging.getLogger("shared_lib.endpoint")

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def get_endpoint(addr: str) -> str:
    """
    Normalize a server address into ``scheme://host[:port]``.

    Args:
        addr: Server address as entered by the user, with or without scheme.

    Returns:
        The canonical endpoint, without a trailing slash.

    Raises:
        ValueError: Address is empty, has an unsupported scheme, or no host.
    """
    raw = (addr or "").strip()
    if not raw:
        raise ValueError("Server address must not be empty")

    if "://" not in raw:
        raw = "http://" + raw

    parts = urlsplit(raw)
    scheme = parts.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise ValueError(f"Unsupported scheme {parts.scheme!r} in server address {addr!r}")
    if not parts.hostname:
        raise ValueError(f"Server address {addr!r} has no host")

    endpoint = f"{scheme}://{parts.netloc}"
    log.debug("Normalized server address %r -> %s", addr, endpoint)
    return endpoint
