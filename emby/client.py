"""
emby.client — Async Emby REST client.

Design notes:
- Async-only: all network methods are coroutines. Synchronous callers wrap
  them in asyncio.run().
- Uses httpx.AsyncClient. Caller must call close() (or use ``async with``)
  when done. Redirects are followed, so status checks apply to the
  final response (Emby behind an http->https reverse proxy).
- Emby's ``/Items?Ids=a,b,c`` batch lookup misbehaves as soon as one ID in
  the batch is invalid. items_service_query_item() therefore looks IDs up one
  at a time and stitches the results together, treating a 404 for a single
  ID as "no match" rather than a failure.
- Lookups run strictly one after another. Each response is opened with
  ``client.stream()`` inside ``async with`` so its connection is released on
  every path (error, not found, success) before the next ID is queried.

Exports:
    EmbyServer -- async Emby client bound to one endpoint and API key
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from emby.exceptions import (
    EmbyBodyReadError,
    EmbyParseError,
    EmbyTransportError,
    EmbyUnexpectedStatusError,
)
from emby.models import EmbyItem, EmbyResponse
from shared_lib.constants import MediaServerType
from shared_lib.endpoint import get_endpoint

log = logging.getLogger("emby.client")


def split_ids(ids: str) -> list[str]:
    """
    Split a comma-separated ID list into trimmed, non-empty IDs.

    Blank segments from leading, trailing or doubled commas are dropped.
    Order is preserved.
    """
    return [token.strip() for token in ids.split(",") if token.strip()]


class EmbyServer:
    """
    Async client for a single Emby server.

    Usage (synchronous context)::

        import asyncio
        from emby.client import EmbyServer

        server = EmbyServer("emby.lan:8096", api_key="my-key")
        result = asyncio.run(server.items_service_query_item("101,102", limit=10))
        asyncio.run(server.close())

    Usage (async context)::

        async with EmbyServer("http://emby.lan:8096", "my-key") as server:
            result = await server.items_service_query_item("101,102")
    """

    def __init__(
        self,
        addr: str,
        api_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Create the Emby client.

        Args:
            addr:      Server address; normalized to ``scheme://host[:port]``
                       by get_endpoint().
            api_key:   Emby API key (Dashboard -> Advanced -> API Keys).
            timeout:   Total request timeout in seconds (default 10). Connect
                       timeout is fixed at 5 seconds.
            transport: Optional httpx transport, used by tests to inject
                       canned responses.
        """
        self._endpoint = get_endpoint(addr)
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=5.0),
            follow_redirects=True,
            transport=transport,
        )
        log.debug("EmbyServer initialised, endpoint=%s api_key=%s", self._endpoint, bool(api_key))

    @property
    def endpoint(self) -> str:
        """Normalized server endpoint, e.g. ``http://emby.lan:8096``."""
        return self._endpoint

    @property
    def api_key(self) -> str:
        return self._api_key

    def get_type(self) -> MediaServerType:
        return MediaServerType.EMBY

    async def close(self) -> None:
        """Close the underlying httpx client and release connections."""
        await self._client.aclose()

    async def __aenter__(self) -> "EmbyServer":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # ItemsService: /Items
    # ------------------------------------------------------------------

    async def items_service_query_item(
        self,
        ids: str,
        limit: int = 0,
        fields: str = "",
    ) -> EmbyResponse:
        """
        Look up items by ID, one request per ID, and aggregate the results.

        Args:
            ids:    Comma-separated item IDs. Blank segments are ignored.
            limit:  Maximum number of items to return; <= 0 means no limit.
                    Applied after aggregation.
            fields: Emby ``Fields`` selection, passed through verbatim.

        Returns:
            EmbyResponse with the found items in input order.
            ``TotalRecordCount`` is the number of items returned.

        Raises:
            EmbyTransportError:        Emby unreachable for one of the IDs.
            EmbyUnexpectedStatusError: Status other than 200/404 for an ID.
            EmbyBodyReadError:         Body of a 200 response could not be read.
            EmbyParseError:            Body of a 200 response is not valid JSON
                                       for the item collection schema.

            Any of these aborts the whole call; items already found for
            earlier IDs are discarded.
        """
        # An empty Ids filter makes Emby return its default (unbounded)
        # item listing, so never send one.
        if not ids.strip():
            return EmbyResponse(Items=[], TotalRecordCount=0)

        item_ids = split_ids(ids)
        items: list[EmbyItem] = []
        for item_id in item_ids:
            items.extend(await self._query_single_item(item_id, fields))

        if limit > 0 and len(items) > limit:
            items = items[:limit]

        log.debug(
            "Aggregated %d item(s) from %d ID(s) (limit=%d)",
            len(items), len(item_ids), limit,
        )
        return EmbyResponse(Items=items, TotalRecordCount=len(items))

    async def _query_single_item(self, item_id: str, fields: str) -> list[EmbyItem]:
        """
        Query ``/Items`` for exactly one ID.

        Returns:
            Items Emby returned for the ID (normally zero or one); an empty
            list when Emby answers 404.
        """
        params = {
            "Ids": item_id,
            "Limit": "1",
            "Fields": fields,
            "Recursive": "true",
            "api_key": self._api_key,
        }
        try:
            async with self._client.stream("GET", self._endpoint + "/Items", params=params) as resp:
                if resp.status_code == httpx.codes.NOT_FOUND:
                    log.debug("Item %s not found on Emby; skipping", item_id)
                    return []

                if resp.status_code != httpx.codes.OK:
                    try:
                        body = await resp.aread()
                    except httpx.HTTPError as exc:
                        log.warning("Item %s: status %d, body unreadable", item_id, resp.status_code)
                        raise EmbyUnexpectedStatusError(item_id, resp.status_code, read_error=exc) from exc
                    log.warning("Item %s: unexpected status %d", item_id, resp.status_code)
                    raise EmbyUnexpectedStatusError(
                        item_id,
                        resp.status_code,
                        body=body.decode("utf-8", errors="replace"),
                    )

                try:
                    body = await resp.aread()
                except httpx.HTTPError as exc:
                    raise EmbyBodyReadError(
                        f"Failed to read response body for item {item_id}: {exc}",
                        item_id,
                    ) from exc
        except httpx.TransportError as exc:
            log.warning("Network error querying item %s: %s", item_id, exc)
            raise EmbyTransportError(
                f"Network error while querying item {item_id}: {exc}",
                item_id,
            ) from exc

        try:
            part = EmbyResponse.model_validate_json(body)
        except ValidationError as exc:
            raise EmbyParseError(item_id, exc, body.decode("utf-8", errors="replace")) from exc

        return part.Items

    # ------------------------------------------------------------------
    # Static web client
    # ------------------------------------------------------------------

    async def get_index_html(self) -> bytes:
        """
        Fetch ``/web/index.html`` and return the body bytes unmodified.

        The status code is not checked; whatever Emby sends is passed through.

        Raises:
            EmbyTransportError: Emby unreachable.
            EmbyBodyReadError:  Body could not be read to the end.
        """
        try:
            async with self._client.stream("GET", self._endpoint + "/web/index.html") as resp:
                try:
                    return await resp.aread()
                except httpx.HTTPError as exc:
                    raise EmbyBodyReadError(f"Failed to read index.html: {exc}") from exc
        except httpx.TransportError as exc:
            raise EmbyTransportError(f"Network error while fetching index.html: {exc}") from exc
