"""
Exception hierarchy for the Emby client.

Every failure that aborts an Emby call is an EmbyError. Callers that only
care whether the call worked catch the base class; callers that want to
tell an unreachable server from a misbehaving one catch the subclasses.

A 404 from a single-item lookup is NOT an exception: the aggregator treats
it as "no match for this ID" and moves on.

Messages are assembled with f-strings. Response bodies are embedded as
plain text and never used as a format template.
"""

from __future__ import annotations

from typing import Optional


class EmbyError(Exception):
    """
    Base class for all Emby client errors.

    Attributes:
        item_id: Identifier being looked up when the error occurred, or
                 None for calls that are not per-item (e.g. index.html).
    """

    def __init__(self, message: str, item_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.item_id = item_id


class EmbyTransportError(EmbyError):
    """
    Emby server could not be reached.

    Covers connection refused, DNS failures and timeouts. The underlying
    httpx exception is available as ``__cause__``.
    """


class EmbyUnexpectedStatusError(EmbyError):
    """
    Emby answered with a status other than 200 or 404.

    Attributes:
        status_code: HTTP status returned by Emby.
        body:        Response body text, or None if it could not be read.
        read_error:  Why the body could not be read, or None.
    """

    def __init__(
        self,
        item_id: Optional[str],
        status_code: int,
        body: Optional[str] = None,
        read_error: Optional[BaseException] = None,
    ) -> None:
        message = f"Unexpected status {status_code} while querying item {item_id}"
        if read_error is None:
            message += f". Response body: {body}"
        else:
            message += f". Failed to read response body: {read_error}"
        super().__init__(message, item_id)
        self.status_code = status_code
        self.body = body
        self.read_error = read_error


class EmbyBodyReadError(EmbyError):
    """Response status was fine but the body could not be read to the end."""


class EmbyParseError(EmbyError):
    """
    Response body is not a valid Emby item collection.

    Attributes:
        body: Raw response body text, kept for diagnostics.
    """

    def __init__(self, item_id: Optional[str], cause: BaseException, body: str) -> None:
        super().__init__(
            f"Failed to parse JSON response for item {item_id}: {cause}. Response body: {body}",
            item_id,
        )
        self.body = body
