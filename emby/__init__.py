"""
Emby API client module.

Talks to an Emby server's REST API and normalizes item lookups.

Classes:
    EmbyServer: Async client bound to one endpoint and API key
    EmbyItem: One catalog entry (extra keys preserved)
    EmbyResponse: Item collection envelope

Exceptions:
    EmbyError: Base class for all client errors
    EmbyTransportError: Server unreachable or request timed out
    EmbyUnexpectedStatusError: Status other than 200/404
    EmbyBodyReadError: Response body could not be read
    EmbyParseError: Response body is not a valid item collection
"""

from emby.exceptions import (
    EmbyError,
    EmbyTransportError,
    EmbyUnexpectedStatusError,
    EmbyBodyReadError,
    EmbyParseError,
)
from emby.models import EmbyItem, EmbyResponse
from emby.client import EmbyServer, split_ids

__all__ = [
    # Client
    'EmbyServer',
    'split_ids',
    # Models
    'EmbyItem',
    'EmbyResponse',
    # Exceptions
    'EmbyError',
    'EmbyTransportError',
    'EmbyUnexpectedStatusError',
    'EmbyBodyReadError',
    'EmbyParseError',
]
