"""
shared_lib — Code shared by the Emby client and the provider service.

Public API:
    get_endpoint       -- normalize a server address to scheme://host[:port]
    MediaServerType    -- media server kind enum
"""

from shared_lib.constants import MediaServerType
from shared_lib.endpoint import get_endpoint

__all__ = [
    "MediaServerType",
    "get_endpoint",
]
