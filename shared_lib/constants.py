"""Constants shared between the Emby client and the provider service."""

from enum import Enum


class MediaServerType(str, Enum):
    """Kind of media server an adapter talks to."""

    EMBY = "Emby"
