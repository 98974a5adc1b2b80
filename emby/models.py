"""Pydantic models for Emby ``/Items`` responses."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmbyItem(BaseModel):
    """
    One Emby catalog entry.

    Only the identifying keys are declared. Which other keys appear depends
    on the ``Fields`` selection sent with the query; they are kept verbatim
    as extra fields so the record can be handed back unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    Id: Optional[str] = None
    Name: Optional[str] = None
    Type: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Dump the record as received, without declared keys Emby did not send."""
        data = self.model_dump()
        for key in type(self).model_fields:
            if key not in self.model_fields_set:
                data.pop(key, None)
        return data


class EmbyResponse(BaseModel):
    """
    Item collection envelope returned by ``/Items``.

    When built by the aggregator, ``TotalRecordCount`` is the number of items
    actually returned, not the server's reported total.
    """

    model_config = ConfigDict(populate_by_name=True)

    Items: list[EmbyItem] = Field(default_factory=list)
    TotalRecordCount: int = 0

    @field_validator("Items", mode="before")
    @classmethod
    def _null_items_as_empty(cls, value: Any) -> Any:
        # Emby sends "Items": null for some empty collections
        return [] if value is None else value

    def to_payload(self) -> dict[str, Any]:
        """Serialize as Emby JSON."""
        return {
            "Items": [item.to_payload() for item in self.Items],
            "TotalRecordCount": self.TotalRecordCount,
        }
