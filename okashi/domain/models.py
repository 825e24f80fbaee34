"""Pydantic models shared across the search core and presentation layers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ("name", "maker", "link", "image")


class SearchRecord(BaseModel):
    """One confectionery item as returned by the search API."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    maker: str = Field(min_length=1)
    link: str = Field(min_length=1, description="Destination page of the item.")
    image: str = Field(min_length=1, description="Thumbnail URL.")

    @staticmethod
    def is_complete(**fields: Any) -> bool:
        """Return True when every record field is present and non-empty."""

        return all(
            isinstance(fields.get(name), str) and fields[name] != ""
            for name in REQUIRED_FIELDS
        )


__all__ = ["SearchRecord", "REQUIRED_FIELDS"]
