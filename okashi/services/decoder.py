"""Decode search API payloads into validated records."""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from okashi.domain.models import SearchRecord
from okashi.logging import logger
from okashi.services.exceptions import MalformedPayload


class _ItemPayload(BaseModel):
    name: str | None = None
    maker: str | None = None
    url: str | None = None
    image: str | None = None


class _ResultPayload(BaseModel):
    item: list[_ItemPayload] | None = None


def decode_response(payload: bytes | str) -> list[SearchRecord]:
    """Parse a raw response body, dropping items that miss any field.

    A missing or null ``item`` array means "no results" and yields an empty
    list. Anything that is not the expected JSON object raises
    :class:`MalformedPayload`.
    """

    try:
        document = _ResultPayload.model_validate_json(payload)
    except ValidationError as exc:
        raise MalformedPayload(f"Search response is malformed: {exc.error_count()} error(s)") from exc

    if not document.item:
        return []

    records: list[SearchRecord] = []
    for item in document.item:
        fields = {
            "name": item.name,
            "maker": item.maker,
            "link": item.url,
            "image": item.image,
        }
        if not SearchRecord.is_complete(**fields):
            continue
        records.append(SearchRecord(**fields))

    dropped = len(document.item) - len(records)
    if dropped:
        logger.debug("response_items_dropped", dropped=dropped, kept=len(records))
    return records


__all__ = ["decode_response"]
