"""Request URL construction for the confectionery search API."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

import httpx

from okashi.config import ApiSettings
from okashi.services.exceptions import EncodingError, URLConstructionError


@dataclass(slots=True, frozen=True)
class Query:
    keyword: str
    url: httpx.URL


class QueryBuilder:
    """Turns a raw keyword into the fully-formed search URL.

    The keyword is escaped as a single query component, so characters such as
    ``&`` or ``=`` can never introduce extra parameters.
    """

    def __init__(self, settings: ApiSettings | None = None) -> None:
        self._settings = settings or ApiSettings()

    def build(self, keyword: str) -> Query:
        encoded = self.encode_keyword(keyword)
        raw_url = f"{self._endpoint()}?{self._query_string(encoded)}"
        try:
            url = httpx.URL(raw_url)
        except httpx.InvalidURL as exc:
            raise URLConstructionError(f"Invalid request URL: {raw_url!r}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise URLConstructionError(f"Invalid request URL: {raw_url!r}")
        return Query(keyword=keyword, url=url)

    @staticmethod
    def encode_keyword(keyword: str) -> str:
        if not isinstance(keyword, str):
            raise EncodingError(f"Keyword must be text, got {type(keyword).__name__}.")
        try:
            return quote(keyword, safe="", encoding="utf-8", errors="strict")
        except UnicodeEncodeError as exc:
            raise EncodingError(f"Keyword cannot be percent-encoded: {exc.reason}") from exc

    def _endpoint(self) -> str:
        return str(self._settings.base_url)

    def _query_string(self, encoded_keyword: str) -> str:
        params = (
            ("apikey", self._settings.api_key.get_secret_value()),
            ("format", self._settings.response_format),
            ("keyword", encoded_keyword),
            ("max", str(self._settings.max_results)),
            ("order", self._settings.order),
        )
        return "&".join(f"{name}={value}" for name, value in params)


__all__ = ["Query", "QueryBuilder"]
