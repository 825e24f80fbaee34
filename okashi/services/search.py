"""Search session: query, fetch, decode and publish results."""

from __future__ import annotations

import asyncio
from typing import Callable

import httpx

from okashi.config import ApiSettings
from okashi.domain.models import SearchRecord
from okashi.logging import logger
from okashi.services.decoder import decode_response
from okashi.services.exceptions import (
    DecodeError,
    DecodeFailure,
    InvalidQuery,
    QueryError,
    SearchError,
    SearchSuperseded,
    TransportFailure,
)
from okashi.services.query import Query, QueryBuilder
from okashi.services.results import ResultStore, ResultsView

Decoder = Callable[[bytes], list[SearchRecord]]


class SearchSession:
    """Owns the result store and issues searches against the API.

    Overlapping searches are allowed. Each issued search is tagged with a
    generation number and only the most recent one may publish its results;
    older completions raise :class:`SearchSuperseded` and leave the store
    untouched.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ApiSettings | None = None,
        *,
        builder: QueryBuilder | None = None,
        decoder: Decoder = decode_response,
    ) -> None:
        self._client = http_client
        self._settings = settings or ApiSettings()
        self._builder = builder or QueryBuilder(self._settings)
        self._decode = decoder
        self._store = ResultStore()
        self._generation = 0
        self._tasks: set[asyncio.Task] = set()

    @property
    def results(self) -> ResultsView:
        return ResultsView(self._store)

    @property
    def generation(self) -> int:
        return self._generation

    async def search(self, keyword: str) -> tuple[SearchRecord, ...]:
        try:
            query = self._builder.build(keyword)
        except QueryError as exc:
            logger.warning("search_query_invalid", keyword=keyword, error=str(exc))
            raise InvalidQuery(str(exc)) from exc

        self._generation += 1
        generation = self._generation
        logger.info("search_started", keyword=keyword, url=str(query.url), generation=generation)

        payload = await self._fetch(query, generation)

        if generation != self._generation:
            logger.info(
                "search_superseded",
                keyword=keyword,
                generation=generation,
                latest_generation=self._generation,
            )
            raise SearchSuperseded(
                f"Search for {keyword!r} was superseded by a newer search."
            )

        try:
            records = self._decode(payload)
        except DecodeError as exc:
            logger.warning("search_decode_failed", keyword=keyword, error=str(exc))
            raise DecodeFailure(str(exc)) from exc

        snapshot = self._store.replace(records)
        logger.info(
            "search_completed",
            keyword=keyword,
            generation=generation,
            count=len(snapshot),
            first=snapshot[0].name if snapshot else None,
        )
        return snapshot

    def submit(self, keyword: str) -> asyncio.Task:
        """Schedule a search on the running loop without waiting for it."""

        task = asyncio.create_task(self.search(keyword))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None and not isinstance(exc, SearchError):
            logger.error(
                "search_task_crashed",
                error_type=exc.__class__.__name__,
                error=str(exc),
            )

    async def _fetch(self, query: Query, generation: int) -> bytes:
        try:
            response = await self._client.get(
                query.url,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            logger.warning(
                "search_transport_failed",
                keyword=query.keyword,
                generation=generation,
                status_code=status_code,
            )
            raise TransportFailure(f"Search request failed ({status_code}).") from exc
        except httpx.RequestError as exc:
            logger.warning(
                "search_transport_failed",
                keyword=query.keyword,
                generation=generation,
                error=str(exc),
            )
            raise TransportFailure(f"Search request failed: {exc}") from exc
        return response.content


__all__ = ["SearchSession"]
