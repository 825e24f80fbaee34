"""Holder of the current result list."""

from __future__ import annotations

import threading
from typing import Callable, Iterable, Sequence

from okashi.domain.models import SearchRecord
from okashi.logging import logger

ResultsListener = Callable[[Sequence[SearchRecord]], None]


class ResultStore:
    """Single source of truth for the records on display.

    The list is kept as an immutable tuple and swapped wholesale, so a reader
    gets either the previous list or the new one.
    """

    def __init__(self) -> None:
        self._records: tuple[SearchRecord, ...] = ()
        self._listeners: list[ResultsListener] = []
        self._lock = threading.Lock()

    def current(self) -> tuple[SearchRecord, ...]:
        return self._records

    def replace(self, records: Iterable[SearchRecord]) -> tuple[SearchRecord, ...]:
        snapshot = tuple(records)
        with self._lock:
            self._records = snapshot
            listeners = list(self._listeners)
        logger.debug("results_replaced", count=len(snapshot))
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:
                logger.exception(
                    "results_listener_failed",
                    listener=getattr(listener, "__qualname__", repr(listener)),
                )
        return snapshot

    def subscribe(self, listener: ResultsListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe


class ResultsView:
    """Read-only facade handed to presentation code."""

    def __init__(self, store: ResultStore) -> None:
        self._store = store

    def current(self) -> tuple[SearchRecord, ...]:
        return self._store.current()

    def subscribe(self, listener: ResultsListener) -> Callable[[], None]:
        return self._store.subscribe(listener)

    def __len__(self) -> int:
        return len(self._store.current())


__all__ = ["ResultStore", "ResultsView", "ResultsListener"]
