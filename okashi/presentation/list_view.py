"""Table data source over the current result list."""

from __future__ import annotations

import webbrowser
from typing import Any, Callable, Sequence

from okashi.domain.models import SearchRecord
from okashi.logging import logger
from okashi.services.results import ResultsView

LinkOpener = Callable[[str], Any]


class ResultListAdapter:
    """Answers row queries for a list widget and handles row selection.

    Rows are always read from the live results view, so the adapter never
    holds a copy that could go stale.
    """

    def __init__(
        self,
        results: ResultsView,
        *,
        opener: LinkOpener | None = webbrowser.open,
        reload: Callable[[Sequence[SearchRecord]], Any] | None = None,
    ) -> None:
        self._results = results
        self._opener = opener
        self._reload = reload
        self._unsubscribe = results.subscribe(self._on_results_changed)

    def row_count(self) -> int:
        return len(self._results.current())

    def record_at(self, index: int) -> SearchRecord:
        records = self._results.current()
        if index < 0 or index >= len(records):
            raise IndexError(f"Row {index} is out of range (0..{len(records) - 1}).")
        return records[index]

    def title_at(self, index: int) -> str:
        return self.record_at(index).name

    def on_item_selected(self, index: int) -> str:
        """Return the link of the selected row and hand it to the opener."""

        link = self.record_at(index).link
        logger.info("result_selected", index=index, link=link)
        if self._opener is not None:
            self._opener(link)
        return link

    def close(self) -> None:
        self._unsubscribe()

    def _on_results_changed(self, records: Sequence[SearchRecord]) -> None:
        if self._reload is not None:
            self._reload(records)


__all__ = ["LinkOpener", "ResultListAdapter"]
