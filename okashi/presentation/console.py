"""Line-oriented front end for interactive searching."""

from __future__ import annotations

import asyncio
import re
import sys
from typing import Callable, Sequence, TextIO

from okashi.domain.models import SearchRecord
from okashi.logging import logger
from okashi.presentation.list_view import ResultListAdapter
from okashi.services.exceptions import InvalidQuery, SearchError, SearchSuperseded
from okashi.services.search import SearchSession

SEARCH_PLACEHOLDER = "お菓子の名前を入力してください"
QUIT_COMMANDS = {"quit", "exit"}
_OPEN_PATTERN = re.compile(r"^open\s+(\d+)$", re.IGNORECASE)


class ConsoleResultsView:
    """Results listener that prints a numbered list."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def __call__(self, records: Sequence[SearchRecord]) -> None:
        if not records:
            self._write("(no results)")
            return
        for position, record in enumerate(records, start=1):
            self._write(f"{position}. {record.name} / {record.maker}")

    def notice(self, message: str) -> None:
        self._write(message)

    def _write(self, line: str) -> None:
        self._stream.write(f"{line}\n")
        self._stream.flush()


async def run_console(
    session: SearchSession,
    adapter: ResultListAdapter,
    view: ConsoleResultsView,
    *,
    read_line: Callable[[str], str] = input,
) -> None:
    """Read keywords until EOF or a quit command.

    ``open N`` opens the link of row ``N`` (1-based); any other line is
    searched as-is.
    """

    prompt = f"{SEARCH_PLACEHOLDER}> "
    while True:
        try:
            line = await asyncio.to_thread(read_line, prompt)
        except EOFError:
            break

        command = line.strip()
        if command.lower() in QUIT_COMMANDS:
            break

        match = _OPEN_PATTERN.match(command)
        if match:
            _open_row(adapter, view, int(match.group(1)))
            continue

        try:
            await session.search(line)
        except InvalidQuery:
            view.notice("This keyword cannot be searched.")
        except SearchSuperseded:
            continue
        except SearchError:
            view.notice("Search failed; showing the previous results.")

    logger.info("console_closed")


def _open_row(adapter: ResultListAdapter, view: ConsoleResultsView, position: int) -> None:
    try:
        link = adapter.on_item_selected(position - 1)
    except IndexError:
        view.notice(f"No result number {position}.")
        return
    view.notice(link)


__all__ = ["ConsoleResultsView", "SEARCH_PLACEHOLDER", "run_console"]
