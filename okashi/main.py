"""Application entrypoint."""

from __future__ import annotations

import asyncio
import webbrowser

import httpx

from okashi.config import get_settings
from okashi.logging import configure_logging, logger
from okashi.presentation import ConsoleResultsView, ResultListAdapter, run_console
from okashi.services.search import SearchSession


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    async with httpx.AsyncClient(follow_redirects=True) as client:
        session = SearchSession(client, settings=settings.api)
        view = ConsoleResultsView()
        adapter = ResultListAdapter(
            session.results,
            opener=webbrowser.open if settings.open_links_in_browser else None,
        )
        session.results.subscribe(view)

        logger.info("okashi_starting", environment=settings.environment)
        try:
            await run_console(session, adapter, view)
        finally:
            adapter.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
