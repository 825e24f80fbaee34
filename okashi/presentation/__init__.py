from okashi.presentation.console import ConsoleResultsView, run_console
from okashi.presentation.list_view import ResultListAdapter
from okashi.presentation.thumbnails import ThumbnailLoader

__all__ = [
    "ConsoleResultsView",
    "ResultListAdapter",
    "ThumbnailLoader",
    "run_console",
]
