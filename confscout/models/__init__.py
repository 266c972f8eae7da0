# confscout/models/__init__.py
"""Data models for confscout."""

from .request import SearchRequest, SearchConfig, LoaderFn
from .contribution import Contribution
from .result import ExplorerResult, LoadResult

__all__ = [
    "SearchRequest",
    "SearchConfig",
    "LoaderFn",
    "Contribution",
    "ExplorerResult",
    "LoadResult",
]
