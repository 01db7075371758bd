"""Document sources: fetch an endpoint URL and parse it into an HTML tree."""

from .base_adapter import SourceAdapter, FetchError
from .web_adapter import WebAdapter
from .local_file_adapter import LocalFileAdapter
from .fetcher import DocumentFetcher

__all__ = [
    "SourceAdapter",
    "FetchError",
    "WebAdapter",
    "LocalFileAdapter",
    "DocumentFetcher",
]
