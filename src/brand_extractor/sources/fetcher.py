import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from .base_adapter import SourceAdapter, FetchError
from .web_adapter import WebAdapter
from .local_file_adapter import LocalFileAdapter


class DocumentFetcher:
    """Dispatches a URL to the first adapter that can handle it."""

    def __init__(self, adapters: Optional[List[SourceAdapter]] = None, timeout: float = 30, user_agent: Optional[str] = None):
        if adapters is None:
            adapters = [
                WebAdapter({"timeout_seconds": timeout, "user_agent": user_agent}),
                LocalFileAdapter(),
            ]
        self.adapters = adapters
        self.logger = logging.getLogger(__name__)

    def fetch(self, url: Optional[str]) -> BeautifulSoup:
        if not url:
            raise FetchError("endpoint has no url")
        for adapter in self.adapters:
            if adapter.can_handle(url):
                return adapter.fetch(url)
        raise FetchError(f"no source adapter for {url}")

    def close(self):
        for adapter in self.adapters:
            close = getattr(adapter, "close", None)
            if close:
                close()
