"""HTTP source adapter backed by per-thread ``requests`` sessions."""

import logging
from typing import Any, Dict, Optional

import requests
from bs4 import BeautifulSoup

from .base_adapter import SourceAdapter, FetchError
from ..session_pool import ThreadLocalSession


class WebAdapter(SourceAdapter):
    """Fetches pages over HTTP(S).

    Configuration:
        timeout_seconds: Request timeout (default: 30)
        user_agent: User-Agent header value
        headers: Optional extra headers
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, session: Optional[requests.Session] = None):
        super().__init__(config)
        self.timeout = self.config.get("timeout_seconds", 30)
        self.headers = self.config.get("headers", {}).copy()
        user_agent = self.config.get("user_agent")
        if user_agent:
            self.headers["User-Agent"] = user_agent
        self.sessions = ThreadLocalSession(session)
        self.logger = logging.getLogger(__name__)

    def can_handle(self, url: str) -> bool:
        return bool(url) and url.lower().startswith(("http://", "https://"))

    def fetch(self, url: str) -> BeautifulSoup:
        self.logger.debug(f"GET {url}")
        try:
            response = self.sessions.get().get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(str(e)) from e
        return self.parse(response.content)

    def close(self):
        self.sessions.close()
