"""Client for the content transformer service.

The transformer converts markup scraped from brand pages into the body
format used downstream. It is an out-of-process HTTP service: the raw
markup is POSTed as ``text/html`` and the response body is the result.
"""

import logging
from typing import Dict, Optional

import requests

from ..errors import EndpointFailure
from ..session_pool import ThreadLocalSession


class TransformError(EndpointFailure):
    """Exception raised when the transformer cannot be reached or refuses the request."""
    pass


class ContentTransformerClient:
    """Posts markup to the content transformer and returns the transformed text.

    Every transformer identifier goes to ``url`` unless a dedicated URL is
    registered for it in ``routes``.
    """

    CONTENT_TYPE = "text/html"

    def __init__(
        self,
        url: str,
        timeout: float = 30,
        encoding: str = "iso-8859-1",
        routes: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.encoding = encoding
        self.routes = dict(routes or {})
        self.sessions = ThreadLocalSession(session)
        self.logger = logging.getLogger(__name__)

    def url_for(self, transformer: str) -> str:
        return self.routes.get(transformer, self.url)

    def transform(self, text: str, transformer: str) -> str:
        url = self.url_for(transformer)
        self.logger.debug(f"Transforming {len(text)} chars with {transformer} via {url}")
        try:
            response = self.sessions.get().post(
                url,
                data=text.encode("utf-8"),
                headers={"Content-Type": self.CONTENT_TYPE},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransformError(f"transformer {transformer} failed: {e}") from e
        return response.content.decode(self.encoding, errors="replace")

    def close(self):
        self.sessions.close()
