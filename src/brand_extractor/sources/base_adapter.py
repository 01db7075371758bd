"""Base adapter for document fetching.

A source adapter turns an endpoint URL into a parsed, traversable HTML
document. Adapters never retry and never cache: each call fetches afresh.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

from ..errors import EndpointFailure


HTML_PARSER = "html.parser"


class SourceAdapter(ABC):
    """Abstract base class for document sources."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the adapter with optional configuration.

        Args:
            config: Adapter-specific configuration (timeouts, headers, etc.)
        """
        self.config = config or {}

    @abstractmethod
    def can_handle(self, url: str) -> bool:
        """Return True if this adapter knows how to fetch ``url``."""
        pass

    @abstractmethod
    def fetch(self, url: str) -> BeautifulSoup:
        """Fetch and parse the document at ``url``.

        Raises:
            FetchError: If the document cannot be retrieved
        """
        pass

    def parse(self, markup) -> BeautifulSoup:
        return BeautifulSoup(markup, HTML_PARSER)


class FetchError(EndpointFailure):
    """Exception raised when fetching a document fails."""
    pass
