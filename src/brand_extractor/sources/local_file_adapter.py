"""Local file source adapter.

Endpoint URLs may point at saved pages on disk, either as ``file://`` URLs
or as plain paths.
"""

import os
from typing import Any, Dict, Optional
from urllib.parse import urlparse, unquote

from bs4 import BeautifulSoup

from .base_adapter import SourceAdapter, FetchError


class LocalFileAdapter(SourceAdapter):
    """Reads HTML documents from the local filesystem.

    Configuration:
        base_dir: Directory relative paths are resolved against (default: cwd)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.base_dir = self.config.get("base_dir") or os.getcwd()

    def can_handle(self, url: str) -> bool:
        if not url:
            return False
        scheme = urlparse(url).scheme.lower()
        # single-letter schemes are Windows drive letters
        return scheme == "file" or scheme == "" or len(scheme) == 1

    def fetch(self, url: str) -> BeautifulSoup:
        path = self.resolve_path(url)
        try:
            with open(path, "rb") as fh:
                return self.parse(fh.read())
        except OSError as e:
            raise FetchError(f"Cannot read {path}: {e.strerror or e}") from e

    def resolve_path(self, url: str) -> str:
        parsed = urlparse(url)
        if parsed.scheme.lower() == "file":
            path = unquote(parsed.path)
        else:
            path = url
        if not os.path.isabs(path):
            path = os.path.join(self.base_dir, path)
        return path
