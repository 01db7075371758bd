from enum import Enum
from typing import Optional


class ExtractKind(str, Enum):
    INNER_HTML = "inner_html"
    TEXT = "text"
    STYLE = "style"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ExtractKind"]:
        """Resolve a configured extract kind, or None when it is not recognised."""
        if value is None:
            return None
        return _ALIASES.get(str(value).strip().lower())


_ALIASES = {
    "inner_html": ExtractKind.INNER_HTML,
    "innerhtml": ExtractKind.INNER_HTML,
    "text": ExtractKind.TEXT,
    "style": ExtractKind.STYLE,
    "styleattribute": ExtractKind.STYLE,
}


class FilterMissPolicy(str, Enum):
    NULL = "null"     # field becomes null, warning logged
    EMPTY = "empty"   # field becomes "", as the legacy scraper wrote it
    KEEP = "keep"     # field keeps the unfiltered value
