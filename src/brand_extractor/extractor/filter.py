import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ..errors import FilterError


@dataclass(frozen=True)
class FilterOutcome:
    """Result of applying a filter pattern: either matched with a value, or not."""
    matched: bool
    value: Optional[str] = None


NO_MATCH = FilterOutcome(matched=False)


@lru_cache(maxsize=256)
def compile_filter(pattern: str) -> "re.Pattern":
    try:
        return re.compile(pattern)
    except re.error as e:
        raise FilterError(f"invalid filter pattern {pattern!r}: {e}") from e


def apply_filter(pattern: str, value: Optional[str]) -> FilterOutcome:
    """Search ``value`` with ``pattern`` and join every captured group in order.

    Groups that did not take part in the match contribute nothing. A
    pattern without groups yields an empty string when it matches.
    """
    regex = compile_filter(pattern)
    if value is None:
        return NO_MATCH
    match = regex.search(value)
    if match is None:
        return NO_MATCH
    return FilterOutcome(matched=True, value="".join(g for g in match.groups() if g is not None))
