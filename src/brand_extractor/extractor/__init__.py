from .engine import EndpointExtractor, ExtractedRecord
from .filter import FilterOutcome, apply_filter, compile_filter

__all__ = [
    "EndpointExtractor",
    "ExtractedRecord",
    "FilterOutcome",
    "apply_filter",
    "compile_filter",
]
