from .type import ExtractKind, FilterMissPolicy
from .rule import SelectorRule, RuleSet
from .endpoint import Endpoint, METADATA_FIELDS
from .config import BrandConfig

__all__ = [
        "ExtractKind",
        "FilterMissPolicy",
        "SelectorRule",
        "RuleSet",
        "Endpoint",
        "METADATA_FIELDS",
        "BrandConfig",
        ]
