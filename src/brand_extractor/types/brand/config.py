from dataclasses import dataclass, field
from typing import Any, Dict, List

import soupsieve
from soupsieve import SelectorSyntaxError

from .endpoint import Endpoint
from .rule import RuleSet
from ...errors import ConfigurationError


@dataclass
class BrandConfig:
    """Parsed "brands to scrape" configuration: endpoints plus named rule sets."""
    endpoints: List[Endpoint] = field(default_factory=list)
    rule_sets: Dict[str, RuleSet] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BrandConfig":
        if not isinstance(data, dict):
            raise ConfigurationError("Brand configuration must be a JSON object")
        raw_endpoints = data.get("endpoints")
        raw_rule_sets = data.get("ruleSets")
        if raw_endpoints is None:
            raw_endpoints = []
        if raw_rule_sets is None:
            raw_rule_sets = {}
        if not isinstance(raw_endpoints, list):
            raise ConfigurationError("'endpoints' must be a list")
        if not isinstance(raw_rule_sets, dict):
            raise ConfigurationError("'ruleSets' must be an object")

        return cls(
            endpoints=[Endpoint.from_dict(e) for e in raw_endpoints],
            rule_sets={
                name: RuleSet.from_dict(name, rs) for name, rs in raw_rule_sets.items()
            },
        )

    @property
    def uuids(self) -> List[str]:
        return [e.uuid for e in self.endpoints]

    def validate_rules(self):
        """Reject rule sets the extractor could only turn into null fields.

        That is an unknown extract kind, or a selector that is empty or does
        not parse.
        """
        problems = []
        for name, rule_set in self.rule_sets.items():
            for attr, kind in rule_set.unknown_extract_kinds().items():
                problems.append(f"{name}.{attr}: unsupported extract kind {kind!r}")
            for attr, rule in rule_set.rules.items():
                if not rule.select:
                    problems.append(f"{name}.{attr}: empty selector")
                    continue
                try:
                    soupsieve.compile(rule.select)
                except SelectorSyntaxError:
                    problems.append(f"{name}.{attr}: invalid selector {rule.select!r}")
        if problems:
            raise ConfigurationError("Invalid rule sets: " + ", ".join(problems))
