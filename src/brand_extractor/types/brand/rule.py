from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .type import ExtractKind
from ...errors import ConfigurationError


@dataclass(frozen=True)
class SelectorRule:
    """Extraction recipe for a single output attribute.

    ``extract`` is None when the configured kind was not recognised; the
    raw configured string is kept in ``extract_name`` for log messages.
    """
    select: str
    extract: Optional[ExtractKind]
    extract_name: Optional[str] = None
    filter: Optional[str] = None
    transformer: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SelectorRule":
        if not isinstance(data, dict):
            raise ConfigurationError(f"Selector rule must be an object, got {type(data).__name__}")
        select = data.get("select") or ""
        extract_name = data.get("extract")
        return cls(
            select=select,
            extract=ExtractKind.parse(extract_name),
            extract_name=extract_name,
            filter=data.get("filter") or None,
            transformer=data.get("transformer") or None,
        )

    def __str__(self) -> str:
        parts = [f"select={self.select!r}", f"extract={self.extract_name!r}"]
        if self.filter:
            parts.append(f"filter={self.filter!r}")
        if self.transformer:
            parts.append(f"transformer={self.transformer!r}")
        return "{" + ", ".join(parts) + "}"


@dataclass(frozen=True)
class RuleSet:
    name: str
    rules: Dict[str, SelectorRule] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "RuleSet":
        if not isinstance(data, dict):
            raise ConfigurationError(f"Rule set {name!r} must be an object")
        raw_rules = data.get("rules")
        if not isinstance(raw_rules, dict):
            raise ConfigurationError(f"Rule set {name!r} has malformed 'rules'")
        rules = {attr: SelectorRule.from_dict(rule) for attr, rule in raw_rules.items()}
        return cls(name=name, rules=rules)

    def unknown_extract_kinds(self) -> Dict[str, Optional[str]]:
        """Attributes whose rule names an extract kind that is not supported."""
        return {
            attr: rule.extract_name
            for attr, rule in self.rules.items()
            if rule.extract is None
        }
