# Rule-driven brand page extractor
import logging
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .filter import apply_filter
from ..transformer import ContentTransformerClient, TransformError
from ..types.brand import Endpoint, ExtractKind, FilterMissPolicy, RuleSet, SelectorRule


ExtractedRecord = Dict[str, Optional[str]]


class EndpointExtractor:
    """Applies a rule set to a parsed page and builds one record per endpoint.

    Every attribute is handled on its own: a selector that is empty, invalid
    or matches nothing leaves that attribute null and logs a warning. Only
    endpoint-scoped errors (malformed filter pattern, transformer failure)
    escape, and they abandon the whole record.
    """

    def __init__(
        self,
        transformer: Optional[ContentTransformerClient] = None,
        filter_miss_policy: FilterMissPolicy = FilterMissPolicy.NULL,
    ):
        self.transformer = transformer
        self.filter_miss_policy = filter_miss_policy
        self.logger = logging.getLogger(__name__)

    def extract(self, document: BeautifulSoup, rule_set: RuleSet, endpoint: Optional[Endpoint] = None) -> ExtractedRecord:
        result: ExtractedRecord = {}
        for attribute, rule in rule_set.rules.items():
            result[attribute] = self._extract_field(document, attribute, rule, endpoint)
        return result

    def _extract_field(self, document: BeautifulSoup, attribute: str, rule: SelectorRule,
                       endpoint: Optional[Endpoint]) -> Optional[str]:
        element = self._select(document, attribute, rule, endpoint)
        if element is None:
            self.logger.warning(
                f"Nil value for {attribute} with {rule}{self._where(endpoint)}"
            )
            return None

        value = self._raw_value(element, rule)
        if value is None and rule.extract is None:
            self.logger.debug(
                f"Unsupported extract kind {rule.extract_name!r} for {attribute}{self._where(endpoint)}"
            )

        if rule.filter:
            outcome = apply_filter(rule.filter, value)
            if outcome.matched:
                value = outcome.value
            else:
                value = self._on_filter_miss(attribute, rule, value, endpoint)

        if rule.transformer and value is not None:
            value = self._transform(value, rule.transformer)

        return value

    def _select(self, document: BeautifulSoup, attribute: str, rule: SelectorRule,
                endpoint: Optional[Endpoint]) -> Optional[Tag]:
        if not rule.select:
            return None
        try:
            return document.select_one(rule.select)
        except SelectorSyntaxError as e:
            self.logger.warning(
                f"Invalid selector for {attribute} with {rule}{self._where(endpoint)}: {e}"
            )
            return None

    @staticmethod
    def _raw_value(element: Tag, rule: SelectorRule) -> Optional[str]:
        kind = rule.extract
        if kind is ExtractKind.INNER_HTML:
            return element.decode_contents()
        if kind is ExtractKind.TEXT:
            return element.get_text().strip()
        if kind is ExtractKind.STYLE:
            return element.get("style")
        return None

    def _on_filter_miss(self, attribute: str, rule: SelectorRule, value: Optional[str],
                        endpoint: Optional[Endpoint]) -> Optional[str]:
        policy = self.filter_miss_policy
        if policy is FilterMissPolicy.KEEP:
            return value
        if policy is FilterMissPolicy.EMPTY:
            return ""
        self.logger.warning(
            f"Filter {rule.filter!r} did not match {attribute}{self._where(endpoint)}"
        )
        return None

    def _transform(self, value: str, transformer: str) -> str:
        if self.transformer is None:
            raise TransformError(f"no content transformer configured for {transformer}")
        return self.transformer.transform(value, transformer)

    @staticmethod
    def _where(endpoint: Optional[Endpoint]) -> str:
        if endpoint is None:
            return ""
        return f" for {endpoint.uuid} at {endpoint.url}"
