"""Batch runner: extracts every configured brand endpoint.

Each endpoint is processed in isolation and yields exactly one record,
whether or not it failed. Failures are collected per uuid alongside the
records so downstream consumers see both.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..errors import EndpointFailure, RuleResolutionFailure
from ..extractor import EndpointExtractor, ExtractedRecord
from ..sources import DocumentFetcher
from ..types.brand import Endpoint, METADATA_FIELDS, RuleSet


@dataclass
class EndpointResult:
    """Outcome of processing one endpoint."""
    uuid: str
    record: ExtractedRecord
    failure: Optional[str] = None


@dataclass
class BatchResult:
    processed: List[ExtractedRecord] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def fold(cls, results: Sequence[EndpointResult]) -> "BatchResult":
        batch = cls()
        for result in results:
            batch.processed.append(result.record)
            if result.failure is not None:
                batch.failures[result.uuid] = result.failure
        return batch


def merge_endpoint_metadata(record: ExtractedRecord, endpoint: Endpoint) -> ExtractedRecord:
    """Overlay configured endpoint metadata on top of scraped values.

    Configured values win over scraped ones. A configured image URL is
    written to ``prefLabel``; downstream loaders rely on that aliasing.
    """
    for name in METADATA_FIELDS:
        configured = getattr(endpoint, name)
        record[name] = configured if configured is not None else record.get(name)
    if endpoint.imageUrl is not None:
        record["prefLabel"] = endpoint.imageUrl
    record["uuid"] = endpoint.uuid
    return record


class BatchRunner:
    def __init__(
        self,
        extractor: EndpointExtractor,
        fetcher: DocumentFetcher,
        max_workers: int = 1,
    ):
        self.extractor = extractor
        self.fetcher = fetcher
        self.max_workers = max(1, max_workers)
        self.logger = logging.getLogger(__name__)

    def run(self, endpoints: Sequence[Endpoint], rule_sets: Dict[str, RuleSet]) -> BatchResult:
        """Process all endpoints and return records in input order plus failures."""
        if self.max_workers == 1 or len(endpoints) <= 1:
            results = [self.process_endpoint(e, rule_sets) for e in endpoints]
        else:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(endpoints))) as pool:
                futures = [pool.submit(self.process_endpoint, e, rule_sets) for e in endpoints]
                results = [f.result() for f in futures]
        return BatchResult.fold(results)

    def process_endpoint(self, endpoint: Endpoint, rule_sets: Dict[str, RuleSet]) -> EndpointResult:
        record: ExtractedRecord = {}
        failure = None

        if endpoint.rule_set_name is not None:
            try:
                rule_set = self._resolve_rule_set(endpoint, rule_sets)
                self.logger.info(f"Processing {endpoint.uuid} at {endpoint.url}")
                document = self.fetcher.fetch(endpoint.url)
                record = self.extractor.extract(document, rule_set, endpoint)
            except RuleResolutionFailure as e:
                failure = str(e)
            except EndpointFailure as e:
                failure = f"Failure processing {endpoint.uuid} at {endpoint.url}: {e}"
            except Exception as e:
                self.logger.exception(f"Unexpected error processing {endpoint.uuid}")
                failure = f"Failure processing {endpoint.uuid} at {endpoint.url}: {e}"

            if failure is not None:
                self.logger.error(failure)
                record = {}

        return EndpointResult(
            uuid=endpoint.uuid,
            record=merge_endpoint_metadata(record, endpoint),
            failure=failure,
        )

    @staticmethod
    def _resolve_rule_set(endpoint: Endpoint, rule_sets: Dict[str, RuleSet]) -> RuleSet:
        rule_set = rule_sets.get(endpoint.rule_set_name)
        if rule_set is None:
            raise RuleResolutionFailure(
                f"Unable to find a ruleset to process brand {endpoint.uuid} at {endpoint.url}"
            )
        return rule_set
