import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

from ..types.brand import Endpoint


def _ordered_difference(left: Iterable[str], right: Iterable[str]) -> List[str]:
    exclude = set(right)
    seen = set()
    out = []
    for item in left:
        if item in exclude or item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


@dataclass
class ReconciliationReport:
    known_count: int = 0
    configured_count: int = 0
    configured_only: List[str] = field(default_factory=list)  # configured but not known
    known_only: List[str] = field(default_factory=list)       # known but not configured

    @property
    def in_sync(self) -> bool:
        return not self.configured_only and not self.known_only


def reconcile(known_uuids: Sequence[str], configured_uuids: Sequence[str]) -> ReconciliationReport:
    return ReconciliationReport(
        known_count=len(known_uuids),
        configured_count=len(configured_uuids),
        configured_only=_ordered_difference(configured_uuids, known_uuids),
        known_only=_ordered_difference(known_uuids, configured_uuids),
    )


class ReconciliationReporter:
    """Compares the known brand list against the configured endpoints and logs the gaps."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def report(self, known_brands: Sequence[Dict[str, Any]], endpoints: Sequence[Endpoint]) -> ReconciliationReport:
        known_uuids = [b.get("uuid") for b in known_brands if b.get("uuid")]
        configured_uuids = [e.uuid for e in endpoints]
        report = reconcile(known_uuids, configured_uuids)

        self.logger.info(
            f"Found {report.known_count} uuids in known brands and "
            f"{report.configured_count} uuids in brands configuration"
        )
        if report.configured_only:
            self.logger.info(
                f"Found {len(report.configured_only)} uuids in brands configuration but not in known brands"
            )
            wanted = set(report.configured_only)
            for endpoint in endpoints:
                if endpoint.uuid in wanted:
                    self.logger.info(f"  {endpoint.to_dict()}")
        if report.known_only:
            self.logger.info(
                f"Found {len(report.known_only)} uuids in known brands but not in brands configuration"
            )
            wanted = set(report.known_only)
            for brand in known_brands:
                if brand.get("uuid") in wanted:
                    self.logger.info(f"  {brand}")
        return report
