from .batch_runner import BatchRunner, BatchResult, EndpointResult, merge_endpoint_metadata
from .reconciliation import ReconciliationReporter, ReconciliationReport, reconcile

__all__ = [
    "BatchRunner",
    "BatchResult",
    "EndpointResult",
    "merge_endpoint_metadata",
    "ReconciliationReporter",
    "ReconciliationReport",
    "reconcile",
]
