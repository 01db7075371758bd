"""Exception hierarchy for the brand extractor.

Endpoint-scoped errors derive from :class:`EndpointFailure` so the batch
runner can record them per brand without stopping the run. Anything that
derives only from :class:`ConfigurationError` is fatal to the whole run.
"""


class BrandExtractorError(Exception):
    """Base exception for brand extractor errors."""
    pass


class ConfigurationError(BrandExtractorError):
    """Raised when input files are missing, unparsable or malformed."""
    pass


class EndpointFailure(BrandExtractorError):
    """Base exception for failures scoped to a single endpoint."""
    pass


class RuleResolutionFailure(EndpointFailure):
    """Raised when an endpoint names a rule set that does not exist."""
    pass


class FilterError(EndpointFailure):
    """Raised when a rule's filter pattern cannot be compiled."""
    pass
