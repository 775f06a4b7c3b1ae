"""
Error types for the job match assistant.

Per-job failures all derive from AnalysisError so the batch orchestrator can
record them uniformly; ValidationError is the only hard stop of a run.
"""

from typing import Optional


class MatcherError(Exception):
    """Base class for all application errors."""

    kind = "MatcherError"


class ValidationError(MatcherError):
    """Missing candidate text or empty job list."""

    kind = "ValidationError"


class DocumentError(MatcherError):
    """An uploaded CSV or PDF could not be read."""

    kind = "DocumentError"


class AnalysisError(MatcherError):
    """A single job analysis failed."""

    kind = "AnalysisError"


class AnalysisTimeout(AnalysisError):
    """The analysis exceeded its wall-clock budget."""

    kind = "Timeout"


class ServiceError(AnalysisError):
    """The scoring service returned a non-success status or an error payload."""

    kind = "ServiceError"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(AnalysisError):
    """The response body was not the expected JSON shape."""

    kind = "MalformedResponse"


class TransportError(AnalysisError):
    """The scoring service could not be reached."""

    kind = "TransportError"
