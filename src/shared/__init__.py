# Shared module for common utilities, models, and configuration
from .config import Settings, get_settings
from .errors import (
    AnalysisError,
    AnalysisTimeout,
    DocumentError,
    MalformedResponse,
    MatcherError,
    ServiceError,
    TransportError,
    ValidationError,
)
from .job_fields import job_identifier
from .models import EnrichedJobRecord, FailureSummary, JobRecord, MatchResult, ScoreBreakdown

__all__ = [
    "Settings",
    "get_settings",
    "AnalysisError",
    "AnalysisTimeout",
    "DocumentError",
    "MalformedResponse",
    "MatcherError",
    "ServiceError",
    "TransportError",
    "ValidationError",
    "job_identifier",
    "EnrichedJobRecord",
    "FailureSummary",
    "JobRecord",
    "MatchResult",
    "ScoreBreakdown",
]
