"""
Common contract for match scoring backends.

Every backend gets one attempt per job, bounded by the configured timeout,
and must hand back a validated MatchResult or raise an AnalysisError.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.errors import AnalysisTimeout, MalformedResponse, ServiceError
from shared.models import JobRecord, MatchResult


def parse_match_result(raw: str) -> MatchResult:
    """
    Parse a scoring response body into a MatchResult.

    The JSON object is cut out of the surrounding text first, since models
    sometimes wrap it in prose or code fences.
    """
    start = raw.find("{")
    end = raw.rfind("}") + 1
    if start == -1 or end == 0:
        raise MalformedResponse("response did not contain a JSON object")

    try:
        data = json.loads(raw[start:end])
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"JSON parse error: {e}") from e

    if "error" in data and "overallScore" not in data:
        raise ServiceError(str(data["error"]))

    try:
        return MatchResult.model_validate(data)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        raise MalformedResponse(f"invalid match result fields: {fields}") from e


class BaseMatcher(ABC):
    """Scores one job against a candidate profile."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def timeout(self) -> float:
        return self.settings.analysis_timeout_seconds

    async def analyze(self, candidate: str, job: JobRecord) -> MatchResult:
        """
        Analyze a single job.

        Raises:
            AnalysisTimeout: the call exceeded the timeout and was cancelled
            ServiceError, MalformedResponse, TransportError: see shared.errors
        """
        try:
            raw = await asyncio.wait_for(self._request(candidate, job), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise AnalysisTimeout(f"analysis timed out after {self.timeout:g}s") from e

        return parse_match_result(raw)

    @abstractmethod
    async def _request(self, candidate: str, job: JobRecord) -> str:
        """Send the request and return the raw response body."""

    async def close(self) -> None:
        """Release network resources."""
