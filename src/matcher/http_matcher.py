"""
Client for a remote match scoring service.

The service takes {"candidateText": ..., "job": {...}} and answers with a
match result object, or {"error": "..."} and a non-2xx status.
"""

from typing import Optional

import httpx
from loguru import logger

from shared.config import Settings
from shared.errors import AnalysisTimeout, ServiceError, TransportError
from shared.models import JobRecord

from .base import BaseMatcher


class HttpMatcher(BaseMatcher):
    """Scores jobs by POSTing them to an HTTP scoring service."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(settings)
        if not self.settings.scoring_service_url:
            raise ValueError("SCORING_SERVICE_URL is not configured")
        self.url = self.settings.scoring_service_url
        self._client = client

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _request(self, candidate: str, job: JobRecord) -> str:
        client = await self._get_client()

        try:
            response = await client.post(
                self.url,
                headers=self.headers,
                json={"candidateText": candidate, "job": dict(job)},
            )
        except httpx.TimeoutException as e:
            raise AnalysisTimeout(f"analysis timed out after {self.timeout:g}s") from e
        except httpx.TransportError as e:
            raise TransportError(f"could not reach scoring service: {e}") from e

        if not response.is_success:
            message = self._error_message(response)
            logger.debug(f"Scoring service returned {response.status_code}: {message}")
            raise ServiceError(message, status_code=response.status_code)

        return response.text

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Use the service's own error text when it sent one."""
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return f"scoring service returned HTTP {response.status_code}"
