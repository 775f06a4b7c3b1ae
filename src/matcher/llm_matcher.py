"""
LLM-based job-candidate matching using OpenAI.
"""

from typing import Optional

from loguru import logger
from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI

from shared.config import Settings
from shared.errors import AnalysisTimeout, MalformedResponse, ServiceError, TransportError
from shared.models import JobRecord

from .base import BaseMatcher
from .prompts import SYSTEM_PROMPT, build_prompt


class LLMMatcher(BaseMatcher):
    """Matches jobs against a candidate profile using an OpenAI chat model."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        super().__init__(settings)
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        """Get or create OpenAI client."""
        if self._client is None:
            api_key = self.settings.openai_api_key.get_secret_value()
            if not api_key:
                raise ServiceError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=self.settings.openai_base_url,
                timeout=self.timeout,
                max_retries=0,  # one attempt per job
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def _request(self, candidate: str, job: JobRecord) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.settings.openai_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(candidate, job)},
                ],
                temperature=self.settings.matcher_temperature,
                max_tokens=self.settings.matcher_max_tokens,
                response_format={"type": "json_object"},  # Force JSON response
            )
        except APITimeoutError as e:
            raise AnalysisTimeout(f"analysis timed out after {self.timeout:g}s") from e
        except APIConnectionError as e:
            raise TransportError(f"could not reach OpenAI: {e}") from e
        except APIStatusError as e:
            raise ServiceError(
                f"OpenAI returned HTTP {e.status_code}: {e.message}",
                status_code=e.status_code,
            ) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise MalformedResponse("Empty response from LLM")

        logger.debug(f"LLM response ({len(content)} chars) for model {self.settings.openai_model}")
        return content
