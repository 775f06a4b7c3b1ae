"""
Pytest configuration and shared fixtures.
"""

import asyncio
import json
from typing import Any, Dict, List

import pytest

from matcher.base import BaseMatcher
from shared.config import Settings
from shared.models import JobRecord

# Outcome that makes ScriptedMatcher outlast any test timeout.
SLOW = object()


def match_payload(score: float = 80, **overrides) -> Dict[str, Any]:
    """Scoring service response body for a match with the given overall score."""
    payload = {
        "overallScore": score,
        "scoreBreakdown": {
            "experienceAndSkills": score,
            "cultureFit": 70,
            "conditions": 60,
            "keywords": 50,
        },
        "matchingKeywords": ["Python", "AWS"],
        "pros": ["Strong backend experience", "Cloud certifications"],
        "cons": ["No people management"],
        "summary": "Solid engineer for a growing platform team",
    }
    payload.update(overrides)
    return payload


class ScriptedMatcher(BaseMatcher):
    """
    Matcher whose answer per job is looked up by the job's position.

    An outcome is a response payload dict, an exception to raise, or SLOW.
    """

    def __init__(self, outcomes: Dict[str, Any], settings: Settings):
        super().__init__(settings)
        self.outcomes = outcomes
        self.calls: List[str] = []
        self.on_call = None

    async def _request(self, candidate: str, job: JobRecord) -> str:
        position = job.get("position", "")
        self.calls.append(position)
        if self.on_call:
            self.on_call(position)

        outcome = self.outcomes[position]
        if outcome is SLOW:
            await asyncio.sleep(5)
        if isinstance(outcome, Exception):
            raise outcome
        return json.dumps(outcome)


@pytest.fixture
def settings() -> Settings:
    """Settings with a short analysis timeout."""
    return Settings(
        openai_api_key="test-key",
        openai_model="gpt-4o-mini",
        analysis_timeout_seconds=0.2,
        scoring_service_url=None,
    )


@pytest.fixture
def make_matcher(settings):
    """Factory for ScriptedMatcher instances."""

    def _make(outcomes: Dict[str, Any]) -> ScriptedMatcher:
        return ScriptedMatcher(outcomes, settings)

    return _make


@pytest.fixture
def sample_job() -> JobRecord:
    """Job record with English headers and an extra column."""
    return {
        "id": "J-100",
        "company": "Acme Corp",
        "position": "Backend Engineer",
        "description": "Build and run Python services on AWS",
        "location": "Tokyo",
        "internal_note": "keep me",
    }


@pytest.fixture
def sample_jobs() -> List[JobRecord]:
    """Three jobs, keyed by position for ScriptedMatcher."""
    return [
        {"company": "Acme Corp", "position": "Engineer"},
        {"company": "Beta Inc", "position": "Designer"},
        {"company": "Gamma KK", "position": "Analyst"},
    ]


@pytest.fixture
def candidate_text() -> str:
    return "Seven years of Python backend development, AWS certified, based in Tokyo."
