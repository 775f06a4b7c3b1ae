"""
Matcher Service - LLM-based job-candidate scoring.

Scores one job posting against a candidate profile and returns a
MatchResult with an overall score (0-100), sub-scores and talking points.
"""

from typing import Optional

from shared.config import Settings, get_settings

from .base import BaseMatcher, parse_match_result
from .http_matcher import HttpMatcher
from .llm_matcher import LLMMatcher


def get_matcher(settings: Optional[Settings] = None) -> BaseMatcher:
    """HTTP scoring service if one is configured, OpenAI otherwise."""
    settings = settings or get_settings()
    if settings.scoring_service_url:
        return HttpMatcher(settings=settings)
    return LLMMatcher(settings=settings)


__all__ = ["BaseMatcher", "HttpMatcher", "LLMMatcher", "get_matcher", "parse_match_result"]
