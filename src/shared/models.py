"""
Pydantic models for match results.

Wire names follow the scoring service's camelCase JSON; Python code uses the
snake_case attribute names.
"""

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .job_fields import COMPANY_FIELDS, JOB_ID_FIELDS, POSITION_FIELDS, first_field

# A job is whatever columns the uploaded CSV has.
JobRecord = dict[str, str]


def _reject_bool(value):
    if isinstance(value, bool):
        raise ValueError("score must be a number, not a boolean")
    return value


def _clamp_score(value: float) -> float:
    if not 0 <= value <= 100:
        logger.warning(f"Invalid score {value}, clamping to range 0-100")
        return max(0.0, min(100.0, value))
    return value


class ScoreBreakdown(BaseModel):
    """Sub-scores (0-100) behind the overall match score."""

    experience_and_skills: float = Field(..., alias="experienceAndSkills")
    culture_fit: float = Field(..., alias="cultureFit")
    conditions: float = Field(...)
    keywords: float = Field(...)

    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    @field_validator("experience_and_skills", "culture_fit", "conditions", "keywords", mode="before")
    @classmethod
    def not_bool(cls, value):
        return _reject_bool(value)

    @field_validator("experience_and_skills", "culture_fit", "conditions", "keywords")
    @classmethod
    def clamp(cls, value: float) -> float:
        return _clamp_score(value)


class MatchResult(BaseModel):
    """Structured verdict for one candidate/job pair."""

    overall_score: float = Field(..., alias="overallScore", description="Weighted match score (0-100)")
    score_breakdown: ScoreBreakdown = Field(..., alias="scoreBreakdown")
    matching_keywords: list[str] = Field(..., alias="matchingKeywords")
    pros: list[str] = Field(..., description="Points in favour of the match (2-3)")
    cons: list[str] = Field(..., description="Concerns about the match (1-2)")
    summary: str = Field(..., description="One-line summary of the match")

    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    @field_validator("overall_score", mode="before")
    @classmethod
    def not_bool(cls, value):
        return _reject_bool(value)

    @field_validator("overall_score")
    @classmethod
    def clamp(cls, value: float) -> float:
        return _clamp_score(value)


class EnrichedJobRecord(BaseModel):
    """A job record paired with its successful match result."""

    job: JobRecord
    match_result: MatchResult

    model_config = ConfigDict(frozen=True)

    @property
    def overall_score(self) -> float:
        return self.match_result.overall_score

    @property
    def company(self) -> str:
        return first_field(self.job, COMPANY_FIELDS)

    @property
    def position(self) -> str:
        return first_field(self.job, POSITION_FIELDS)

    @property
    def job_id(self) -> str:
        return first_field(self.job, JOB_ID_FIELDS)


class FailureSummary(BaseModel):
    """A job that could not be analyzed."""

    identifier: str
    message: str
    kind: str = Field(default="AnalysisError", description="Error kind, e.g. Timeout")

    def __str__(self) -> str:
        return f"{self.identifier} ({self.message})"
