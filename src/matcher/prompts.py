"""
Prompt construction for job/candidate match scoring.
"""

from shared.job_fields import COMPANY_FIELDS, DUTIES_FIELDS, JOB_ID_FIELDS, POSITION_FIELDS, first_field
from shared.models import JobRecord

NOT_AVAILABLE = "N/A"

# (label shown to the model, CSV headers that may hold the value)
JOB_PROMPT_FIELDS: list[tuple[str, tuple[str, ...]]] = [
    ("Company", COMPANY_FIELDS),
    ("Position", POSITION_FIELDS),
    ("Duties", DUTIES_FIELDS),
    ("Hiring background", ("募集背景", "hiring_background", "background")),
    ("Ideal candidate", ("求める人材像", "求める人材", "ideal_candidate")),
    ("Qualifications (summary)", ("応募資格(概要)", "requirements", "Requirements")),
    ("Qualifications (detail)", ("応募資格(詳細)", "requirements_detail")),
    ("Location", ("勤務地", "location", "Location")),
    ("Keywords", ("★キーワード★", "keywords", "Keywords", "tags")),
]

SALARY_MIN_FIELDS = ("年収下限 [万円]", "salary_min", "Salary Min")
SALARY_MAX_FIELDS = ("年収上限 [万円]", "年収上限 [万円] (選択肢型)", "salary_max", "Salary Max")


SYSTEM_PROMPT = """You are an expert career agent at a recruitment firm. Your task is to evaluate, objectively, how well a job seeker matches a single job posting.

Score the match on four criteria, each from 0 to 100, and compute the overall match score (0-100) as their weighted average:
- A. Experience and skills fit (weight 40%)
- B. Culture and career-orientation fit (weight 30%)
- C. Conditions match: salary, location, work style (weight 20%)
- D. Keyword synergy (weight 10%)

Also list the keywords that contributed to the match, 2-3 points in favour of the match, 1-2 concerns, and a catchy one-line summary of the match.

IMPORTANT: Respond ONLY with valid JSON in the exact format specified. No other text."""

RESPONSE_FORMAT = """{
  "overallScore": <0-100>,
  "scoreBreakdown": {
    "experienceAndSkills": <0-100>,
    "cultureFit": <0-100>,
    "conditions": <0-100>,
    "keywords": <0-100>
  },
  "matchingKeywords": ["<keyword>", ...],
  "pros": ["<point in favour>", ...],
  "cons": ["<concern>", ...],
  "summary": "<one-line summary>"
}"""


def format_job(job: JobRecord) -> str:
    """Render the job fields the model scores on; absent fields become N/A."""
    job_id = first_field(job, JOB_ID_FIELDS, default="unknown")
    lines = [f"--- Job Details (ID: {job_id}) ---"]
    for label, keys in JOB_PROMPT_FIELDS:
        lines.append(f"- {label}: {first_field(job, keys, default=NOT_AVAILABLE)}")

    salary_min = first_field(job, SALARY_MIN_FIELDS, default=NOT_AVAILABLE)
    salary_max = first_field(job, SALARY_MAX_FIELDS, default=NOT_AVAILABLE)
    lines.append(f"- Salary range: {salary_min} - {salary_max}")
    return "\n".join(lines)


def build_prompt(candidate: str, job: JobRecord) -> str:
    """User prompt for one candidate/job pair."""
    return f"""## Job Seeker:
{candidate}

## Job Posting:
{format_job(job)}

## Task:
Evaluate how well this job seeker matches the job posting.
Respond in the following JSON format only:

{RESPONSE_FORMAT}"""
