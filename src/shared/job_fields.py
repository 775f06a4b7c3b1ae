"""
Lookups over job records whose CSV headers are not fixed.

Both the Japanese agency export headers and plain English headers are
recognised; the first non-blank match wins.
"""

from typing import Iterable, Mapping

POSITION_FIELDS = ("ポジション", "position", "Position", "title", "Title", "job_title")
COMPANY_FIELDS = ("企業名", "company", "Company", "company_name")
JOB_ID_FIELDS = ("JOB ID", "企業 ID", "job_id", "id", "ID")
DUTIES_FIELDS = ("業務内容", "duties", "Duties", "description", "Description")


def first_field(job: Mapping[str, str], keys: Iterable[str], default: str = "") -> str:
    """Return the first non-blank value among ``keys``."""
    for key in keys:
        value = job.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return default


def job_identifier(job: Mapping[str, str], index: int) -> str:
    """Human-readable label for a job: position, then company, then its position in the list."""
    return (
        first_field(job, POSITION_FIELDS)
        or first_field(job, COMPANY_FIELDS)
        or f"job {index + 1}"
    )
