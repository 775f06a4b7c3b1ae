"""
Job list CSV import and match result CSV export.
"""

import io
from typing import Sequence

import pandas as pd
from loguru import logger

from shared.errors import DocumentError
from shared.models import EnrichedJobRecord, JobRecord

# Japanese Excel saves CSV as Shift_JIS unless told otherwise.
CSV_ENCODINGS = ("utf-8-sig", "cp932")

EXPORT_COLUMNS = [
    "Job ID",
    "Company",
    "Position",
    "Overall Score",
    "Experience & Skills",
    "Culture Fit",
    "Conditions",
    "Keywords",
    "Summary",
    "Pros",
    "Cons",
    "Matching Keywords",
]


def _read_csv(data: bytes) -> pd.DataFrame:
    for encoding in CSV_ENCODINGS:
        try:
            return pd.read_csv(
                io.BytesIO(data),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding=encoding,
            )
        except UnicodeDecodeError:
            logger.debug(f"CSV is not {encoding}, trying next encoding")
        except pd.errors.EmptyDataError as e:
            raise DocumentError("The CSV file is empty.") from e
        except pd.errors.ParserError as e:
            raise DocumentError(f"Could not parse CSV: {e}") from e

    raise DocumentError(f"Could not decode CSV (tried {', '.join(CSV_ENCODINGS)}).")


def load_jobs(data: bytes) -> list[JobRecord]:
    """
    Parse an uploaded job CSV into job records.

    The header row names the fields; every value is kept as a string and
    unknown columns are passed through untouched.

    Raises:
        DocumentError: the file is empty, undecodable or malformed
    """
    df = _read_csv(data)
    jobs = [{str(k): v for k, v in row.items()} for row in df.to_dict(orient="records")]

    if not jobs:
        logger.warning("CSV parsed with 0 rows; check the header row and file encoding")
    else:
        logger.info(f"Loaded {len(jobs)} jobs ({len(df.columns)} columns)")
    return jobs


def export_results(results: Sequence[EnrichedJobRecord], delimiter: str = " | ") -> bytes:
    """
    Render match results as CSV.

    List fields are joined with ``delimiter``. Output is UTF-8 with a BOM
    so spreadsheet apps pick the right encoding.
    """
    rows = []
    for record in results:
        match = record.match_result
        breakdown = match.score_breakdown
        rows.append(
            {
                "Job ID": record.job_id,
                "Company": record.company,
                "Position": record.position,
                "Overall Score": match.overall_score,
                "Experience & Skills": breakdown.experience_and_skills,
                "Culture Fit": breakdown.culture_fit,
                "Conditions": breakdown.conditions,
                "Keywords": breakdown.keywords,
                "Summary": match.summary,
                "Pros": delimiter.join(match.pros),
                "Cons": delimiter.join(match.cons),
                "Matching Keywords": delimiter.join(match.matching_keywords),
            }
        )

    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    logger.info(f"Exported {len(rows)} results to CSV")
    return df.to_csv(index=False).encode("utf-8-sig")
