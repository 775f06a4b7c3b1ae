"""
Streamlit rendering for match results.
"""

from enum import Enum
from typing import Optional, Sequence

import streamlit as st

from shared.job_fields import DUTIES_FIELDS, first_field, job_identifier
from shared.models import EnrichedJobRecord

SCORE_LABELS = [
    ("Experience & Skills", "experience_and_skills"),
    ("Culture Fit", "culture_fit"),
    ("Conditions", "conditions"),
    ("Keywords", "keywords"),
]


class ViewMode(str, Enum):
    """What the results panel shows."""

    LOADING = "loading"  # run in progress, nothing to show yet
    ERROR = "error"  # blocking: every job failed or the input was invalid
    RESULTS = "results"  # any error is shown as a warning banner above the cards
    EMPTY = "empty"


def view_mode(has_results: bool, error: Optional[str], is_loading: bool) -> ViewMode:
    if has_results:
        return ViewMode.RESULTS
    if is_loading:
        return ViewMode.LOADING
    if error:
        return ViewMode.ERROR
    return ViewMode.EMPTY


def score_color(score: float) -> str:
    """Streamlit markdown colour for a score band."""
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "orange"


def card_title(record: EnrichedJobRecord, index: int) -> str:
    name = job_identifier(record.job, index)
    if record.company and record.company != name:
        name = f"{record.company} - {name}"
    return f"{name}  |  {record.overall_score:g}/100"


def render_job_card(record: EnrichedJobRecord, index: int) -> None:
    match = record.match_result
    with st.expander(card_title(record, index)):
        duties = first_field(record.job, DUTIES_FIELDS)
        if duties:
            st.caption(duties[:200])

        color = score_color(match.overall_score)
        st.markdown(f"### :{color}[{match.overall_score:g}]/100")
        st.info(match.summary)

        pros_col, cons_col = st.columns(2)
        with pros_col:
            st.markdown("**Matching points**")
            st.markdown("\n".join(f"- {pro}" for pro in match.pros))
        with cons_col:
            st.markdown("**Concerns**")
            st.markdown("\n".join(f"- {con}" for con in match.cons))

        st.markdown("**Score breakdown**")
        for label, attr in SCORE_LABELS:
            value = getattr(match.score_breakdown, attr)
            st.progress(int(round(value)), text=f"{label}: {value:g}")

        if match.matching_keywords:
            st.markdown("**Matching keywords**")
            st.markdown(" ".join(f"`{keyword}`" for keyword in match.matching_keywords))


def render_results(
    results: Sequence[EnrichedJobRecord],
    error: Optional[str],
    progress_text: str,
    is_loading: bool,
) -> None:
    """Draw the results panel into the current container."""
    st.subheader("Match results")
    mode = view_mode(bool(results), error, is_loading)

    if mode is ViewMode.LOADING:
        st.info(f"Analyzing: {progress_text}" if progress_text else "Analyzing match scores...")
        if not progress_text:
            st.caption("This can take a while depending on the number of jobs.")
    elif mode is ViewMode.ERROR:
        st.error(error)
    elif mode is ViewMode.RESULTS:
        if error:
            st.warning(error)
        if is_loading and progress_text:
            st.info(f"Analyzing: {progress_text}")
        for index, record in enumerate(results):
            render_job_card(record, index)
    else:
        st.caption("No match results yet. Enter a candidate profile and a job CSV, then start matching.")
