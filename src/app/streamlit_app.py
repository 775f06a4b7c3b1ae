"""
Streamlit UI for the Job Match Assistant.

Run with:
    streamlit run src/app/streamlit_app.py
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st
from loguru import logger

from app.components import render_results
from documents import export_results, extract_profile_text, load_jobs
from matcher import get_matcher
from pipeline import BatchOrchestrator, RunState
from shared.config import get_settings
from shared.errors import DocumentError, ValidationError
from shared.log import setup_logging
from shared.models import JobRecord

SESSION_DEFAULTS = {
    "candidate_text": "",
    "jobs": [],
    "results": [],
    "error": "",
    "progress_text": "",
    "is_loading": False,
    "pdf_file_key": None,
    "csv_file_key": None,
}


def init_session_state() -> None:
    for key, value in SESSION_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = list(value) if isinstance(value, list) else value


def _file_key(uploaded_file) -> str:
    return f"{uploaded_file.name}:{uploaded_file.size}"


def render_inputs() -> bool:
    """Candidate profile and job CSV inputs. Returns True when matching was requested."""
    st.subheader("Job seeker")
    text_tab, pdf_tab = st.tabs(["Text", "PDF"])

    # PDF is handled first so extracted text can seed the text area below.
    with pdf_tab:
        uploaded_pdf = st.file_uploader("Upload a résumé PDF", type=["pdf"])
        if uploaded_pdf is not None and _file_key(uploaded_pdf) != st.session_state.pdf_file_key:
            st.session_state.pdf_file_key = _file_key(uploaded_pdf)
            try:
                st.session_state.candidate_text = extract_profile_text(uploaded_pdf.getvalue())
                st.success(f"Extracted text from {uploaded_pdf.name}. Review it in the Text tab.")
            except DocumentError as e:
                logger.error(f"PDF extraction failed for {uploaded_pdf.name}: {e}")
                st.error(str(e))

    with text_tab:
        st.text_area(
            "Résumé, interview notes or any free-text profile",
            key="candidate_text",
            height=300,
        )

    st.subheader("Job list")
    uploaded_csv = st.file_uploader("Upload a job CSV", type=["csv"])
    if uploaded_csv is None:
        st.session_state.jobs = []
        st.session_state.csv_file_key = None
    elif _file_key(uploaded_csv) != st.session_state.csv_file_key:
        st.session_state.csv_file_key = _file_key(uploaded_csv)
        try:
            st.session_state.jobs = load_jobs(uploaded_csv.getvalue())
        except DocumentError as e:
            logger.error(f"CSV import failed for {uploaded_csv.name}: {e}")
            st.session_state.jobs = []
            st.error(str(e))

    if st.session_state.csv_file_key and st.session_state.jobs:
        st.success(f"Loaded {len(st.session_state.jobs)} jobs")
    elif st.session_state.csv_file_key:
        st.warning("No job rows found. Check the header row and the file encoding.")

    ready = bool(st.session_state.candidate_text.strip()) and bool(st.session_state.jobs)
    return st.button(
        "Start matching",
        type="primary",
        disabled=st.session_state.is_loading or not ready,
        use_container_width=True,
    )


async def _run_batch(candidate: str, jobs: list[JobRecord], placeholder) -> RunState:
    settings = get_settings()
    matcher = get_matcher(settings)
    orchestrator = BatchOrchestrator(matcher)

    def refresh() -> None:
        with placeholder.container():
            render_results(
                st.session_state.results,
                st.session_state.error,
                st.session_state.progress_text,
                st.session_state.is_loading,
            )

    def on_progress(progress) -> None:
        st.session_state.progress_text = str(progress) if progress else ""
        refresh()

    def on_results(results) -> None:
        st.session_state.results = results
        refresh()

    def on_error(message) -> None:
        st.session_state.error = message or ""
        refresh()

    try:
        return await orchestrator.run_batch(candidate, jobs, on_progress, on_results, on_error)
    finally:
        await matcher.close()


def run_matching(placeholder) -> None:
    st.session_state.is_loading = True
    try:
        asyncio.run(_run_batch(st.session_state.candidate_text, st.session_state.jobs, placeholder))
    except ValidationError as e:
        st.session_state.results = []
        st.session_state.error = str(e)
    finally:
        st.session_state.is_loading = False
        st.session_state.progress_text = ""


def main() -> None:
    st.set_page_config(page_title="Job Match Assistant", layout="wide")
    setup_logging()
    init_session_state()

    st.title("Job Match Assistant")
    st.caption("Score a job seeker against every job in a CSV with an LLM.")

    input_col, results_col = st.columns(2)

    with input_col:
        start = render_inputs()

    with results_col:
        placeholder = st.empty()
        if start:
            run_matching(placeholder)

        with placeholder.container():
            render_results(
                st.session_state.results,
                st.session_state.error,
                st.session_state.progress_text,
                st.session_state.is_loading,
            )

        if st.session_state.results:
            st.download_button(
                "Download results (CSV)",
                data=export_results(
                    st.session_state.results, delimiter=get_settings().export_list_delimiter
                ),
                file_name="job_matches.csv",
                mime="text/csv",
            )


if __name__ == "__main__":
    main()
