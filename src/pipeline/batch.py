"""
Batch matching run.

Analyzes a candidate against a list of jobs one at a time, publishing
progress and the score-sorted results as they arrive. A failed job is
recorded and skipped; only invalid input stops a run.
"""

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from loguru import logger

from matcher.base import BaseMatcher
from shared.errors import AnalysisError, ValidationError
from shared.job_fields import job_identifier
from shared.models import EnrichedJobRecord, FailureSummary, JobRecord


class RunStatus(str, Enum):
    """Batch run lifecycle."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED_CLEAN = "completed_clean"
    COMPLETED_WITH_WARNINGS = "completed_with_warnings"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class BatchProgress:
    """1-based position of the job being analyzed."""

    index: int
    total: int

    def __str__(self) -> str:
        return f"{self.index} of {self.total}"


ProgressSink = Callable[[Optional[BatchProgress]], None]
ResultSink = Callable[[list[EnrichedJobRecord]], None]
ErrorSink = Callable[[Optional[str]], None]


@dataclass
class RunState:
    """State of one batch run. Results are kept sorted by overall score, best first."""

    status: RunStatus = RunStatus.IDLE
    results: list[EnrichedJobRecord] = field(default_factory=list)
    failures: list[FailureSummary] = field(default_factory=list)
    current_index: int = 0
    total: int = 0
    error_message: Optional[str] = None
    start_time: float = field(default_factory=time.time)
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    @property
    def duration_seconds(self) -> float:
        return time.time() - self.start_time

    def add_result(self, record: EnrichedJobRecord) -> None:
        self.results.append(record)
        self.results.sort(key=lambda r: r.overall_score, reverse=True)

    def add_failure(self, failure: FailureSummary) -> None:
        self.failures.append(failure)

    def snapshot(self) -> list[EnrichedJobRecord]:
        """Copy of the current results for consumers."""
        return list(self.results)

    def aggregate_message(self) -> Optional[str]:
        if not self.failures:
            return None
        details = ", ".join(str(f) for f in self.failures)
        return (
            f"{len(self.failures)} job(s) failed to analyze; "
            f"showing successful results only. Details: {details}"
        )

    def __str__(self) -> str:
        return (
            f"Status: {self.status.value}, Analyzed: {self.current_index}/{self.total}, "
            f"Matched: {len(self.results)}, Failed: {len(self.failures)}, "
            f"Duration: {self.duration_seconds:.1f}s"
        )


class BatchOrchestrator:
    """
    Runs a candidate against a job list, sequentially.

    Jobs are analyzed strictly in input order with a single request in
    flight; job i+1 starts only after job i has succeeded or failed.
    """

    def __init__(self, matcher: BaseMatcher):
        self.matcher = matcher
        self.state = RunState()
        self._cancel_requested = False

    @property
    def is_running(self) -> bool:
        return self.state.status is RunStatus.RUNNING

    def cancel(self) -> None:
        """Stop the current run before its next job starts."""
        if self.is_running:
            logger.bind(run=self.state.run_id).info("Cancellation requested")
            self._cancel_requested = True

    async def run_batch(
        self,
        candidate: str,
        jobs: Sequence[JobRecord],
        progress_sink: ProgressSink,
        result_sink: ResultSink,
        error_sink: ErrorSink,
    ) -> RunState:
        """
        Analyze every job against the candidate.

        Args:
            candidate: Candidate profile text
            jobs: Job records, analyzed in this order
            progress_sink: Receives BatchProgress before each job, None to clear
            result_sink: Receives the full sorted result list after each success
            error_sink: Receives the aggregate failure warning, None to clear

        Returns:
            The final RunState

        Raises:
            ValidationError: candidate text or job list is empty
        """
        if not candidate or not candidate.strip():
            raise ValidationError("Candidate profile text is required.")
        jobs = list(jobs)
        if not jobs:
            raise ValidationError("At least one job is required.")
        if self.is_running:
            raise RuntimeError("A batch run is already in progress")

        self.state = state = RunState(status=RunStatus.RUNNING, total=len(jobs))
        self._cancel_requested = False
        result_sink([])
        error_sink(None)
        progress_sink(None)

        with logger.contextualize(run=state.run_id):
            logger.info(f"Starting batch run: {state.total} jobs")

            try:
                for index, job in enumerate(jobs):
                    if self._cancel_requested:
                        logger.info(f"Batch run cancelled before job {index + 1} of {state.total}")
                        state.status = RunStatus.CANCELLED
                        break

                    state.current_index = index + 1
                    progress_sink(BatchProgress(index=index + 1, total=state.total))

                    identifier = job_identifier(job, index)
                    logger.debug(f"Matching [{index + 1}/{state.total}]: {identifier}")

                    try:
                        match_result = await self.matcher.analyze(candidate, job)
                    except AnalysisError as e:
                        logger.error(f"Analysis failed for {identifier}: [{e.kind}] {e}")
                        state.add_failure(FailureSummary(identifier=identifier, message=str(e), kind=e.kind))
                        continue
                    except Exception as e:
                        logger.exception(f"Unexpected error analyzing {identifier}: {e}")
                        state.add_failure(
                            FailureSummary(identifier=identifier, message=str(e), kind=type(e).__name__)
                        )
                        continue

                    state.add_result(EnrichedJobRecord(job=dict(job), match_result=match_result))
                    logger.info(f"Match score: {match_result.overall_score:g}/100 - {identifier}")
                    result_sink(state.snapshot())

                state.error_message = state.aggregate_message()
                if state.error_message:
                    error_sink(state.error_message)

                if state.status is RunStatus.RUNNING:
                    state.status = (
                        RunStatus.COMPLETED_WITH_WARNINGS if state.failures else RunStatus.COMPLETED_CLEAN
                    )
            finally:
                if state.status is RunStatus.RUNNING:
                    # Surrounding task was cancelled mid-job.
                    state.status = RunStatus.CANCELLED
                self._cancel_requested = False
                progress_sink(None)

            logger.info(f"Batch run complete - {state}")
        return state
