"""
Batch Pipeline - candidate vs. job list matching run.
Analyze → Accumulate (sorted) → Report failures, one job at a time.
"""

from .batch import BatchOrchestrator, BatchProgress, RunState, RunStatus

__all__ = ["BatchOrchestrator", "BatchProgress", "RunState", "RunStatus"]
