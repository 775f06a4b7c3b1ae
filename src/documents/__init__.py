"""
Document handling - job CSV import/export and PDF profile extraction.
"""

from .jobs_csv import export_results, load_jobs
from .profile_pdf import extract_profile_text

__all__ = ["export_results", "extract_profile_text", "load_jobs"]
