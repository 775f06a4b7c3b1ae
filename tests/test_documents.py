"""
Tests for job CSV import/export and PDF profile extraction.
"""

from unittest.mock import MagicMock, patch

import pytest
from pypdf.errors import PdfReadError

from conftest import match_payload
from documents import export_results, extract_profile_text, load_jobs
from documents.jobs_csv import EXPORT_COLUMNS
from shared.errors import DocumentError
from shared.models import EnrichedJobRecord, MatchResult


def enriched(job, score, **overrides) -> EnrichedJobRecord:
    return EnrichedJobRecord(
        job=job, match_result=MatchResult.model_validate(match_payload(score, **overrides))
    )


class TestLoadJobs:
    """Header-driven CSV parsing."""

    def test_rows_become_records(self):
        data = b"company,position,remote\nAcme,Engineer,yes\n\nBeta,Designer,no\n"

        jobs = load_jobs(data)

        assert jobs == [
            {"company": "Acme", "position": "Engineer", "remote": "yes"},
            {"company": "Beta", "position": "Designer", "remote": "no"},
        ]

    def test_values_stay_strings(self):
        data = b"position,salary_min,notes\nEngineer,600,\n"

        job = load_jobs(data)[0]

        assert job["salary_min"] == "600"
        assert job["notes"] == ""

    def test_utf8_bom(self):
        data = "\ufeff企業名,ポジション\nテスト株式会社,エンジニア\n".encode("utf-8")

        jobs = load_jobs(data)

        assert jobs == [{"企業名": "テスト株式会社", "ポジション": "エンジニア"}]

    def test_shift_jis_fallback(self):
        data = "企業名,ポジション\nテスト株式会社,データ分析\n".encode("cp932")

        jobs = load_jobs(data)

        assert jobs[0]["企業名"] == "テスト株式会社"
        assert jobs[0]["ポジション"] == "データ分析"

    def test_header_only(self):
        assert load_jobs(b"company,position\n") == []

    def test_empty_file(self):
        with pytest.raises(DocumentError):
            load_jobs(b"")

    def test_malformed_rows(self):
        with pytest.raises(DocumentError):
            load_jobs(b"a,b\n1,2\n3,4,5,6\n")


class TestExportResults:
    """CSV export of match results."""

    def test_utf8_bom_and_header(self):
        data = export_results([enriched({"company": "Acme", "position": "Engineer"}, 80)])

        assert data.startswith(b"\xef\xbb\xbf")
        header = data.decode("utf-8-sig").splitlines()[0]
        assert header.split(",") == EXPORT_COLUMNS

    def test_round_trip(self):
        """Exported rows re-parse to the same identity, scores and list items."""
        results = [
            enriched(
                {"企業名": "テスト株式会社", "ポジション": "SRE", "JOB ID": "7"},
                92.5,
                pros=["Kubernetes in production", "On-call experience, 24/7"],
                cons=["Relocation needed"],
                matchingKeywords=["Kubernetes", "Go"],
            ),
            enriched({"company": "Acme", "position": "Engineer"}, 64),
        ]

        rows = load_jobs(export_results(results, delimiter=" | "))

        assert len(rows) == 2
        first = rows[0]
        assert first["Job ID"] == "7"
        assert first["Company"] == "テスト株式会社"
        assert first["Position"] == "SRE"
        assert float(first["Overall Score"]) == 92.5
        assert float(first["Experience & Skills"]) == 92.5
        assert float(first["Culture Fit"]) == 70
        assert float(first["Conditions"]) == 60
        assert float(first["Keywords"]) == 50
        assert first["Pros"].split(" | ") == ["Kubernetes in production", "On-call experience, 24/7"]
        assert first["Cons"].split(" | ") == ["Relocation needed"]
        assert first["Matching Keywords"].split(" | ") == ["Kubernetes", "Go"]

        assert rows[1]["Company"] == "Acme"
        assert float(rows[1]["Overall Score"]) == 64

    def test_custom_delimiter(self):
        data = export_results([enriched({"position": "Engineer"}, 70)], delimiter="; ")

        row = load_jobs(data)[0]

        assert row["Pros"] == "Strong backend experience; Cloud certifications"

    def test_no_results(self):
        assert load_jobs(export_results([])) == []


class TestExtractProfileText:
    """PDF text extraction with a patched reader."""

    def _reader(self, *texts):
        reader = MagicMock()
        reader.pages = []
        for text in texts:
            page = MagicMock()
            page.extract_text.return_value = text
            reader.pages.append(page)
        return reader

    def test_pages_joined_by_blank_line(self):
        reader = self._reader("Page one text\n", "  Page two text", None)

        with patch("documents.profile_pdf.PdfReader", return_value=reader):
            text = extract_profile_text(b"%PDF-1.7 fake")

        assert text == "Page one text\n\nPage two text"

    def test_no_text(self):
        with patch("documents.profile_pdf.PdfReader", return_value=self._reader("", "   ")):
            with pytest.raises(DocumentError, match="No text"):
                extract_profile_text(b"%PDF-1.7 fake")

    def test_unreadable_pdf(self):
        with patch("documents.profile_pdf.PdfReader", side_effect=PdfReadError("EOF marker not found")):
            with pytest.raises(DocumentError, match="Could not read PDF"):
                extract_profile_text(b"not a pdf")
