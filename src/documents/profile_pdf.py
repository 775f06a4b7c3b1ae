"""
Candidate profile text extraction from PDF résumés.
"""

import io

from loguru import logger
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from shared.errors import DocumentError


def extract_profile_text(data: bytes) -> str:
    """Return the text of every page, pages separated by a blank line."""
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
    except (PyPdfError, ValueError) as e:
        raise DocumentError(f"Could not read PDF: {e}") from e

    text = "\n\n".join(page for page in pages if page)
    if not text:
        raise DocumentError("No text could be extracted from the PDF (is it a scanned image?)")

    logger.info(f"Extracted {len(text)} characters from {len(pages)} PDF pages")
    return text
