import io
import logging
import re

import pdfplumber

from config import settings

logger = logging.getLogger(__name__)

INSUFFICIENT_TEXT_MESSAGE = (
    "Unable to extract sufficient text from PDF. "
    "Please ensure the PDF contains selectable text (not scanned images)."
)

_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
_EXCESS_SPACES_RE = re.compile(r" {2,}")


class PDFExtractionError(ValueError):
    """The uploaded bytes could not be read as a PDF."""


class InsufficientTextError(PDFExtractionError):
    """The PDF opened but yielded too little selectable text."""


def is_pdf_filename(filename: str | None) -> bool:
    return bool(filename) and filename.lower().endswith(".pdf")


def clean_extracted_text(text: str) -> str:
    """Normalize whitespace while keeping paragraph structure."""
    text = text.replace("\r\n", "\n")
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
    text = _EXCESS_SPACES_RE.sub(" ", text)
    return text.strip()


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file.

    Raises PDFExtractionError if the file is not a parseable PDF and
    InsufficientTextError if it holds no meaningful selectable text.
    """
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("PDF parsing failed: %s", e)
        raise PDFExtractionError(
            "Failed to parse PDF. Please ensure the file is a valid PDF."
        ) from e

    text = clean_extracted_text("\n\n".join(pages))
    if len(text) < settings.min_extracted_chars:
        raise InsufficientTextError(INSUFFICIENT_TEXT_MESSAGE)
    return text
