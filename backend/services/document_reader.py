import io
import logging
from pathlib import PurePath

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = frozenset({".pdf"})
DOCX_EXTENSIONS = frozenset({".docx", ".doc"})
TEXT_EXTENSIONS = frozenset({".txt", ".text"})
SUPPORTED_EXTENSIONS = PDF_EXTENSIONS | DOCX_EXTENSIONS | TEXT_EXTENSIONS

MIN_USEFUL_CHARS = 50
LOW_TEXT_WARNING = (
    "Very little text was extracted - the file may be image-based or have "
    "unusual formatting. Try pasting the text directly."
)


class UnsupportedFileType(ValueError):
    """Raised for uploads that are not PDF, DOCX or plain text."""


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_plain(raw_bytes: bytes) -> str:
    return raw_bytes.decode("utf-8", errors="replace").strip()


def file_extension(filename: str) -> str:
    return PurePath(filename).suffix.lower()


def read_resume_file(filename: str, content: bytes) -> tuple[str, list[str]]:
    """Turn an uploaded resume into text plus reader warnings.

    Raises UnsupportedFileType for unknown extensions. Decoding errors from
    pdfplumber / python-docx propagate to the caller.
    """
    ext = file_extension(filename)
    if ext in PDF_EXTENSIONS:
        text = extract_text(content)
    elif ext in DOCX_EXTENSIONS:
        text = extract_text_docx(content)
    elif ext in TEXT_EXTENSIONS:
        text = extract_text_plain(content)
    else:
        raise UnsupportedFileType(
            f"Unsupported file type '{ext or filename}'. Please upload a PDF, DOCX, or TXT file."
        )

    warnings: list[str] = []
    if len(text) < MIN_USEFUL_CHARS:
        logger.warning("Only %d characters extracted from %s", len(text), filename)
        warnings.append(LOW_TEXT_WARNING)
    return text, warnings
