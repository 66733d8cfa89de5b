import io
from collections.abc import Callable
from pathlib import PurePath

import pdfplumber
from docx import Document

from resumatch.core.exceptions import ExtractionError


def extract_text_from_pdf(data: bytes) -> str:
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n\n".join(pages).strip()
    except Exception as e:
        raise ExtractionError(f"PDF extraction failed: {e}") from e


def extract_text_from_docx(data: bytes) -> str:
    try:
        doc = Document(io.BytesIO(data))
        return "\n\n".join(para.text for para in doc.paragraphs if para.text.strip())
    except Exception as e:
        raise ExtractionError(f"DOCX extraction failed: {e}") from e


def extract_text_from_txt(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


EXTRACTORS: dict[str, Callable[[bytes], str]] = {
    ".pdf": extract_text_from_pdf,
    ".docx": extract_text_from_docx,
    ".txt": extract_text_from_txt,
}


def extract_text(filename: str, data: bytes) -> str:
    """Pull plain text out of an uploaded resume.

    Known binary formats go through their extractor; anything else is read
    as text, the way a browser reads a dropped plain-text file.
    """
    suffix = PurePath(filename).suffix.lower()
    extractor = EXTRACTORS.get(suffix, extract_text_from_txt)
    text = extractor(data)
    if not text.strip():
        raise ExtractionError(f"No text could be extracted from {filename}")
    return text
