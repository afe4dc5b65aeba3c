"""Structured text-layer parsing for uploaded documents.

Reads the embedded text layer of PDF files (PyMuPDF) and DOCX files
(python-docx). UTF-8 plain text is accepted as-is. The format is sniffed from
the leading bytes since uploads carry no reliable extension.
"""

from __future__ import annotations

import io
import logging

from resume_checker.models.extraction import Provenance, StageResult

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK\x03\x04"


def detect_format(data: bytes) -> str:
    """Return "pdf", "docx", "text" or "unknown" for raw document bytes."""
    head = data[:1024].lstrip()
    if head.startswith(PDF_MAGIC):
        return "pdf"
    if data.startswith(ZIP_MAGIC):
        return "docx"
    if b"\x00" in head:
        return "unknown"
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return "unknown"
    return "text"


def parse_structured(data: bytes) -> StageResult:
    """Extract the text layer of a document.

    Parser errors (corrupt structure, unsupported format) are reported as a
    failed stage, not raised.
    """
    fmt = detect_format(data)
    try:
        if fmt == "pdf":
            text = _parse_pdf(data)
        elif fmt == "docx":
            text = _parse_docx(data)
        elif fmt == "text":
            text = data.decode("utf-8-sig")
        else:
            raise ValueError("Unsupported document format")
    except Exception as e:
        logger.warning("Structured parse failed (%s): %s", fmt, e)
        return StageResult.failed(Provenance.STRUCTURED, str(e))

    result = StageResult.from_text(Provenance.STRUCTURED, text)
    logger.debug("Structured parse (%s): %d chars", fmt, len(result.text))
    return result


def _parse_pdf(data: bytes) -> str:
    import fitz  # pymupdf

    doc = fitz.open(stream=data, filetype="pdf")
    try:
        text = [page.get_text() for page in doc]
    finally:
        doc.close()
    return "\n".join(text)


def _parse_docx(data: bytes) -> str:
    from docx import Document

    doc = Document(io.BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
