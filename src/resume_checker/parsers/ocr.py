"""Optical character recognition fallback using Tesseract.

Raster images are passed to Tesseract directly. PDF pages without a text
layer are rendered to PNG with PyMuPDF first.
"""

from __future__ import annotations

import io
import logging

import pytesseract
from PIL import Image

from resume_checker.models.extraction import Provenance, StageResult
from resume_checker.parsers.structured import detect_format

logger = logging.getLogger(__name__)

PDF_DPI = 200


def pdf_to_images(pdf_bytes: bytes, dpi: int = PDF_DPI) -> list[Image.Image]:
    """Render each PDF page to a PIL image."""
    import fitz  # PyMuPDF

    doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    images = []
    try:
        for page in doc:
            mat = fitz.Matrix(dpi / 72, dpi / 72)
            pix = page.get_pixmap(matrix=mat)
            images.append(Image.open(io.BytesIO(pix.tobytes("png"))))
    finally:
        doc.close()
    return images


def recognize_text(data: bytes, language: str = "eng", dpi: int = PDF_DPI) -> StageResult:
    """Run OCR over an image or scanned PDF and return the recognized text."""
    logger.info("Attempting OCR extraction (lang=%s)", language)
    try:
        if detect_format(data) == "pdf":
            images = pdf_to_images(data, dpi=dpi)
        else:
            images = [Image.open(io.BytesIO(data))]

        parts = []
        for i, image in enumerate(images):
            logger.debug("OCR page %d/%d", i + 1, len(images))
            parts.append(pytesseract.image_to_string(image, lang=language))
    except Exception as e:
        logger.error("OCR Error: %s", e)
        return StageResult.failed(Provenance.VISUAL, str(e))

    return StageResult.from_text(Provenance.VISUAL, "\n".join(parts))
