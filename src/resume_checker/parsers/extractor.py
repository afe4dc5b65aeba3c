"""Two-stage document text extraction: structured parse, then OCR."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from resume_checker.config import ExtractionConfig
from resume_checker.models.extraction import (
    ExtractedText,
    Provenance,
    StageResult,
)
from resume_checker.parsers.ocr import recognize_text
from resume_checker.parsers.structured import parse_structured

logger = logging.getLogger(__name__)


class DocumentExtractor:
    """Recover plain text from document bytes.

    The structured parser runs first. OCR runs only when the structured stage
    failed or produced no text, and is bounded by ``ocr_timeout`` seconds.
    ``extract`` never raises; an unreadable document yields empty text with
    provenance ``none``.
    """

    def __init__(
        self,
        *,
        ocr_language: str = "eng",
        ocr_timeout: float | None = 90,
        ocr_dpi: int = 200,
        structured_parser: Callable[[bytes], StageResult] = parse_structured,
        recognizer: Callable[[bytes, str, int], StageResult] = recognize_text,
    ):
        self.ocr_language = ocr_language
        self.ocr_timeout = ocr_timeout
        self.ocr_dpi = ocr_dpi
        self._structured_parser = structured_parser
        self._recognizer = recognizer

    @classmethod
    def from_config(cls, config: ExtractionConfig) -> DocumentExtractor:
        return cls(
            ocr_language=config.ocr_language,
            ocr_timeout=config.ocr_timeout,
            ocr_dpi=config.ocr_dpi,
        )

    async def extract(self, data: bytes) -> ExtractedText:
        logger.info("Extracting text from document (%d bytes)...", len(data))
        structured = await asyncio.to_thread(self._structured_parser, data)
        if structured.ok:
            return ExtractedText(
                text=structured.text,
                provenance=Provenance.STRUCTURED,
                stages=(structured,),
            )

        logger.info("Structured parse %s, falling back to OCR", structured.status.value)
        visual = await self._recognize(data)
        stages = (structured, visual)
        if visual.ok:
            return ExtractedText(text=visual.text, provenance=Provenance.VISUAL, stages=stages)

        logger.warning("No text recovered from document (ocr: %s)", visual.status.value)
        return ExtractedText(text="", provenance=Provenance.NONE, stages=stages)

    async def _recognize(self, data: bytes) -> StageResult:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._recognizer, data, self.ocr_language, self.ocr_dpi),
                timeout=self.ocr_timeout,
            )
        except asyncio.TimeoutError:
            logger.error("OCR timed out after %ss", self.ocr_timeout)
            return StageResult.timed_out(Provenance.VISUAL, self.ocr_timeout)
