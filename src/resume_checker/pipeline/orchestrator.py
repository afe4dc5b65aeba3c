"""Main pipeline orchestrator - extract, prompt, analyze."""

from __future__ import annotations

import logging
import time

from resume_checker.clients.llm_client import LLMClient
from resume_checker.config import DEFAULT_TARGET_ROLE, AppConfig, ExtractionConfig
from resume_checker.errors import (
    ExtractionError,
    ExtractionTimeoutError,
    InputError,
    ResumeCheckError,
    UnexpectedError,
)
from resume_checker.models.response import ResponsePayload
from resume_checker.parsers.extractor import DocumentExtractor
from resume_checker.pipeline.analyzer import ResumeAnalyzer
from resume_checker.pipeline.prompt_builder import build_prompt

logger = logging.getLogger(__name__)


class ResumeAnalysisPipeline:
    """Runs one upload through extraction and model analysis."""

    def __init__(
        self,
        extractor: DocumentExtractor,
        analyzer: ResumeAnalyzer,
        *,
        min_chars: int = ExtractionConfig.min_chars,
        default_target_role: str = DEFAULT_TARGET_ROLE,
    ):
        self.extractor = extractor
        self.analyzer = analyzer
        self.min_chars = min_chars
        self.default_target_role = default_target_role

    async def handle_upload(
        self,
        file_bytes: bytes | None,
        file_name: str | None,
        target_role: str | None = None,
    ) -> ResponsePayload:
        """Analyze an uploaded resume.

        Args:
            file_bytes: Raw document bytes, None when no file was sent.
            file_name: Original file name, echoed in the response.
            target_role: Role to evaluate against; blank falls back to the default.

        Raises:
            InputError: No document bytes.
            ExtractionError: Fewer than ``min_chars`` characters recovered.
            InferenceError: Model call failed or returned unusable output.
            UnexpectedError: Anything else.
        """
        start = time.monotonic()
        try:
            if not file_bytes:
                raise InputError("no file uploaded")

            role = (target_role or "").strip() or self.default_target_role

            extracted = await self.extractor.extract(file_bytes)
            logger.info(
                "Extracted %d chars from %s via %s",
                extracted.length, file_name, extracted.provenance.value,
            )
            if extracted.length < self.min_chars:
                error_cls = ExtractionTimeoutError if extracted.timed_out else ExtractionError
                raise error_cls(
                    f"extracted {extracted.length} chars, need at least {self.min_chars}"
                )

            prompt = build_prompt(extracted.text, role)
            logger.info("Sending to model (role=%r)...", role)
            analysis = await self.analyzer.infer(prompt)

            payload = ResponsePayload(
                target_role=role,
                file_name=file_name,
                extracted_chars=extracted.length,
                analysis=analysis,
            )
        except ResumeCheckError as e:
            logger.warning("Upload rejected (%s): %s", type(e).__name__, e)
            raise
        except Exception as e:
            logger.exception("Unexpected pipeline failure")
            raise UnexpectedError(str(e)) from e

        logger.info("Analysis done in %.1fs", time.monotonic() - start)
        return payload


def error_response(exc: BaseException) -> tuple[int, dict]:
    """Map a pipeline error to an HTTP status and ``{"error": ...}`` body."""
    if isinstance(exc, ResumeCheckError):
        return exc.status_code, {"error": exc.public_message}
    return UnexpectedError.status_code, {"error": UnexpectedError.public_message}


def create_pipeline(config: AppConfig, api_key: str | None = None) -> ResumeAnalysisPipeline:
    """Build a pipeline from configuration and the provider credential."""
    llm = LLMClient(api_key=api_key, timeout=config.llm.timeout)
    return ResumeAnalysisPipeline(
        DocumentExtractor.from_config(config.extraction),
        ResumeAnalyzer.from_config(llm, config.llm),
        min_chars=config.extraction.min_chars,
        default_target_role=config.pipeline.default_target_role,
    )
