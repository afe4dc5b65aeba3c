"""Data models for the resume analysis pipeline."""

from resume_checker.models.analysis import AnalysisResult
from resume_checker.models.extraction import (
    ExtractedText,
    Provenance,
    StageResult,
    StageStatus,
)
from resume_checker.models.response import ResponsePayload

__all__ = [
    "AnalysisResult",
    "ExtractedText",
    "Provenance",
    "ResponsePayload",
    "StageResult",
    "StageStatus",
]
