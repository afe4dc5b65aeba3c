"""Extraction stage results and the final extracted text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Provenance(str, Enum):
    STRUCTURED = "structured-parse"
    VISUAL = "visual-fallback"
    NONE = "none"


class StageStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class StageResult:
    """Outcome of a single extraction stage."""

    stage: Provenance
    status: StageStatus
    text: str = ""
    error: str | None = None

    @classmethod
    def from_text(cls, stage: Provenance, text: str) -> StageResult:
        text = (text or "").strip()
        status = StageStatus.SUCCESS if text else StageStatus.EMPTY
        return cls(stage=stage, status=status, text=text)

    @classmethod
    def failed(cls, stage: Provenance, error: str) -> StageResult:
        return cls(stage=stage, status=StageStatus.FAILED, error=error)

    @classmethod
    def timed_out(cls, stage: Provenance, timeout: float) -> StageResult:
        return cls(
            stage=stage,
            status=StageStatus.TIMED_OUT,
            error=f"timed out after {timeout:g}s",
        )

    @property
    def ok(self) -> bool:
        return self.status is StageStatus.SUCCESS


@dataclass(frozen=True)
class ExtractedText:
    """Best available transcription of a document, tagged with its source stage."""

    text: str
    provenance: Provenance
    stages: tuple[StageResult, ...] = ()

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def timed_out(self) -> bool:
        return any(s.status is StageStatus.TIMED_OUT for s in self.stages)
