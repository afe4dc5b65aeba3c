"""Response payload assembled once per upload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from resume_checker.models.analysis import AnalysisResult


class ResponsePayload(BaseModel):
    target_role: str = Field(alias="targetRole")
    file_name: str | None = Field(alias="fileName")
    extracted_chars: int = Field(alias="extractedChars")
    analysis: AnalysisResult

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
