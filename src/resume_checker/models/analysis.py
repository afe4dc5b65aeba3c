"""Pydantic models for the resume analysis returned by the model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalysisResult(BaseModel):
    ats_score: int | float = Field(alias="atsScore")  # 0-100 by convention, not enforced
    strengths: list[str]
    weak_areas: list[str] = Field(alias="weakAreas")
    missing_skills: list[str] = Field(alias="missingSkills")
    project_gaps: list[str] = Field(alias="projectGaps")
    quick_fixes: list[str] = Field(alias="quickFixes")
    one_line_verdict: str = Field(alias="oneLineVerdict")

    model_config = ConfigDict(populate_by_name=True, strict=True)
