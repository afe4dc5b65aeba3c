"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from resume_checker.clients.llm_client import LLMClient, LLMResponse
from resume_checker.models.analysis import AnalysisResult
from resume_checker.models.extraction import Provenance, StageResult


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane.doe@example.com | +1 555 010 2030 | github.com/janedoe

Education:
- B.Tech Computer Science, State University (2020 - 2024), CGPA 8.4

Projects:
- Task tracker web app (React, Node.js, MongoDB) with JWT auth
- CLI weather tool in Python using a public REST API

Skills:
- Python, JavaScript, SQL
- React, Express, Git
"""


@pytest.fixture
def sample_analysis_json() -> dict:
    return {
        "atsScore": 72,
        "strengths": ["clear formatting", "relevant projects"],
        "weakAreas": ["no internships"],
        "missingSkills": ["Docker", "unit testing"],
        "projectGaps": ["no deployed project links"],
        "quickFixes": ["add GitHub links to each project"],
        "oneLineVerdict": "Solid fresher resume.",
    }


@pytest.fixture
def sample_analysis(sample_analysis_json) -> AnalysisResult:
    return AnalysisResult.model_validate(sample_analysis_json)


@pytest.fixture
def mock_llm_client(sample_analysis_json) -> LLMClient:
    """Create a mock LLM client that answers with the sample analysis."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(
            text=json.dumps(sample_analysis_json), input_tokens=100, output_tokens=50
        )
    )
    return client


@pytest.fixture
def make_pdf():
    """Build an in-memory PDF; each string in ``pages`` becomes one page."""
    import fitz

    def _make(*pages: str) -> bytes:
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text, fontsize=11)
        data = doc.tobytes()
        doc.close()
        return data

    return _make


@pytest.fixture
def text_stage():
    """Factory for a stage callable that returns fixed text and records calls."""

    def _make(stage: Provenance, text: str):
        calls = []

        def _stage(data, *args):
            calls.append((data, args))
            return StageResult.from_text(stage, text)

        _stage.calls = calls
        return _stage

    return _make
