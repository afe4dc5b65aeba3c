"""Resume Analyzer - calls the model and enforces the JSON analysis contract."""

from __future__ import annotations

import asyncio
import logging

import anthropic
from pydantic import ValidationError

from resume_checker.clients.llm_client import DEFAULT_MODEL, LLMClient
from resume_checker.config import LLMConfig
from resume_checker.errors import InferenceError, InferenceTimeoutError
from resume_checker.models.analysis import AnalysisResult
from resume_checker.utils.json_parser import extract_json_object

logger = logging.getLogger(__name__)


def parse_analysis(raw: str) -> AnalysisResult:
    """Recover an AnalysisResult from raw model text.

    Raises:
        InferenceError: no JSON object could be recovered, or it does not
            match the analysis shape.
    """
    try:
        data = extract_json_object(raw)
    except ValueError as e:
        logger.error("Model did not return valid JSON: %s (response: %.200r)", e, raw)
        raise InferenceError(str(e)) from e

    if not isinstance(data, dict):
        raise InferenceError(f"Expected JSON object from model, got {type(data).__name__}")

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        logger.error("Model JSON does not match analysis shape: %s", e)
        raise InferenceError("model returned an invalid analysis object") from e


class ResumeAnalyzer:
    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        *,
        timeout: float | None = 60,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_config(cls, llm: LLMClient, config: LLMConfig) -> ResumeAnalyzer:
        return cls(
            llm,
            model=config.model,
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    async def infer(self, prompt: str) -> AnalysisResult:
        """Send the prompt once and return the parsed analysis."""
        try:
            response = await asyncio.wait_for(
                self.llm.generate(
                    prompt=prompt,
                    model=self.model,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, anthropic.APITimeoutError) as e:
            raise InferenceTimeoutError(f"model call timed out after {self.timeout}s") from e
        except Exception as e:
            raise InferenceError(f"model call failed: {e}") from e

        return parse_analysis(response.text)
