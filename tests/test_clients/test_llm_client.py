"""Tests for LLMClient (Claude API wrapper)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from resume_checker.clients.llm_client import LLMClient, LLMResponse


def _make_api_message(text: str, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = [MagicMock(text=text)]
    return message


class TestLLMClientInit:
    def test_init_default_disables_sdk_retries(self):
        """Creates AsyncAnthropic with retries disabled and nothing else."""
        with patch("resume_checker.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient()
            mock_cls.assert_called_once_with(max_retries=0)

    def test_init_with_api_key_passes_key(self):
        """Passes api_key kwarg when provided."""
        with patch("resume_checker.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key")
            mock_cls.assert_called_once_with(max_retries=0, api_key="test-key")

    def test_init_with_timeout_passes_timeout(self):
        """Passes timeout kwarg when provided."""
        with patch("resume_checker.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(timeout=30.0)
            mock_cls.assert_called_once_with(max_retries=0, timeout=30.0)


class TestLLMClientGenerate:
    async def test_generate_returns_llm_response(self):
        """generate() wraps API response fields into an LLMResponse dataclass."""
        with patch("resume_checker.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(
                return_value=_make_api_message("hello world", input_tokens=100, output_tokens=50)
            )
            mock_cls.return_value = mock_client

            llm = LLMClient()
            result = await llm.generate("say hello")

        assert isinstance(result, LLMResponse)
        assert result.text == "hello world"
        assert result.input_tokens == 100
        assert result.output_tokens == 50

    async def test_generate_sends_single_user_message(self):
        with patch("resume_checker.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=_make_api_message("{}"))
            mock_cls.return_value = mock_client

            llm = LLMClient()
            await llm.generate("analyze", model="test-model", max_tokens=100)

        mock_client.messages.create.assert_awaited_once()
        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["max_tokens"] == 100
        assert kwargs["messages"] == [{"role": "user", "content": "analyze"}]
        assert "system" not in kwargs

    async def test_generate_passes_system_prompt(self):
        with patch("resume_checker.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=_make_api_message("{}"))
            mock_cls.return_value = mock_client

            llm = LLMClient()
            await llm.generate("analyze", system="You are an API.")

        assert mock_client.messages.create.call_args.kwargs["system"] == "You are an API."

    async def test_generate_propagates_api_errors(self):
        """API failures are re-raised after logging, without another attempt."""
        with patch("resume_checker.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(side_effect=RuntimeError("quota exceeded"))
            mock_cls.return_value = mock_client

            llm = LLMClient()
            with pytest.raises(RuntimeError, match="quota exceeded"):
                await llm.generate("analyze")

        assert mock_client.messages.create.await_count == 1
