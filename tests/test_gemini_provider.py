"""Tests for the Gemini provider wrapper."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import errors

from devcareer.config import GeminiConfig
from devcareer.gemini_provider import (
    AIServiceError,
    FatalFailure,
    GeminiProvider,
    Success,
    TransientFailure,
    classify_api_error,
    extract_json,
)


CONFIG = GeminiConfig(
    api_key="test-key",
    model="gemini-test",
    temperature=0.4,
    max_tokens=1024,
    timeout_seconds=5.0,
)


def _api_error(cls, code: int, status: str, message: str = "upstream said no"):
    return cls(code, {"error": {"code": code, "message": message, "status": status}})


def _provider_with(generate_content: AsyncMock) -> GeminiProvider:
    provider = GeminiProvider.__new__(GeminiProvider)
    provider._config = CONFIG
    provider._client = MagicMock()
    provider._client.aio.models.generate_content = generate_content
    return provider


class TestClassifyApiError:
    def test_503_is_transient(self) -> None:
        failure = classify_api_error(_api_error(errors.ServerError, 503, "UNAVAILABLE", "overloaded"))
        assert isinstance(failure, TransientFailure)
        assert failure.status_code == 503
        assert failure.reason == "Gemini API Error: 503 - overloaded"

    def test_429_is_transient(self) -> None:
        failure = classify_api_error(_api_error(errors.ClientError, 429, "RESOURCE_EXHAUSTED"))
        assert isinstance(failure, TransientFailure)
        assert failure.status_code == 429

    def test_status_alone_marks_transient(self) -> None:
        failure = classify_api_error(_api_error(errors.ServerError, 500, "UNAVAILABLE"))
        assert isinstance(failure, TransientFailure)

    def test_bad_request_is_fatal(self) -> None:
        failure = classify_api_error(_api_error(errors.ClientError, 400, "INVALID_ARGUMENT"))
        assert isinstance(failure, FatalFailure)
        assert failure.status_code == 400

    def test_internal_error_is_fatal(self) -> None:
        failure = classify_api_error(_api_error(errors.ServerError, 500, "INTERNAL"))
        assert isinstance(failure, FatalFailure)


class TestAIServiceError:
    def test_from_transient_failure(self) -> None:
        exc = AIServiceError.from_failure(TransientFailure("busy", status_code=429))
        assert exc.transient
        assert exc.status_code == 429
        assert str(exc) == "busy"

    def test_from_fatal_failure(self) -> None:
        exc = AIServiceError.from_failure(FatalFailure("broken"))
        assert not exc.transient
        assert exc.status_code is None


class TestExtractJson:
    def test_plain_object(self) -> None:
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_fenced_json_block(self) -> None:
        assert extract_json('Here you go:\n```json\n{"a": [1, 2]}\n```\nThanks') == {"a": [1, 2]}

    def test_bare_fence(self) -> None:
        assert extract_json('```\n{"ok": true}\n```') == {"ok": True}

    def test_object_embedded_in_prose(self) -> None:
        assert extract_json('The answer is {"score": 7} as requested.') == {"score": 7}

    def test_top_level_array_rejected(self) -> None:
        with pytest.raises(ValueError):
            extract_json("[1, 2, 3]")

    def test_garbage_rejected(self) -> None:
        with pytest.raises(ValueError, match="Could not extract valid JSON"):
            extract_json("I cannot help with that.")


class TestGeminiProvider:
    def test_unconfigured_provider_is_unavailable(self) -> None:
        provider = GeminiProvider(
            GeminiConfig(api_key="", model="gemini-test", temperature=0.4, max_tokens=10, timeout_seconds=1.0)
        )
        assert not provider.available
        assert provider.model_name == "gemini-test"

    @pytest.mark.asyncio
    async def test_unconfigured_generate_is_fatal(self) -> None:
        provider = GeminiProvider(
            GeminiConfig(api_key="", model="gemini-test", temperature=0.4, max_tokens=10, timeout_seconds=1.0)
        )
        result = await provider.generate("hello")
        assert isinstance(result, FatalFailure)

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        generate_content = AsyncMock(return_value=SimpleNamespace(text='{"a": 1}', candidates=[]))
        provider = _provider_with(generate_content)

        result = await provider.generate("prompt", system_instruction="be brief")

        assert result == Success('{"a": 1}')
        kwargs = generate_content.await_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["config"].system_instruction == "be brief"
        assert kwargs["config"].max_output_tokens == 1024

    @pytest.mark.asyncio
    async def test_service_unavailable_is_transient(self) -> None:
        provider = _provider_with(
            AsyncMock(side_effect=_api_error(errors.ServerError, 503, "UNAVAILABLE"))
        )
        result = await provider.generate("prompt")
        assert isinstance(result, TransientFailure)
        assert result.status_code == 503

    @pytest.mark.asyncio
    async def test_rate_limit_is_transient(self) -> None:
        provider = _provider_with(
            AsyncMock(side_effect=_api_error(errors.ClientError, 429, "RESOURCE_EXHAUSTED"))
        )
        result = await provider.generate("prompt")
        assert isinstance(result, TransientFailure)
        assert result.status_code == 429

    @pytest.mark.asyncio
    async def test_api_errors_are_not_retried(self) -> None:
        generate_content = AsyncMock(side_effect=_api_error(errors.ClientError, 400, "INVALID_ARGUMENT"))
        provider = _provider_with(generate_content)

        result = await provider.generate("prompt")

        assert isinstance(result, FatalFailure)
        assert generate_content.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_text_is_fatal(self) -> None:
        candidate = SimpleNamespace(finish_reason="SAFETY")
        provider = _provider_with(AsyncMock(return_value=SimpleNamespace(text=None, candidates=[candidate])))

        result = await provider.generate("prompt")

        assert result == FatalFailure("Gemini returned an empty response")
