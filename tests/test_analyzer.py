"""Tests for the complexity analyzer's primary/fallback selection."""

from __future__ import annotations

import pytest

from devcareer.core import ComplexityAnalyzer, analyze_fallback
from devcareer.gemini_provider import AIServiceError, FatalFailure, Success, TransientFailure
from tests.helpers import BUBBLE_SORT_JS, FakeProvider


def _gemini_report_json() -> str:
    report = analyze_fallback("let x = 1;", "javascript").model_copy(
        update={"overview": "Gemini says this assigns a constant."}
    )
    return report.model_dump_json()


class TestComplexityAnalyzer:
    @pytest.mark.asyncio
    async def test_success_uses_gemini_report(self) -> None:
        provider = FakeProvider(Success(f"```json\n{_gemini_report_json()}\n```"))

        outcome = await ComplexityAnalyzer(provider).analyze(BUBBLE_SORT_JS, "javascript")

        assert not outcome.is_fallback
        assert outcome.report.overview == "Gemini says this assigns a constant."
        assert "javascript" in provider.prompts[0]
        assert "bubbleSort" in provider.prompts[0]

    @pytest.mark.asyncio
    async def test_transient_failure_falls_back(self) -> None:
        provider = FakeProvider(TransientFailure("Gemini API Error: 503 - overloaded", status_code=503))

        outcome = await ComplexityAnalyzer(provider).analyze(BUBBLE_SORT_JS, "javascript")

        assert outcome.is_fallback
        assert outcome.report == analyze_fallback(BUBBLE_SORT_JS, "javascript")

    @pytest.mark.asyncio
    async def test_unavailable_provider_falls_back_without_calling(self) -> None:
        provider = FakeProvider(available=False)

        outcome = await ComplexityAnalyzer(provider).analyze(BUBBLE_SORT_JS, "python")

        assert outcome.is_fallback
        assert provider.prompts == []
        assert "written in python" in outcome.report.overview

    @pytest.mark.asyncio
    async def test_fatal_failure_raises(self) -> None:
        provider = FakeProvider(FatalFailure("Gemini API Error: 400 - bad request", status_code=400))

        with pytest.raises(AIServiceError) as exc_info:
            await ComplexityAnalyzer(provider).analyze(BUBBLE_SORT_JS, "javascript")

        assert not exc_info.value.transient
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_non_json_answer_falls_back(self) -> None:
        provider = FakeProvider(Success("Sorry, I can only answer in prose."))

        outcome = await ComplexityAnalyzer(provider).analyze(BUBBLE_SORT_JS, "javascript")

        assert outcome.is_fallback

    @pytest.mark.asyncio
    async def test_wrong_shape_falls_back(self) -> None:
        provider = FakeProvider(Success('{"overview": "only this"}'))

        outcome = await ComplexityAnalyzer(provider).analyze(BUBBLE_SORT_JS, "javascript")

        assert outcome.is_fallback
        assert outcome.report.algorithmAnalysis.algorithmType == "Sorting Algorithm"
