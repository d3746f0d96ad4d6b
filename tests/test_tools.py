"""Tests for the Gemini-backed AI tool service."""

from __future__ import annotations

import pytest

from devcareer.gemini_provider import AIServiceError, FatalFailure, Success, TransientFailure
from devcareer.tools import (
    AIToolService,
    ats_resume_placeholder,
    clean_generated_code,
    interview_questions_placeholder,
    resume_analysis_placeholder,
)
from tests.helpers import FakeProvider


RESUME = "Jane Doe\nSoftware Engineer with five years of Python, FastAPI and Redis experience."


class TestCleanGeneratedCode:
    def test_strips_fences_and_comments(self) -> None:
        text = "```javascript\n// add numbers\nfunction add(a, b) { return a + b; }\n```"
        assert clean_generated_code(text) == "function add(a, b) { return a + b; }"

    def test_strips_block_comments(self) -> None:
        text = "/* helper */\nconst x = 1;"
        assert clean_generated_code(text) == "const x = 1;"

    def test_strips_leading_language_tag(self) -> None:
        assert clean_generated_code("python\nprint('hi')") == "print('hi')"

    def test_plain_code_untouched(self) -> None:
        assert clean_generated_code("  x = [i for i in range(3)]  ") == "x = [i for i in range(3)]"


class TestGenerateCode:
    @pytest.mark.asyncio
    async def test_returns_cleaned_code(self) -> None:
        provider = FakeProvider(Success("```javascript\n// add numbers\nfunction add(a, b) { return a + b; }\n```"))

        code = await AIToolService(provider).generate_code("Add two numbers together", "javascript")

        assert code == "function add(a, b) { return a + b; }"
        assert "Add two numbers together" in provider.prompts[0]

    @pytest.mark.asyncio
    async def test_short_output_replaced_with_notice(self) -> None:
        provider = FakeProvider(Success("```\nx\n```"))

        code = await AIToolService(provider).generate_code("Reverse a linked list", "python")

        assert code.startswith("// Code generation failed")
        assert "// Problem: Reverse a linked list" in code
        assert code.endswith("// Language: python")

    @pytest.mark.asyncio
    async def test_failure_raises(self) -> None:
        provider = FakeProvider(TransientFailure("busy", status_code=429))

        with pytest.raises(AIServiceError) as exc_info:
            await AIToolService(provider).generate_code("Reverse a linked list", "python")

        assert exc_info.value.transient


class TestJsonTools:
    @pytest.mark.asyncio
    async def test_resume_analysis_parsed(self) -> None:
        provider = FakeProvider(Success('{"atsScore": "82", "strengths": ["Clear"]}'))

        analysis = await AIToolService(provider).analyze_resume(RESUME)

        assert analysis == {"atsScore": "82", "strengths": ["Clear"]}

    @pytest.mark.asyncio
    async def test_resume_analysis_placeholder_on_bad_json(self) -> None:
        provider = FakeProvider(Success("not json"))

        analysis = await AIToolService(provider).analyze_resume(RESUME)

        assert analysis == resume_analysis_placeholder()

    @pytest.mark.asyncio
    async def test_interview_placeholder_uses_job_title(self) -> None:
        provider = FakeProvider(Success("no json here"))

        questions = await AIToolService(provider).generate_interview_questions(RESUME, "Data Engineer")

        assert questions == interview_questions_placeholder("Data Engineer")
        assert "Data Engineer" in questions["technical"][0]["question"]

    @pytest.mark.asyncio
    async def test_ats_placeholder_keeps_original_resume(self) -> None:
        provider = FakeProvider(Success("garbled"))

        resume = await AIToolService(provider).generate_ats_resume(RESUME, {"atsScore": "60"}, "Backend Engineer")

        assert resume == ats_resume_placeholder(RESUME)
        assert resume["improvedResume"] == RESUME

    @pytest.mark.asyncio
    async def test_roadmap_prompt_includes_focus_areas(self) -> None:
        provider = FakeProvider(Success('{"domain": "Web Development"}'))

        await AIToolService(provider).generate_roadmap("Web Development", "beginner", ["React", "CSS"])

        assert "React" in provider.prompts[0]
        assert "CSS" in provider.prompts[0]

    @pytest.mark.asyncio
    async def test_fatal_failure_raises(self) -> None:
        provider = FakeProvider(FatalFailure("Gemini API Error: 400 - bad"))

        with pytest.raises(AIServiceError) as exc_info:
            await AIToolService(provider).review_code("def add(a, b):\n    return a + b", "python")

        assert not exc_info.value.transient

    @pytest.mark.asyncio
    async def test_explain_algorithm(self) -> None:
        provider = FakeProvider(Success('{"name": "Dijkstra"}'))

        explanation = await AIToolService(provider).explain_algorithm("Dijkstra", "simple")

        assert explanation == {"name": "Dijkstra"}
        assert "Dijkstra" in provider.prompts[0]


class TestServiceAvailability:
    def test_reflects_provider(self) -> None:
        assert AIToolService(FakeProvider()).available
        assert not AIToolService(FakeProvider(available=False)).available

    def test_model_name_from_provider(self) -> None:
        assert AIToolService(FakeProvider()).model_name == "fake-model"
