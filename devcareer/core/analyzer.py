"""
Code complexity analyzer.

Asks Gemini first and substitutes the heuristic report when Gemini is
rate-limited, unavailable, unconfigured or returns an unusable document.
"""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from devcareer.config import logger
from devcareer.gemini_provider import (
    AIServiceError,
    GeminiProvider,
    Success,
    TransientFailure,
    extract_json,
)
from devcareer.prompts import SYSTEM_INSTRUCTION, build_complexity_prompt

from .fallback import analyze_fallback
from .models import ComplexityReport


@dataclass(frozen=True)
class AnalysisOutcome:
    report: ComplexityReport
    is_fallback: bool


class ComplexityAnalyzer:
    """
    Code complexity analyzer using Gemini with a heuristic fallback.
    """

    def __init__(self, provider: GeminiProvider):
        self._provider = provider

    async def analyze(self, code: str, language: str) -> AnalysisOutcome:
        """
        Analyze code complexity.

        Args:
            code: Source code (non-blank, validated by the caller)
            language: Language tag, used for display only

        Returns:
            AnalysisOutcome with the report and whether it is heuristic

        Raises:
            AIServiceError: If Gemini failed for a non-transient reason
        """
        if not self._provider.available:
            logger.warning("Gemini unavailable, using fallback complexity analysis")
            return AnalysisOutcome(analyze_fallback(code, language), is_fallback=True)

        result = await self._provider.generate(
            build_complexity_prompt(code, language),
            system_instruction=SYSTEM_INSTRUCTION,
        )

        if isinstance(result, TransientFailure):
            logger.warning(
                "Gemini temporarily unavailable (%s), using fallback complexity analysis",
                result.reason,
            )
            return AnalysisOutcome(analyze_fallback(code, language), is_fallback=True)

        if not isinstance(result, Success):
            raise AIServiceError.from_failure(result)

        try:
            report = ComplexityReport.model_validate(extract_json(result.text))
        except (ValueError, ValidationError) as exc:
            logger.error("Unusable complexity analysis from Gemini: %s", str(exc)[:200])
            return AnalysisOutcome(analyze_fallback(code, language), is_fallback=True)

        return AnalysisOutcome(report, is_fallback=False)
