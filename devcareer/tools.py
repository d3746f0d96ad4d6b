"""
AI tool services backed by Gemini.

Each tool builds a prompt, asks Gemini and parses the JSON answer. An
answer that cannot be parsed is replaced by a fixed placeholder document so
the client always gets the expected keys; upstream failures raise
AIServiceError.
"""
from __future__ import annotations

import re
from typing import Any

from devcareer import prompts
from devcareer.config import logger
from devcareer.core import AnalysisOutcome, ComplexityAnalyzer
from devcareer.gemini_provider import (
    AIServiceError,
    GeminiProvider,
    Success,
    extract_json,
)


MIN_GENERATED_CODE_LENGTH = 10

_CODE_CLEANUP_PATTERNS = [
    (re.compile(r"```[\s\S]*?\n"), ""),
    (re.compile(r"```[\s\S]*$"), ""),
    (re.compile(r"^(javascript|js|python|py|java|cpp|csharp|php|ruby|go|rust|swift)\s*\n?", re.IGNORECASE), ""),
    (re.compile(r"/\*[\s\S]*?\*/"), ""),
    (re.compile(r"//.*$", re.MULTILINE), ""),
]


def clean_generated_code(text: str) -> str:
    """Strip markdown fences, a leading language tag and C-style comments."""
    for pattern, replacement in _CODE_CLEANUP_PATTERNS:
        text = pattern.sub(replacement, text)
    return text.strip()


def resume_analysis_placeholder() -> dict[str, Any]:
    unable = "Unable to analyze"
    return {
        "atsScore": "Unable to parse",
        "strengths": ["Analysis completed but format error occurred"],
        "weaknesses": ["Please check the response format"],
        "suggestions": ["Try again or contact support"],
        "keywords": [],
        "missingKeywords": [],
        "sectionAnalysis": {
            "contactInfo": unable,
            "summary": unable,
            "experience": unable,
            "education": unable,
            "skills": unable,
            "formatting": unable,
        },
        "industryRecommendations": ["Analysis completed but there was a formatting issue"],
        "overallAssessment": "Analysis completed but there was a formatting issue with the response.",
    }


def interview_questions_placeholder(job_title: str) -> dict[str, Any]:
    return {
        "technical": [
            {
                "question": f"Tell me about a challenging technical problem you solved as a {job_title}.",
                "difficulty": "medium",
                "category": "problem solving",
                "expectedAnswer": "Problem identification, solution approach, implementation details and results",
                "followUpQuestions": ["What alternatives did you consider?", "How did you measure success?"],
            }
        ],
        "behavioral": [
            {
                "question": "Describe a situation where you had to work with a difficult team member on a critical project.",
                "focus": "conflict resolution and teamwork",
                "starMethod": "Situation, Task, Action, Result",
                "redFlags": ["blaming others", "no resolution"],
                "greenFlags": ["collaborative approach", "learning experience"],
            }
        ],
        "projectBased": [],
        "systemDesign": [],
        "coding": [],
        "tips": [
            {
                "category": "Technical Preparation",
                "tip": "Review the specific technologies mentioned in your resume thoroughly",
                "reasoning": "Interviewers will dive deep into technologies you claim to know",
            }
        ],
        "redFlags": [],
        "preparation": [],
    }


def code_review_placeholder() -> dict[str, Any]:
    return {
        "overallScore": "Unable to parse",
        "strengths": ["Code review completed but format error occurred"],
        "issues": [],
        "securityConcerns": [],
        "performanceTips": [],
        "bestPractices": [],
        "overallFeedback": "Code review completed but there was a formatting issue with the response.",
    }


def algorithm_explanation_placeholder(algorithm_name: str) -> dict[str, Any]:
    return {
        "name": algorithm_name,
        "description": "Algorithm explanation completed but format error occurred",
        "howItWorks": "Please try again or contact support",
        "pseudocode": "",
        "timeComplexity": "Unable to parse",
        "spaceComplexity": "Unable to parse",
        "useCases": [],
        "advantages": [],
        "disadvantages": [],
        "example": "Explanation completed but there was a formatting issue with the response.",
    }


def roadmap_placeholder(domain: str, experience_level: str) -> dict[str, Any]:
    return {
        "domain": domain,
        "experienceLevel": experience_level,
        "estimatedDuration": "Unable to parse",
        "overview": "Roadmap generation completed but format error occurred",
        "prerequisites": ["Please try again or contact support"],
        "phases": [],
        "advancedTopics": [],
        "careerPaths": [],
        "tips": [],
        "tools": [],
        "communities": [],
    }


def ats_resume_placeholder(original_resume: str) -> dict[str, Any]:
    return {
        "improvedResume": original_resume,
        "changesMade": [
            {
                "section": "General",
                "originalText": "Resume optimization failed",
                "improvedText": "Please try again or contact support",
                "reason": "Format parsing error occurred",
            }
        ],
        "atsOptimization": {
            "keywordDensity": "Unable to analyze",
            "formattingScore": "0",
            "readabilityScore": "0",
            "improvements": ["Please try again or contact support"],
            "estimatedATSScore": "0",
        },
        "summary": "Resume optimization completed but there was a formatting issue with the response.",
    }


class AIToolService:
    """Gemini-backed implementations of the AI tools."""

    def __init__(self, provider: GeminiProvider):
        self._provider = provider
        self._complexity = ComplexityAnalyzer(provider)

    @property
    def available(self) -> bool:
        return self._provider.available

    @property
    def model_name(self) -> str:
        return self._provider.model_name

    async def _complete(self, tool: str, prompt: str) -> str:
        result = await self._provider.generate(prompt, system_instruction=prompts.SYSTEM_INSTRUCTION)
        if not isinstance(result, Success):
            logger.error("%s failed: %s", tool, result.reason)
            raise AIServiceError.from_failure(result)
        return result.text

    async def _complete_json(self, tool: str, prompt: str, placeholder: dict[str, Any]) -> dict[str, Any]:
        text = await self._complete(tool, prompt)
        try:
            return extract_json(text)
        except ValueError as exc:
            logger.error("%s returned unparseable JSON: %s", tool, str(exc)[:200])
            return placeholder

    async def generate_code(self, problem_statement: str, language: str) -> str:
        text = await self._complete(
            "Code generation",
            prompts.build_code_generation_prompt(problem_statement, language),
        )
        code = clean_generated_code(text)
        if len(code) < MIN_GENERATED_CODE_LENGTH:
            return (
                "// Code generation failed. Please try again with a more specific problem statement.\n"
                f"// Problem: {problem_statement}\n"
                f"// Language: {language}"
            )
        return code

    async def analyze_resume(self, resume_text: str) -> dict[str, Any]:
        return await self._complete_json(
            "Resume analysis",
            prompts.build_resume_analysis_prompt(resume_text),
            resume_analysis_placeholder(),
        )

    async def generate_interview_questions(self, resume_text: str, job_title: str) -> dict[str, Any]:
        return await self._complete_json(
            "Interview question generation",
            prompts.build_interview_questions_prompt(resume_text, job_title),
            interview_questions_placeholder(job_title),
        )

    async def review_code(self, code: str, language: str) -> dict[str, Any]:
        return await self._complete_json(
            "Code review",
            prompts.build_code_review_prompt(code, language),
            code_review_placeholder(),
        )

    async def explain_algorithm(self, algorithm_name: str, depth: str) -> dict[str, Any]:
        return await self._complete_json(
            "Algorithm explanation",
            prompts.build_algorithm_explanation_prompt(algorithm_name, depth),
            algorithm_explanation_placeholder(algorithm_name),
        )

    async def generate_roadmap(
        self, domain: str, experience_level: str, focus_areas: list[str]
    ) -> dict[str, Any]:
        return await self._complete_json(
            "Roadmap generation",
            prompts.build_roadmap_prompt(domain, experience_level, focus_areas),
            roadmap_placeholder(domain, experience_level),
        )

    async def generate_ats_resume(
        self, original_resume: str, analysis: dict[str, Any], target_job_title: str
    ) -> dict[str, Any]:
        return await self._complete_json(
            "ATS resume generation",
            prompts.build_ats_resume_prompt(original_resume, analysis, target_job_title),
            ats_resume_placeholder(original_resume),
        )

    async def analyze_complexity(self, code: str, language: str) -> AnalysisOutcome:
        return await self._complexity.analyze(code, language)
