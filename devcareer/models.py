"""
Pydantic request/response models for the AI tools API.
"""
from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from devcareer.config import SUPPORTED_LANGUAGES, settings
from devcareer.core.models import ComplexityReport


Language = Literal[SUPPORTED_LANGUAGES]


def _require_text(v: str, min_length: int, max_length: int, label: str) -> str:
    v = v.strip()
    if not min_length <= len(v) <= max_length:
        raise ValueError(f"{label} must be between {min_length} and {max_length} characters")
    return v


class CodeGenerationRequest(BaseModel):
    problemStatement: str = Field(..., description="Problem to solve")
    language: Language = Field(default="javascript")

    @field_validator("problemStatement")
    @classmethod
    def validate_problem_statement(cls, v: str) -> str:
        return _require_text(v, 10, 2000, "Problem statement")


class ResumeAnalysisRequest(BaseModel):
    resumeText: str = Field(..., description="Plain-text resume")

    @field_validator("resumeText")
    @classmethod
    def validate_resume_text(cls, v: str) -> str:
        return _require_text(v, 50, 10_000, "Resume text")


class InterviewQuestionsRequest(ResumeAnalysisRequest):
    jobTitle: str = Field(default="Software Engineer")

    @field_validator("jobTitle")
    @classmethod
    def validate_job_title(cls, v: str) -> str:
        return _require_text(v, 2, 100, "Job title")


class CodeRequest(BaseModel):
    """Request payload for code review and complexity analysis."""

    code: str = Field(..., description="Source code to analyze")
    language: Language = Field(default="javascript")

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Code cannot be empty or whitespace only")
        _require_text(v, 10, settings.MAX_CODE_LENGTH, "Code")
        if re.search(r"(.)\1{500,}", v):
            raise ValueError("Invalid code content detected")
        return v


class AlgorithmExplanationRequest(BaseModel):
    algorithmName: str
    complexity: Literal["simple", "detailed", "advanced"] = Field(default="detailed")

    @field_validator("algorithmName")
    @classmethod
    def validate_algorithm_name(cls, v: str) -> str:
        return _require_text(v, 2, 100, "Algorithm name")


class RoadmapRequest(BaseModel):
    domain: str
    experienceLevel: Literal["beginner", "intermediate", "advanced"] = Field(default="beginner")
    focusAreas: list[str] = Field(default_factory=list)

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        return _require_text(v, 2, 100, "Domain")


class ATSResumeRequest(BaseModel):
    originalResume: str
    analysis: dict[str, Any] = Field(..., description="Output of a previous resume analysis")
    targetJobTitle: str = Field(default="Software Engineer")

    @field_validator("originalResume")
    @classmethod
    def validate_original_resume(cls, v: str) -> str:
        return _require_text(v, 50, 10_000, "Original resume")

    @field_validator("targetJobTitle")
    @classmethod
    def validate_target_job_title(cls, v: str) -> str:
        return _require_text(v, 2, 100, "Target job title")


class ToolResponse(BaseModel):
    success: bool = True
    message: str
    data: Any


class CodeGenerationData(BaseModel):
    code: str
    language: str
    problemStatement: str


class ComplexityResponse(BaseModel):
    success: bool = True
    message: str
    data: ComplexityReport
    isFallback: bool = False


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
