"""
Prompt templates for the AI tools.
"""
from __future__ import annotations

import json
from typing import Any


SYSTEM_INSTRUCTION = """You are an expert software engineer, technical interviewer and career advisor.

## CRITICAL RULES:
1. When a JSON format is requested, respond with ONLY valid JSON - no markdown, no explanations
2. Follow the requested schema exactly, keeping every key
3. Be specific and actionable; avoid generic advice
4. Use standard Big-O notation: O(1), O(log n), O(n), O(n log n), O(n²), O(2ⁿ)
"""

JSON_ONLY = "Return only the JSON response without any additional text."


def build_code_generation_prompt(problem_statement: str, language: str) -> str:
    return f"""You are an expert {language} developer. Generate clean, efficient code for the following problem:

Problem: {problem_statement}

Requirements:
1. Use the {language} programming language
2. Include proper error handling
3. Follow best practices and make the code production-ready
4. Do NOT include comments, documentation, example usage, tests or explanatory text

Return ONLY the pure, executable code."""


def build_resume_analysis_prompt(resume_text: str) -> str:
    return f"""Analyze the following resume as an ATS (Applicant Tracking System) analyst and career advisor.

Resume Content:
{resume_text}

Respond in this JSON format:
{{
  "atsScore": "score out of 100",
  "strengths": ["list of strengths"],
  "weaknesses": ["list of areas for improvement"],
  "suggestions": ["specific suggestions for improvement"],
  "keywords": ["relevant keywords found"],
  "missingKeywords": ["important keywords that are missing"],
  "sectionAnalysis": {{
    "contactInfo": "assessment", "summary": "assessment", "experience": "assessment",
    "education": "assessment", "skills": "assessment", "formatting": "assessment"
  }},
  "industryRecommendations": ["industry-specific recommendations"],
  "overallAssessment": "brief overall assessment"
}}

{JSON_ONLY}"""


def build_interview_questions_prompt(resume_text: str, job_title: str) -> str:
    return f"""Based on the following resume, generate interview questions for a {job_title} position.

Resume Content:
{resume_text}

Respond in this JSON format:
{{
  "technical": [{{"question": "", "difficulty": "easy/medium/hard", "category": "", "expectedAnswer": "", "followUpQuestions": []}}],
  "behavioral": [{{"question": "", "focus": "", "starMethod": "", "redFlags": [], "greenFlags": []}}],
  "projectBased": [{{"question": "", "basedOn": "", "technicalDepth": "", "businessImpact": "", "challenges": []}}],
  "systemDesign": [{{"question": "", "scale": "", "constraints": [], "components": [], "tradeoffs": []}}],
  "coding": [{{"question": "", "difficulty": "", "language": "", "approach": "", "edgeCases": [], "optimization": ""}}],
  "tips": [{{"category": "", "tip": "", "reasoning": ""}}],
  "redFlags": [{{"category": "", "warning": "", "why": ""}}],
  "preparation": [{{"area": "", "suggestion": "", "resources": []}}]
}}

Questions must be specific to the technologies and projects in the resume and progress in difficulty.
{JSON_ONLY}"""


def build_code_review_prompt(code: str, language: str) -> str:
    return f"""Review the following {language} code.

Code:
{code}

Respond in this JSON format:
{{
  "overallScore": "score out of 10",
  "strengths": ["good practices found"],
  "issues": [{{"type": "error/warning/suggestion", "line": "line number or general", "description": "", "suggestion": ""}}],
  "securityConcerns": ["security issues found"],
  "performanceTips": ["performance improvement suggestions"],
  "bestPractices": ["best practices to follow"],
  "overallFeedback": "summary of the review"
}}

{JSON_ONLY}"""


def build_algorithm_explanation_prompt(algorithm_name: str, depth: str) -> str:
    return f"""Explain the {algorithm_name} algorithm in a {depth} manner for computer science students.

Respond in this JSON format:
{{
  "name": "algorithm name",
  "description": "brief description",
  "howItWorks": "step-by-step explanation",
  "pseudocode": "pseudocode representation",
  "timeComplexity": "time complexity analysis",
  "spaceComplexity": "space complexity analysis",
  "useCases": ["when to use this algorithm"],
  "advantages": ["advantages"],
  "disadvantages": ["disadvantages"],
  "example": "simple example with input/output"
}}

{JSON_ONLY}"""


def build_roadmap_prompt(domain: str, experience_level: str, focus_areas: list[str]) -> str:
    focus = f"Focus areas: {', '.join(focus_areas)}" if focus_areas else ""
    return f"""Create a learning roadmap for {domain} at {experience_level} level. {focus}

Respond in this JSON format:
{{
  "domain": "{domain}",
  "experienceLevel": "{experience_level}",
  "estimatedDuration": "estimated time to complete",
  "overview": "brief overview",
  "prerequisites": ["required knowledge"],
  "phases": [{{
    "phase": "Phase 1: Foundation", "duration": "", "description": "",
    "topics": [{{"topic": "", "description": "", "resources": [], "projects": [], "milestone": ""}}]
  }}],
  "advancedTopics": [], "careerPaths": [], "tips": [], "tools": [], "communities": []
}}

{JSON_ONLY}"""


def build_ats_resume_prompt(original_resume: str, analysis: dict[str, Any], target_job_title: str) -> str:
    return f"""Improve this resume for ATS screening while PRESERVING its exact format, section order, headers and layout.
Only rewrite the text content: stronger action verbs, quantified achievements, missing keywords.

Original Resume:
{original_resume}

Analysis Feedback:
{json.dumps(analysis, indent=2)}

Target Job Title: {target_job_title}

Respond in this JSON format:
{{
  "improvedResume": "the complete improved resume",
  "changesMade": [{{"section": "", "originalText": "", "improvedText": "", "reason": ""}}],
  "atsOptimization": {{
    "keywordDensity": "", "formattingScore": "", "readabilityScore": "",
    "improvements": [], "estimatedATSScore": ""
  }},
  "summary": "what was improved"
}}

{JSON_ONLY}"""


def build_complexity_prompt(code: str, language: str) -> str:
    return f"""Analyze the time and space complexity of the following {language} code.

CODE:
```
{code}
```

Respond in this JSON format:
{{
  "overview": "what the code does",
  "timeComplexity": {{
    "bestCase": "O(...) - explanation", "averageCase": "O(...) - explanation", "worstCase": "O(...) - explanation",
    "detailedAnalysis": "step-by-step analysis", "factors": [], "examples": []
  }},
  "spaceComplexity": {{
    "auxiliary": "O(...) - explanation", "total": "O(...) - explanation",
    "detailedAnalysis": "step-by-step analysis", "factors": [], "memoryUsage": ""
  }},
  "algorithmAnalysis": {{
    "algorithmType": "", "efficiency": "Excellent/Good/Fair/Poor",
    "optimizationOpportunities": [], "tradeoffs": [], "comparison": ""
  }},
  "codeBreakdown": [{{"line": "", "operation": "", "complexity": "O(...)", "explanation": ""}}],
  "optimizationSuggestions": [{{"suggestion": "", "impact": "", "implementation": "", "tradeoff": ""}}],
  "realWorldImplications": {{"scalability": "", "performance": "", "useCases": [], "limitations": []}},
  "visualization": {{"complexityGraph": "", "comparisonChart": ""}}
}}

Consider all loops, nested structures, recursive calls and data structure operations.
{JSON_ONLY}"""
