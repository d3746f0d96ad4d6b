"""
Static catalog of AI tools shown on the dashboard.
"""
from __future__ import annotations

import random
from typing import Any


AVAILABLE_TOOLS: list[dict[str, Any]] = [
    {
        "id": "code-generator",
        "name": "Code Generator",
        "description": "Generate clean, efficient code based on problem statements",
        "icon": "💻",
        "category": "Development",
        "features": ["Multiple languages", "Error handling", "Best practices"],
    },
    {
        "id": "resume-analyzer",
        "name": "Resume Analyzer & Optimizer",
        "description": "Analyze resumes for ATS optimization and generate improved versions",
        "icon": "📄",
        "category": "Career",
        "features": ["ATS scoring", "Keyword analysis", "Optimized resume generation"],
    },
    {
        "id": "interview-questions",
        "name": "Interview Questions",
        "description": "Generate tailored interview questions based on your resume",
        "icon": "❓",
        "category": "Career",
        "features": ["Technical questions", "Behavioral questions", "Project-based questions"],
    },
    {
        "id": "code-reviewer",
        "name": "Code Reviewer",
        "description": "Get detailed feedback and improvements for your code",
        "icon": "🔍",
        "category": "Development",
        "features": ["Security analysis", "Performance tips", "Best practices"],
    },
    {
        "id": "complexity-analyzer",
        "name": "Time Complexity Analyzer",
        "description": "Analyze and explain the time and space complexity of a given code",
        "icon": "⏱️",
        "category": "Development",
        "features": [
            "Time complexity analysis",
            "Space complexity analysis",
            "Optimization suggestions",
            "Performance insights",
        ],
    },
    {
        "id": "algorithm-explainer",
        "name": "Algorithm Explainer",
        "description": "Get detailed explanations of algorithms and data structures",
        "icon": "🧮",
        "category": "Education",
        "features": ["Step-by-step explanation", "Complexity analysis", "Use cases"],
    },
    {
        "id": "roadmap-generator",
        "name": "Roadmap Generator",
        "description": "Generate personalized learning roadmaps for tech domains",
        "icon": "🗺️",
        "category": "Education",
        "features": ["Structured learning paths", "Project-based learning", "Career guidance"],
    },
]

HIGHLIGHTS: list[dict[str, str]] = [
    {
        "tool": "code-generator",
        "title": "Generate Code Instantly",
        "description": "Describe your problem and get production-ready code in multiple languages",
        "icon": "💻",
        "color": "blue",
    },
    {
        "tool": "resume-analyzer",
        "title": "Optimize Your Resume",
        "description": "Get ATS-friendly resume analysis and an optimized version that passes screening",
        "icon": "📄",
        "color": "green",
    },
    {
        "tool": "interview-questions",
        "title": "Prepare for Interviews",
        "description": "Get personalized interview questions based on your experience",
        "icon": "❓",
        "color": "purple",
    },
    {
        "tool": "code-reviewer",
        "title": "Review Your Code",
        "description": "Get expert feedback on your code with security and performance tips",
        "icon": "🔍",
        "color": "orange",
    },
    {
        "tool": "complexity-analyzer",
        "title": "Analyze Code Complexity",
        "description": "Understand the time and space complexity of your algorithms",
        "icon": "⏱️",
        "color": "red",
    },
    {
        "tool": "algorithm-explainer",
        "title": "Learn Algorithms",
        "description": "Understand complex algorithms with step-by-step explanations",
        "icon": "🧮",
        "color": "indigo",
    },
    {
        "tool": "roadmap-generator",
        "title": "Plan Your Learning",
        "description": "Generate personalized learning roadmaps for any tech domain",
        "icon": "🗺️",
        "color": "yellow",
    },
]


def random_highlight(rng: random.Random | None = None) -> dict[str, str]:
    return (rng or random).choice(HIGHLIGHTS)
