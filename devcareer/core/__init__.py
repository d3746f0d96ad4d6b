"""Core module for code complexity analysis."""

from .analyzer import AnalysisOutcome, ComplexityAnalyzer
from .fallback import analyze_fallback
from .heuristics import classify, infer_complexity
from .models import (
    AlgorithmClassification,
    ComplexityEstimate,
    ComplexityReport,
    Efficiency,
    PatternSignals,
    SpaceClass,
    TimeClass,
)
from .signals import extract_signals

__all__ = [
    "AlgorithmClassification",
    "AnalysisOutcome",
    "ComplexityAnalyzer",
    "ComplexityEstimate",
    "ComplexityReport",
    "Efficiency",
    "PatternSignals",
    "SpaceClass",
    "TimeClass",
    "analyze_fallback",
    "classify",
    "extract_signals",
    "infer_complexity",
]
