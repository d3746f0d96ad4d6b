"""
Heuristic complexity report, used when Gemini cannot produce one.
"""
from __future__ import annotations

from .heuristics import classify, infer_complexity
from .models import (
    AlgorithmAnalysis,
    ComplexityReport,
    RealWorldImplications,
    SpaceComplexityDetail,
    TimeComplexityDetail,
    Visualization,
)
from .narrative import (
    GROWTH_DESCRIPTIONS,
    INPUT_SIZE_EXAMPLES,
    MEMORY_USAGE_DESCRIPTIONS,
    SCALABILITY_DESCRIPTIONS,
    TRADEOFFS,
    code_breakdown,
    detailed_space_narrative,
    detailed_time_narrative,
    limitations,
    optimization_suggestions,
    use_cases,
)
from .signals import extract_signals


def analyze_fallback(code: str, language: str) -> ComplexityReport:
    """
    Build a complete complexity report from lexical heuristics only.

    Callers must reject blank code beforehand. Never raises for non-empty
    input and never touches shared state.
    """
    signals = extract_signals(code)
    classification = classify(signals)
    estimate = infer_complexity(signals, classification)

    time = estimate.time.value
    space = estimate.space.value
    efficiency = estimate.efficiency.value

    suggestions = optimization_suggestions(
        classification,
        estimate.time,
        signals.has_recursion_signal,
        signals.loop_construct_count,
    )

    return ComplexityReport(
        overview=(
            f"This appears to be a {classification.value.lower()} written in {language}. "
            f"The code contains {signals.line_count} lines of logic with "
            f"{signals.loop_construct_count} loop structures."
        ),
        timeComplexity=TimeComplexityDetail(
            bestCase=f"{time} - Best case scenario",
            averageCase=f"{time} - Average case scenario",
            worstCase=f"{time} - Worst case scenario",
            detailedAnalysis=detailed_time_narrative(signals, estimate.time),
            factors=[
                "Input size",
                "Nested iterations" if signals.has_nested_loops else "Single iterations",
                "Recursive depth" if signals.has_recursion_signal else "Iterative approach",
            ],
            examples=list(INPUT_SIZE_EXAMPLES),
        ),
        spaceComplexity=SpaceComplexityDetail(
            auxiliary=f"{space} - Additional space required",
            total=f"{space} - Total space complexity",
            detailedAnalysis=detailed_space_narrative(signals, estimate.space),
            factors=[
                "Input storage",
                "Call stack" if signals.has_recursion_signal else "Variables",
                "Temporary data structures",
            ],
            memoryUsage=(
                f"Memory usage is {MEMORY_USAGE_DESCRIPTIONS[estimate.space]} "
                "with respect to input size."
            ),
        ),
        algorithmAnalysis=AlgorithmAnalysis(
            algorithmType=classification.value,
            efficiency=efficiency,
            optimizationOpportunities=[s.model_copy() for s in suggestions],
            tradeoffs=list(TRADEOFFS),
            comparison=(
                f"This implementation is {efficiency.lower()} compared to optimized "
                "versions of similar algorithms."
            ),
        ),
        codeBreakdown=code_breakdown(signals, estimate.time),
        optimizationSuggestions=suggestions,
        realWorldImplications=RealWorldImplications(
            scalability=(
                f"This algorithm {SCALABILITY_DESCRIPTIONS[estimate.efficiency]} "
                "with large inputs."
            ),
            performance=f"Performance is {efficiency.lower()} for typical use cases.",
            useCases=use_cases(classification, estimate.efficiency),
            limitations=limitations(classification, estimate.efficiency, estimate.time),
        ),
        visualization=Visualization(
            complexityGraph=(
                f"The complexity grows {GROWTH_DESCRIPTIONS[estimate.time]} with input size."
            ),
            comparisonChart=(
                f"Compared to optimal solutions, this is {efficiency.lower()} "
                "in terms of both time and space complexity."
            ),
        ),
    )
