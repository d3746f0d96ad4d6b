"""
Narrative and suggestion generators for the heuristic report.

Pure functions: the same inputs always give the same strings and lists.
"""
from __future__ import annotations

from .models import (
    AlgorithmClassification,
    CodeBreakdownEntry,
    Efficiency,
    OptimizationSuggestion,
    PatternSignals,
    SpaceClass,
    TimeClass,
)


GROWTH_DESCRIPTIONS: dict[TimeClass, str] = {
    TimeClass.CONSTANT: "constantly",
    TimeClass.LOGARITHMIC: "logarithmically",
    TimeClass.LINEAR: "linearly",
    TimeClass.LINEARITHMIC: "linearithmically",
    TimeClass.QUADRATIC: "quadratically",
    TimeClass.EXPONENTIAL: "exponentially",
    TimeClass.GRAPH: "linearly in the number of vertices and edges",
}

MEMORY_USAGE_DESCRIPTIONS: dict[SpaceClass, str] = {
    SpaceClass.CONSTANT: "constant",
    SpaceClass.LINEAR: "linear",
    SpaceClass.QUADRATIC: "quadratic",
    SpaceClass.VERTICES: "linear in the number of vertices",
}

SCALABILITY_DESCRIPTIONS: dict[Efficiency, str] = {
    Efficiency.EXCELLENT: "scales very well",
    Efficiency.GOOD: "scales moderately well",
    Efficiency.FAIR: "scales moderately well",
    Efficiency.POOR: "does not scale well",
}

INPUT_SIZE_EXAMPLES = (
    "Small input (n=10): Fast execution",
    "Medium input (n=1000): Moderate performance",
    "Large input (n=100000): May be slow",
)

TRADEOFFS = (
    "Time vs Space complexity tradeoffs",
    "Readability vs Performance",
    "Memory usage vs Speed",
)

NESTED_LOOP_SUGGESTION = OptimizationSuggestion(
    suggestion="Reduce nested loops",
    impact="Can improve time complexity from O(n²) to O(n log n)",
    implementation="Use more efficient algorithms or data structures",
    tradeoff="May increase code complexity",
)

MEMOIZATION_SUGGESTION = OptimizationSuggestion(
    suggestion="Implement memoization",
    impact="Can reduce time complexity from exponential to polynomial",
    implementation="Cache results of recursive calls",
    tradeoff="Uses more memory",
)

BUILTIN_SORT_SUGGESTION = OptimizationSuggestion(
    suggestion="Use built-in sorting",
    impact="Leverage optimized language implementations",
    implementation="Use language-specific sort methods",
    tradeoff="Less control over algorithm",
)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" + ("" if count == 1 else "s")


def detailed_time_narrative(signals: PatternSignals, time: TimeClass) -> str:
    parts = [f"Based on code analysis, this algorithm has {time.value} time complexity."]

    if signals.has_nested_loops:
        parts.append(f"Nested loops detected ({signals.loop_construct_count} loop structures).")
    if signals.has_recursion_signal:
        parts.append("Recursive calls detected.")
    if signals.mentions_sort:
        parts.append("Sorting algorithm identified.")
    if signals.mentions_search:
        parts.append("Search algorithm identified.")

    iterations = max(signals.loop_construct_count, 1)
    parts.append(
        f"The algorithm processes the input data through {_plural(iterations, 'iteration')}."
    )
    return " ".join(parts)


def detailed_space_narrative(signals: PatternSignals, space: SpaceClass) -> str:
    parts = [f"The algorithm uses {space.value} space complexity."]

    if signals.has_recursion_signal:
        parts.append("Recursive call stack contributes to space usage.")
    if signals.has_dynamic_programming_signal:
        parts.append("Dynamic programming table/memoization requires additional space.")

    if space is SpaceClass.CONSTANT:
        parts.append("Minimal additional space required.")
    else:
        parts.append("Space usage grows with input size.")
    return " ".join(parts)


def optimization_suggestions(
    classification: AlgorithmClassification,
    time: TimeClass,
    has_recursion_signal: bool,
    loop_construct_count: int,
) -> list[OptimizationSuggestion]:
    suggestions: list[OptimizationSuggestion] = []

    if time is TimeClass.QUADRATIC and loop_construct_count > 1:
        suggestions.append(NESTED_LOOP_SUGGESTION.model_copy())
    if has_recursion_signal:
        suggestions.append(MEMOIZATION_SUGGESTION.model_copy())
    if classification is AlgorithmClassification.SORTING:
        suggestions.append(BUILTIN_SORT_SUGGESTION.model_copy())

    return suggestions


def code_breakdown(signals: PatternSignals, time: TimeClass) -> list[CodeBreakdownEntry]:
    breakdown = [
        CodeBreakdownEntry(
            line="1",
            operation="Code initialization",
            complexity=TimeClass.CONSTANT.value,
            explanation="Constant time setup operations",
        )
    ]

    if signals.loop_construct_count > 0:
        breakdown.append(
            CodeBreakdownEntry(
                line="2",
                operation=f"Main algorithm logic ({_plural(signals.loop_construct_count, 'loop')})",
                complexity=time.value,
                explanation=f"Main computational complexity: {time.value}",
            )
        )
    return breakdown


def use_cases(classification: AlgorithmClassification, efficiency: Efficiency) -> list[str]:
    cases: list[str] = []

    if efficiency in (Efficiency.EXCELLENT, Efficiency.GOOD):
        cases.extend(["Production applications", "Large-scale data processing"])

    cases.extend([
        "Small to medium-sized datasets",
        "Prototyping and development",
        "Educational purposes",
    ])

    if classification is AlgorithmClassification.SORTING:
        cases.extend(["Data organization", "Database operations"])
    if classification.is_search:
        cases.extend(["Information retrieval", "Lookup operations"])

    return cases


def limitations(
    classification: AlgorithmClassification,
    efficiency: Efficiency,
    time: TimeClass,
) -> list[str]:
    items: list[str] = []

    if efficiency is Efficiency.POOR:
        items.extend([
            "May be slow for large inputs",
            "Not suitable for production use with large datasets",
        ])
    if time in (TimeClass.QUADRATIC, TimeClass.EXPONENTIAL):
        items.append("Poor scalability with large inputs")

    items.extend([
        "Memory usage could be optimized",
        "Consider using built-in language functions",
    ])
    return items
