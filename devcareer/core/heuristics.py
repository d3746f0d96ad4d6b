"""
Algorithm classification and complexity inference over pattern signals.

Classification and inference walk the raw signals independently and in
different orders, so they can disagree (tree code with nested loops is
classified as tree traversal but estimated at O(n²)).
"""
from __future__ import annotations

from .models import (
    AlgorithmClassification,
    ComplexityEstimate,
    Efficiency,
    PatternSignals,
    SpaceClass,
    TimeClass,
)


# First match wins.
CLASSIFICATION_ORDER: tuple[tuple[AlgorithmClassification, str], ...] = (
    (AlgorithmClassification.SORTING, "has_sort_signal"),
    (AlgorithmClassification.BINARY_SEARCH, "has_binary_search_signal"),
    (AlgorithmClassification.SEARCH, "has_search_signal"),
    (AlgorithmClassification.DYNAMIC_PROGRAMMING, "has_dynamic_programming_signal"),
    (AlgorithmClassification.TREE_TRAVERSAL, "has_tree_signal"),
    (AlgorithmClassification.GRAPH, "has_graph_signal"),
    (AlgorithmClassification.RECURSIVE, "has_recursion_signal"),
    (AlgorithmClassification.NESTED_LOOP, "has_nested_loops"),
)


def classify(signals: PatternSignals) -> AlgorithmClassification:
    for classification, attribute in CLASSIFICATION_ORDER:
        if getattr(signals, attribute):
            return classification
    return AlgorithmClassification.GENERAL


def infer_complexity(
    signals: PatternSignals,
    classification: AlgorithmClassification,
) -> ComplexityEstimate:
    """
    Estimate time/space complexity and an efficiency rating.

    `classification` is accepted for interface symmetry but the estimate is
    driven by the raw signals only.
    """
    time = TimeClass.LINEAR
    space = SpaceClass.CONSTANT
    efficiency = Efficiency.GOOD

    if signals.has_binary_search_signal:
        time = TimeClass.LOGARITHMIC
        efficiency = Efficiency.EXCELLENT
    elif signals.has_sort_signal:
        if signals.mentions_bubble:
            time = TimeClass.QUADRATIC
            efficiency = Efficiency.POOR
        elif signals.mentions_quick_or_merge:
            time = TimeClass.LINEARITHMIC
            efficiency = Efficiency.GOOD
        else:
            # unnamed sorts are assumed to be comparison sorts
            time = TimeClass.LINEARITHMIC
            efficiency = Efficiency.GOOD
    elif signals.has_nested_loops:
        time = TimeClass.QUADRATIC
        efficiency = Efficiency.FAIR
    elif signals.has_recursion_signal:
        time = TimeClass.EXPONENTIAL
        space = SpaceClass.LINEAR
        efficiency = Efficiency.POOR
    elif signals.has_dynamic_programming_signal:
        time = TimeClass.QUADRATIC
        space = SpaceClass.QUADRATIC
        efficiency = Efficiency.GOOD
    elif signals.has_tree_signal or signals.has_graph_signal:
        time = TimeClass.GRAPH
        space = SpaceClass.VERTICES
        efficiency = Efficiency.GOOD

    return ComplexityEstimate(time=time, space=space, efficiency=efficiency)
