"""
Data models for code complexity analysis.

The report models describe the JSON shape returned to clients, whether it
was produced by Gemini or by the heuristic fallback. Signal and estimate
records are per-call and never persisted.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class TimeClass(str, Enum):
    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log n)"
    LINEAR = "O(n)"
    LINEARITHMIC = "O(n log n)"
    QUADRATIC = "O(n²)"
    EXPONENTIAL = "O(2ⁿ)"
    GRAPH = "O(V+E)"


class SpaceClass(str, Enum):
    CONSTANT = "O(1)"
    LINEAR = "O(n)"
    QUADRATIC = "O(n²)"
    VERTICES = "O(V)"


class Efficiency(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class AlgorithmClassification(str, Enum):
    SORTING = "Sorting Algorithm"
    BINARY_SEARCH = "Binary Search Algorithm"
    SEARCH = "Search Algorithm"
    DYNAMIC_PROGRAMMING = "Dynamic Programming Algorithm"
    TREE_TRAVERSAL = "Tree Traversal Algorithm"
    GRAPH = "Graph Algorithm"
    RECURSIVE = "Recursive Algorithm"
    NESTED_LOOP = "Nested Loop Algorithm"
    GENERAL = "General Algorithm"

    @property
    def is_search(self) -> bool:
        return self in (AlgorithmClassification.SEARCH, AlgorithmClassification.BINARY_SEARCH)


@dataclass(frozen=True)
class PatternSignals:
    """Lexical signals extracted from a block of source text."""

    line_count: int
    loop_construct_count: int
    has_recursion_signal: bool = False
    has_sort_signal: bool = False
    has_search_signal: bool = False
    has_binary_search_signal: bool = False
    has_dynamic_programming_signal: bool = False
    has_tree_signal: bool = False
    has_graph_signal: bool = False
    # Sort sub-variants, only meaningful when has_sort_signal is set
    mentions_bubble: bool = False
    mentions_quick_or_merge: bool = False
    # Literal "sort" / "search" words, used by the time narrative
    mentions_sort: bool = False
    mentions_search: bool = False

    @property
    def has_nested_loops(self) -> bool:
        return self.loop_construct_count > 1


@dataclass(frozen=True)
class ComplexityEstimate:
    time: TimeClass
    space: SpaceClass
    efficiency: Efficiency


# ---------------------------------------------------------------------------
# Report models (wire shape)
# ---------------------------------------------------------------------------


class TimeComplexityDetail(BaseModel):
    bestCase: str = Field(..., description="Best case notation with explanation")
    averageCase: str = Field(..., description="Average case notation with explanation")
    worstCase: str = Field(..., description="Worst case notation with explanation")
    detailedAnalysis: str = Field(..., description="Step-by-step time analysis")
    factors: list[str] = Field(..., description="Factors affecting time complexity")
    examples: list[str] = Field(..., description="Input sizes and their impact")


class SpaceComplexityDetail(BaseModel):
    auxiliary: str = Field(..., description="Auxiliary space with explanation")
    total: str = Field(..., description="Total space with explanation")
    detailedAnalysis: str = Field(..., description="Step-by-step space analysis")
    factors: list[str] = Field(..., description="Factors affecting space complexity")
    memoryUsage: str = Field(..., description="Memory usage pattern")


class OptimizationSuggestion(BaseModel):
    suggestion: str
    impact: str
    implementation: str
    tradeoff: str


class AlgorithmAnalysis(BaseModel):
    algorithmType: str
    efficiency: str
    optimizationOpportunities: list[OptimizationSuggestion | str]
    tradeoffs: list[str]
    comparison: str


class CodeBreakdownEntry(BaseModel):
    line: str = Field(..., description="Line number or section")
    operation: str
    complexity: str
    explanation: str


class RealWorldImplications(BaseModel):
    scalability: str
    performance: str
    useCases: list[str]
    limitations: list[str]


class Visualization(BaseModel):
    complexityGraph: str
    comparisonChart: str


class ComplexityReport(BaseModel):
    """Complete complexity report matching frontend expectations."""

    overview: str = Field(..., description="What the code does")
    timeComplexity: TimeComplexityDetail
    spaceComplexity: SpaceComplexityDetail
    algorithmAnalysis: AlgorithmAnalysis
    codeBreakdown: list[CodeBreakdownEntry]
    optimizationSuggestions: list[OptimizationSuggestion]
    realWorldImplications: RealWorldImplications
    visualization: Visualization
