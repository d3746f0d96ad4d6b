"""
Lexical signal extraction.

Best-effort stand-in for a parser: every signal is a substring or regex
match over the raw text, so comments, strings and identifiers all count.
"""
from __future__ import annotations

import re

from .models import PatternSignals


# Matches `for (...)`, `while (...)` and `forEach(...)` call shapes.
LOOP_PATTERN = re.compile(r"for\s*\([^)]*\)|while\s*\([^)]*\)|forEach\s*\([^)]*\)")

FUNCTION_KEYWORDS = ("function", "def ", "func ", "fn ")

# signal name -> lowercase substrings, any of which raises the signal
SIGNAL_VOCABULARY: dict[str, tuple[str, ...]] = {
    "has_sort_signal": ("sort", "bubble", "quick", "merge"),
    "has_search_signal": ("search", "find", "indexof"),
    "has_dynamic_programming_signal": ("memo", "dp", "cache"),
    "has_tree_signal": ("tree", "node", "traverse"),
    "has_graph_signal": ("graph", "bfs", "dfs"),
    "mentions_bubble": ("bubble",),
    "mentions_quick_or_merge": ("quick", "merge"),
    "mentions_sort": ("sort",),
    "mentions_search": ("search",),
}

# signal name -> lowercase substrings, all of which must be present
CONJUNCTIVE_VOCABULARY: dict[str, tuple[str, ...]] = {
    "has_binary_search_signal": ("binary", "search"),
}


def count_logic_lines(code: str) -> int:
    return sum(1 for line in code.split("\n") if line.strip())


def count_loop_constructs(code: str) -> int:
    return len(LOOP_PATTERN.findall(code))


def has_recursion_signal(code: str) -> bool:
    """
    Coarse recursion heuristic.

    True when the text contains a function definition keyword, both
    parentheses and a `return` anywhere. Order and structure are ignored,
    so almost any non-trivial function matches.
    """
    has_function = any(keyword in code for keyword in FUNCTION_KEYWORDS)
    return has_function and "(" in code and ")" in code and "return" in code


def extract_signals(code: str) -> PatternSignals:
    """Compute all pattern signals for one block of source text."""
    lowered = code.lower()

    flags = {
        name: any(term in lowered for term in terms)
        for name, terms in SIGNAL_VOCABULARY.items()
    }
    flags.update(
        {
            name: all(term in lowered for term in terms)
            for name, terms in CONJUNCTIVE_VOCABULARY.items()
        }
    )

    return PatternSignals(
        line_count=count_logic_lines(code),
        loop_construct_count=count_loop_constructs(code),
        has_recursion_signal=has_recursion_signal(code),
        **flags,
    )
