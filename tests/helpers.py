"""Test doubles and code samples shared across test modules."""

from __future__ import annotations

from typing import Optional

from devcareer.gemini_provider import GenerationResult, Success


class FakeProvider:
    """Stands in for GeminiProvider; returns a preset result and records prompts."""

    def __init__(self, result: Optional[GenerationResult] = None, available: bool = True):
        self.result = result if result is not None else Success("{}")
        self._available = available
        self.prompts: list[str] = []

    @property
    def available(self) -> bool:
        return self._available

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def generate(self, prompt: str, system_instruction: Optional[str] = None) -> GenerationResult:
        self.prompts.append(prompt)
        return self.result


BUBBLE_SORT_JS = """function bubbleSort(arr) {
  const n = arr.length;
  for (let i = 0; i < n - 1; i++) {
    for (let j = 0; j < n - i - 1; j++) {
      if (arr[j] > arr[j + 1]) {
        [arr[j], arr[j + 1]] = [arr[j + 1], arr[j]];
      }
    }
  }
  return arr;
}"""

NESTED_LOOPS_JS = """for (let i = 0; i < n; i++) {
  for (let j = 0; j < n; j++) {
    total += i * j;
  }
}"""

FACTORIAL_JS = "function factorial(n) { if (n <= 1) return 1; return n * factorial(n - 1); }"
