"""
Gemini LLM provider shared by all AI tools.
"""
from __future__ import annotations

import asyncio
import json
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from google import genai
from google.genai import errors, types
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from devcareer.config import GeminiConfig, logger


TRANSIENT_STATUS_CODES = frozenset({429, 503})
TRANSIENT_STATUSES = frozenset({"UNAVAILABLE", "RESOURCE_EXHAUSTED"})


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class TransientFailure:
    """Upstream is overloaded or rate-limited; a substitute answer is acceptable."""

    reason: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class FatalFailure:
    reason: str
    status_code: Optional[int] = None


GenerationResult = Union[Success, TransientFailure, FatalFailure]


class AIServiceError(Exception):
    """Raised by tool services when Gemini could not produce an answer."""

    def __init__(self, message: str, transient: bool = False, status_code: Optional[int] = None):
        self.message = message
        self.transient = transient
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_failure(cls, failure: Union[TransientFailure, FatalFailure]) -> AIServiceError:
        return cls(
            failure.reason,
            transient=isinstance(failure, TransientFailure),
            status_code=failure.status_code,
        )


def classify_api_error(exc: errors.APIError) -> Union[TransientFailure, FatalFailure]:
    """Map a Gemini API error onto the transient/fatal split."""
    reason = f"Gemini API Error: {exc.code} - {exc.message or 'Unknown error'}"
    if exc.code in TRANSIENT_STATUS_CODES or (exc.status or "").upper() in TRANSIENT_STATUSES:
        return TransientFailure(reason, status_code=exc.code)
    return FatalFailure(reason, status_code=exc.code)


def extract_json(text: str) -> dict[str, Any]:
    """
    Extract a JSON object from model output, handling markdown code blocks.

    Raises:
        ValueError: If no JSON object can be recovered
    """
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return data
    except json.JSONDecodeError:
        pass

    json_patterns = [
        r'```json\s*\n?(.*?)\n?```',
        r'```\s*\n?(.*?)\n?```',
        r'\{[\s\S]*\}',
    ]

    for pattern in json_patterns:
        match = re.search(pattern, text, re.DOTALL)
        if match:
            try:
                json_str = match.group(1) if '```' in pattern else match.group(0)
                data = json.loads(json_str.strip())
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict):
                return data

    raise ValueError(f"Could not extract valid JSON from response: {text[:200]}...")


class GeminiProvider:
    """
    Thin wrapper around the google-genai async client.

    Built once at startup from an immutable GeminiConfig; holds no
    per-request state.
    """

    def __init__(self, config: GeminiConfig):
        self._config = config
        self._client: genai.Client | None = None
        self._initialize()

    def _initialize(self) -> None:
        if not self._config.configured:
            logger.warning("GEMINI_API_KEY not configured")
            return
        try:
            self._client = genai.Client(api_key=self._config.api_key)
            logger.info("Gemini client initialized (model=%s)", self._config.model)
        except Exception as exc:
            logger.error("Failed to initialize Gemini client: %s", exc)

    @property
    def available(self) -> bool:
        return self._client is not None

    @property
    def model_name(self) -> str:
        return self._config.model

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=4),
        retry=retry_if_exception_type((TimeoutError, ConnectionError)),
        reraise=True,
    )
    async def _request(self, prompt: str, system_instruction: Optional[str]) -> types.GenerateContentResponse:
        try:
            return await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self._config.model,
                    contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
                    config=types.GenerateContentConfig(
                        system_instruction=system_instruction,
                        temperature=self._config.temperature,
                        max_output_tokens=self._config.max_tokens,
                    ),
                ),
                timeout=self._config.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            logger.error("Gemini API timeout after %.0fs", self._config.timeout_seconds)
            raise TimeoutError(
                f"Gemini request timed out after {self._config.timeout_seconds:.0f}s"
            ) from exc

    async def generate(self, prompt: str, system_instruction: Optional[str] = None) -> GenerationResult:
        """
        Send one prompt to Gemini.

        Never raises for upstream problems: failures come back as
        TransientFailure (rate limit / unavailable) or FatalFailure.
        """
        if not self._client:
            return FatalFailure("Gemini client not initialized - check GEMINI_API_KEY")

        try:
            response = await self._request(prompt, system_instruction)
        except errors.APIError as exc:
            failure = classify_api_error(exc)
            logger.error("Gemini API error: %s", failure.reason)
            return failure
        except (TimeoutError, ConnectionError) as exc:
            logger.error("Gemini request failed after retries: %s", exc)
            return FatalFailure(f"Gemini API Error: {exc}")

        text = response.text
        if not text:
            finish_reason = response.candidates[0].finish_reason if response.candidates else "Unknown"
            logger.error("Empty response from Gemini. Finish reason: %s", finish_reason)
            return FatalFailure("Gemini returned an empty response")

        logger.debug("Raw Gemini response: %s...", text[:500])
        return Success(text)
