"""Prompt-in, content-out generation client over an LLMProvider."""

import asyncio
import json
from dataclasses import dataclass
from typing import Any

import structlog

from shared_types import ResponseFormat

from .base import LLMProvider, LLMTimeoutError

logger = structlog.get_logger()

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class GenerationResult:
    """Parsed content plus the raw provider text it came from."""

    content: Any
    raw_content: str


def _strip_code_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[-1]
    if cleaned.endswith("```"):
        cleaned = cleaned.rsplit("```", 1)[0]
    return cleaned.strip()


def parse_content(raw: str, response_format: ResponseFormat) -> Any:
    """Parse provider text for the requested format.

    JSON that fails to parse is returned as the raw string, leaving the
    caller's validation to reject it.
    """
    if response_format != ResponseFormat.JSON:
        return raw
    try:
        return json.loads(_strip_code_fences(raw))
    except json.JSONDecodeError:
        logger.debug("generation_json_parse_failed", response=raw[:200])
        return raw


class GenerationClient:
    """Sends single prompts to a provider without blocking the event loop."""

    def __init__(
        self,
        provider: LLMProvider,
        timeout: float = DEFAULT_TIMEOUT,
        max_tokens: int = 1000,
    ):
        """
        Args:
            provider: LLMProvider doing the actual call
            timeout: Seconds before a request is abandoned as LLMTimeoutError
            max_tokens: Max response tokens per request
        """
        self.provider = provider
        self.timeout = timeout
        self.max_tokens = max_tokens

    async def generate(
        self, prompt: str, response_format: ResponseFormat | str = ResponseFormat.TEXT
    ) -> GenerationResult:
        """Run one prompt.

        Raises:
            LLMError: provider failure (auth, rate limit, API error)
            LLMTimeoutError: no response within the timeout
        """
        fmt = ResponseFormat(response_format)
        call = asyncio.to_thread(
            self.provider.generate,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self.max_tokens,
            json_mode=fmt == ResponseFormat.JSON,
        )
        try:
            raw = await asyncio.wait_for(call, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise LLMTimeoutError(
                f"{self.provider.provider_name} did not respond within {self.timeout}s"
            ) from e

        raw = raw or ""
        return GenerationResult(content=parse_content(raw, fmt), raw_content=raw)
