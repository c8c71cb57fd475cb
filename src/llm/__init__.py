"""Multi-provider LLM abstraction layer."""

from .base import (
    LLMAuthError,
    LLMError,
    LLMProvider,
    LLMRateLimitError,
    LLMTimeoutError,
)
from .factory import create_llm_provider
from .generation import GenerationClient, GenerationResult

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "GenerationClient",
    "GenerationResult",
    "LLMError",
    "LLMRateLimitError",
    "LLMAuthError",
    "LLMTimeoutError",
]
