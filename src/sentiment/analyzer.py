"""Analysis entry point: remote first, local keyword analysis on any failure."""

import structlog

from .local import LocalAnalyzer
from .models import SentimentResult
from .remote import RemoteAnalysisError, RemoteAnalyzer

logger = structlog.get_logger()

MIN_TEXT_LENGTH = 10


class InputValidationError(ValueError):
    """Text is empty or too short to analyze."""


def validate_text(text: str | None, min_length: int = MIN_TEXT_LENGTH) -> str:
    """Return stripped text, or raise InputValidationError."""
    cleaned = (text or "").strip()
    if not cleaned:
        raise InputValidationError("Text is empty")
    if len(cleaned) < min_length:
        raise InputValidationError(
            f"Text is too short ({len(cleaned)} chars, minimum {min_length})"
        )
    return cleaned


class SentimentAnalyzer:
    """Turns text into a SentimentResult.

    The remote analyzer is optional. When it is configured but fails for any
    reason, the local result is returned instead; callers get the same type
    either way and never see the remote failure.
    """

    def __init__(
        self,
        local: LocalAnalyzer | None = None,
        remote: RemoteAnalyzer | None = None,
        min_length: int = MIN_TEXT_LENGTH,
    ):
        self.local = local or LocalAnalyzer()
        self.remote = remote
        self.min_length = min_length

    async def analyze(self, text: str) -> SentimentResult:
        """Analyze text.

        Raises:
            InputValidationError: text empty or shorter than min_length
        """
        cleaned = validate_text(text, self.min_length)

        if self.remote is not None:
            try:
                result = await self.remote.analyze(cleaned)
                logger.debug("analysis_served", path="remote", level=result.level.value)
                return result
            except RemoteAnalysisError as e:
                logger.warning("remote_analysis_failed", reason=e.reason, error=str(e))
            except Exception as e:
                logger.warning("remote_analysis_failed", reason="unexpected", error=str(e))

        result = self.local.analyze(cleaned)
        logger.debug("analysis_served", path="local", level=result.level.value)
        return result

    def analyze_local(self, text: str) -> SentimentResult:
        """Synchronous local-only analysis, for callers without an event loop."""
        return self.local.analyze(validate_text(text, self.min_length))
