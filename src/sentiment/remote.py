"""Remote sentiment analysis through the generation service.

The remote answer is only trusted after it passes an explicit schema check:
six numeric emotions in [0, 1] whose sum is close to 1.0, a numeric score in
[-1, 1] and a known stress level. Anything else, including transport errors,
is raised as RemoteAnalysisError. There are no retries here; the caller
decides what to do with a failure.
"""

from typing import Annotated

import structlog
from pydantic import BaseModel, Field, ValidationError

from llm import GenerationClient, LLMError
from shared_types import ResponseFormat, StressLevel

from .emotions import EMOTIONS, normalize
from .models import MAX_IMPORTANT_WORDS, SentimentResult
from .prompts import PromptTemplates

logger = structlog.get_logger()

DEFAULT_SUM_TOLERANCE = 0.1

Intensity = Annotated[float, Field(strict=True, ge=0.0, le=1.0)]


class RemoteEmotions(BaseModel):
    joy: Intensity
    sadness: Intensity
    anger: Intensity
    fear: Intensity
    love: Intensity
    surprise: Intensity


class RemoteSentimentPayload(BaseModel):
    """Shape required of the remote sentiment JSON object."""

    score: Annotated[float, Field(strict=True, ge=-1.0, le=1.0)]
    level: StressLevel
    emotions: RemoteEmotions


class RemoteAnalysisError(Exception):
    """Remote analysis failed or returned data that cannot be trusted."""

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason


class RemoteAnalyzer:
    """Two-request remote analysis: sentiment object, then salient words."""

    def __init__(self, client: GenerationClient, sum_tolerance: float = DEFAULT_SUM_TOLERANCE):
        self.client = client
        self.sum_tolerance = sum_tolerance

    async def analyze(self, text: str) -> SentimentResult:
        """Analyze text remotely.

        Raises:
            RemoteAnalysisError: on any transport, parse or validation failure
        """
        payload = await self._request(PromptTemplates.sentiment(text))
        sentiment = self._validate_sentiment(payload)
        emotions = self._normalize_emotions(sentiment.emotions.model_dump())

        words_payload = await self._request(PromptTemplates.important_words(text))
        words = self._validate_words(words_payload)

        return SentimentResult(
            score=sentiment.score,
            level=sentiment.level,
            emotions=emotions,
            important_words=words,
        )

    async def _request(self, prompt: str):
        try:
            result = await self.client.generate(prompt, ResponseFormat.JSON)
        except LLMError as e:
            raise RemoteAnalysisError("transport", str(e)) from e
        return result.content

    @staticmethod
    def _validate_sentiment(payload) -> RemoteSentimentPayload:
        if not isinstance(payload, dict):
            raise RemoteAnalysisError(
                "not_json_object", f"Expected JSON object, got {type(payload).__name__}"
            )
        try:
            return RemoteSentimentPayload.model_validate(payload)
        except ValidationError as e:
            raise RemoteAnalysisError("schema", f"Invalid sentiment payload: {e}") from e

    def _normalize_emotions(self, emotions: dict[str, float]) -> dict[str, float]:
        total = sum(emotions[e] for e in EMOTIONS)
        if total <= 0 or abs(total - 1.0) > self.sum_tolerance:
            raise RemoteAnalysisError(
                "emotion_sum", f"Emotion values sum to {total:.3f}, expected ~1.0"
            )
        return normalize(emotions)

    @staticmethod
    def _validate_words(payload) -> tuple[str, ...]:
        if not isinstance(payload, list):
            raise RemoteAnalysisError(
                "not_json_array", f"Expected JSON array of words, got {type(payload).__name__}"
            )
        if not all(isinstance(w, str) for w in payload):
            raise RemoteAnalysisError("schema", "Important words must all be strings")
        words = [w.strip() for w in payload if w.strip()]
        return tuple(words[:MAX_IMPORTANT_WORDS])
