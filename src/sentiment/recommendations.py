"""Wellness recommendations per stress level, optionally personalized remotely."""

from types import MappingProxyType

import structlog

from llm import GenerationClient
from shared_types import ResponseFormat, StressLevel

from .prompts import PromptTemplates

logger = structlog.get_logger()

MIN_PERSONALIZED = 3
MAX_RECOMMENDATIONS = 5

STATIC_RECOMMENDATIONS = MappingProxyType({
    StressLevel.MILD: (
        "Take a moment to appreciate something positive in your day.",
        "Try a short 2-minute mindful breathing exercise.",
        "Consider going for a brief walk outside if possible.",
        "Write down three things you're grateful for right now.",
        "Listen to a favorite uplifting song.",
    ),
    StressLevel.MODERATE: (
        "Try the 5-4-3-2-1 grounding technique: notice 5 things you see, 4 things you feel, "
        "3 things you hear, 2 things you smell, and 1 thing you taste.",
        "Practice box breathing: inhale for 4 counts, hold for 4, exhale for 4, hold for 4, "
        "and repeat.",
        "Take a short break from screens and current tasks.",
        "Try gentle stretching or simple yoga poses for 5 minutes.",
        "Write down what's on your mind to externalize your thoughts.",
    ),
    StressLevel.SEVERE: (
        "If possible, move to a quiet space where you can take some time for yourself.",
        "Try a guided meditation focused on anxiety relief (even just 5 minutes).",
        "Practice progressive muscle relaxation by tensing and releasing each muscle group.",
        "Consider reaching out to a supportive friend, family member, or counselor.",
        "Focus on slow, deep breathing - in through the nose for 5 counts, out through the "
        "mouth for 7.",
    ),
})

# Synthetic sentiment score used to seed personalized requests
LEVEL_SCORES = MappingProxyType({
    StressLevel.SEVERE: -0.8,
    StressLevel.MODERATE: -0.4,
    StressLevel.MILD: 0.0,
})


def static_recommendations(level: StressLevel | str) -> list[str]:
    return list(STATIC_RECOMMENDATIONS[StressLevel(level)])


class RecommendationSelector:
    """Picks up to five recommendations for a stress level."""

    def __init__(self, client: GenerationClient | None = None, personalize: bool = True):
        self.client = client
        self.personalize = personalize

    async def recommend(self, level: StressLevel | str, text: str | None = None) -> list[str]:
        """Recommendations for a level.

        Personalized through the generation service when enabled and text is
        given; the static table is used otherwise or when that request fails
        or yields fewer than three items.

        Raises:
            ValueError: unknown level
        """
        level = StressLevel(level)

        if self.personalize and self.client is not None and text and text.strip():
            personalized = await self._personalized(level, text.strip())
            if personalized:
                return personalized

        return static_recommendations(level)

    async def _personalized(self, level: StressLevel, text: str) -> list[str] | None:
        prompt = PromptTemplates.recommendations(text, LEVEL_SCORES[level])
        try:
            result = await self.client.generate(prompt, ResponseFormat.JSON)
        except Exception as e:
            logger.warning("recommendations_fallback", reason="request_failed", error=str(e))
            return None

        items = result.content
        if not isinstance(items, list):
            logger.warning("recommendations_fallback", reason="not_json_array")
            return None

        cleaned = [i.strip() for i in items if isinstance(i, str) and i.strip()]
        if len(cleaned) < MIN_PERSONALIZED:
            logger.warning("recommendations_fallback", reason="too_few", count=len(cleaned))
            return None
        return cleaned[:MAX_RECOMMENDATIONS]
