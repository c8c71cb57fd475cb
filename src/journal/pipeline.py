"""Write path and insights for journal entries."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog

from sentiment import aggregation
from sentiment.analyzer import SentimentAnalyzer, validate_text
from sentiment.emotions import EmotionVector
from sentiment.models import Entry, TrendPoint
from sentiment.recommendations import RecommendationSelector
from shared_types import StressLevel

from .storage import EntryStore

logger = structlog.get_logger()


@dataclass
class Insights:
    """Aggregated view over all saved entries."""

    total: int
    distribution: dict[str, int]
    average_emotions: EmotionVector
    trends: list[TrendPoint] = field(default_factory=list)
    primary_emotion: str | None = None
    most_common_level: StressLevel | None = None
    most_common_percent: int = 0
    average_score: float = 0.0


class JournalService:
    """Analyze, recommend, save; and summarize what was saved."""

    def __init__(
        self,
        analyzer: SentimentAnalyzer,
        selector: RecommendationSelector,
        store: EntryStore,
    ):
        self.analyzer = analyzer
        self.selector = selector
        self.store = store

    async def create_entry(self, text: str, now: datetime | None = None) -> Entry:
        """Analyze text, pick recommendations, and append the new entry to the store.

        Raises:
            InputValidationError: text empty or too short
        """
        cleaned = validate_text(text, self.analyzer.min_length)
        analysis = await self.analyzer.analyze(cleaned)
        recommendations = await self.selector.recommend(analysis.level, cleaned)

        entry = Entry(
            text=cleaned,
            timestamp=now or datetime.now(timezone.utc),
            analysis=analysis,
            recommendations=tuple(recommendations),
        )
        self.store.append(entry)
        logger.info("entry_saved", entry_id=entry.id, level=analysis.level.value)
        return entry

    def entries(self) -> list[Entry]:
        return self.store.list()

    def insights(self, window_days: int = aggregation.DEFAULT_WINDOW_DAYS) -> Insights:
        """Distribution, averages and daily trends over the raw stored records."""
        records = self.store.list_raw()
        common = aggregation.most_common_level(records)
        return Insights(
            total=len(records),
            distribution=aggregation.distribution(records),
            average_emotions=aggregation.average_emotions(records),
            trends=aggregation.daily_trends(records, window_days),
            primary_emotion=aggregation.primary_emotion(records),
            most_common_level=common[0] if common else None,
            most_common_percent=common[1] if common else 0,
            average_score=aggregation.average_score(records),
        )
