"""Insight aggregation over journal entries.

All functions are pure: they read an iterable of entries and never mutate it.
Entries may be Entry models or raw mappings as loaded from storage; a
malformed record degrades (zero emotion vector, no level, no day) instead of
failing the whole computation.

Days are UTC calendar days. Naive timestamps are taken as already UTC.
"""

import math
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone

import numpy as np

from shared_types import StressLevel

from .emotions import EMOTIONS, EmotionVector, coerce_vector, zero_vector
from .models import Entry, TrendPoint

DEFAULT_WINDOW_DAYS = 7

_LEVELS = (StressLevel.MILD, StressLevel.MODERATE, StressLevel.SEVERE)


def _analysis(entry) -> Mapping:
    if isinstance(entry, Entry):
        return {
            "score": entry.analysis.score,
            "level": entry.analysis.level,
            "emotions": entry.analysis.emotions,
        }
    if isinstance(entry, Mapping):
        analysis = entry.get("analysis")
        return analysis if isinstance(analysis, Mapping) else {}
    return {}


def _level(entry) -> StressLevel | None:
    try:
        return StressLevel(_analysis(entry).get("level"))
    except ValueError:
        return None


def _emotions(entry) -> EmotionVector:
    return coerce_vector(_analysis(entry).get("emotions"))


def _score(entry) -> float | None:
    score = _analysis(entry).get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
        return None
    return float(score)


def _timestamp(entry) -> datetime | None:
    if isinstance(entry, Entry):
        value = entry.timestamp
    elif isinstance(entry, Mapping):
        value = entry.get("timestamp")
    else:
        return None

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _mean_vector(vectors: list[EmotionVector]) -> EmotionVector:
    if not vectors:
        return zero_vector()
    matrix = np.array([[v[e] for e in EMOTIONS] for v in vectors], dtype=float)
    means = matrix.mean(axis=0)
    return {e: float(means[i]) for i, e in enumerate(EMOTIONS)}


def distribution(entries: Iterable) -> dict[str, int]:
    """Percentage of entries at each stress level, rounded to whole percents.

    Entries with an unknown level count toward the total but no bucket.
    """
    entries = list(entries)
    counts = {level.value: 0 for level in _LEVELS}
    if not entries:
        return counts

    for entry in entries:
        level = _level(entry)
        if level is not None:
            counts[level.value] += 1

    total = len(entries)
    return {level: _round_half_up(count / total * 100) for level, count in counts.items()}


def average_emotions(entries: Iterable) -> EmotionVector:
    """Arithmetic mean of each emotion across entries (zero vector if none)."""
    return _mean_vector([_emotions(e) for e in entries])


def daily_trends(entries: Iterable, window_days: int = DEFAULT_WINDOW_DAYS) -> list[TrendPoint]:
    """Per-day average emotions for the most recent days that have entries.

    Args:
        entries: Entries to group; ones without a usable timestamp are skipped
        window_days: Maximum number of days returned

    Returns:
        TrendPoints sorted by date ascending, at most window_days long. Days
        without entries are not filled in.
    """
    if window_days < 1:
        return []

    by_day: dict[date, list[EmotionVector]] = defaultdict(list)
    for entry in entries:
        ts = _timestamp(entry)
        if ts is None:
            continue
        by_day[ts.date()].append(_emotions(entry))

    days = sorted(by_day)[-window_days:]
    return [
        TrendPoint(date=day, emotions=_mean_vector(by_day[day]), entry_count=len(by_day[day]))
        for day in days
    ]


def entries_in_range(entries: Iterable, start: datetime, end: datetime) -> list:
    """Entries whose timestamp falls within [start, end]."""
    start_utc = _timestamp({"timestamp": start})
    end_utc = _timestamp({"timestamp": end})
    result = []
    for entry in entries:
        ts = _timestamp(entry)
        if ts is not None and start_utc <= ts <= end_utc:
            result.append(entry)
    return result


def average_score(
    entries: Iterable, start: datetime | None = None, end: datetime | None = None
) -> float:
    """Mean sentiment score, optionally bounded to [start, end]; 0.0 if none."""
    if start is not None or end is not None:
        entries = entries_in_range(
            entries,
            start or datetime.min.replace(tzinfo=timezone.utc),
            end or datetime.max.replace(tzinfo=timezone.utc),
        )
    scores = [s for s in (_score(e) for e in entries) if s is not None]
    if not scores:
        return 0.0
    return float(np.mean(scores))


def most_common_level(entries: Iterable) -> tuple[StressLevel, int] | None:
    """Level with the highest share and its percent; ties favor the milder level."""
    entries = list(entries)
    if not entries:
        return None
    percents = distribution(entries)
    best = max(_LEVELS, key=lambda level: (percents[level.value], -_LEVELS.index(level)))
    return best, percents[best.value]


def primary_emotion(entries: Iterable) -> str | None:
    """Emotion with the highest average; ties resolve in canonical order."""
    entries = list(entries)
    if not entries:
        return None
    averages = average_emotions(entries)
    return max(EMOTIONS, key=lambda e: (averages[e], -EMOTIONS.index(e)))
