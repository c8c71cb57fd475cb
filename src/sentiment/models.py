"""Data models for analysis results, journal entries and trend points."""

import uuid
from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared_types import StressLevel

from .emotions import EMOTIONS, EmotionVector

MAX_IMPORTANT_WORDS = 5


def _canonical_emotions(v: dict) -> EmotionVector:
    missing = [e for e in EMOTIONS if e not in v]
    if missing:
        raise ValueError(f"Missing emotions: {', '.join(missing)}")
    vector = {}
    for e in EMOTIONS:
        value = float(v[e])
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Emotion '{e}' out of range [0, 1]: {value}")
        vector[e] = value
    return vector


class SentimentResult(BaseModel):
    """Outcome of analysing one piece of text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: float = Field(ge=-1.0, le=1.0)
    level: StressLevel
    emotions: EmotionVector
    important_words: tuple[str, ...] = Field(
        default=(), max_length=MAX_IMPORTANT_WORDS, alias="importantWords"
    )

    @field_validator("emotions", mode="before")
    @classmethod
    def validate_emotions(cls, v):
        if not isinstance(v, dict):
            raise ValueError("emotions must be a mapping")
        return _canonical_emotions(v)


def _new_entry_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Entry(BaseModel):
    """A saved journal entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_entry_id)
    text: str = Field(min_length=1)
    timestamp: datetime = Field(default_factory=_utcnow)
    analysis: SentimentResult
    recommendations: tuple[str, ...] = ()

    @field_validator("timestamp")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC; aware ones are converted."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class TrendPoint(BaseModel):
    """Averaged emotions for one UTC calendar day."""

    model_config = ConfigDict(frozen=True)

    date: date
    emotions: EmotionVector
    entry_count: int = Field(ge=0)
