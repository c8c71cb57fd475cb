"""Emotion analysis with local fallback, recommendations and trend aggregation."""

from .analyzer import InputValidationError, SentimentAnalyzer, validate_text
from .emotions import EMOTIONS, classify_level, zero_vector
from .local import LocalAnalyzer
from .models import Entry, SentimentResult, TrendPoint
from .recommendations import RecommendationSelector
from .remote import RemoteAnalysisError, RemoteAnalyzer

__all__ = [
    "EMOTIONS",
    "Entry",
    "InputValidationError",
    "LocalAnalyzer",
    "RecommendationSelector",
    "RemoteAnalysisError",
    "RemoteAnalyzer",
    "SentimentAnalyzer",
    "SentimentResult",
    "TrendPoint",
    "classify_level",
    "validate_text",
    "zero_vector",
]
