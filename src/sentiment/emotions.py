"""Fixed six-dimension emotion space and stress-level classification."""

import math
from collections.abc import Mapping

from shared_types import StressLevel

EMOTIONS: tuple[str, ...] = ("joy", "sadness", "anger", "fear", "love", "surprise")
NEGATIVE_EMOTIONS: tuple[str, ...] = ("sadness", "anger", "fear")
POSITIVE_EMOTIONS: tuple[str, ...] = ("joy", "love", "surprise")

SEVERE_THRESHOLD = 0.7
MODERATE_THRESHOLD = 0.4

_LEVEL_ORDER = (StressLevel.MILD, StressLevel.MODERATE, StressLevel.SEVERE)

EmotionVector = dict[str, float]


def zero_vector() -> EmotionVector:
    return {e: 0.0 for e in EMOTIONS}


def normalize(counts: Mapping[str, float]) -> EmotionVector:
    """Scale canonical emotion values so they sum to 1.0 (all zero if the sum is 0)."""
    total = sum(counts.get(e, 0) for e in EMOTIONS)
    if total <= 0:
        return zero_vector()
    return {e: counts.get(e, 0) / total for e in EMOTIONS}


def _is_intensity(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and 0.0 <= value <= 1.0


def coerce_vector(value) -> EmotionVector:
    """Best-effort canonical vector from a stored value.

    Anything other than a mapping holding all six emotions as numbers in
    [0, 1] collapses to the zero vector. Extra keys are dropped.
    """
    if not isinstance(value, Mapping):
        return zero_vector()
    if not all(_is_intensity(value.get(e)) for e in EMOTIONS):
        return zero_vector()
    return {e: float(value[e]) for e in EMOTIONS}


def negative_score(vector: Mapping[str, float]) -> float:
    return sum(vector.get(e, 0.0) for e in NEGATIVE_EMOTIONS)


def positive_score(vector: Mapping[str, float]) -> float:
    return sum(vector.get(e, 0.0) for e in POSITIVE_EMOTIONS)


def classify_level(negative: float) -> StressLevel:
    """Map negative-emotion magnitude to a stress level (strict thresholds)."""
    if negative > SEVERE_THRESHOLD:
        return StressLevel.SEVERE
    if negative > MODERATE_THRESHOLD:
        return StressLevel.MODERATE
    return StressLevel.MILD


def level_rank(level: StressLevel | str) -> int:
    """Position of a level in mild < moderate < severe."""
    return _LEVEL_ORDER.index(StressLevel(level))
