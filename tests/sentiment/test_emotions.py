"""Tests for the emotion space helpers."""

import math

import pytest

from sentiment.emotions import (
    EMOTIONS,
    classify_level,
    coerce_vector,
    level_rank,
    negative_score,
    normalize,
    positive_score,
    zero_vector,
)
from shared_types import StressLevel


class TestClassifyLevel:
    @pytest.mark.parametrize(
        "negative,expected",
        [
            (0.0, StressLevel.MILD),
            (0.4, StressLevel.MILD),
            (0.41, StressLevel.MODERATE),
            (0.7, StressLevel.MODERATE),
            (0.71, StressLevel.SEVERE),
            (1.0, StressLevel.SEVERE),
        ],
    )
    def test_thresholds_are_strict(self, negative, expected):
        assert classify_level(negative) == expected

    def test_level_rank_order(self):
        assert level_rank("mild") < level_rank("moderate") < level_rank(StressLevel.SEVERE)


class TestNormalize:
    def test_sums_to_one(self):
        vector = normalize({"joy": 2, "fear": 1, "anger": 1})
        assert math.isclose(sum(vector.values()), 1.0)
        assert vector["joy"] == 0.5
        assert list(vector) == list(EMOTIONS)

    def test_all_zero_stays_zero(self):
        assert normalize({e: 0 for e in EMOTIONS}) == zero_vector()

    def test_missing_keys_treated_as_zero(self):
        assert normalize({"love": 3})["love"] == 1.0


class TestScores:
    def test_negative_and_positive(self):
        vector = {"joy": 0.2, "sadness": 0.1, "anger": 0.2, "fear": 0.3, "love": 0.1, "surprise": 0.1}
        assert math.isclose(negative_score(vector), 0.6)
        assert math.isclose(positive_score(vector), 0.4)


class TestCoerceVector:
    def test_valid_vector_kept(self):
        value = {"joy": 0.5, "sadness": 0.5, "anger": 0, "fear": 0, "love": 0, "surprise": 0}
        assert coerce_vector(value) == {**value, "anger": 0.0, "fear": 0.0, "love": 0.0, "surprise": 0.0}

    def test_extra_keys_dropped(self):
        value = {e: 0.0 for e in EMOTIONS} | {"boredom": 0.9}
        assert set(coerce_vector(value)) == set(EMOTIONS)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            [0.1, 0.2],
            "joy",
            {"joy": 1.0},
            {e: "0.1" for e in EMOTIONS},
            {e: 1.5 for e in EMOTIONS},
            {e: -0.1 for e in EMOTIONS},
            {e: float("nan") for e in EMOTIONS},
            {e: True for e in EMOTIONS},
        ],
    )
    def test_malformed_becomes_zero(self, value):
        assert coerce_vector(value) == zero_vector()
