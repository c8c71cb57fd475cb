"""Shared test fixtures for mindlog."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from llm import GenerationResult  # noqa: E402
from sentiment.models import Entry, SentimentResult  # noqa: E402


def make_emotions(**overrides) -> dict[str, float]:
    vector = {"joy": 0.0, "sadness": 0.0, "anger": 0.0, "fear": 0.0, "love": 0.0, "surprise": 0.0}
    vector.update(overrides)
    return vector


def make_analysis(level="mild", score=0.0, **emotions) -> SentimentResult:
    return SentimentResult(
        score=score,
        level=level,
        emotions=make_emotions(**emotions) if emotions else make_emotions(joy=1.0),
    )


def generation_client(*contents):
    """AsyncMock GenerationClient returning each content in turn.

    Exceptions in `contents` are raised instead of returned.
    """
    client = AsyncMock()
    client.generate.side_effect = [
        c if isinstance(c, Exception) else GenerationResult(content=c, raw_content=str(c))
        for c in contents
    ]
    return client


@pytest.fixture
def fake_client():
    """Factory for scripted generation clients."""
    return generation_client


@pytest.fixture
def remote_payload():
    """A valid remote sentiment object."""
    return {
        "score": -0.6,
        "level": "moderate",
        "emotions": {
            "joy": 0.1,
            "sadness": 0.3,
            "anger": 0.1,
            "fear": 0.4,
            "love": 0.05,
            "surprise": 0.05,
        },
    }


@pytest.fixture
def journal_dir(tmp_path):
    path = tmp_path / "journal"
    path.mkdir()
    return path


@pytest.fixture
def sample_entries():
    """Three entries over two UTC days."""
    base = datetime(2026, 3, 10, 9, 0, tzinfo=timezone.utc)
    return [
        Entry(
            text="morning pages",
            timestamp=base,
            analysis=make_analysis("mild", 0.6, joy=0.8, love=0.2),
        ),
        Entry(
            text="afternoon slump",
            timestamp=base + timedelta(hours=6),
            analysis=make_analysis("moderate", -0.2, joy=0.4, sadness=0.6),
        ),
        Entry(
            text="next day dread",
            timestamp=base + timedelta(days=1),
            analysis=make_analysis("severe", -0.8, sadness=0.2, fear=0.8),
        ),
    ]


@pytest.fixture
def analysis_factory():
    """Build SentimentResults: analysis_factory("severe", -0.8, fear=1.0)."""
    return make_analysis
