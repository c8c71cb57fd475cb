"""Keyword-frequency emotion analysis (no external deps, never fails)."""

from collections.abc import Mapping

from .emotions import EMOTIONS, classify_level, negative_score, normalize, positive_score
from .models import MAX_IMPORTANT_WORDS, SentimentResult

# Substring keywords: a token matches when it *contains* the keyword, so
# "unhappy" counts for both joy ("happy") and sadness ("unhappy").
EMOTION_KEYWORDS: Mapping[str, tuple[str, ...]] = {
    "joy": (
        "happy", "glad", "joy", "excited", "wonderful",
        "love", "great", "good", "positive", "awesome",
    ),
    "sadness": (
        "sad", "upset", "down", "blue", "depressed",
        "unhappy", "disappointed", "hurt", "pain", "miserable",
    ),
    "anger": (
        "angry", "mad", "furious", "irritated", "annoyed",
        "frustrated", "hate", "rage", "hostile", "resent",
    ),
    "fear": (
        "afraid", "scared", "fear", "anxious", "worry",
        "nervous", "panic", "dread", "terror", "uneasy",
    ),
    "love": (
        "love", "adore", "affection", "care", "fond",
        "trust", "compassion", "tender", "kind", "warm",
    ),
    "surprise": (
        "surprised", "shocked", "amazed", "astonished", "wow",
        "unexpected", "startled", "sudden", "incredible", "unpredictable",
    ),
}


class LocalAnalyzer:
    """Deterministic analyzer used as the fallback for remote analysis."""

    def __init__(self, keywords: Mapping[str, tuple[str, ...]] | None = None):
        """
        Args:
            keywords: Per-emotion substring keywords; defaults to EMOTION_KEYWORDS.
                Unknown emotion names are ignored.
        """
        table = keywords if keywords is not None else EMOTION_KEYWORDS
        self.keywords = {e: tuple(k.lower() for k in table.get(e, ())) for e in EMOTIONS}

    def analyze(self, text: str) -> SentimentResult:
        """Analyze text by whitespace-token keyword matching.

        Returns:
            SentimentResult whose emotions sum to 1.0 when any keyword matched,
            otherwise all zero.
        """
        counts = {e: 0 for e in EMOTIONS}
        # dicts keep insertion order, which gives first-seen tie-breaking below
        word_counts: dict[str, int] = {}

        for token in text.lower().split():
            for emotion, keywords in self.keywords.items():
                if any(k in token for k in keywords):
                    counts[emotion] += 1
                    word_counts[token] = word_counts.get(token, 0) + 1

        emotions = normalize(counts)
        negative = negative_score(emotions)
        score = positive_score(emotions) - negative

        return SentimentResult(
            score=max(-1.0, min(1.0, score)),
            level=classify_level(negative),
            emotions=emotions,
            important_words=self._top_words(word_counts),
        )

    @staticmethod
    def _top_words(word_counts: dict[str, int]) -> tuple[str, ...]:
        # sorted() is stable, so equal counts keep first-encountered order
        ranked = sorted(word_counts.items(), key=lambda kv: -kv[1])
        return tuple(word for word, _ in ranked[:MAX_IMPORTANT_WORDS])
