"""Prompt templates sent to the remote generation service."""


class PromptTemplates:
    """Prompts for remote sentiment analysis and recommendations."""

    SENTIMENT = """Analyze the following text for emotional content and sentiment.
Text: "{text}"

Respond with a JSON object that has the following structure:
{{
  "score": number, // overall sentiment score between -1 (very negative) to 1 (very positive)
  "level": string, // "mild", "moderate", or "severe" based on the negativity
  "emotions": {{
    "joy": number, // between 0 and 1
    "sadness": number, // between 0 and 1
    "anger": number, // between 0 and 1
    "fear": number, // between 0 and 1
    "love": number, // between 0 and 1
    "surprise": number // between 0 and 1
  }}
}}

The sum of all emotion values should be 1.0. Format the response as valid JSON only."""

    IMPORTANT_WORDS = """Analyze the following journal entry and identify the 5 most emotionally significant words or short phrases.
Text: "{text}"

Please respond with a JSON array of strings, each containing a significant word or short phrase.
Format the response as valid JSON only, like this: ["word1", "word2", ...]"""

    RECOMMENDATIONS = """Based on the following emotional state and sentiment score, generate 5 helpful wellness recommendations.
Emotional state: {state}
Sentiment score: {score} (ranges from -1 to 1, where -1 is very negative, 0 is neutral, and 1 is very positive)

Please respond with a JSON array of 5 strings, each containing a concise recommendation.
Format the response as valid JSON only, like this: ["recommendation 1", "recommendation 2", ...]"""

    @classmethod
    def sentiment(cls, text: str) -> str:
        return cls.SENTIMENT.format(text=text)

    @classmethod
    def important_words(cls, text: str) -> str:
        return cls.IMPORTANT_WORDS.format(text=text)

    @classmethod
    def recommendations(cls, state: str, score: float) -> str:
        return cls.RECOMMENDATIONS.format(state=state, score=score)
