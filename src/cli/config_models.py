"""Pydantic configuration models for mindlog."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

VALID_LLM_PROVIDERS = {"auto", "claude", "openai", "gemini", "none"}


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = "auto"
    model: Optional[str] = None  # None = use provider default
    api_key: Optional[str] = None
    max_tokens: int = 1000
    timeout: float = 30.0

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if v not in VALID_LLM_PROVIDERS:
            raise ValueError(f"Invalid LLM provider: {v}. Must be one of {VALID_LLM_PROVIDERS}")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be positive, got {v}")
        return v


class AnalysisConfig(BaseModel):
    """Sentiment analysis and recommendation settings."""

    remote_enabled: bool = True
    min_text_length: int = 10
    emotion_sum_tolerance: float = 0.1
    personalize_recommendations: bool = True

    @field_validator("min_text_length")
    @classmethod
    def validate_min_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"min_text_length must be >= 1, got {v}")
        return v

    @field_validator("emotion_sum_tolerance")
    @classmethod
    def validate_tolerance(cls, v: float) -> float:
        if not 0.0 < v <= 0.5:
            raise ValueError(f"emotion_sum_tolerance must be in (0, 0.5], got {v}")
        return v


class InsightsConfig(BaseModel):
    """Trend aggregation defaults."""

    trend_window_days: int = 7

    @field_validator("trend_window_days")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"trend_window_days must be >= 1, got {v}")
        return v


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/mindlog/journal")
    log_file: Path = Path("~/mindlog/mindlog.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class MindlogConfig(BaseModel):
    """Main configuration model."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    insights: InsightsConfig = Field(default_factory=InsightsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} patterns in API keys."""
        if self.llm.api_key:
            key = self.llm.api_key
            if key.startswith("${") and key.endswith("}"):
                env_var = key[2:-1]
                self.llm.api_key = os.getenv(env_var, "")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "MindlogConfig":
        """Create config from dict, converting string paths."""
        if "paths" in data and isinstance(data["paths"], dict):
            for key in ["journal_dir", "log_file"]:
                if key in data["paths"] and isinstance(data["paths"][key], str):
                    data["paths"][key] = Path(data["paths"][key])

        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
