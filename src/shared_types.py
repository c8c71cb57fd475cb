"""Shared enums and types for mindlog."""

from enum import StrEnum


class StressLevel(StrEnum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ResponseFormat(StrEnum):
    TEXT = "text"
    JSON = "json"
