"""CLI command modules."""

from .insights import insights
from .journal import analyze, delete, entries, write
from .recommend import recommend

__all__ = [
    "analyze",
    "write",
    "entries",
    "delete",
    "insights",
    "recommend",
]
