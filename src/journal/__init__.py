from .pipeline import Insights, JournalService
from .storage import EntryStore, JournalStorage, MemoryEntryStore

__all__ = ["EntryStore", "Insights", "JournalService", "JournalStorage", "MemoryEntryStore"]
