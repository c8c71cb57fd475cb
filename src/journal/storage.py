"""Entry persistence: markdown files with YAML frontmatter, or in memory."""

import re
from abc import ABC, abstractmethod
from pathlib import Path

import frontmatter
import structlog
import yaml

from sentiment.models import Entry

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000  # 100KB


def _sanitize_id(entry_id: str) -> str:
    """Only [a-z0-9] allowed in ids that become filenames."""
    return re.sub(r"[^a-z0-9]", "", entry_id.lower())[:64]


class EntryStore(ABC):
    """Where saved entries live. The analysis core only needs list and append."""

    def list_raw(self) -> list[dict]:
        """Entries as plain mappings, for tolerant aggregation."""
        return [e.model_dump(mode="json") for e in self.list()]

    @abstractmethod
    def list(self) -> list[Entry]:
        """All entries, oldest first."""
        ...

    @abstractmethod
    def append(self, entry: Entry) -> None:
        """Persist a new entry."""
        ...


class MemoryEntryStore(EntryStore):
    """In-process store."""

    def __init__(self, entries: list[Entry] | None = None):
        self._entries: list[Entry] = list(entries or [])

    def list(self) -> list[Entry]:
        return sorted(self._entries, key=lambda e: e.timestamp)

    def append(self, entry: Entry) -> None:
        self._entries.append(entry)

    def delete(self, entry_id: str) -> bool:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != entry_id]
        return len(self._entries) < before


class JournalStorage(EntryStore):
    """One markdown file per entry; body is the text, frontmatter the analysis."""

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _generate_filename(self, entry: Entry) -> str:
        date_str = entry.timestamp.strftime("%Y-%m-%d")
        return f"{date_str}_{_sanitize_id(entry.id)}.md"

    def _validate_path(self, filepath: Path) -> Path:
        """Ensure resolved path is inside journal_dir."""
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise ValueError(f"Path escapes journal directory: {filepath}")
        return resolved

    def append(self, entry: Entry) -> None:
        """Write entry to a new file.

        Raises:
            ValueError: If text too long, id unusable, or entry already saved
        """
        if len(entry.text) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")
        if not _sanitize_id(entry.id):
            raise ValueError(f"Entry id cannot be used as a filename: {entry.id!r}")

        filepath = self._validate_path(self.journal_dir / self._generate_filename(entry))
        if filepath.exists():
            raise ValueError(f"Entry already exists: {entry.id}")

        data = entry.model_dump(mode="json")
        post = frontmatter.Post(data.pop("text"))
        for k, v in data.items():
            post[k] = v

        with open(filepath, "w") as f:
            f.write(frontmatter.dumps(post))

        logger.debug("entry_file_written", entry_id=entry.id, path=str(filepath))

    def _files(self) -> list[Path]:
        return sorted(self.journal_dir.glob("*.md"))

    def _find(self, entry_id: str) -> Path | None:
        safe = _sanitize_id(entry_id)
        if not safe:
            return None
        matches = list(self.journal_dir.glob(f"*_{safe}.md"))
        return self._validate_path(matches[0]) if matches else None

    @staticmethod
    def _load_raw(path: Path) -> dict:
        post = frontmatter.load(path)
        return {**post.metadata, "text": post.content}

    def list_raw(self) -> list[dict]:
        """Stored entries as loaded, without validation. Unreadable files are skipped."""
        raw = []
        for f in self._files():
            try:
                raw.append(self._load_raw(f))
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning("entry_file_skipped", path=str(f), error=str(e))
        return raw

    def list(self) -> list[Entry]:
        """All valid entries, oldest first. Invalid files are logged and skipped."""
        entries = []
        for f in self._files():
            try:
                entries.append(Entry.model_validate(self._load_raw(f)))
            except (OSError, ValueError, yaml.YAMLError) as e:
                # pydantic's ValidationError is a ValueError
                logger.warning("entry_file_skipped", path=str(f), error=str(e))
        return sorted(entries, key=lambda e: e.timestamp)

    def get(self, entry_id: str) -> Entry | None:
        path = self._find(entry_id)
        if path is None:
            return None
        try:
            return Entry.model_validate(self._load_raw(path))
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning("entry_file_skipped", path=str(path), error=str(e))
            return None

    def delete(self, entry_id: str) -> bool:
        """Delete an entry's file."""
        path = self._find(entry_id)
        if path is None:
            return False
        path.unlink()
        return True
