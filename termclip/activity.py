from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .utils.io import write_text_atomic


PREVIEW_CHARS = 60


def count_content_lines(text: str) -> int:
    return sum(1 for line in text.splitlines() if line.strip())


def _preview(text: str) -> str:
    return text[:PREVIEW_CHARS].replace("\r", "").replace("\n", "⏎")


class ActivityLog:
    """Capped, line-per-entry record of clipboard cleanings."""

    def __init__(self, path: Path, max_entries: int = 1000):
        self.path = path
        self.max_entries = max_entries

    def _read_entries(self) -> List[str]:
        if not self.path.exists():
            return []
        return [l for l in self.path.read_text(encoding="utf-8").splitlines() if l]

    def format_entry(self, app: str, cleaned: str, lines_before: int, lines_after: int, when: Optional[datetime] = None) -> str:
        stamp = (when or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
        return f'[{stamp}] Cleaned from {app}: "{_preview(cleaned)}" ({lines_before} lines → {lines_after})'

    def log(self, app: str, original: str, cleaned: str) -> str:
        entry = self.format_entry(app, cleaned, count_content_lines(original), count_content_lines(cleaned))
        entries = self._read_entries()
        entries.append(entry)
        if len(entries) > self.max_entries:
            entries = entries[-self.max_entries:]
        write_text_atomic(self.path, "\n".join(entries) + "\n")
        return entry

    def recent(self, count: int = 20) -> List[str]:
        if count <= 0:
            return []
        return self._read_entries()[-count:]
