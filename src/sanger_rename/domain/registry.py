from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator

from .models import DecomposedFilename, LabelKind, PreviewRow
from .rename_logic import build_preview
from .vendors import Vendor


class FilenameRegistry:
    """Ordered set of decomposed filenames keyed on full path.

    Every wizard stage holds the same registry instance and mutates the
    entries in place.
    """

    def __init__(self, entries: Iterable[DecomposedFilename] = ()) -> None:
        self._entries: dict[str, DecomposedFilename] = {}
        for entry in entries:
            self.add(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DecomposedFilename]:
        return iter(list(self._entries.values()))

    def __contains__(self, full_path: object) -> bool:
        return full_path in self._entries

    def add(self, entry: DecomposedFilename) -> bool:
        """Add an entry; returns False when the path is already present."""

        if entry.full_path in self._entries:
            return False
        self._entries[entry.full_path] = entry
        return True

    def get(self, full_path: str) -> DecomposedFilename | None:
        return self._entries.get(full_path)

    def entries(self) -> tuple[DecomposedFilename, ...]:
        return tuple(self._entries.values())

    def load(self, paths: Iterable[str], vendor: Vendor) -> int:
        """
        Decompose raw paths under a vendor.

        Entries already present are re-decomposed, which discards their
        overridden labels. Returns the number of newly added entries.
        """
        added = 0
        for full_path in paths:
            existing = self._entries.get(full_path)
            if existing is not None:
                existing.set_vendor(vendor)
                continue
            if self.add(DecomposedFilename.from_path(full_path, vendor)):
                added += 1
        return added

    def labels(self, kind: LabelKind) -> list[str]:
        """Distinct current labels of one kind in first-seen order."""

        seen: dict[str, None] = {}
        for entry in self._entries.values():
            seen.setdefault(entry.label(kind), None)
        return list(seen)

    def stamp_date(self, capture_date: date) -> None:
        for entry in self._entries.values():
            entry.set_date(capture_date)

    def common_date(self) -> date | None:
        dates = {entry.capture_date for entry in self._entries.values()}
        if len(dates) == 1:
            return dates.pop()
        return None

    def preview_rows(self, today: date) -> list[PreviewRow]:
        return build_preview(self._entries.values(), today)
