from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable

from .models import DecomposedFilename, PreviewRow
from .vendors import format_standardized

INVALID_LABEL_CHARS = set('/\\:*?"<>|')


def sanitize_label(name: str) -> str:
    """
    Remove characters that cannot appear in a filename and normalize whitespace.

    Unlike a full filename, a label may legitimately end up empty.

    Examples:
        >>> sanitize_label("  T7/rev  ")
        'T7rev'
        >>> sanitize_label("M13\\tF")
        'M13 F'
        >>> sanitize_label("   ")
        ''
    """
    filtered = []
    for ch in name:
        if ch in INVALID_LABEL_CHARS:
            continue
        codepoint = ord(ch)
        if codepoint < 32 or codepoint == 127:
            filtered.append(" ")
            continue
        filtered.append(ch)
    return " ".join("".join(filtered).split())


def standardized_filename(entry: DecomposedFilename, today: date) -> str:
    """
    Return the new basename for an entry, falling back to today when no date is set.

    Example:
        entry = DecomposedFilename.from_path("K528-1.C1.34781340.B08.ab1", Vendor.RUIBIO)
        standardized_filename(entry, date(2025, 12, 6))
        # '251206.K528-1.C1.ab1'
    """
    capture_date = entry.capture_date or today
    name = format_standardized(capture_date, entry.template_name, entry.primer_name)
    if entry.extension:
        return f"{name}.{entry.extension}"
    return name


def target_path(entry: DecomposedFilename, today: date) -> str:
    return str(Path(entry.full_path).with_name(standardized_filename(entry, today)))


def build_preview(entries: Iterable[DecomposedFilename], today: date) -> list[PreviewRow]:
    return [
        PreviewRow(original_name=entry.file_name, standardized_name=standardized_filename(entry, today))
        for entry in entries
    ]
