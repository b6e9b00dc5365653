from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from sanger_rename.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


def normalize_extensions(extensions: Iterable[str]) -> set[str]:
    """
    Lower-case extensions and drop leading dots and blanks.

    Example:
        >>> sorted(normalize_extensions([".AB1", " seq", ""]))
        ['ab1', 'seq']
    """
    normalized = set()
    for extension in extensions:
        cleaned = extension.strip().lstrip(".").lower()
        if cleaned:
            normalized.add(cleaned)
    return normalized


class DiscoveryService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def discover(self, directory: str, extensions: Iterable[str]) -> list[str]:
        """Return files in directory with a matching extension, sorted by path."""

        wanted = normalize_extensions(extensions)
        matches = {
            path
            for path in self._filesystem.list_files(directory)
            if Path(path).suffix.lstrip(".").lower() in wanted
        }
        found = sorted(matches)
        logger.debug("Discovered %d file(s) in %s", len(found), directory)
        return found

    def collect(
        self, paths: Iterable[str], directories: Iterable[str], extensions: Iterable[str]
    ) -> list[str]:
        """Merge explicit paths with discovered ones, keeping first occurrence order."""

        wanted = list(extensions)
        collected: dict[str, None] = {}
        for path in paths:
            collected.setdefault(path, None)
        for directory in directories:
            for path in self.discover(directory, wanted):
                collected.setdefault(path, None)
        return list(collected)
