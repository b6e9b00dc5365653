from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    def list_files(self, directory: str) -> list[str]:
        """Return paths of regular files directly inside a directory."""

    def rename_file(self, source: str, target: str) -> None:
        """Move source to target, refusing to overwrite an existing target."""
