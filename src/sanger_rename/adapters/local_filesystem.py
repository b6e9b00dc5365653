from __future__ import annotations

import os
from pathlib import Path

from sanger_rename.ports.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    def list_files(self, directory: str) -> list[str]:
        root = Path(directory)
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")
        return [str(path) for path in root.iterdir() if path.is_file()]

    def rename_file(self, source: str, target: str) -> None:
        if not os.path.lexists(source):
            raise FileNotFoundError(f"Source file not found: {source}")
        if os.path.lexists(target) and not _same_file(source, target):
            raise FileExistsError(f"Target already exists: {target}")
        os.rename(source, target)


def _same_file(source: str, target: str) -> bool:
    try:
        return os.path.samefile(source, target)
    except OSError:
        return False
