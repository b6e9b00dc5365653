from .local_filesystem import LocalFileSystemAdapter

__all__ = ["LocalFileSystemAdapter"]
