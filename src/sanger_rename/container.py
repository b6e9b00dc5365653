from __future__ import annotations

from typing import Any

from sanger_rename.adapters.local_filesystem import LocalFileSystemAdapter
from sanger_rename.services.discovery_service import DiscoveryService
from sanger_rename.services.rename_service import RenameService


def build_services() -> dict[str, Any]:
    filesystem = LocalFileSystemAdapter()
    return {
        "discovery_service": DiscoveryService(filesystem),
        "rename_service": RenameService(filesystem),
    }
