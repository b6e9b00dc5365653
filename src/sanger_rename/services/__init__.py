from .discovery_service import DiscoveryService
from .rename_service import RenameService

__all__ = ["DiscoveryService", "RenameService"]
