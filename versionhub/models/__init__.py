"""Data models for Version Hub."""

from versionhub.models.core.application_info import (
    ApplicationDestinationInfo,
    ApplicationInfo,
    ApplicationSourceInfo,
)
from versionhub.models.core.cluster_info import ClusterInfo
from versionhub.models.errors import (
    CatalogLoadError,
    InventoryLoadError,
    LoadError,
    VersionLoadError,
)

__all__ = [
    "ApplicationDestinationInfo",
    "ApplicationInfo",
    "ApplicationSourceInfo",
    "CatalogLoadError",
    "ClusterInfo",
    "InventoryLoadError",
    "LoadError",
    "VersionLoadError",
]
