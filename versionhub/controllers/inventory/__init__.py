"""Init file for inventory module."""

from versionhub.controllers.inventory.fetchers import (
    ApplicationFetcher,
    ClusterFetcher,
    VersionFetcher,
)
from versionhub.controllers.inventory.parsers import (
    ApplicationParser,
    ClusterParser,
    VersionParser,
)

__all__ = [
    "ApplicationFetcher",
    "ApplicationParser",
    "ClusterFetcher",
    "ClusterParser",
    "VersionFetcher",
    "VersionParser",
]
