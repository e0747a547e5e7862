"""Inventory service fetchers."""

from versionhub.controllers.inventory.fetchers.application_fetcher import (
    ApplicationFetcher,
)
from versionhub.controllers.inventory.fetchers.cluster_fetcher import ClusterFetcher
from versionhub.controllers.inventory.fetchers.version_fetcher import VersionFetcher

__all__ = ["ApplicationFetcher", "ClusterFetcher", "VersionFetcher"]
