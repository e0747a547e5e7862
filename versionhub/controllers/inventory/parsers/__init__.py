"""Inventory service response parsers."""

from versionhub.controllers.inventory.parsers.application_parser import (
    ApplicationParser,
)
from versionhub.controllers.inventory.parsers.cluster_parser import ClusterParser
from versionhub.controllers.inventory.parsers.version_parser import VersionParser

__all__ = ["ApplicationParser", "ClusterParser", "VersionParser"]
