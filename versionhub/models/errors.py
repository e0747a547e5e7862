"""Load error taxonomy surfaced through the session error channel."""

from __future__ import annotations

from versionhub.constants.enums import LoadErrorKind


class LoadError(Exception):
    """Base exception for inventory service load failures."""

    kind: LoadErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CatalogLoadError(LoadError):
    """Raised when the cluster catalog cannot be loaded."""

    kind = LoadErrorKind.CATALOG


class InventoryLoadError(LoadError):
    """Raised when a cluster's application list cannot be loaded."""

    kind = LoadErrorKind.INVENTORY

    def __init__(self, message: str, cluster_name: str) -> None:
        super().__init__(message)
        self.cluster_name = cluster_name


class VersionLoadError(LoadError):
    """Raised when an application's available versions cannot be loaded."""

    kind = LoadErrorKind.VERSION

    def __init__(self, message: str, app_name: str) -> None:
        super().__init__(message)
        self.app_name = app_name


__all__ = [
    "CatalogLoadError",
    "InventoryLoadError",
    "LoadError",
    "VersionLoadError",
]
