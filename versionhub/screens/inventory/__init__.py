"""Inventory screen module exports."""

from versionhub.screens.inventory.inventory_screen import InventoryScreen
from versionhub.screens.inventory.presenter import (
    ApplicationsLoaded,
    CatalogLoaded,
    InventoryPresenter,
    SessionErrorRaised,
    VersionsUpdated,
)

__all__ = [
    "ApplicationsLoaded",
    "CatalogLoaded",
    "InventoryPresenter",
    "InventoryScreen",
    "SessionErrorRaised",
    "VersionsUpdated",
]
