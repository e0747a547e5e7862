"""Version Hub screens."""

from versionhub.screens.inventory import InventoryScreen

__all__ = ["InventoryScreen"]
