"""Controllers module for Version Hub.

This module provides controllers for fetching cluster catalogs, application
listings and application versions from the inventory service.
"""

from __future__ import annotations

# Base classes
from versionhub.controllers.base import (
    AsyncControllerMixin,
    BaseController,
)

# Inventory domain
from versionhub.controllers.inventory.controller import (
    FetchStatus,
    InventoryController,
)

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    # Inventory domain
    "FetchStatus",
    "InventoryController",
]
