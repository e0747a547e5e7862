"""Scalar constants for Version Hub.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Argo Upgrader"
APP_SUB_TITLE: Final = "Helm Version Hub"

# ============================================================================
# Inventory service paths (relative to the API base URL)
# ============================================================================

CLUSTERS_PATH: Final = "/cluster"
APPLICATIONS_PATH: Final = "/applications"
APPLICATION_VERSION_PATH: Final = "/application/{name}/version"

# ============================================================================
# Settings
# ============================================================================

CONFIG_DIR_NAME: Final = "versionhub"
CONFIG_FILE_NAME: Final = "settings.yaml"

__all__ = [
    "APPLICATIONS_PATH",
    "APPLICATION_VERSION_PATH",
    "APP_SUB_TITLE",
    "APP_TITLE",
    "CLUSTERS_PATH",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
]
