"""All enum definitions for Version Hub.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Inventory Enums
# =============================================================================


class ClusterType(Enum):
    """Cluster kinds exposed by the inventory service.

    Values are the wire values sent as the ``type`` query parameter.
    """

    MANAGEMENT = "mgmt"
    WORKLOAD = "workload"


class WorkloadClusterStatus(Enum):
    """Provisioning status values reported for workload clusters."""

    PROVISIONED = "provisioned"
    PENDING = "pending"
    FAILED = "failed"


# =============================================================================
# Fetch State Enums
# =============================================================================


class FetchState(Enum):
    """Data source fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class VersionFetchState(Enum):
    """Per-application version lookup state."""

    ABSENT = "absent"
    LOADING = "loading"
    PRESENT = "present"
    FAILED = "failed-transient"


class FetchSources(Enum):
    """Data source identifiers."""

    CLUSTERS = "clusters"
    APPLICATIONS = "applications"
    VERSIONS = "versions"


# =============================================================================
# Error Enums
# =============================================================================


class LoadErrorKind(Enum):
    """Error taxonomy for the session error channel."""

    CATALOG = "catalog-load-error"
    INVENTORY = "inventory-load-error"
    VERSION = "version-load-error"


__all__ = [
    "ClusterType",
    "FetchSources",
    "FetchState",
    "LoadErrorKind",
    "VersionFetchState",
    "WorkloadClusterStatus",
]
