"""Constants module for Version Hub.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
- screens/: Screen-specific constants
"""

from versionhub.constants.defaults import (
    API_BASE_URL_DEFAULT,
    INCLUDE_ALL_APPLICATIONS_DEFAULT,
    THEME_DEFAULT,
    VERSION_CACHE_TTL_SECONDS_DEFAULT,
)
from versionhub.constants.enums import (
    ClusterType,
    FetchSources,
    FetchState,
    LoadErrorKind,
    VersionFetchState,
    WorkloadClusterStatus,
)
from versionhub.constants.limits import (
    MAX_VERSION_CACHE_ENTRIES,
    REQUEST_TIMEOUT_MIN,
    VERSION_CACHE_TTL_MIN,
)
from versionhub.constants.timeouts import (
    CONNECTION_CHECK_TIMEOUT,
    INVENTORY_REQUEST_TIMEOUT,
)
from versionhub.constants.values import (
    APP_SUB_TITLE,
    APP_TITLE,
)

__all__ = [
    # Defaults
    "API_BASE_URL_DEFAULT",
    # Application
    "APP_SUB_TITLE",
    "APP_TITLE",
    # Timeouts
    "CONNECTION_CHECK_TIMEOUT",
    "INCLUDE_ALL_APPLICATIONS_DEFAULT",
    "INVENTORY_REQUEST_TIMEOUT",
    # Limits
    "MAX_VERSION_CACHE_ENTRIES",
    "REQUEST_TIMEOUT_MIN",
    "THEME_DEFAULT",
    "VERSION_CACHE_TTL_MIN",
    "VERSION_CACHE_TTL_SECONDS_DEFAULT",
    # Enums
    "ClusterType",
    "FetchSources",
    "FetchState",
    "LoadErrorKind",
    "VersionFetchState",
    "WorkloadClusterStatus",
]
