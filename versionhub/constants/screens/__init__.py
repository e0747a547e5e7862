"""Screen-specific constants."""

from versionhub.constants.screens.inventory import (
    APPLICATION_TABLE_COLUMNS,
    LOADING_VERSIONS_TEXT,
    NO_APPLICATIONS_TEXT,
    NO_DATA_TEXT,
    NO_VERSIONS_TEXT,
    SELECT_CLUSTER_PROMPT,
)

__all__ = [
    "APPLICATION_TABLE_COLUMNS",
    "LOADING_VERSIONS_TEXT",
    "NO_APPLICATIONS_TEXT",
    "NO_DATA_TEXT",
    "NO_VERSIONS_TEXT",
    "SELECT_CLUSTER_PROMPT",
]
