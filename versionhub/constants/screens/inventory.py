"""Inventory screen constants."""

from typing import Final

# ============================================================================
# Cluster selector
# ============================================================================

SELECT_CLUSTER_PROMPT: Final = "Select a Cluster"

# ============================================================================
# Application table
# ============================================================================

APPLICATION_TABLE_COLUMNS: Final[tuple[tuple[str, int], ...]] = (
    ("Name", 32),
    ("Namespace", 20),
    ("Health", 12),
    ("Sync", 12),
    ("Current Version", 18),
    ("Catalog", 8),
)

# ============================================================================
# Placeholders
# ============================================================================

NO_DATA_TEXT: Final = "No applications to display. Select a cluster."
NO_APPLICATIONS_TEXT: Final = "This cluster has no applications."
LOADING_VERSIONS_TEXT: Final = "Loading versions..."
NO_VERSIONS_TEXT: Final = "No versions available."

__all__ = [
    "APPLICATION_TABLE_COLUMNS",
    "LOADING_VERSIONS_TEXT",
    "NO_APPLICATIONS_TEXT",
    "NO_DATA_TEXT",
    "NO_VERSIONS_TEXT",
    "SELECT_CLUSTER_PROMPT",
]
