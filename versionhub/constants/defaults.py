"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Inventory service defaults
# ============================================================================

API_BASE_URL_DEFAULT: Final = "http://localhost:8082/api/v1"
INCLUDE_ALL_APPLICATIONS_DEFAULT: Final = True

# ============================================================================
# Cache defaults
# ============================================================================

VERSION_CACHE_TTL_SECONDS_DEFAULT: Final = 600

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"

__all__ = [
    "API_BASE_URL_DEFAULT",
    "INCLUDE_ALL_APPLICATIONS_DEFAULT",
    "THEME_DEFAULT",
    "VERSION_CACHE_TTL_SECONDS_DEFAULT",
]
