"""Limit and threshold constants for Version Hub."""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REQUEST_TIMEOUT_MIN: Final = 1.0
VERSION_CACHE_TTL_MIN: Final = 0

# ============================================================================
# Cache limits
# ============================================================================

MAX_VERSION_CACHE_ENTRIES: Final = 256

__all__ = [
    "MAX_VERSION_CACHE_ENTRIES",
    "REQUEST_TIMEOUT_MIN",
    "VERSION_CACHE_TTL_MIN",
]
