"""Timeout constants for Version Hub.

All timeout values for inventory service requests.
"""

from typing import Final

# ============================================================================
# HTTP timeouts (float, in seconds)
# ============================================================================

INVENTORY_REQUEST_TIMEOUT: Final = 30.0
CONNECTION_CHECK_TIMEOUT: Final = 5.0

__all__ = [
    "CONNECTION_CHECK_TIMEOUT",
    "INVENTORY_REQUEST_TIMEOUT",
]
