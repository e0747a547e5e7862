"""Cluster fetcher for inventory controller - fetches the management/workload hierarchy."""

from __future__ import annotations

import logging
from typing import Any

from versionhub.constants.values import CLUSTERS_PATH

logger = logging.getLogger(__name__)


class ClusterFetcher:
    """Fetches the raw cluster hierarchy from the inventory service."""

    def __init__(self, request_json_func: Any) -> None:
        """Initialize with the JSON request function.

        Args:
            request_json_func: Async function ``(path, params) -> Any``
        """
        self._request_json = request_json_func

    async def fetch_clusters_raw(self) -> Any:
        """Fetch management cluster records with their nested workload clusters."""
        logger.debug("Fetching cluster hierarchy")
        return await self._request_json(CLUSTERS_PATH, None)
