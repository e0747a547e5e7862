"""Application fetcher for inventory controller - fetches one cluster's application listing."""

from __future__ import annotations

import logging
from typing import Any

from versionhub.constants.enums import ClusterType
from versionhub.constants.values import APPLICATIONS_PATH

logger = logging.getLogger(__name__)


class ApplicationFetcher:
    """Fetches the raw application listing for a cluster."""

    def __init__(self, request_json_func: Any, include_all: bool = True) -> None:
        """Initialize application fetcher.

        Args:
            request_json_func: Async function ``(path, params) -> Any``
            include_all: Ask the service to include non-catalog applications
        """
        self._request_json = request_json_func
        self.include_all = include_all

    @staticmethod
    def build_params(
        cluster_name: str, cluster_type: ClusterType, include_all: bool
    ) -> dict[str, str]:
        """Build the listing query parameters."""
        return {
            "cluster_name": cluster_name,
            "include_all": "true" if include_all else "false",
            "type": cluster_type.value,
        }

    async def fetch_applications_raw(
        self, cluster_name: str, cluster_type: ClusterType
    ) -> Any:
        """Fetch the ``{count, applications}`` payload for one cluster."""
        logger.debug("Fetching applications for %s (%s)", cluster_name, cluster_type.value)
        return await self._request_json(
            APPLICATIONS_PATH,
            self.build_params(cluster_name, cluster_type, self.include_all),
        )
