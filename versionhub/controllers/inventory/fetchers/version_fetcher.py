"""Version fetcher for inventory controller - fetches available versions of one application."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from versionhub.constants.values import APPLICATION_VERSION_PATH

logger = logging.getLogger(__name__)


class VersionFetcher:
    """Fetches the raw available-versions payload for an application."""

    def __init__(self, request_json_func: Any) -> None:
        """Initialize with the JSON request function.

        Args:
            request_json_func: Async function ``(path, params) -> Any``
        """
        self._request_json = request_json_func

    @staticmethod
    def build_path(app_name: str) -> str:
        """Build the version path with the application name escaped as one segment."""
        return APPLICATION_VERSION_PATH.format(name=quote(app_name, safe=""))

    async def fetch_versions_raw(self, app_name: str) -> Any:
        """Fetch the versions payload (a list, or an object with ``versions``)."""
        logger.debug("Fetching versions for %s", app_name)
        return await self._request_json(self.build_path(app_name), None)
