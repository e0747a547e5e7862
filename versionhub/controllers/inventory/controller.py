"""Inventory controller for the cluster/application inventory service.

This module serves as the orchestrator for inventory service calls,
delegating to specialized fetchers and parsers for clusters, applications
and application versions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import httpx

from versionhub.constants.defaults import (
    API_BASE_URL_DEFAULT,
    INCLUDE_ALL_APPLICATIONS_DEFAULT,
)
from versionhub.constants.enums import ClusterType, FetchSources, FetchState
from versionhub.constants.timeouts import (
    CONNECTION_CHECK_TIMEOUT,
    INVENTORY_REQUEST_TIMEOUT,
)
from versionhub.constants.values import CLUSTERS_PATH
from versionhub.controllers.base import BaseController
from versionhub.controllers.inventory.fetchers import (
    ApplicationFetcher,
    ClusterFetcher,
    VersionFetcher,
)
from versionhub.controllers.inventory.parsers import (
    ApplicationParser,
    ClusterParser,
    VersionParser,
)
from versionhub.models.core.application_info import ApplicationInfo
from versionhub.models.core.cluster_info import ClusterInfo
from versionhub.models.errors import (
    CatalogLoadError,
    InventoryLoadError,
    VersionLoadError,
)

logger = logging.getLogger(__name__)


@dataclass
class FetchStatus:
    """Status tracking for a single data source fetch operation."""

    source_name: str
    state: FetchState = FetchState.SUCCESS
    error_message: str | None = None
    last_updated: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "source_name": self.source_name,
            "state": self.state.value,
            "error_message": self.error_message,
            "last_updated": self.last_updated.isoformat()
            if self.last_updated
            else None,
        }


class InventoryController(BaseController):
    """Inventory service operations over HTTP.

    The controller owns one ``httpx.AsyncClient`` and converts transport,
    HTTP status and payload-shape failures into the load error taxonomy:

    - ClusterFetcher + ClusterParser: cluster catalog
    - ApplicationFetcher + ApplicationParser: per-cluster application listing
    - VersionFetcher + VersionParser: per-application available versions
    """

    SOURCE_CLUSTERS = FetchSources.CLUSTERS.value
    SOURCE_APPLICATIONS = FetchSources.APPLICATIONS.value
    SOURCE_VERSIONS = FetchSources.VERSIONS.value

    def __init__(
        self,
        base_url: str = API_BASE_URL_DEFAULT,
        *,
        timeout: float = INVENTORY_REQUEST_TIMEOUT,
        include_all: bool = INCLUDE_ALL_APPLICATIONS_DEFAULT,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the inventory controller.

        Args:
            base_url: API root, e.g. ``http://localhost:8082/api/v1``.
            timeout: Per-request timeout in seconds.
            include_all: Include non-catalog applications in listings.
            client: Pre-built client; the controller will not close it.
            transport: Transport for the client the controller builds itself.
        """
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._transport = transport

        self._cluster_fetcher = ClusterFetcher(self._request_json)
        self._application_fetcher = ApplicationFetcher(
            self._request_json, include_all=include_all
        )
        self._version_fetcher = VersionFetcher(self._request_json)

        self._cluster_parser = ClusterParser()
        self._application_parser = ApplicationParser()
        self._version_parser = VersionParser()

        self._fetch_states: dict[str, FetchStatus] = {
            source: FetchStatus(source_name=source)
            for source in (
                self.SOURCE_CLUSTERS,
                self.SOURCE_APPLICATIONS,
                self.SOURCE_VERSIONS,
            )
        }

    # =========================================================================
    # Client lifecycle
    # =========================================================================

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if the controller created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> InventoryController:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request_json(
        self, path: str, params: dict[str, str] | None = None
    ) -> Any:
        """GET ``path`` and decode the JSON body.

        Raises:
            httpx.HTTPError: On transport failures and non-2xx statuses.
            ValueError: If the body is not valid JSON.
        """
        response = await self._get_client().get(path, params=params)
        response.raise_for_status()
        return response.json()

    # =========================================================================
    # Fetch state tracking
    # =========================================================================

    def _mark(self, source: str, state: FetchState, error: str | None = None) -> None:
        status = self._fetch_states[source]
        status.state = state
        status.error_message = error
        status.last_updated = datetime.now(timezone.utc)

    def get_fetch_state(self, source: str) -> FetchStatus | None:
        return self._fetch_states.get(source)

    def get_fetch_states(self) -> dict[str, dict[str, Any]]:
        return {name: status.to_dict() for name, status in self._fetch_states.items()}

    # =========================================================================
    # Operations
    # =========================================================================

    async def check_connection(self) -> bool:
        """Return True when the cluster endpoint answers with a 2xx status."""
        try:
            response = await self._get_client().get(
                CLUSTERS_PATH, timeout=CONNECTION_CHECK_TIMEOUT
            )
        except httpx.HTTPError as exc:
            logger.debug("Inventory service unreachable at %s: %s", self.base_url, exc)
            return False
        return response.is_success

    async def fetch_clusters(self) -> list[ClusterInfo]:
        """Fetch and normalize the cluster catalog.

        Raises:
            CatalogLoadError: On any transport, status or payload failure.
        """
        self._mark(self.SOURCE_CLUSTERS, FetchState.LOADING)
        self._start_timer()
        try:
            raw = await self._cluster_fetcher.fetch_clusters_raw()
            clusters = self._cluster_parser.parse_clusters(raw)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Error fetching clusters: %s", exc)
            self._mark(self.SOURCE_CLUSTERS, FetchState.ERROR, str(exc))
            raise CatalogLoadError("Failed to fetch clusters.") from exc

        self._mark(self.SOURCE_CLUSTERS, FetchState.SUCCESS)
        logger.debug("Loaded %s clusters in %.2fms", len(clusters), self._elapsed_ms())
        return clusters

    async def fetch_applications(
        self, cluster_name: str, cluster_type: ClusterType
    ) -> list[ApplicationInfo]:
        """Fetch the application listing for one cluster.

        Raises:
            InventoryLoadError: On any transport, status or payload failure.
        """
        self._mark(self.SOURCE_APPLICATIONS, FetchState.LOADING)
        try:
            raw = await self._application_fetcher.fetch_applications_raw(
                cluster_name, cluster_type
            )
            applications = self._application_parser.parse_applications(raw)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Error fetching applications for %s: %s", cluster_name, exc)
            self._mark(self.SOURCE_APPLICATIONS, FetchState.ERROR, str(exc))
            raise InventoryLoadError(
                f"Failed to fetch applications for {cluster_name}.",
                cluster_name=cluster_name,
            ) from exc

        self._mark(self.SOURCE_APPLICATIONS, FetchState.SUCCESS)
        return applications

    async def fetch_versions(self, app_name: str) -> list[str]:
        """Fetch available versions for one application.

        Raises:
            VersionLoadError: On any transport, status or payload failure.
        """
        self._mark(self.SOURCE_VERSIONS, FetchState.LOADING)
        try:
            raw = await self._version_fetcher.fetch_versions_raw(app_name)
            versions = self._version_parser.parse_versions(raw)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Error fetching versions for %s: %s", app_name, exc)
            self._mark(self.SOURCE_VERSIONS, FetchState.ERROR, str(exc))
            raise VersionLoadError(
                f"Failed to fetch versions for {app_name}.", app_name=app_name
            ) from exc

        self._mark(self.SOURCE_VERSIONS, FetchState.SUCCESS)
        return versions

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch everything that does not depend on a selection (the catalog)."""
        return {self.SOURCE_CLUSTERS: await self.fetch_clusters()}


__all__ = [
    "FetchStatus",
    "InventoryController",
]
