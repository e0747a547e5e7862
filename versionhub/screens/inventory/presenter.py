"""Inventory screen presenter - catalog loading, cluster selection and version resolution."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from textual.message import Message

from versionhub.constants.enums import ClusterType, LoadErrorKind
from versionhub.controllers import InventoryController
from versionhub.models.core.cluster_info import ClusterInfo
from versionhub.models.errors import (
    CatalogLoadError,
    InventoryLoadError,
    LoadError,
    VersionLoadError,
)
from versionhub.models.state.session_state import SessionSnapshot, SessionState

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class CatalogLoaded(Message):
    """Message indicating the cluster catalog was replaced."""

    def __init__(self, clusters: tuple[ClusterInfo, ...]) -> None:
        super().__init__()
        self.clusters = clusters


class ApplicationsLoaded(Message):
    """Message indicating the application list changed for a selection.

    Posted with the no-data sentinel when a selection starts, and again when
    its listing arrives or fails.
    """

    def __init__(self, selection_token: int) -> None:
        super().__init__()
        self.selection_token = selection_token


class VersionsUpdated(Message):
    """Message indicating expansion or version state changed for one application."""

    def __init__(self, app_name: str) -> None:
        super().__init__()
        self.app_name = app_name


class SessionErrorRaised(Message):
    """Message indicating the error channel holds a new failure."""

    def __init__(self, error: str, kind: LoadErrorKind) -> None:
        super().__init__()
        self.error = error
        self.kind = kind


class InventoryPresenter:
    """Presenter for InventoryScreen - turns operator intents into session state changes.

    Intents (``select_cluster``, ``expand_application``, ``refresh_versions``)
    run synchronously and start workers for the network round trips. Workers
    carry the selection token taken when they started, so a completion that
    arrives after the operator moved on is dropped by ``SessionState``.
    """

    _APPLICATIONS_GROUP = "applications"
    _VERSIONS_GROUP = "versions"
    _CATALOG_GROUP = "catalog"

    def __init__(
        self,
        screen: Any,
        controller: InventoryController,
        state: SessionState | None = None,
    ) -> None:
        self._screen = screen
        self._controller = controller
        self._state = state or SessionState()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def controller(self) -> InventoryController:
        return self._controller

    def snapshot(self) -> SessionSnapshot:
        return self._state.snapshot()

    def _post(self, message: Message) -> None:
        self._screen.post_message(message)

    def _publish_error(self, error: LoadError) -> None:
        self._post(SessionErrorRaised(error.message, error.kind))

    # =========================================================================
    # Cluster catalog
    # =========================================================================

    def refresh_catalog(self) -> None:
        """Start a catalog load in the background."""
        self._screen.run_worker(
            self.load_clusters(),
            name="cluster-catalog",
            group=self._CATALOG_GROUP,
            exclusive=True,
            exit_on_error=False,
        )

    async def load_clusters(self) -> list[ClusterInfo]:
        """Load the cluster catalog, replacing the current one.

        On failure the catalog is emptied and a catalog error is published.
        """
        token = self._state.begin_catalog_load()
        try:
            clusters = await self._controller.fetch_clusters()
        except CatalogLoadError as exc:
            if self._state.fail_catalog(token, exc):
                self._publish_error(exc)
                self._post(CatalogLoaded(()))
            return []

        if self._state.apply_catalog(token, clusters):
            logger.info("Cluster catalog loaded: %s clusters", len(clusters))
            self._post(CatalogLoaded(tuple(clusters)))
        return self._state.clusters

    # =========================================================================
    # Cluster selection
    # =========================================================================

    def select_cluster(self, cluster_name: str | None) -> int | None:
        """Select a cluster and start loading its applications.

        A falsy name returns to the "select a cluster" state without a fetch.
        Returns the new selection token, or None when nothing was fetched.
        """
        if not cluster_name:
            token = self._state.begin_selection(None, None)
            self._post(ApplicationsLoaded(token))
            return None

        cluster = self._state.find_cluster(cluster_name)
        if cluster is None:
            error = InventoryLoadError(
                f"Unknown cluster {cluster_name}.", cluster_name=cluster_name
            )
            self._state.errors.publish(error)
            self._publish_error(error)
            return None

        token = self._state.begin_selection(cluster.name, cluster.type)
        self._post(ApplicationsLoaded(token))
        self._screen.run_worker(
            self.load_applications(token, cluster.name, cluster.type),
            name=f"applications-{cluster.name}",
            group=self._APPLICATIONS_GROUP,
            exclusive=True,
            exit_on_error=False,
        )
        return token

    async def load_applications(
        self, token: int, cluster_name: str, cluster_type: ClusterType
    ) -> bool:
        """Fetch the listing for one selection. Returns True if it was applied."""
        if not self._state.is_current(token):
            return False

        try:
            applications = await self._controller.fetch_applications(
                cluster_name, cluster_type
            )
        except InventoryLoadError as exc:
            if self._state.fail_applications(token, exc):
                self._publish_error(exc)
                self._post(ApplicationsLoaded(token))
            return False

        if not self._state.apply_applications(token, applications):
            return False
        logger.info("Loaded %s applications for %s", len(applications), cluster_name)
        self._post(ApplicationsLoaded(token))
        return True

    # =========================================================================
    # Version resolution
    # =========================================================================

    def expand_application(self, app_name: str) -> bool:
        """Toggle an application card and resolve its versions when it opens.

        Returns True if a version fetch was started.
        """
        expanded = self._state.toggle_expanded(app_name)
        self._post(VersionsUpdated(app_name))
        if not expanded:
            return False
        return self.resolve_versions(app_name)

    def resolve_versions(self, app_name: str) -> bool:
        """Start a version fetch unless one is in flight or versions are cached."""
        token = self._state.begin_version_fetch(app_name)
        if token is None:
            return False
        self._post(VersionsUpdated(app_name))
        self._screen.run_worker(
            self.load_versions(token, app_name),
            name=f"versions-{app_name}",
            group=self._VERSIONS_GROUP,
            exclusive=False,
            exit_on_error=False,
        )
        return True

    def refresh_versions(self, app_name: str) -> bool:
        """Drop cached versions for ``app_name`` and fetch them again."""
        if not self._state.invalidate_versions(app_name):
            return False
        return self.resolve_versions(app_name)

    async def load_versions(self, token: int, app_name: str) -> bool:
        """Fetch versions for one application. Returns True if they were stored."""
        try:
            versions = await self._controller.fetch_versions(app_name)
        except VersionLoadError as exc:
            if self._state.fail_version_fetch(token, app_name, exc):
                self._publish_error(exc)
                self._post(VersionsUpdated(app_name))
            return False
        except asyncio.CancelledError:
            self._state.abandon_version_fetch(token, app_name)
            raise

        if not self._state.complete_version_fetch(token, app_name, versions):
            return False
        self._post(VersionsUpdated(app_name))
        return True


__all__ = [
    "ApplicationsLoaded",
    "CatalogLoaded",
    "InventoryPresenter",
    "SessionErrorRaised",
    "VersionsUpdated",
]
