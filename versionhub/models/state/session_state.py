"""Session state aggregate for the inventory screen.

SessionState owns everything the operator sees for one running session:

- the cluster catalog,
- the current cluster selection and its selection token,
- the application list for that selection (``None`` means "no data yet"),
- the version cache and per-application fetch flags,
- the latest-error slot.

Every mutation is synchronous. Asynchronous loaders take a token when they
start and hand it back when they finish; results carrying a token that no
longer matches the current selection (or catalog load) are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from versionhub.constants.defaults import VERSION_CACHE_TTL_SECONDS_DEFAULT
from versionhub.constants.enums import ClusterType, VersionFetchState
from versionhub.models.cache.version_cache import VersionCache
from versionhub.models.core.application_info import ApplicationInfo
from versionhub.models.core.cluster_info import ClusterInfo
from versionhub.models.errors import (
    CatalogLoadError,
    InventoryLoadError,
    VersionLoadError,
)
from versionhub.models.state.error_channel import ErrorChannel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of the session handed to the presentation layer."""

    clusters: tuple[ClusterInfo, ...] = ()
    selected_cluster: str | None = None
    selected_cluster_type: ClusterType | None = None
    selection_token: int = 0
    applications: tuple[ApplicationInfo, ...] | None = None
    expanded_app: str | None = None
    versions: dict[str, tuple[str, ...]] = field(default_factory=dict)
    version_states: dict[str, VersionFetchState] = field(default_factory=dict)
    error_message: str | None = None

    @property
    def has_applications(self) -> bool:
        """False while the list is the no-data sentinel, True once loaded (even if empty)."""
        return self.applications is not None

    def version_state(self, app_name: str) -> VersionFetchState:
        return self.version_states.get(app_name, VersionFetchState.ABSENT)


class SessionState:
    """Single owner of catalog, selection, inventory, version cache and errors."""

    def __init__(
        self,
        version_ttl_seconds: float = VERSION_CACHE_TTL_SECONDS_DEFAULT,
        version_cache: VersionCache | None = None,
    ) -> None:
        self._clusters: list[ClusterInfo] = []
        self._catalog_token = 0
        self._selection_token = 0
        self._selected_cluster: str | None = None
        self._selected_cluster_type: ClusterType | None = None
        self._applications: list[ApplicationInfo] | None = None
        self._expanded_app: str | None = None
        self._versions = (
            version_cache
            if version_cache is not None
            else VersionCache(ttl_seconds=version_ttl_seconds)
        )
        self._loading_versions: set[str] = set()
        self._failed_versions: set[str] = set()
        self.errors = ErrorChannel()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def clusters(self) -> list[ClusterInfo]:
        return list(self._clusters)

    @property
    def selection_token(self) -> int:
        return self._selection_token

    @property
    def selected_cluster(self) -> str | None:
        return self._selected_cluster

    @property
    def selected_cluster_type(self) -> ClusterType | None:
        return self._selected_cluster_type

    @property
    def applications(self) -> list[ApplicationInfo] | None:
        return None if self._applications is None else list(self._applications)

    @property
    def expanded_app(self) -> str | None:
        return self._expanded_app

    # =========================================================================
    # Cluster catalog
    # =========================================================================

    def begin_catalog_load(self) -> int:
        """Start a catalog load and return its token."""
        self._catalog_token += 1
        return self._catalog_token

    def apply_catalog(self, token: int, clusters: Iterable[ClusterInfo]) -> bool:
        """Replace the catalog wholesale. Returns False for a superseded load."""
        if token != self._catalog_token:
            logger.debug("Dropping stale catalog result (token %s)", token)
            return False
        self._clusters = list(clusters)
        return True

    def fail_catalog(self, token: int, error: CatalogLoadError) -> bool:
        """Empty the catalog and publish the error. Returns False for a superseded load."""
        if token != self._catalog_token:
            logger.debug("Dropping stale catalog failure (token %s)", token)
            return False
        self._clusters = []
        self.errors.publish(error)
        return True

    def find_cluster(self, cluster_name: str) -> ClusterInfo | None:
        for cluster in self._clusters:
            if cluster.name == cluster_name:
                return cluster
        return None

    # =========================================================================
    # Cluster selection and application inventory
    # =========================================================================

    def begin_selection(
        self, cluster_name: str | None, cluster_type: ClusterType | None
    ) -> int:
        """Switch to a new selection and return its token.

        Application list, expansion, version cache, fetch flags and the error
        slot are reset together; in-flight loads from the previous selection
        become stale.
        """
        self._selection_token += 1
        self._selected_cluster = cluster_name
        self._selected_cluster_type = cluster_type if cluster_name else None
        self._applications = None
        self._expanded_app = None
        self._versions.clear()
        self._loading_versions.clear()
        self._failed_versions.clear()
        self.errors.clear()
        logger.debug(
            "Selection %s -> %s (%s)",
            self._selection_token,
            cluster_name,
            cluster_type.value if cluster_type else "-",
        )
        return self._selection_token

    def is_current(self, token: int) -> bool:
        return token == self._selection_token

    def apply_applications(
        self, token: int, applications: Iterable[ApplicationInfo]
    ) -> bool:
        """Replace the application list. Returns False for a superseded selection."""
        if not self.is_current(token):
            logger.debug("Dropping stale application list (token %s)", token)
            return False
        self._applications = list(applications)
        return True

    def fail_applications(self, token: int, error: InventoryLoadError) -> bool:
        """Restore the no-data sentinel and publish the error."""
        if not self.is_current(token):
            logger.debug("Dropping stale application failure (token %s)", token)
            return False
        self._applications = None
        self.errors.publish(error)
        return True

    def has_application(self, app_name: str) -> bool:
        if self._applications is None:
            return False
        return any(app.name == app_name for app in self._applications)

    # =========================================================================
    # Version resolution
    # =========================================================================

    def toggle_expanded(self, app_name: str) -> bool:
        """Expand ``app_name`` (collapsing any other) or collapse it. Returns the new expanded flag."""
        if self._expanded_app == app_name:
            self._expanded_app = None
            return False
        self._expanded_app = app_name
        return True

    def version_state(self, app_name: str) -> VersionFetchState:
        if app_name in self._loading_versions:
            return VersionFetchState.LOADING
        if app_name in self._versions:
            return VersionFetchState.PRESENT
        if app_name in self._failed_versions:
            return VersionFetchState.FAILED
        return VersionFetchState.ABSENT

    def get_versions(self, app_name: str) -> tuple[str, ...] | None:
        return self._versions.get(app_name)

    def begin_version_fetch(self, app_name: str) -> int | None:
        """Mark ``app_name`` as loading and return the selection token.

        Returns None when a fetch is in flight, versions are cached, or the
        name is not part of the current listing.
        """
        if not self.has_application(app_name):
            logger.debug("Ignoring version fetch for unknown application %s", app_name)
            return None
        state = self.version_state(app_name)
        if state not in (VersionFetchState.ABSENT, VersionFetchState.FAILED):
            logger.debug("Version fetch for %s blocked (%s)", app_name, state.value)
            return None
        self._failed_versions.discard(app_name)
        self._loading_versions.add(app_name)
        return self._selection_token

    def complete_version_fetch(
        self, token: int, app_name: str, versions: Iterable[str]
    ) -> bool:
        """Store fetched versions and clear the loading flag."""
        if not self.is_current(token):
            logger.debug("Dropping stale versions for %s (token %s)", app_name, token)
            return False
        self._loading_versions.discard(app_name)
        self._versions.set(app_name, versions)
        return True

    def fail_version_fetch(
        self, token: int, app_name: str, error: VersionLoadError
    ) -> bool:
        """Clear the loading flag, mark the lookup failed and publish the error."""
        if not self.is_current(token):
            logger.debug("Dropping stale version failure for %s (token %s)", app_name, token)
            return False
        self._loading_versions.discard(app_name)
        self._failed_versions.add(app_name)
        self.errors.publish(error)
        return True

    def abandon_version_fetch(self, token: int, app_name: str) -> bool:
        """Clear the loading flag of a cancelled fetch so it can be retried."""
        if not self.is_current(token):
            return False
        self._loading_versions.discard(app_name)
        return True

    def invalidate_versions(self, app_name: str) -> bool:
        """Forget cached versions for one application so the next fetch goes out.

        A lookup already in flight is left alone and False is returned.
        """
        if app_name in self._loading_versions:
            return False
        self._versions.pop(app_name)
        self._failed_versions.discard(app_name)
        return True

    # =========================================================================
    # Snapshots
    # =========================================================================

    def snapshot(self) -> SessionSnapshot:
        version_states: dict[str, VersionFetchState] = {}
        for name in self._failed_versions:
            version_states[name] = VersionFetchState.FAILED
        cached = self._versions.items()
        for name in cached:
            version_states[name] = VersionFetchState.PRESENT
        for name in self._loading_versions:
            version_states[name] = VersionFetchState.LOADING

        return SessionSnapshot(
            clusters=tuple(self._clusters),
            selected_cluster=self._selected_cluster,
            selected_cluster_type=self._selected_cluster_type,
            selection_token=self._selection_token,
            applications=None if self._applications is None else tuple(self._applications),
            expanded_app=self._expanded_app,
            versions=cached,
            version_states=version_states,
            error_message=self.errors.message,
        )


__all__ = [
    "SessionSnapshot",
    "SessionState",
]
