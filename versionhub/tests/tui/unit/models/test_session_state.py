"""Unit tests for SessionState - selection tokens, version guard and snapshots."""

from __future__ import annotations

from versionhub.constants.enums import ClusterType, VersionFetchState
from versionhub.models.cache import VersionCache
from versionhub.models.core.application_info import ApplicationInfo
from versionhub.models.core.cluster_info import ClusterInfo
from versionhub.models.errors import (
    CatalogLoadError,
    InventoryLoadError,
    VersionLoadError,
)
from versionhub.models.state.session_state import SessionState

# =============================================================================
# Test Helpers
# =============================================================================


def _cluster(name: str, cluster_type: ClusterType = ClusterType.MANAGEMENT) -> ClusterInfo:
    return ClusterInfo(name=name, type=cluster_type, id=name)


def _state_with_apps(*names: str) -> tuple[SessionState, int]:
    state = SessionState()
    state.apply_catalog(state.begin_catalog_load(), [_cluster("mgmt-a")])
    token = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)
    state.apply_applications(token, [ApplicationInfo(name=n) for n in names])
    return state, token


# =============================================================================
# Catalog
# =============================================================================


class TestCatalog:
    def test_apply_catalog(self) -> None:
        state = SessionState()
        token = state.begin_catalog_load()

        assert state.apply_catalog(token, [_cluster("mgmt-a")]) is True
        assert [c.name for c in state.clusters] == ["mgmt-a"]
        assert state.find_cluster("mgmt-a") is not None
        assert state.find_cluster("nope") is None

    def test_superseded_catalog_load_is_dropped(self) -> None:
        state = SessionState()
        first = state.begin_catalog_load()
        second = state.begin_catalog_load()

        assert state.apply_catalog(second, [_cluster("new")]) is True
        assert state.apply_catalog(first, [_cluster("old")]) is False
        assert [c.name for c in state.clusters] == ["new"]

    def test_catalog_failure_empties_catalog(self) -> None:
        state = SessionState()
        state.apply_catalog(state.begin_catalog_load(), [_cluster("mgmt-a")])

        token = state.begin_catalog_load()
        assert state.fail_catalog(token, CatalogLoadError("down")) is True
        assert state.clusters == []
        assert state.snapshot().error_message == "down"


# =============================================================================
# Selection
# =============================================================================


class TestSelection:
    def test_begin_selection_sets_no_data_sentinel(self) -> None:
        state, _ = _state_with_apps("app-x")

        state.begin_selection("wl-1", ClusterType.WORKLOAD)

        snapshot = state.snapshot()
        assert snapshot.applications is None
        assert snapshot.has_applications is False
        assert snapshot.selected_cluster == "wl-1"
        assert snapshot.selected_cluster_type == ClusterType.WORKLOAD

    def test_empty_listing_differs_from_sentinel(self) -> None:
        state = SessionState()
        token = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)
        state.apply_applications(token, [])

        snapshot = state.snapshot()
        assert snapshot.applications == ()
        assert snapshot.has_applications is True

    def test_tokens_increase(self) -> None:
        state = SessionState()
        first = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)
        second = state.begin_selection("wl-1", ClusterType.WORKLOAD)

        assert second > first
        assert state.is_current(second)
        assert not state.is_current(first)

    def test_stale_listing_is_dropped(self) -> None:
        state = SessionState()
        first = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)
        second = state.begin_selection("wl-1", ClusterType.WORKLOAD)

        assert state.apply_applications(second, [ApplicationInfo(name="wl-app")])
        assert not state.apply_applications(first, [ApplicationInfo(name="mgmt-app")])
        assert [a.name for a in state.applications or []] == ["wl-app"]

    def test_stale_failure_is_dropped(self) -> None:
        state = SessionState()
        first = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)
        second = state.begin_selection("wl-1", ClusterType.WORKLOAD)
        state.apply_applications(second, [ApplicationInfo(name="wl-app")])

        error = InventoryLoadError("boom", cluster_name="mgmt-a")
        assert state.fail_applications(first, error) is False
        assert state.applications is not None
        assert state.snapshot().error_message is None

    def test_failure_restores_sentinel(self) -> None:
        state = SessionState()
        token = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)

        error = InventoryLoadError("Failed to fetch applications for mgmt-a.", "mgmt-a")
        assert state.fail_applications(token, error) is True
        assert state.applications is None
        assert state.errors.latest is error

    def test_selection_clears_error(self) -> None:
        state = SessionState()
        state.errors.publish(CatalogLoadError("down"))

        state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)

        assert state.snapshot().error_message is None

    def test_clearing_selection(self) -> None:
        state, _ = _state_with_apps("app-x")

        state.begin_selection(None, ClusterType.MANAGEMENT)

        assert state.selected_cluster is None
        assert state.selected_cluster_type is None
        assert state.applications is None


# =============================================================================
# Version resolution
# =============================================================================


class TestVersionGuard:
    def test_first_fetch_marks_loading(self) -> None:
        state, token = _state_with_apps("app-x")

        assert state.begin_version_fetch("app-x") == token
        assert state.version_state("app-x") == VersionFetchState.LOADING

    def test_loading_blocks_second_fetch(self) -> None:
        state, _ = _state_with_apps("app-x")
        state.begin_version_fetch("app-x")

        assert state.begin_version_fetch("app-x") is None

    def test_present_blocks_refetch(self) -> None:
        state, _ = _state_with_apps("app-x")
        token = state.begin_version_fetch("app-x")
        assert token is not None
        state.complete_version_fetch(token, "app-x", ["1.0.0"])

        assert state.version_state("app-x") == VersionFetchState.PRESENT
        assert state.begin_version_fetch("app-x") is None
        assert state.get_versions("app-x") == ("1.0.0",)

    def test_failed_can_retry(self) -> None:
        state, _ = _state_with_apps("app-x")
        token = state.begin_version_fetch("app-x")
        assert token is not None
        state.fail_version_fetch(token, "app-x", VersionLoadError("boom", "app-x"))

        assert state.version_state("app-x") == VersionFetchState.FAILED
        assert state.begin_version_fetch("app-x") == token
        assert state.version_state("app-x") == VersionFetchState.LOADING

    def test_version_failure_keeps_applications(self) -> None:
        state, _ = _state_with_apps("app-x", "app-y")
        token = state.begin_version_fetch("app-x")
        assert token is not None

        state.fail_version_fetch(token, "app-x", VersionLoadError("boom", "app-x"))

        assert [a.name for a in state.applications or []] == ["app-x", "app-y"]
        assert state.snapshot().error_message == "boom"

    def test_unknown_application_is_ignored(self) -> None:
        state, _ = _state_with_apps("app-x")

        assert state.begin_version_fetch("ghost") is None
        assert state.version_state("ghost") == VersionFetchState.ABSENT

    def test_no_fetch_before_listing(self) -> None:
        state = SessionState()
        state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)

        assert state.begin_version_fetch("app-x") is None

    def test_stale_completion_does_not_touch_new_selection(self) -> None:
        state, _ = _state_with_apps("app-x")
        old_token = state.begin_version_fetch("app-x")
        assert old_token is not None

        new_token = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)
        state.apply_applications(new_token, [ApplicationInfo(name="app-x")])
        new_fetch = state.begin_version_fetch("app-x")

        assert state.complete_version_fetch(old_token, "app-x", ["stale"]) is False
        assert new_fetch == new_token
        assert state.version_state("app-x") == VersionFetchState.LOADING
        assert state.get_versions("app-x") is None

    def test_selection_clears_versions_and_flags_together(self) -> None:
        state, _ = _state_with_apps("app-x", "app-y")
        token = state.begin_version_fetch("app-x")
        assert token is not None
        state.complete_version_fetch(token, "app-x", ["1.0.0"])
        state.begin_version_fetch("app-y")

        state.begin_selection("wl-1", ClusterType.WORKLOAD)

        snapshot = state.snapshot()
        assert snapshot.versions == {}
        assert snapshot.version_states == {}

    def test_abandoned_fetch_can_restart(self) -> None:
        state, _ = _state_with_apps("app-x")
        token = state.begin_version_fetch("app-x")
        assert token is not None

        assert state.abandon_version_fetch(token, "app-x") is True
        assert state.version_state("app-x") == VersionFetchState.ABSENT
        assert state.begin_version_fetch("app-x") == token

    def test_invalidate_present_versions(self) -> None:
        state, _ = _state_with_apps("app-x")
        token = state.begin_version_fetch("app-x")
        assert token is not None
        state.complete_version_fetch(token, "app-x", ["1.0.0"])

        assert state.invalidate_versions("app-x") is True
        assert state.version_state("app-x") == VersionFetchState.ABSENT

    def test_invalidate_refuses_while_loading(self) -> None:
        state, _ = _state_with_apps("app-x")
        state.begin_version_fetch("app-x")

        assert state.invalidate_versions("app-x") is False
        assert state.version_state("app-x") == VersionFetchState.LOADING

    def test_injected_empty_cache_is_kept(self) -> None:
        cache = VersionCache(ttl_seconds=5, clock=lambda: 0.0)

        state = SessionState(version_cache=cache)

        assert len(cache) == 0
        assert state._versions is cache

    def test_expired_versions_can_be_fetched_again(self) -> None:
        now = [0.0]
        cache = VersionCache(ttl_seconds=60, clock=lambda: now[0])
        state = SessionState(version_cache=cache)
        token = state.begin_selection("mgmt-a", ClusterType.MANAGEMENT)
        state.apply_applications(token, [ApplicationInfo(name="app-x")])
        state.complete_version_fetch(state.begin_version_fetch("app-x") or 0, "app-x", ["1"])

        now[0] = 61.0

        assert state.version_state("app-x") == VersionFetchState.ABSENT
        assert state.begin_version_fetch("app-x") == token


class TestExpansion:
    def test_toggle(self) -> None:
        state, _ = _state_with_apps("app-x", "app-y")

        assert state.toggle_expanded("app-x") is True
        assert state.expanded_app == "app-x"
        assert state.toggle_expanded("app-y") is True
        assert state.expanded_app == "app-y"
        assert state.toggle_expanded("app-y") is False
        assert state.expanded_app is None

    def test_selection_collapses(self) -> None:
        state, _ = _state_with_apps("app-x")
        state.toggle_expanded("app-x")

        state.begin_selection("wl-1", ClusterType.WORKLOAD)

        assert state.expanded_app is None


class TestSnapshot:
    def test_snapshot_is_detached(self) -> None:
        state, token = _state_with_apps("app-x")
        fetch_token = state.begin_version_fetch("app-x")
        assert fetch_token == token
        snapshot = state.snapshot()

        state.complete_version_fetch(token, "app-x", ["1.0.0"])

        assert snapshot.version_state("app-x") == VersionFetchState.LOADING
        assert "app-x" not in snapshot.versions
        assert state.snapshot().versions == {"app-x": ("1.0.0",)}
        assert snapshot.version_state("other") == VersionFetchState.ABSENT
