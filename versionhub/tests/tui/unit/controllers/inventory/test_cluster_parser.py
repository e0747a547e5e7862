"""Tests for cluster parser."""

from __future__ import annotations

import pytest

from versionhub.constants.enums import ClusterType
from versionhub.controllers.inventory.parsers.cluster_parser import ClusterParser


@pytest.fixture
def parser() -> ClusterParser:
    return ClusterParser()


class TestClusterParser:
    """Tests for ClusterParser.parse_clusters."""

    def test_management_and_provisioned_workload(self, parser: ClusterParser) -> None:
        """Pending workload clusters are not selectable."""
        raw = [
            {
                "cluster_name": "mgmt-a",
                "workload_clusters": [
                    {"cluster_name": "wl-1", "cluster_type": "eks", "status": "provisioned"},
                    {"cluster_name": "wl-2", "cluster_type": "eks", "status": "pending"},
                ],
            }
        ]

        clusters = parser.parse_clusters(raw)

        assert [(c.name, c.type) for c in clusters] == [
            ("mgmt-a", ClusterType.MANAGEMENT),
            ("wl-1", ClusterType.WORKLOAD),
        ]
        assert all(c.id == c.name for c in clusters)

    def test_missing_workload_clusters_key(self, parser: ClusterParser) -> None:
        clusters = parser.parse_clusters([{"cluster_name": "mgmt-a"}])
        assert [c.name for c in clusters] == ["mgmt-a"]

    def test_null_workload_clusters(self, parser: ClusterParser) -> None:
        clusters = parser.parse_clusters(
            [{"cluster_name": "mgmt-a", "workload_clusters": None}]
        )
        assert [c.name for c in clusters] == ["mgmt-a"]

    def test_duplicate_name_later_entry_wins(self, parser: ClusterParser) -> None:
        """A workload cluster named like a management cluster replaces it in place."""
        raw = [
            {"cluster_name": "shared"},
            {
                "cluster_name": "mgmt-b",
                "workload_clusters": [
                    {"cluster_name": "shared", "status": "provisioned"},
                ],
            },
        ]

        clusters = parser.parse_clusters(raw)

        assert [c.name for c in clusters] == ["shared", "mgmt-b"]
        assert clusters[0].type == ClusterType.WORKLOAD

    def test_names_are_unique(self, parser: ClusterParser) -> None:
        raw = [
            {
                "cluster_name": f"mgmt-{i % 2}",
                "workload_clusters": [
                    {"cluster_name": f"wl-{j % 3}", "status": "provisioned"}
                    for j in range(6)
                ],
            }
            for i in range(4)
        ]

        names = [c.name for c in parser.parse_clusters(raw)]

        assert len(names) == len(set(names))
        assert set(names) == {"mgmt-0", "mgmt-1", "wl-0", "wl-1", "wl-2"}

    def test_status_comparison_is_exact(self, parser: ClusterParser) -> None:
        raw = [
            {
                "cluster_name": "mgmt-a",
                "workload_clusters": [
                    {"cluster_name": "wl-upper", "status": "Provisioned"},
                    {"cluster_name": "wl-missing"},
                ],
            }
        ]
        assert [c.name for c in parser.parse_clusters(raw)] == ["mgmt-a"]

    def test_skips_malformed_records(self, parser: ClusterParser) -> None:
        raw = [
            "not-a-record",
            {"workload_clusters": [{"cluster_name": "wl-1", "status": "provisioned"}]},
            {"cluster_name": "mgmt-a", "workload_clusters": ["bad", {"status": "provisioned"}]},
        ]

        clusters = parser.parse_clusters(raw)

        # Workloads under a nameless management record are still selectable.
        assert [c.name for c in clusters] == ["wl-1", "mgmt-a"]

    def test_empty_list(self, parser: ClusterParser) -> None:
        assert parser.parse_clusters([]) == []

    @pytest.mark.parametrize("raw", [None, {}, "clusters", 3])
    def test_non_list_payload_raises(self, parser: ClusterParser, raw: object) -> None:
        with pytest.raises(ValueError):
            parser.parse_clusters(raw)
