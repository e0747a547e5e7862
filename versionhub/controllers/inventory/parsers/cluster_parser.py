"""Cluster parser for inventory controller - normalizes the cluster hierarchy into a flat catalog."""

from __future__ import annotations

import logging
from typing import Any

from versionhub.constants.enums import ClusterType, WorkloadClusterStatus
from versionhub.models.core.cluster_info import ClusterInfo

logger = logging.getLogger(__name__)


class ClusterParser:
    """Flattens management and workload cluster records into ``ClusterInfo`` rows."""

    _SELECTABLE_WORKLOAD_STATUS = WorkloadClusterStatus.PROVISIONED.value

    def parse_clusters(self, raw: Any) -> list[ClusterInfo]:
        """Normalize the hierarchy response.

        Each management record yields a management cluster followed by its
        provisioned workload clusters. Clusters are keyed by name: when a name
        repeats, the later record replaces the earlier one and keeps the
        earlier one's position.

        Raises:
            ValueError: If the payload is not a list of records.
        """
        if not isinstance(raw, list):
            raise ValueError(f"Expected a list of clusters, got {type(raw).__name__}")

        catalog: dict[str, ClusterInfo] = {}
        for record in raw:
            for cluster in self._iter_record(record):
                if cluster.name in catalog:
                    logger.debug("Cluster name %s repeats, keeping the later entry", cluster.name)
                catalog[cluster.name] = cluster
        return list(catalog.values())

    def _iter_record(self, record: Any) -> list[ClusterInfo]:
        if not isinstance(record, dict):
            logger.warning("Skipping malformed cluster record: %r", record)
            return []

        clusters: list[ClusterInfo] = []
        name = record.get("cluster_name")
        if name:
            clusters.append(self._make_cluster(str(name), ClusterType.MANAGEMENT))
        else:
            logger.warning("Skipping management cluster record without cluster_name")

        for workload in record.get("workload_clusters") or []:
            if not isinstance(workload, dict):
                continue
            workload_name = workload.get("cluster_name")
            if not workload_name:
                continue
            if workload.get("status") != self._SELECTABLE_WORKLOAD_STATUS:
                logger.debug(
                    "Workload cluster %s not selectable (status=%s)",
                    workload_name,
                    workload.get("status"),
                )
                continue
            clusters.append(self._make_cluster(str(workload_name), ClusterType.WORKLOAD))
        return clusters

    @staticmethod
    def _make_cluster(name: str, cluster_type: ClusterType) -> ClusterInfo:
        return ClusterInfo(name=name, type=cluster_type, id=name)
