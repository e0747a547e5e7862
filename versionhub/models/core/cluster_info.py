"""Cluster catalog models."""

from pydantic import BaseModel, ConfigDict

from versionhub.constants.enums import ClusterType


class ClusterInfo(BaseModel):
    """Selectable cluster in the catalog. Identity is ``name``."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ClusterType
    id: str

    @property
    def label(self) -> str:
        """Selector label, e.g. ``mgmt-a (mgmt)``."""
        return f"{self.name} ({self.type.value})"
