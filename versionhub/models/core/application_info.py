"""Deployed application models as reported by the inventory service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ApplicationSourceInfo(BaseModel):
    """Where an application's manifests come from."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    repo_url: str | None = None
    chart_name: str | None = None
    path: str | None = None
    target_revision: str | None = None
    synced_revision: str | None = None
    last_synced_at: str | None = None


class ApplicationDestinationInfo(BaseModel):
    """Cluster an application is deployed to."""

    model_config = ConfigDict(extra="ignore")

    server: str | None = None
    name: str | None = None


class ApplicationInfo(BaseModel):
    """One application row of a cluster listing. ``name`` is unique per listing."""

    model_config = ConfigDict(extra="ignore")

    name: str
    namespace: str = ""
    health_status: str = "Unknown"
    sync_status: str = "Unknown"
    source: ApplicationSourceInfo = Field(default_factory=ApplicationSourceInfo)
    destination: ApplicationDestinationInfo = Field(
        default_factory=ApplicationDestinationInfo
    )
    container_images: list[str] = Field(default_factory=list)
    argocd_url: str | None = None
    is_catalog_app: bool = False

    @field_validator(
        "namespace", "health_status", "sync_status", "source", "destination", mode="before"
    )
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat explicit nulls from the service as missing fields."""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    @property
    def current_version(self) -> str:
        """Revision the application is pinned to."""
        return self.source.target_revision or "-"
