"""Application parser for inventory controller - parses a cluster's application listing."""

from __future__ import annotations

import logging
from typing import Any

from versionhub.models.core.application_info import ApplicationInfo

logger = logging.getLogger(__name__)


class ApplicationParser:
    """Parses ``{count, applications}`` payloads into ``ApplicationInfo`` rows."""

    def parse_applications(self, raw: Any) -> list[ApplicationInfo]:
        """Parse an application listing.

        Rows are keyed by ``name``; a repeated name replaces the earlier row.

        Raises:
            ValueError: If the payload shape is wrong or a row fails validation.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"Expected an applications object, got {type(raw).__name__}")
        rows = raw.get("applications")
        if rows is None:
            rows = []
        if not isinstance(rows, list):
            raise ValueError("'applications' must be a list")

        applications: dict[str, ApplicationInfo] = {}
        for row in rows:
            app = ApplicationInfo.model_validate(row)
            applications[app.name] = app

        count = raw.get("count")
        if isinstance(count, int) and count != len(rows):
            logger.warning(
                "Application count mismatch: service reported %s, received %s",
                count,
                len(rows),
            )
        return list(applications.values())
