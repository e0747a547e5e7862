"""Latest-error slot shared by catalog, inventory and version loading."""

from __future__ import annotations

import logging

from versionhub.models.errors import LoadError

logger = logging.getLogger(__name__)


class ErrorChannel:
    """Holds the single most recent load failure.

    New failures overwrite the previous one; nothing accumulates.
    """

    def __init__(self) -> None:
        self._latest: LoadError | None = None

    @property
    def latest(self) -> LoadError | None:
        return self._latest

    @property
    def message(self) -> str | None:
        return self._latest.message if self._latest is not None else None

    def publish(self, error: LoadError) -> None:
        logger.warning("%s: %s", error.kind.value, error.message)
        self._latest = error

    def clear(self) -> None:
        self._latest = None


__all__ = ["ErrorChannel"]
