"""Cache models."""

from versionhub.models.cache.version_cache import VersionCache

__all__ = ["VersionCache"]
