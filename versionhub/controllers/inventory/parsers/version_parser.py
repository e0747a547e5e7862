"""Version parser for inventory controller - normalizes both version payload shapes."""

from __future__ import annotations

from typing import Any


class VersionParser:
    """Accepts ``["1.2.0", ...]`` or ``{"versions": ["1.2.0", ...]}``."""

    def parse_versions(self, raw: Any) -> list[str]:
        """Return version identifiers in service order.

        Raises:
            ValueError: If neither shape matches or an entry is not a scalar.
        """
        if isinstance(raw, dict):
            raw = raw.get("versions")
        if not isinstance(raw, list):
            raise ValueError("Expected a version list or an object with 'versions'")

        versions: list[str] = []
        for item in raw:
            if isinstance(item, bool) or not isinstance(item, (str, int, float)):
                raise ValueError(f"Unexpected version entry: {item!r}")
            versions.append(str(item))
        return versions
