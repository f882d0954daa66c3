"""In-memory metadata extractor.

Serves pre-extracted documentation.js output keyed by package name, useful
for testing and for rebuilding the configuration without node installed.

Example:
    >>> from docsconfig.extractor.memory import MemoryExtractor
    >>> extractor = MemoryExtractor({"@turf/along": [{"name": "along"}]})
    >>> extractor.package_names()
    ['@turf/along']
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from docsconfig.core.exceptions import ExtractionError
from docsconfig.models.metadata import SymbolMetadata

if TYPE_CHECKING:
    from docsconfig.packages import PackageDescriptor


class MemoryExtractor:
    """Extractor returning canned metadata.

    Packages without an entry raise :class:`ExtractionError`, matching a
    failed extraction. A ``None`` entry stands for an empty result.

    Best for: Testing, offline builds.

    Example:
        >>> import asyncio
        >>> from pathlib import Path
        >>> from docsconfig.extractor.memory import MemoryExtractor
        >>> from docsconfig.packages import PackageDescriptor
        >>> extractor = MemoryExtractor({"@turf/along": [{"name": "along"}]})
        >>> pkg = PackageDescriptor("@turf/along", Path("turf-along/package.json"))
        >>> [s.name for s in asyncio.run(extractor.extract(pkg))]
        ['along']
        >>> extractor.calls
        ['@turf/along']
    """

    def __init__(self, metadata: Mapping[str, list[dict[str, Any]] | None] | None = None) -> None:
        """Initialize the extractor.

        Args:
            metadata: Raw documentation.js output per package name.
        """
        self._metadata: dict[str, list[dict[str, Any]] | None] = dict(metadata or {})
        self.calls: list[str] = []
        self._initialized = False

    async def initialize(self) -> None:
        self._initialized = True

    async def close(self) -> None:
        self._initialized = False

    def add(self, package_name: str, symbols: list[dict[str, Any]] | None) -> None:
        """Register raw metadata for a package."""
        self._metadata[package_name] = symbols

    def package_names(self) -> list[str]:
        return list(self._metadata)

    async def extract(self, package: PackageDescriptor) -> list[SymbolMetadata] | None:
        self.calls.append(package.name)
        if package.name not in self._metadata:
            raise ExtractionError(f"No metadata for package '{package.name}'", package=package.name)
        raw = self._metadata[package.name]
        if raw is None:
            return None
        return [SymbolMetadata.from_dict(item) for item in raw]
