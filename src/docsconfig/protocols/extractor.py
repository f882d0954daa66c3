"""Metadata extractor protocol.

Defines the boundary to the external documentation-extraction collaborator,
which parses a package's entry file into per-symbol metadata.

Example:
    >>> from docsconfig.protocols.extractor import MetadataExtractor
    >>> hasattr(MetadataExtractor, "extract")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from docsconfig.models.metadata import SymbolMetadata
    from docsconfig.packages import PackageDescriptor


@runtime_checkable
class MetadataExtractor(Protocol):
    """Extractor protocol.

    Implementations: documentation.js subprocess, in-memory.
    """

    async def extract(self, package: PackageDescriptor) -> list[SymbolMetadata] | None:
        """Extract metadata for every top-level symbol of a package.

        Returns None when the extractor produced no result at all.
        """
        ...

    async def initialize(self) -> None:
        """Initialize extractor."""
        ...

    async def close(self) -> None:
        """Clean up resources."""
        ...
