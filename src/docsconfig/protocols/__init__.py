"""Protocol definitions - all extension points."""

from docsconfig.protocols.extractor import MetadataExtractor

__all__ = [
    "MetadataExtractor",
]
