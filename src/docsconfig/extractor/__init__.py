"""Metadata extractor implementations."""

from docsconfig.extractor.documentation import DocumentationJsExtractor, parse_symbols
from docsconfig.extractor.memory import MemoryExtractor

__all__ = [
    "DocumentationJsExtractor",
    "MemoryExtractor",
    "parse_symbols",
]
