"""Models for docs-config: extractor metadata in, configuration tree out."""

from docsconfig.models.base import DocsConfigModel
from docsconfig.models.metadata import (
    Description,
    DocNode,
    GenericType,
    LinkNode,
    NamedType,
    OptionalType,
    ParamDoc,
    ReturnDoc,
    SymbolMetadata,
    TextNode,
    TypeNode,
    UnionType,
    parse_doc_node,
    parse_type,
)
from docsconfig.models.module import (
    DocsConfig,
    ModuleEntry,
    ModuleGroup,
    OptionEntry,
    ParamEntry,
    ReturnEntry,
)

__all__ = [
    # Base
    "DocsConfigModel",
    # Metadata
    "Description",
    "DocNode",
    "TextNode",
    "LinkNode",
    "TypeNode",
    "NamedType",
    "UnionType",
    "OptionalType",
    "GenericType",
    "ParamDoc",
    "ReturnDoc",
    "SymbolMetadata",
    "parse_doc_node",
    "parse_type",
    # Output
    "DocsConfig",
    "ModuleEntry",
    "ModuleGroup",
    "OptionEntry",
    "ParamEntry",
    "ReturnEntry",
]
