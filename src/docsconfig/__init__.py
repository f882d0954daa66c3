"""
docs-config - API documentation to website configuration.

docs-config turns the documentation comments of a set of library packages
into the single JSON configuration file a documentation website renders
from. A table-of-contents manifest decides which symbols appear and in what
order; documentation.js extracts their metadata; the normalizer flattens it
into link-annotated descriptions, parameter and option tables, return types
and examples.

Quick Start:
    >>> import asyncio
    >>> from docsconfig import ConfigBuilder, get_settings
    >>> builder = ConfigBuilder(get_settings())
    >>> # result = asyncio.run(builder.build())

Architecture:
    Manifest: Manifest, load_manifest
    Packages: PackageDescriptor, discover_packages
    Extractors: DocumentationJsExtractor, MemoryExtractor
    Processing: Sequencer, Normalizer, Renderer
    Output: DocsConfig, write_config, read_config
"""

from docsconfig.core.builder import BuildResult, ConfigBuilder
from docsconfig.core.config import Settings, get_settings
from docsconfig.core.exceptions import (
    ConfigurationError,
    DocsConfigError,
    ExtractionError,
    ManifestError,
    PackageError,
    UnknownNodeError,
)
from docsconfig.extractor import DocumentationJsExtractor, MemoryExtractor
from docsconfig.manifest import Manifest, load_manifest
from docsconfig.models.metadata import SymbolMetadata
from docsconfig.models.module import (
    DocsConfig,
    ModuleEntry,
    ModuleGroup,
    OptionEntry,
    ParamEntry,
    ReturnEntry,
)
from docsconfig.normalizer import Normalizer
from docsconfig.packages import PackageDescriptor, discover_packages
from docsconfig.protocols.extractor import MetadataExtractor
from docsconfig.render import Renderer
from docsconfig.sequencer import PackageResult, Sequencer
from docsconfig.writer import read_config, write_config

__version__ = "0.1.0"

__all__ = [
    # Orchestration
    "ConfigBuilder",
    "BuildResult",
    # Settings
    "Settings",
    "get_settings",
    # Manifest
    "Manifest",
    "load_manifest",
    # Packages
    "PackageDescriptor",
    "discover_packages",
    # Extraction
    "MetadataExtractor",
    "DocumentationJsExtractor",
    "MemoryExtractor",
    "SymbolMetadata",
    # Processing
    "Sequencer",
    "PackageResult",
    "Normalizer",
    "Renderer",
    # Output
    "DocsConfig",
    "ModuleGroup",
    "ModuleEntry",
    "ParamEntry",
    "OptionEntry",
    "ReturnEntry",
    "write_config",
    "read_config",
    # Errors
    "DocsConfigError",
    "ConfigurationError",
    "ManifestError",
    "PackageError",
    "ExtractionError",
    "UnknownNodeError",
    # Version
    "__version__",
]
