"""Core configuration and orchestration."""

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

__all__ = [
    # Orchestrator
    "BuildResult",
    "ConfigBuilder",
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "DocsConfigError",
    "ConfigurationError",
    "ManifestError",
    "PackageError",
    "ExtractionError",
    "UnknownNodeError",
]
