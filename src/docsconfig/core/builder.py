"""ConfigBuilder - main orchestrator for a configuration build.

Coordinates the manifest, package discovery, the extractor, the normalizer
and the writer. The output is all or nothing: if any package fails to
extract, no file is written.

Example:
    >>> from docsconfig.core.builder import ConfigBuilder
    >>> from docsconfig.core.config import Settings
    >>> from docsconfig.extractor.memory import MemoryExtractor
    >>> builder = ConfigBuilder(Settings(), extractor=MemoryExtractor())
    >>> builder.info()["concurrency"]
    1
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docsconfig.extractor.documentation import DocumentationJsExtractor
from docsconfig.manifest import load_manifest
from docsconfig.normalizer import Normalizer
from docsconfig.packages import discover_packages
from docsconfig.sequencer import PackageResult, Sequencer
from docsconfig.writer import write_config

if TYPE_CHECKING:
    from docsconfig.core.config import Settings
    from docsconfig.models.module import DocsConfig
    from docsconfig.protocols.extractor import MetadataExtractor

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Summary of a completed build.

    Example:
        >>> from pathlib import Path
        >>> from docsconfig.core.builder import BuildResult
        >>> result = BuildResult(output_path=Path("config.json"), modules=10, documented=7)
        >>> result.undocumented
        3
    """

    output_path: Path
    packages: int = 0
    modules: int = 0
    documented: int = 0
    empty_packages: list[str] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    completed_at: datetime | None = None

    @property
    def undocumented(self) -> int:
        """Manifest entries that received no metadata."""
        return self.modules - self.documented

    @property
    def duration_seconds(self) -> float:
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()


class ConfigBuilder:
    """Builds the website configuration file.

    Args:
        settings: Build settings (paths, extractor command, concurrency).
        extractor: Optional extractor; defaults to documentation.js.

    Example:
        >>> import asyncio
        >>> import json
        >>> import tempfile
        >>> from pathlib import Path
        >>> from docsconfig.core.builder import ConfigBuilder
        >>> from docsconfig.core.config import Settings
        >>> from docsconfig.extractor.memory import MemoryExtractor
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     root = Path(tmpdir)
        ...     _ = (root / "documentation.yml").write_text("toc:\\n  - name: Joins\\n  - tag\\n")
        ...     settings = Settings(root=root, manifest_path="documentation.yml",
        ...                         packages_glob="packages/*/package.json", output_path="config.json")
        ...     result = asyncio.run(ConfigBuilder(settings, extractor=MemoryExtractor()).build())
        ...     json.loads((root / "config.json").read_text())["modules"][0]["group"]
        'Joins'
    """

    def __init__(
        self,
        settings: Settings,
        *,
        extractor: MetadataExtractor | None = None,
    ) -> None:
        self.settings = settings
        self.extractor = extractor or DocumentationJsExtractor(
            command=settings.extractor_command,
            cwd=settings.root,
        )

    async def assemble(self) -> tuple[DocsConfig, list[PackageResult]]:
        """Run every step except the final write.

        Raises:
            ManifestError: If the manifest is unreadable or malformed.
            PackageError: If a package descriptor is unreadable or malformed.
            ExtractionError: If extraction fails for any package.
        """
        settings = self.settings
        manifest = load_manifest(settings.resolve(settings.manifest_path))
        packages = discover_packages(settings.packages_pattern)
        logger.info(f"Found {len(packages)} packages, {manifest.module_count} manifest modules")

        config = manifest.skeleton()
        normalizer = Normalizer(config, manifest.link_for)

        def on_result(result: PackageResult) -> None:
            normalizer.apply(result.package, result.symbols)

        await self.extractor.initialize()
        try:
            results = await Sequencer(self.extractor, settings.concurrency).run(packages, on_result)
        finally:
            await self.extractor.close()
        return config, results

    async def build(self) -> BuildResult:
        """Build and write the configuration file.

        Returns:
            BuildResult summarizing the run.
        """
        output_path = self.settings.resolve(self.settings.output_path)
        result = BuildResult(output_path=output_path)

        config, package_results = await self.assemble()
        write_config(config, output_path)

        result.packages = len(package_results)
        result.modules = sum(1 for _ in config.entries())
        result.documented = config.documented_count
        result.empty_packages = [r.package.name for r in package_results if r.empty]
        result.completed_at = datetime.now(UTC)
        return result

    def info(self) -> dict[str, Any]:
        """Get builder metadata."""
        settings = self.settings
        return {
            "root": str(settings.root),
            "manifest": str(settings.resolve(settings.manifest_path)),
            "packages": settings.packages_pattern,
            "output": str(settings.resolve(settings.output_path)),
            "extractor": type(self.extractor).__name__,
            "concurrency": settings.concurrency,
        }
