"""documentation.js extractor.

Runs the ``documentation`` CLI on a package entry file and parses its JSON
output. Only the entry file's own exports are documented (``--shallow``).

Example:
    >>> from docsconfig.extractor.documentation import DocumentationJsExtractor
    >>> extractor = DocumentationJsExtractor()
    >>> extractor.command_for("/repo/turf-along/index.js")
    ['documentation', 'build', '/repo/turf-along/index.js', '--shallow', '--format', 'json']
"""

from __future__ import annotations

import asyncio
import json
import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from docsconfig.core.exceptions import ConfigurationError, ExtractionError
from docsconfig.models.metadata import SymbolMetadata

if TYPE_CHECKING:
    from docsconfig.packages import PackageDescriptor

logger = logging.getLogger(__name__)


class DocumentationJsExtractor:
    """Extractor backed by the documentation.js command line tool.

    Best for: real builds against a checkout with node_modules installed.

    Args:
        command: Executable name or path.
        cwd: Working directory for the subprocess.
    """

    def __init__(self, command: str = "documentation", cwd: Path | None = None) -> None:
        self.command = command
        self.cwd = cwd
        self._executable: str | None = None

    async def initialize(self) -> None:
        """Locate the executable.

        Raises:
            ConfigurationError: If the command cannot be found.
        """
        executable = shutil.which(self.command)
        if executable is None:
            raise ConfigurationError(f"documentation.js executable not found: {self.command!r}")
        self._executable = executable

    async def close(self) -> None:
        """Clean up resources (no-op)."""
        self._executable = None

    def command_for(self, entry_path: Path | str) -> list[str]:
        """Build the argument vector for one entry file."""
        return [
            self._executable or self.command,
            "build",
            str(entry_path),
            "--shallow",
            "--format",
            "json",
        ]

    async def extract(self, package: PackageDescriptor) -> list[SymbolMetadata] | None:
        """Run documentation.js for a package.

        Raises:
            ExtractionError: If the process cannot start, exits non-zero or
                prints something other than a JSON array.
        """
        argv = self.command_for(package.entry_path)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self.cwd,
            )
        except OSError as exc:
            raise ExtractionError(f"Cannot run {argv[0]}: {exc}", package=package.name) from exc

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise ExtractionError(
                f"{argv[0]} exited with status {process.returncode}: {detail}",
                package=package.name,
            )

        output = stdout.decode("utf-8").strip()
        if not output:
            return None
        return parse_symbols(output, package.name)


def parse_symbols(output: str, package: str | None = None) -> list[SymbolMetadata]:
    """Parse documentation.js JSON output into symbol records.

    Example:
        >>> from docsconfig.extractor.documentation import parse_symbols
        >>> [s.name for s in parse_symbols('[{"name": "along"}, {"name": "area"}]')]
        ['along', 'area']
    """
    try:
        data = json.loads(output)
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Extractor output is not valid JSON: {exc}", package=package) from exc
    if not isinstance(data, list):
        raise ExtractionError("Extractor output must be a JSON array", package=package)
    return [SymbolMetadata.from_dict(item) for item in data]
