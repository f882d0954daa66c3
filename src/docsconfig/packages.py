"""Discovery of the library packages to document.

Every library component ships a ``package.json`` descriptor next to its
``index.js`` entry file. The enumerator globs for the descriptors and
reads each one.

Example:
    >>> from pathlib import Path
    >>> from docsconfig.packages import PackageDescriptor
    >>> pkg = PackageDescriptor(
    ...     name="@turf/along",
    ...     descriptor_path=Path("/repo/packages/turf-along/package.json"),
    ... )
    >>> pkg.entry_path.as_posix()
    '/repo/packages/turf-along/index.js'
"""

from __future__ import annotations

import glob
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from docsconfig.core.exceptions import PackageError

logger = logging.getLogger(__name__)

ENTRY_FILE = "index.js"


@dataclass(frozen=True)
class PackageDescriptor:
    """A library package to extract documentation from.

    Attributes:
        name: Package name from the descriptor.
        descriptor_path: Path of the ``package.json``.
    """

    name: str
    descriptor_path: Path

    @property
    def entry_path(self) -> Path:
        """The sibling entry file handed to the extractor."""
        return self.descriptor_path.parent / ENTRY_FILE


def load_descriptor(path: Path) -> PackageDescriptor:
    """Read one ``package.json``.

    Raises:
        PackageError: If the file is unreadable, not JSON, or lacks a name.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PackageError(f"Cannot read package descriptor '{path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PackageError(f"Package descriptor '{path}' is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise PackageError(f"Package descriptor '{path}' must be a JSON object")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise PackageError(f"Package descriptor '{path}' has no 'name'")
    return PackageDescriptor(name=name, descriptor_path=path)


def discover_packages(pattern: str) -> list[PackageDescriptor]:
    """Find and load every package descriptor matching a glob pattern.

    Matches are processed in sorted path order.

    Args:
        pattern: Glob pattern for ``package.json`` files.

    Returns:
        Descriptors in sorted path order.
    """
    paths = sorted(glob.glob(pattern))
    packages = [load_descriptor(Path(path)) for path in paths]
    logger.debug(f"Discovered {len(packages)} packages matching {pattern}")
    return packages
