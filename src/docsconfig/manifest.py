"""Table-of-contents manifest loading.

The manifest is a YAML document with two keys:

- ``toc``: an ordered list of group markers (mappings with a ``name``) and
  module names (plain strings). Every module belongs to the closest group
  marker above it.
- ``paths``: a mapping of symbol name to documentation URL, used to
  hyperlink type names and ``{@link}`` references.

Example:
    >>> from docsconfig.manifest import Manifest
    >>> manifest = Manifest.from_dict({
    ...     "toc": [{"name": "Measurement"}, "along", "area"],
    ...     "paths": {"Feature": "https://example.com/feature"},
    ... })
    >>> [(group, list(names)) for group, names in manifest.toc]
    [('Measurement', ['along', 'area'])]
    >>> manifest.link_for("feature")
    'https://example.com/feature'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from docsconfig.core.exceptions import ManifestError
from docsconfig.models.module import DocsConfig, ModuleEntry, ModuleGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Manifest:
    """A parsed manifest.

    Attributes:
        toc: Groups in manifest order, each with its module names in order.
        paths: Symbol name to URL. Every key is also present upper-cased.
    """

    toc: tuple[tuple[str, tuple[str, ...]], ...] = ()
    paths: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Manifest:
        """Build a manifest from a decoded YAML document.

        Raises:
            ManifestError: If the document does not have the expected shape.
        """
        if not isinstance(data, Mapping):
            raise ManifestError("Manifest must contain a mapping at the root")

        toc = data.get("toc")
        if not isinstance(toc, list):
            raise ManifestError("Manifest 'toc' must be a list")

        groups: list[tuple[str, list[str]]] = []
        for index, item in enumerate(toc):
            if isinstance(item, Mapping):
                name = item.get("name")
                if not isinstance(name, str):
                    raise ManifestError(f"toc[{index}]: group marker needs a string 'name'")
                groups.append((name, []))
            elif isinstance(item, str):
                if not groups:
                    raise ManifestError(f"toc[{index}]: module '{item}' appears before any group")
                groups[-1][1].append(item)
            else:
                raise ManifestError(f"toc[{index}]: expected a group marker or a module name")

        raw_paths = data.get("paths") or {}
        if not isinstance(raw_paths, Mapping):
            raise ManifestError("Manifest 'paths' must be a mapping")
        paths = {str(name): str(url) for name, url in raw_paths.items()}
        for name, url in list(paths.items()):
            paths[name.upper()] = url

        return cls(
            toc=tuple((group, tuple(names)) for group, names in groups),
            paths=paths,
        )

    def link_for(self, name: str) -> str | None:
        """Case-insensitive URL lookup for a symbol name."""
        return self.paths.get(name.upper())

    def skeleton(self) -> DocsConfig:
        """Create a fresh output tree of empty module placeholders.

        Example:
            >>> from docsconfig.manifest import Manifest
            >>> m = Manifest.from_dict({"toc": [{"name": "Joins"}, "tag"]})
            >>> m.skeleton().to_dict()
            {'modules': [{'group': 'Joins', 'modules': [{'name': 'tag', 'hidden': False}]}]}
        """
        return DocsConfig(
            modules=[
                ModuleGroup(group=group, modules=[ModuleEntry(name=name) for name in names])
                for group, names in self.toc
            ]
        )

    @property
    def module_count(self) -> int:
        return sum(len(names) for _, names in self.toc)


def load_manifest(path: Path) -> Manifest:
    """Read and parse a manifest file.

    Raises:
        ManifestError: If the file is missing, is not valid YAML or has an
            unexpected shape.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ManifestError(f"Manifest '{path}' contains invalid YAML") from exc

    manifest = Manifest.from_dict(data)
    logger.debug(f"Loaded manifest {path}: {len(manifest.toc)} groups, {manifest.module_count} modules")
    return manifest
