"""Normalization of symbol metadata into module entries.

The normalizer walks the metadata of one package at a time and fills the
matching placeholders of the output tree. Missing documentation is not an
error: absent fields become ``False`` (or ``None`` for options) and entries
without descriptive text stay in their lists as ``False`` placeholders.

Example:
    >>> from pathlib import Path
    >>> from docsconfig.manifest import Manifest
    >>> from docsconfig.models.metadata import SymbolMetadata
    >>> from docsconfig.normalizer import Normalizer
    >>> from docsconfig.packages import PackageDescriptor
    >>> manifest = Manifest.from_dict({"toc": [{"name": "Measurement"}, "along"]})
    >>> config = manifest.skeleton()
    >>> normalizer = Normalizer(config, manifest.link_for)
    >>> pkg = PackageDescriptor("@turf/along", Path("turf-along/package.json"))
    >>> normalizer.apply(pkg, [SymbolMetadata(name="along", examples=("turf.along(line, 1);",))])
    1
    >>> config.find("along").snippet
    'turf.along(line, 1);'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Literal

from docsconfig.models.module import (
    DocsConfig,
    OptionEntry,
    ParamEntry,
    ParamList,
    ReturnEntry,
    ReturnList,
)
from docsconfig.render import Renderer

if TYPE_CHECKING:
    from docsconfig.models.metadata import ReturnDoc, SymbolMetadata
    from docsconfig.packages import PackageDescriptor

logger = logging.getLogger(__name__)

MAP_MARKER = "//addToMap"
OPTIONS_PARAM = "options"
OPTIONS_PREFIX = "options."


class Normalizer:
    """Fills module placeholders from symbol metadata.

    Args:
        config: Output tree whose entries are filled in place.
        links: A Renderer, or a manifest link lookup (mapping or callable)
            for hyperlinks.
    """

    def __init__(
        self,
        config: DocsConfig,
        links: Renderer | Mapping[str, str] | Callable[[str], str | None],
    ) -> None:
        self.config = config
        self.renderer = links if isinstance(links, Renderer) else Renderer(links)

    def apply(self, package: PackageDescriptor, symbols: Sequence[SymbolMetadata]) -> int:
        """Apply one package's metadata to the output tree.

        Args:
            package: The package the symbols were extracted from.
            symbols: Its top-level symbols.

        Returns:
            Number of module entries filled.
        """
        parent = package.name if len(symbols) > 1 else None
        filled = 0
        for metadata in symbols:
            entry = self.config.find(metadata.name)
            if entry is None:
                logger.debug(f"No manifest entry for {metadata.name} ({package.name})")
                continue
            if entry.is_documented:
                logger.warning(f"{metadata.name} already documented, ignoring copy from {package.name}")
                continue
            entry.document(parent=parent, package_name=package.name, **self.normalize(metadata))
            filled += 1
        return filled

    def normalize(self, metadata: SymbolMetadata) -> dict[str, Any]:
        """Compute every normalized field for one symbol."""
        return {
            "description": self.description(metadata),
            "snippet": self.snippet(metadata),
            "example": self.example(metadata),
            "has_map": self.has_map(metadata),
            "returns": self.returns(metadata),
            "params": self.params(metadata),
            "options": self.options(metadata),
            "throws": self.throws(metadata),
        }

    # --- Description and examples ---

    def description(self, metadata: SymbolMetadata) -> str | Literal[False]:
        return self.renderer.render_description(metadata.description.first_block, add_link=True)

    def snippet(self, metadata: SymbolMetadata) -> str | Literal[False]:
        """First example up to the map marker.

        Example:
            >>> from docsconfig.models.metadata import SymbolMetadata
            >>> from docsconfig.normalizer import Normalizer
            >>> from docsconfig.models.module import DocsConfig
            >>> n = Normalizer(DocsConfig(), {})
            >>> n.snippet(SymbolMetadata(name="x", examples=("foo\\n//addToMap\\nbar",)))
            'foo\\n'
        """
        if not metadata.examples:
            return False
        return metadata.examples[0].split(MAP_MARKER, 1)[0]

    def example(self, metadata: SymbolMetadata) -> str | Literal[False]:
        if not metadata.examples:
            return False
        return metadata.examples[0]

    def has_map(self, metadata: SymbolMetadata) -> bool:
        return bool(metadata.examples) and MAP_MARKER in metadata.examples[0]

    # --- Returns and throws ---

    def returns(self, metadata: SymbolMetadata) -> ReturnList | Literal[False]:
        return self._results(metadata.returns)

    def throws(self, metadata: SymbolMetadata) -> ReturnList | Literal[False]:
        return self._results(metadata.throws)

    def _results(self, declared: Sequence[ReturnDoc]) -> ReturnList | Literal[False]:
        if not declared:
            return False
        results: ReturnList = []
        for result in declared:
            if result.description.is_empty:
                results.append(False)
                continue
            results.append(
                ReturnEntry(
                    type_name=self.renderer.render_type(result.type),
                    desc=self.renderer.render_description(result.description.first_block),
                )
            )
        return results

    # --- Parameters ---

    def params(self, metadata: SymbolMetadata) -> ParamList | Literal[False]:
        """Parameter table ordered by source line.

        Untyped parameters are left out; typed ones without a description
        are kept as ``False``.
        """
        if not metadata.params:
            return False
        rows: list[tuple[int, ParamEntry | Literal[False]]] = []
        for param in metadata.params:
            if param.type is None:
                continue
            line = param.line_number if param.line_number is not None else 0
            if param.description.is_empty:
                rows.append((line, False))
                continue
            rows.append(
                (
                    line,
                    ParamEntry(
                        argument=param.name,
                        type_name=self.renderer.render_type(param.type, add_link=True),
                        description=self.renderer.render_description(param.description.first_block),
                    ),
                )
            )
        rows.sort(key=lambda row: row[0])
        return [row for _, row in rows]

    def options(self, metadata: SymbolMetadata) -> list[OptionEntry] | Literal[False] | None:
        """Options table from the parameter named ``options``.

        False without any parameters, None without an ``options`` parameter.
        """
        if not metadata.params:
            return False
        options = next((p for p in metadata.params if p.name == OPTIONS_PARAM), None)
        if options is None:
            return None
        return [
            OptionEntry(
                prop=prop.name.replace(OPTIONS_PREFIX, "", 1),
                type_name=self.renderer.render_type(prop.type),
                default=clean_default(prop.default),
                description=self.renderer.render_description(prop.description.first_block),
            )
            for prop in options.properties
        ]


def clean_default(value: str | None) -> str | None:
    """Unescape a documented default value for display.

    Drops the first backslash, then one pair of matching surrounding quotes.

    Example:
        >>> from docsconfig.normalizer import clean_default
        >>> clean_default("'kilometers'")
        'kilometers'
        >>> clean_default("\\\\d+")
        'd+'
        >>> clean_default("10")
        '10'
        >>> clean_default(None) is None
        True
    """
    if not value:
        return None
    value = value.replace("\\", "", 1)
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1]
    return value
