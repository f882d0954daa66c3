"""Output models for the website configuration file.

The configuration file is a tree of groups, each holding the module entries
listed for it in the manifest. Entries start as placeholders carrying only a
name and are filled in once their documentation metadata is found.

Example:
    >>> from docsconfig.models.module import DocsConfig, ModuleEntry, ModuleGroup
    >>> config = DocsConfig(modules=[
    ...     ModuleGroup(group="Measurement", modules=[ModuleEntry(name="along")]),
    ... ])
    >>> config.model_dump(by_alias=True)
    {'modules': [{'group': 'Measurement', 'modules': [{'name': 'along', 'hidden': False}]}]}
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Literal

from pydantic import Field, PrivateAttr, SerializerFunctionWrapHandler, model_serializer

from docsconfig.models.base import DocsConfigModel

# Keys an unfilled placeholder serializes to.
PLACEHOLDER_FIELDS = ("name", "hidden")


class ParamEntry(DocsConfigModel):
    """One row of a module's parameter table.

    Example:
        >>> from docsconfig.models.module import ParamEntry
        >>> row = ParamEntry(argument="line", type_name="Feature", description="input line")
        >>> row.model_dump(by_alias=True)
        {'Argument': 'line', 'Type': 'Feature', 'Description': 'input line'}
    """

    argument: str = Field(..., alias="Argument")
    type_name: str | Literal[False] = Field(..., alias="Type")
    description: str | Literal[False] = Field(..., alias="Description")


class OptionEntry(DocsConfigModel):
    """One row of a module's options table.

    Example:
        >>> from docsconfig.models.module import OptionEntry
        >>> row = OptionEntry(prop="units", type_name="string", default="kilometers", description="")
        >>> row.model_dump(by_alias=True)["Prop"]
        'units'
    """

    prop: str = Field(..., alias="Prop")
    type_name: str | Literal[False] = Field(..., alias="Type")
    default: str | None = Field(default=None, alias="Default")
    description: str | Literal[False] = Field(..., alias="Description")


class ReturnEntry(DocsConfigModel):
    """A documented return value or thrown error."""

    type_name: str | Literal[False] = Field(..., alias="type")
    desc: str | Literal[False]


# Placeholders for entries without descriptive text are kept as ``False``.
ParamList = list[ParamEntry | Literal[False]]
ReturnList = list[ReturnEntry | Literal[False]]


class ModuleEntry(DocsConfigModel):
    """The output record for one documented symbol.

    Created from the manifest with only ``name`` and ``hidden`` and filled
    exactly once through :meth:`document`. Until then it serializes to the
    bare placeholder.

    Example:
        >>> from docsconfig.models.module import ModuleEntry
        >>> entry = ModuleEntry(name="along")
        >>> entry.is_documented
        False
        >>> entry.document(description="Takes a line.", package_name="@turf/along")
        >>> entry.model_dump(by_alias=True)["npmName"]
        '@turf/along'
    """

    name: str
    hidden: bool = False
    parent: str | None = None
    description: str | Literal[False] | None = None
    snippet: str | Literal[False] | None = None
    example: str | Literal[False] | None = None
    has_map: bool = Field(default=False, alias="hasMap")
    package_name: str | None = Field(default=None, alias="npmName")
    returns: ReturnList | Literal[False] | None = None
    params: ParamList | Literal[False] | None = None
    options: list[OptionEntry] | Literal[False] | None = None
    throws: ReturnList | Literal[False] | None = None

    _documented: bool = PrivateAttr(default=False)

    def model_post_init(self, __context: Any) -> None:
        # Entries read back from a written file are documented when they
        # carry anything beyond the placeholder keys.
        self._documented = bool(self.model_fields_set - set(PLACEHOLDER_FIELDS))

    @property
    def is_documented(self) -> bool:
        """Whether metadata has been applied to this entry."""
        return self._documented

    def document(self, **fields: Any) -> None:
        """Fill the entry from normalized metadata.

        Args:
            **fields: Field values keyed by field name (not alias).

        Raises:
            ValueError: If the entry was already documented.
        """
        if self._documented:
            raise ValueError(f"Module '{self.name}' is already documented")
        for key, value in fields.items():
            setattr(self, key, value)
        self._documented = True

    @model_serializer(mode="wrap")
    def serialize_entry(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not self._documented:
            return {key: data[key] for key in PLACEHOLDER_FIELDS}
        return data


class ModuleGroup(DocsConfigModel):
    """A named group of module entries, in manifest order."""

    group: str
    modules: list[ModuleEntry] = Field(default_factory=list)


class DocsConfig(DocsConfigModel):
    """The complete configuration document.

    Example:
        >>> from docsconfig.models.module import DocsConfig, ModuleEntry, ModuleGroup
        >>> config = DocsConfig(modules=[
        ...     ModuleGroup(group="Measurement", modules=[ModuleEntry(name="along")]),
        ...     ModuleGroup(group="Joins", modules=[ModuleEntry(name="tag")]),
        ... ])
        >>> config.find("tag").name
        'tag'
        >>> config.find("missing") is None
        True
    """

    modules: list[ModuleGroup] = Field(default_factory=list)

    def entries(self) -> Iterator[ModuleEntry]:
        """Iterate over every module entry in output order."""
        for group in self.modules:
            yield from group.modules

    def find(self, name: str) -> ModuleEntry | None:
        """Return the first entry whose name matches exactly."""
        for entry in self.entries():
            if entry.name == name:
                return entry
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON-compatible output shape."""
        return self.model_dump(mode="json", by_alias=True)

    @property
    def documented_count(self) -> int:
        """Number of entries that received metadata."""
        return sum(1 for entry in self.entries() if entry.is_documented)
