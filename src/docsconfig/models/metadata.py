"""Documentation metadata produced by the extractor.

The extractor emits one JSON object per exported symbol. Its description
fields are markdown syntax trees and its type fields are JSDoc type
expressions. This module parses both up front into a closed set of node
kinds; anything else fails fast with :class:`UnknownNodeError`.

Description nodes:
    - :class:`TextNode`: plain text (``text``, ``inlineCode``, ...)
    - :class:`LinkNode`: a node with children, usually a ``{@link}``

Type nodes:
    - :class:`NamedType`: ``NameExpression`` and object-like types
    - :class:`UnionType`: ``(A|B)``
    - :class:`OptionalType`: ``[A]`` / ``A=``
    - :class:`GenericType`: ``Array<A>``

Example:
    >>> from docsconfig.models.metadata import parse_type
    >>> node = parse_type({
    ...     "type": "UnionType",
    ...     "elements": [
    ...         {"type": "NameExpression", "name": "Number"},
    ...         {"type": "NameExpression", "name": "Feature"},
    ...     ],
    ... })
    >>> [member.name for member in node.elements]
    ['Number', 'Feature']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from docsconfig.core.exceptions import UnknownNodeError

# =============================================================================
# Description nodes
# =============================================================================


@dataclass(frozen=True)
class TextNode:
    """Plain text fragment."""

    value: str


@dataclass(frozen=True)
class LinkNode:
    """Link fragment.

    Attributes:
        text: Visible link text (the first child's value).
        url: URL embedded in the node, if any.
        jsdoc: True when the node is an internal symbol link.
    """

    text: str
    url: str | None = None
    jsdoc: bool = False


DocNode = Union[TextNode, LinkNode]


def parse_doc_node(raw: dict[str, Any]) -> DocNode:
    """Parse one inline node of a description paragraph.

    Example:
        >>> from docsconfig.models.metadata import parse_doc_node
        >>> parse_doc_node({"type": "text", "value": "Takes a "})
        TextNode(value='Takes a ')
        >>> parse_doc_node({
        ...     "type": "link",
        ...     "url": "https://example.com/feature",
        ...     "jsdoc": True,
        ...     "children": [{"type": "text", "value": "Feature"}],
        ... })
        LinkNode(text='Feature', url='https://example.com/feature', jsdoc=True)
    """
    if not isinstance(raw, dict):
        raise UnknownNodeError(raw, context="description")
    children = raw.get("children")
    if children:
        first = children[0]
        if not isinstance(first, dict) or "value" not in first:
            raise UnknownNodeError(first, context="link text")
        return LinkNode(text=first["value"], url=raw.get("url"), jsdoc=bool(raw.get("jsdoc")))
    if "value" in raw:
        return TextNode(value=raw["value"])
    raise UnknownNodeError(raw.get("type"), context="description")


@dataclass(frozen=True)
class Description:
    """A parsed description tree.

    Each block is the tuple of inline nodes of one top-level paragraph, or
    None for a block without inline children (a code block, for instance).
    """

    blocks: tuple[tuple[DocNode, ...] | None, ...] = ()

    @property
    def first_block(self) -> tuple[DocNode, ...] | None:
        """Inline nodes of the first block, None if there is none."""
        return self.blocks[0] if self.blocks else None

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> Description:
        """Parse a markdown root node.

        Example:
            >>> from docsconfig.models.metadata import Description
            >>> d = Description.from_dict({
            ...     "type": "root",
            ...     "children": [{"type": "paragraph", "children": [{"type": "text", "value": "Hi"}]}],
            ... })
            >>> d.first_block
            (TextNode(value='Hi'),)
            >>> Description.from_dict(None).is_empty
            True
        """
        if not raw:
            return cls()
        blocks: list[tuple[DocNode, ...] | None] = []
        for block in raw.get("children") or []:
            inline = block.get("children") if isinstance(block, dict) else None
            if inline is None:
                blocks.append(None)
            else:
                blocks.append(tuple(parse_doc_node(node) for node in inline))
        return cls(blocks=tuple(blocks))


# =============================================================================
# Type nodes
# =============================================================================


@dataclass(frozen=True)
class NamedType:
    """A named or object-like type."""

    name: str | None


@dataclass(frozen=True)
class UnionType:
    elements: tuple[TypeNode, ...]


@dataclass(frozen=True)
class OptionalType:
    expression: TypeNode


@dataclass(frozen=True)
class GenericType:
    """A parameterized type such as ``Array<Feature>``."""

    expression: TypeNode
    applications: tuple[TypeNode, ...]

    @property
    def name(self) -> str | None:
        return getattr(self.expression, "name", None)


TypeNode = Union[NamedType, UnionType, OptionalType, GenericType]


def parse_type(raw: dict[str, Any] | None) -> TypeNode | None:
    """Parse a JSDoc type expression; None when absent.

    Raises:
        UnknownNodeError: For a type kind outside the recognized set.

    Example:
        >>> from docsconfig.models.metadata import parse_type
        >>> parse_type({"type": "NameExpression", "name": "Point"})
        NamedType(name='Point')
        >>> parse_type(None) is None
        True
    """
    if not raw:
        return None
    kind = raw.get("type")
    if kind == "UnionType":
        return UnionType(elements=tuple(_required_type(node) for node in raw.get("elements", [])))
    if kind == "OptionalType":
        return OptionalType(expression=_required_type(raw.get("expression")))
    if kind == "TypeApplication":
        return GenericType(
            expression=_required_type(raw.get("expression")),
            applications=tuple(_required_type(node) for node in raw.get("applications", [])),
        )
    if kind == "NameExpression" or isinstance(kind, dict):
        return NamedType(name=raw.get("name"))
    raise UnknownNodeError(kind, context="type")


def _required_type(raw: dict[str, Any] | None) -> TypeNode:
    node = parse_type(raw)
    if node is None:
        raise UnknownNodeError(raw, context="type")
    return node


# =============================================================================
# Symbol records
# =============================================================================


@dataclass(frozen=True)
class ParamDoc:
    """A documented parameter or parameter property."""

    name: str
    type: TypeNode | None = None
    description: Description = field(default_factory=Description)
    line_number: int | None = None
    default: str | None = None
    properties: tuple[ParamDoc, ...] = ()

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ParamDoc:
        return cls(
            name=raw.get("name", ""),
            type=parse_type(raw.get("type")),
            description=Description.from_dict(raw.get("description")),
            line_number=raw.get("lineNumber"),
            default=raw.get("default"),
            properties=tuple(cls.from_dict(prop) for prop in raw.get("properties") or []),
        )


@dataclass(frozen=True)
class ReturnDoc:
    """A documented return value or thrown error."""

    type: TypeNode | None = None
    description: Description = field(default_factory=Description)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ReturnDoc:
        return cls(
            type=parse_type(raw.get("type")),
            description=Description.from_dict(raw.get("description")),
        )


@dataclass(frozen=True)
class SymbolMetadata:
    """Documentation metadata for one exported symbol.

    ``params``, ``returns`` and ``throws`` are empty tuples when nothing is
    declared.

    Example:
        >>> from docsconfig.models.metadata import SymbolMetadata
        >>> meta = SymbolMetadata.from_dict({
        ...     "name": "along",
        ...     "examples": [{"description": "turf.along(line, 200);"}],
        ...     "params": [{"name": "line", "lineNumber": 3}],
        ... })
        >>> meta.name, meta.examples, meta.params[0].line_number
        ('along', ('turf.along(line, 200);',), 3)
    """

    name: str
    description: Description = field(default_factory=Description)
    examples: tuple[str, ...] = ()
    params: tuple[ParamDoc, ...] = ()
    returns: tuple[ReturnDoc, ...] = ()
    throws: tuple[ReturnDoc, ...] = ()

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> SymbolMetadata:
        return cls(
            name=raw.get("name", ""),
            description=Description.from_dict(raw.get("description")),
            examples=tuple(
                example.get("description", "") for example in raw.get("examples") or []
            ),
            params=tuple(ParamDoc.from_dict(p) for p in raw.get("params") or []),
            returns=tuple(ReturnDoc.from_dict(r) for r in raw.get("returns") or []),
            throws=tuple(ReturnDoc.from_dict(t) for t in raw.get("throws") or []),
        )
