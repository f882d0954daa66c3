"""Rendering of type expressions and descriptions to display strings.

Both renderers can annotate known symbols with hyperlinks taken from the
manifest's ``paths`` table. Lookups are case-insensitive.

Example:
    >>> from docsconfig.models.metadata import NamedType, UnionType
    >>> from docsconfig.render import Renderer
    >>> renderer = Renderer({"FEATURE": "https://example.com/feature"})
    >>> node = UnionType(elements=(NamedType("Number"), NamedType("Feature")))
    >>> renderer.render_type(node, add_link=True)
    '(Number | <a target="_blank" href="https://example.com/feature">Feature</a>)'
    >>> renderer.render_type(node)
    '(Number | Feature)'
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Literal

from docsconfig.core.exceptions import UnknownNodeError
from docsconfig.models.metadata import (
    DocNode,
    GenericType,
    LinkNode,
    NamedType,
    OptionalType,
    TextNode,
    TypeNode,
    UnionType,
)

OPTIONAL_PARAMETERS = "Optional parameters"


def anchor(href: str | None, text: str | None) -> str:
    """Render an HTML link opening in a new tab.

    Example:
        >>> anchor("https://example.com", "Point")
        '<a target="_blank" href="https://example.com">Point</a>'
    """
    return f'<a target="_blank" href="{href}">{text}</a>'


class Renderer:
    """Renders metadata nodes, resolving links through a lookup.

    Args:
        links: Either a mapping of upper-cased symbol names to URLs or a
            callable returning the URL for a symbol name (or None).
    """

    def __init__(self, links: Mapping[str, str] | Callable[[str], str | None]) -> None:
        if callable(links):
            self._lookup = links
        else:
            table = {key.upper(): value for key, value in links.items()}
            self._lookup = lambda name: table.get(name.upper())

    def link_for(self, name: str | None) -> str | None:
        """Return the manifest URL for a symbol name, if any."""
        if name is None:
            return None
        return self._lookup(name)

    def link(self, name: str | None, add_link: bool = False) -> str | None:
        """Render a symbol name, as a hyperlink when requested and known.

        Example:
            >>> from docsconfig.render import Renderer
            >>> r = Renderer({"POINT": "https://example.com/point"})
            >>> r.link("point", add_link=True)
            '<a target="_blank" href="https://example.com/point">point</a>'
            >>> r.link("Polygon", add_link=True)
            'Polygon'
        """
        url = self.link_for(name)
        if not add_link or url is None:
            return name
        return anchor(url, name)

    # --- Types ---

    def render_type(self, node: TypeNode | None, add_link: bool = False) -> str | Literal[False]:
        """Render a type expression; False when there is none.

        Example:
            >>> from docsconfig.models.metadata import GenericType, NamedType, OptionalType
            >>> from docsconfig.render import Renderer
            >>> r = Renderer({})
            >>> r.render_type(GenericType(NamedType("Array"), (NamedType("Point"), NamedType("Polygon"))))
            'Array <Point,Polygon>'
            >>> r.render_type(OptionalType(NamedType("Object")))
            'Optional: Object'
            >>> r.render_type(None)
            False
        """
        if node is None:
            return False
        if isinstance(node, UnionType):
            return self._render_union(node, add_link)
        if isinstance(node, OptionalType):
            expression = node.expression
            if isinstance(expression, NamedType):
                return f"Optional: {expression.name}"
            return f"Optional: {self.render_type(expression)}"
        if isinstance(node, NamedType):
            return self.link(node.name, add_link) or ""
        if isinstance(node, GenericType):
            arguments = ",".join(self._render_argument(arg, add_link) for arg in node.applications)
            return f"{node.name} <{arguments}>"
        raise UnknownNodeError(type(node).__name__, context="type")

    def _render_union(self, node: UnionType, add_link: bool) -> str:
        members = " | ".join(str(self.render_type(member, add_link)) for member in node.elements)
        return f"({members})"

    def _render_argument(self, node: TypeNode, add_link: bool) -> str:
        if isinstance(node, (UnionType, GenericType)):
            return str(self.render_type(node, add_link))
        return self.link(getattr(node, "name", None), add_link) or ""

    # --- Descriptions ---

    def render_fragment(self, node: DocNode, add_link: bool = False) -> str:
        """Render one inline description node."""
        if isinstance(node, TextNode):
            return node.value
        if isinstance(node, LinkNode):
            if not add_link:
                return node.text
            url = self.link_for(node.text)
            if url is None or not node.jsdoc:
                url = node.url
            return anchor(url, node.text)
        raise UnknownNodeError(type(node).__name__, context="description")

    def render_description(
        self,
        nodes: Iterable[DocNode] | None,
        add_link: bool = False,
    ) -> str | Literal[False]:
        """Render a description block; False when there is none.

        Fragments are joined with single spaces, the first ``" ."`` is
        collapsed and a bare "Optional parameters" points the reader at the
        options table.

        Example:
            >>> from docsconfig.models.metadata import TextNode
            >>> from docsconfig.render import Renderer
            >>> r = Renderer({})
            >>> r.render_description([TextNode("Optional parameters")])
            'Optional parameters: see below'
            >>> r.render_description([TextNode("Returns a point"), TextNode(".")])
            'Returns a point.'
        """
        if nodes is None:
            return False
        text = " ".join(self.render_fragment(node, add_link) for node in nodes)
        text = text.replace(" .", ".", 1)
        if text == OPTIONAL_PARAMETERS:
            text += ": see below"
        return text
