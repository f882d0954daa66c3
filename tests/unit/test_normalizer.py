"""Tests for the Normalizer.

Tests cover:
- Matching metadata to manifest entries
- Description, snippet, example and map marker handling
- Parameter, option, return and throws tables
- Placeholders for missing documentation
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from docsconfig.manifest import Manifest
from docsconfig.models.metadata import SymbolMetadata
from docsconfig.models.module import OptionEntry, ParamEntry, ReturnEntry
from docsconfig.normalizer import Normalizer
from docsconfig.packages import PackageDescriptor

# =============================================================================
# Test Fixtures and Helpers
# =============================================================================

FEATURE_URL = "https://example.com/feature"


def text(value: str) -> dict[str, Any]:
    return {"type": "text", "value": value}


def link(value: str, url: str | None = None, jsdoc: bool = True) -> dict[str, Any]:
    return {"type": "link", "url": url, "jsdoc": jsdoc, "children": [text(value)]}


def root(*inline: dict[str, Any]) -> dict[str, Any]:
    return {"type": "root", "children": [{"type": "paragraph", "children": list(inline)}]}


def name_type(name: str) -> dict[str, Any]:
    return {"type": "NameExpression", "name": name}


def symbol(name: str = "along", **fields: Any) -> SymbolMetadata:
    return SymbolMetadata.from_dict({"name": name, **fields})


def package(name: str = "@turf/along") -> PackageDescriptor:
    return PackageDescriptor(name=name, descriptor_path=Path("packages/turf-along/package.json"))


@pytest.fixture
def manifest() -> Manifest:
    return Manifest.from_dict(
        {
            "toc": [{"name": "Measurement"}, "along", "area", {"name": "Misc"}, "kinks"],
            "paths": {"Feature": FEATURE_URL},
        }
    )


@pytest.fixture
def normalizer(manifest: Manifest) -> Normalizer:
    return Normalizer(manifest.skeleton(), manifest.link_for)


# =============================================================================
# Matching Tests
# =============================================================================


class TestNormalizerMatching:
    """Tests for matching metadata to entries."""

    def test_fills_matching_entry(self, normalizer):
        """Matching metadata fills the entry."""
        filled = normalizer.apply(package(), [symbol(description=root(text("Takes a line.")))])

        entry = normalizer.config.find("along")
        assert filled == 1
        assert entry.is_documented
        assert entry.description == "Takes a line."
        assert entry.package_name == "@turf/along"

    def test_unmatched_metadata_dropped(self, normalizer):
        """Metadata without a manifest entry is ignored."""
        filled = normalizer.apply(package(), [symbol(name="notInToc")])

        assert filled == 0
        assert normalizer.config.documented_count == 0

    def test_unmatched_entry_stays_placeholder(self, normalizer):
        """Entries without metadata serialize to name and hidden only."""
        normalizer.apply(package(), [symbol()])

        groups = normalizer.config.to_dict()["modules"]
        assert groups[0]["modules"][1] == {"name": "area", "hidden": False}
        assert groups[1]["modules"][0] == {"name": "kinks", "hidden": False}

    def test_single_symbol_has_no_parent(self, normalizer):
        """A package exposing one symbol sets no parent."""
        normalizer.apply(package(), [symbol()])
        assert normalizer.config.find("along").parent is None

    def test_multiple_symbols_set_parent(self, normalizer):
        """A package exposing several symbols becomes their parent."""
        normalizer.apply(package("@turf/helpers"), [symbol("along"), symbol("area")])

        assert normalizer.config.find("along").parent == "@turf/helpers"
        assert normalizer.config.find("area").parent == "@turf/helpers"

    def test_duplicate_symbol_keeps_first(self, normalizer):
        """A symbol already filled is not overwritten."""
        normalizer.apply(package("@turf/along"), [symbol(description=root(text("first")))])
        filled = normalizer.apply(package("@turf/other"), [symbol(description=root(text("second")))])

        assert filled == 0
        assert normalizer.config.find("along").description == "first"


# =============================================================================
# Description and Example Tests
# =============================================================================


class TestNormalizerDescription:
    """Tests for descriptions."""

    def test_description_links_symbols(self, normalizer):
        """Internal links in the description resolve through the manifest."""
        meta = symbol(description=root(text("Takes a"), link("Feature"), text("and measures it")))

        assert normalizer.description(meta) == (
            f'Takes a <a target="_blank" href="{FEATURE_URL}">Feature</a> and measures it'
        )

    def test_only_first_block_used(self, normalizer):
        """Only the first paragraph is rendered."""
        meta = symbol(
            description={
                "type": "root",
                "children": [
                    {"type": "paragraph", "children": [text("First.")]},
                    {"type": "paragraph", "children": [text("Second.")]},
                ],
            }
        )
        assert normalizer.description(meta) == "First."

    def test_missing_description(self, normalizer):
        """No description renders as False."""
        assert normalizer.description(symbol()) is False

    def test_optional_parameters_description(self, normalizer):
        """The bare 'Optional parameters' text is expanded."""
        meta = symbol(description=root(text("Optional parameters")))
        assert normalizer.description(meta) == "Optional parameters: see below"


class TestNormalizerExamples:
    """Tests for snippets, examples and the map marker."""

    def test_snippet_cut_at_marker(self, normalizer):
        """The snippet stops at the map marker."""
        meta = symbol(examples=[{"description": "foo\n//addToMap\nbar"}])

        assert normalizer.snippet(meta) == "foo\n"
        assert normalizer.has_map(meta) is True

    def test_example_verbatim(self, normalizer):
        """The example keeps the full text."""
        meta = symbol(examples=[{"description": "foo\n//addToMap\nbar"}])
        assert normalizer.example(meta) == "foo\n//addToMap\nbar"

    def test_without_marker(self, normalizer):
        """Without a marker the snippet is the whole example."""
        meta = symbol(examples=[{"description": "var pt = turf.point([0, 0]);"}])

        assert normalizer.snippet(meta) == "var pt = turf.point([0, 0]);"
        assert normalizer.has_map(meta) is False

    def test_only_first_example(self, normalizer):
        """Later examples are ignored."""
        meta = symbol(examples=[{"description": "one"}, {"description": "two"}])
        assert normalizer.example(meta) == "one"

    def test_no_example(self, normalizer):
        """Missing examples become False."""
        meta = symbol()

        assert normalizer.snippet(meta) is False
        assert normalizer.example(meta) is False
        assert normalizer.has_map(meta) is False


# =============================================================================
# Parameter Tests
# =============================================================================


class TestNormalizerParams:
    """Tests for the parameter table."""

    def test_params_sorted_by_line(self, normalizer):
        """Rows are ordered by source line number."""
        meta = symbol(
            params=[
                {"name": "distance", "lineNumber": 5, "type": name_type("number"), "description": root(text("d"))},
                {"name": "line", "lineNumber": 3, "type": name_type("Feature"), "description": root(text("l"))},
            ]
        )

        rows = normalizer.params(meta)

        assert [row.argument for row in rows] == ["line", "distance"]

    def test_param_type_linked_description_not(self, normalizer):
        """Types are linked, descriptions are not."""
        meta = symbol(
            params=[
                {
                    "name": "line",
                    "lineNumber": 1,
                    "type": name_type("Feature"),
                    "description": root(text("input"), link("Feature")),
                }
            ]
        )

        [row] = normalizer.params(meta)

        assert row == ParamEntry(
            argument="line",
            type_name=f'<a target="_blank" href="{FEATURE_URL}">Feature</a>',
            description="input Feature",
        )

    def test_untyped_params_excluded(self, normalizer):
        """Parameters without a type are left out."""
        meta = symbol(params=[{"name": "x", "lineNumber": 1, "description": root(text("x"))}])
        assert normalizer.params(meta) == []

    def test_empty_description_placeholder(self, normalizer):
        """Typed parameters without a description become False."""
        meta = symbol(
            params=[
                {"name": "a", "lineNumber": 1, "type": name_type("number"), "description": {"type": "root", "children": []}},
                {"name": "b", "lineNumber": 2, "type": name_type("number"), "description": root(text("b"))},
            ]
        )

        rows = normalizer.params(meta)

        assert rows[0] is False
        assert rows[1].argument == "b"

    def test_no_params(self, normalizer):
        """No parameters at all becomes False."""
        assert normalizer.params(symbol()) is False

    def test_serialized_keys(self, normalizer):
        """Rows serialize with the website's column names."""
        meta = symbol(params=[{"name": "a", "lineNumber": 1, "type": name_type("number"), "description": root(text("b"))}])
        normalizer.apply(package(), [meta])

        entry = normalizer.config.to_dict()["modules"][0]["modules"][0]
        assert entry["params"] == [{"Argument": "a", "Type": "number", "Description": "b"}]


class TestNormalizerOptions:
    """Tests for the options table."""

    def test_options_table(self, normalizer):
        """Properties of the 'options' parameter become rows."""
        meta = symbol(
            params=[
                {
                    "name": "options",
                    "lineNumber": 4,
                    "type": name_type("Object"),
                    "description": root(text("Optional parameters")),
                    "properties": [
                        {
                            "name": "options.units",
                            "type": name_type("string"),
                            "default": "'kilometers'",
                            "description": root(text("can be degrees, radians, miles, or kilometers")),
                        }
                    ],
                }
            ]
        )

        [row] = normalizer.options(meta)

        assert row == OptionEntry(
            prop="units",
            type_name="string",
            default="kilometers",
            description="can be degrees, radians, miles, or kilometers",
        )

    def test_default_backslash_removed_once(self, normalizer):
        """Only the first backslash of a default is removed."""
        meta = symbol(
            params=[
                {
                    "name": "options",
                    "type": name_type("Object"),
                    "properties": [{"name": "options.pattern", "default": "\\d\\d", "description": root(text("p"))}],
                }
            ]
        )

        [row] = normalizer.options(meta)

        assert row.default == "d\\d"
        assert row.type_name is False

    def test_missing_default(self, normalizer):
        """Properties without a default have None."""
        meta = symbol(
            params=[
                {
                    "name": "options",
                    "type": name_type("Object"),
                    "properties": [{"name": "options.mutate", "type": name_type("boolean"), "description": root(text("m"))}],
                }
            ]
        )
        assert normalizer.options(meta)[0].default is None

    def test_no_options_param(self, normalizer):
        """Parameters without 'options' give None."""
        meta = symbol(params=[{"name": "line", "type": name_type("Feature"), "description": root(text("l"))}])
        assert normalizer.options(meta) is None

    def test_no_params(self, normalizer):
        """No parameters at all gives False."""
        assert normalizer.options(symbol()) is False


# =============================================================================
# Returns and Throws Tests
# =============================================================================


class TestNormalizerReturns:
    """Tests for returns and throws."""

    def test_returns(self, normalizer):
        """Returns carry an unlinked type and description."""
        meta = symbol(returns=[{"type": name_type("Feature"), "description": root(text("the point"))}])
        assert normalizer.returns(meta) == [ReturnEntry(type_name="Feature", desc="the point")]

    def test_return_without_description(self, normalizer):
        """Entries without a description become False."""
        meta = symbol(returns=[{"type": name_type("Feature"), "description": {"type": "root", "children": []}}])
        assert normalizer.returns(meta) == [False]

    def test_no_returns(self, normalizer):
        """No declared returns gives False."""
        assert normalizer.returns(symbol()) is False

    def test_throws(self, normalizer):
        """Throws use the same shape as returns."""
        meta = symbol(throws=[{"type": name_type("Error"), "description": root(text("if line is invalid"))}])

        assert normalizer.throws(meta) == [ReturnEntry(type_name="Error", desc="if line is invalid")]
        assert normalizer.throws(symbol()) is False

    def test_serialized_keys(self, normalizer):
        """Returns serialize with 'type' and 'desc' keys."""
        meta = symbol(returns=[{"type": name_type("number"), "description": root(text("area"))}])
        normalizer.apply(package(), [meta])

        entry = normalizer.config.to_dict()["modules"][0]["modules"][0]
        assert entry["returns"] == [{"type": "number", "desc": "area"}]
        assert entry["throws"] is False
