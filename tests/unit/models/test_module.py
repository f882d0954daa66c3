"""Tests for docsconfig.models.module."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from docsconfig.models.module import (
    DocsConfig,
    ModuleEntry,
    ModuleGroup,
    OptionEntry,
    ParamEntry,
    ReturnEntry,
)


def make_config() -> DocsConfig:
    return DocsConfig(
        modules=[
            ModuleGroup(group="Measurement", modules=[ModuleEntry(name="along"), ModuleEntry(name="area")]),
            ModuleGroup(group="Misc", modules=[ModuleEntry(name="along"), ModuleEntry(name="kinks")]),
        ]
    )


class TestModuleEntryPlaceholder:
    """Placeholder entry tests."""

    def test_placeholder_serializes_name_and_hidden(self) -> None:
        """Unfilled entries carry only the placeholder keys."""
        entry = ModuleEntry(name="along")
        assert entry.model_dump(by_alias=True) == {"name": "along", "hidden": False}

    def test_placeholder_not_documented(self) -> None:
        """New entries start undocumented."""
        assert ModuleEntry(name="along").is_documented is False

    def test_hidden_placeholder(self) -> None:
        """Hidden is kept on placeholders."""
        entry = ModuleEntry(name="along", hidden=True)
        assert entry.model_dump(by_alias=True) == {"name": "along", "hidden": True}


class TestModuleEntryDocument:
    """Filling entries with metadata."""

    def test_document_sets_fields(self) -> None:
        """document() fills the entry and marks it documented."""
        entry = ModuleEntry(name="along")
        entry.document(
            description="Takes a line.",
            snippet="turf.along(line, 1);",
            example="turf.along(line, 1);",
            has_map=False,
            package_name="@turf/along",
            returns=False,
            params=False,
            options=False,
            throws=False,
        )

        data = entry.model_dump(by_alias=True)
        assert entry.is_documented
        assert data["npmName"] == "@turf/along"
        assert data["hasMap"] is False
        assert data["parent"] is None
        assert set(data) == {
            "name",
            "hidden",
            "parent",
            "description",
            "snippet",
            "example",
            "hasMap",
            "npmName",
            "returns",
            "params",
            "options",
            "throws",
        }

    def test_document_twice_rejected(self) -> None:
        """An entry is filled at most once."""
        entry = ModuleEntry(name="along")
        entry.document(description="first")

        with pytest.raises(ValueError, match="already documented"):
            entry.document(description="second")
        assert entry.description == "first"

    def test_document_validates(self) -> None:
        """Assigned values are validated."""
        entry = ModuleEntry(name="along")
        with pytest.raises(ValidationError):
            entry.document(has_map="sometimes")

    def test_rows_with_placeholders(self) -> None:
        """Parameter and return lists may hold False placeholders."""
        entry = ModuleEntry(name="along")
        entry.document(
            params=[False, ParamEntry(argument="line", type_name="Feature", description="input")],
            returns=[ReturnEntry(type_name="Feature", desc="point"), False],
        )

        data = entry.model_dump(by_alias=True)
        assert data["params"] == [False, {"Argument": "line", "Type": "Feature", "Description": "input"}]
        assert data["returns"] == [{"type": "Feature", "desc": "point"}, False]


class TestModuleEntryReadBack:
    """Entries validated from written output."""

    def test_full_entry_is_documented(self) -> None:
        """Entries with more than the placeholder keys count as documented."""
        entry = ModuleEntry.model_validate({"name": "along", "hidden": False, "npmName": "@turf/along"})
        assert entry.is_documented
        assert entry.package_name == "@turf/along"

    def test_placeholder_stays_placeholder(self) -> None:
        """Bare placeholders stay undocumented."""
        entry = ModuleEntry.model_validate({"name": "along", "hidden": False})
        assert entry.is_documented is False

    def test_option_row_aliases(self) -> None:
        """Option rows accept the output column names."""
        row = OptionEntry.model_validate(
            {"Prop": "units", "Type": "string", "Default": "kilometers", "Description": "units"}
        )
        assert row.prop == "units"
        assert row.default == "kilometers"

    def test_unknown_keys_rejected(self) -> None:
        """Unexpected keys are errors."""
        with pytest.raises(ValidationError):
            ModuleEntry.model_validate({"name": "along", "colour": "red"})


class TestDocsConfig:
    """DocsConfig tree tests."""

    def test_entries_in_output_order(self) -> None:
        """entries() walks groups then modules in order."""
        names = [entry.name for entry in make_config().entries()]
        assert names == ["along", "area", "along", "kinks"]

    def test_find_returns_first_match(self) -> None:
        """Duplicate names resolve to the first entry."""
        config = make_config()
        assert config.find("along") is config.modules[0].modules[0]

    def test_find_missing(self) -> None:
        """Unknown names return None."""
        assert make_config().find("bbox") is None

    def test_documented_count(self) -> None:
        """Only filled entries are counted."""
        config = make_config()
        config.find("kinks").document(description="Finds self-intersections.")
        assert config.documented_count == 1

    def test_to_dict_shape(self) -> None:
        """to_dict produces the groups and module lists."""
        data = make_config().to_dict()
        assert [group["group"] for group in data["modules"]] == ["Measurement", "Misc"]
        assert data["modules"][1]["modules"][1] == {"name": "kinks", "hidden": False}
