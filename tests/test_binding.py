"""Tests for the renderer binding helpers."""

from __future__ import annotations

from typing import Any

import pytest

from json_form_tree.binding import (
    append_label,
    choice_placeholder,
    display_text,
    field_label,
    format_value,
    match_option,
    option_defect,
    parse_number,
)
from json_form_tree.config import BindingConfig
from json_form_tree.paths import MISSING
from json_form_tree.schema.nodes import (
    ChoiceNode,
    ContainerNode,
    FlagNode,
    LongTextNode,
    Option,
    RepeatedNode,
    ScalarKind,
    ScalarNode,
)


TEXT = ScalarNode(ScalarKind.TEXT)


class TestFormatValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (1.0, "1"),
            (1.5, "1.5"),
            (3, "3"),
            ("x", "x"),
            (None, "None"),
        ],
    )
    def test_rendering(self, value: Any, expected: str) -> None:
        assert format_value(value) == expected


class TestDisplayText:
    def test_missing_shows_default(self) -> None:
        assert display_text(ScalarNode(ScalarKind.TEXT, default="hint"), MISSING) == "hint"

    def test_none_shows_default(self) -> None:
        assert display_text(LongTextNode(default="para"), None) == "para"

    def test_missing_without_default(self) -> None:
        assert display_text(TEXT, MISSING) == ""

    def test_container_node_has_no_default(self) -> None:
        assert display_text(ContainerNode(), MISSING) == ""

    def test_empty_containers(self) -> None:
        assert display_text(TEXT, {}) == ""
        assert display_text(TEXT, []) == ""

    def test_non_empty_container_is_compact_json(self) -> None:
        assert display_text(TEXT, {"a": [1, 2]}) == '{"a":[1,2]}'

    def test_scalars(self) -> None:
        assert display_text(TEXT, 12) == "12"
        assert display_text(TEXT, False) == "false"
        assert display_text(TEXT, "") == ""


class TestParseNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("42", 42),
            ("  -7", -7),
            ("+3", 3),
            ("2.5", 2.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("12px", 12),
            ("1.2.3", 1.2),
            ("Infinity", float("inf")),
            ("-Infinity", float("-inf")),
            (7, 7),
            (2.25, 2.25),
        ],
    )
    def test_numeric_prefix(self, raw: Any, expected: int | float) -> None:
        result = parse_number(raw)
        assert result == expected
        assert type(result) is type(expected)

    @pytest.mark.parametrize("raw", ["", "abc", "-", ".", "e5", None, True, float("nan")])
    def test_unparsable_yields_invalid_number(self, raw: Any) -> None:
        assert parse_number(raw) == 0

    def test_configured_invalid_number(self) -> None:
        assert parse_number("abc", BindingConfig(invalid_number=-1)) == -1


class TestMatchOption:
    @pytest.fixture
    def node(self) -> ChoiceNode:
        return ChoiceNode(
            options=(
                Option(1, "One"),
                Option(2.0, "Two"),
                Option(True, "Yes"),
                Option("x", "Ex"),
            )
        )

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1", 1),
            ("2", 2.0),
            ("true", True),
            ("x", "x"),
            (1, 1),
        ],
    )
    def test_matches_rendered_value(self, node: ChoiceNode, raw: Any, expected: Any) -> None:
        result = match_option(node, raw)
        assert result == expected
        assert type(result) is type(expected)

    def test_no_match_passes_raw_through(self, node: ChoiceNode) -> None:
        assert match_option(node, "unknown") == "unknown"

    def test_no_options(self) -> None:
        assert match_option(ChoiceNode(), "a") == "a"


class TestLabels:
    def test_display_name_wins(self) -> None:
        assert field_label(ScalarNode(ScalarKind.TEXT, name="Full name"), ("name",)) == "Full name"

    def test_last_segment(self) -> None:
        assert field_label(TEXT, ("person", "name")) == "name"
        assert field_label(TEXT, ("tags", 0)) == "0"

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (FlagNode(), "Boolean value"),
            (ContainerNode(), "Object"),
            (RepeatedNode(TEXT), "Array"),
            (TEXT, "value"),
        ],
    )
    def test_kind_fallbacks(self, node: Any, expected: str) -> None:
        assert field_label(node, ()) == expected

    def test_configured_fallback(self) -> None:
        assert field_label(TEXT, (), BindingConfig(fallback_label="field")) == "field"

    def test_append_label(self) -> None:
        assert append_label(RepeatedNode(TEXT, name="Contacts"), ("c",)) == "Add new element to Contacts"
        assert append_label(RepeatedNode(TEXT), ("tags",)) == "Add new element to tags"
        assert append_label(RepeatedNode(TEXT), ()) == "Add new element to array"


class TestChoiceEdgeCases:
    def test_option_defect(self) -> None:
        assert option_defect(ChoiceNode()) == "Select field requires options array"
        assert option_defect(ChoiceNode(options=(Option("a", "A"),))) is None
        assert option_defect(TEXT) is None

    @pytest.mark.parametrize("value", [MISSING, None, ""])
    def test_placeholder_for_empty_value(self, value: Any) -> None:
        assert choice_placeholder(value) == "Select an option..."

    def test_no_placeholder_for_value(self) -> None:
        assert choice_placeholder("a") is None
        assert choice_placeholder(0) is None

    def test_configured_placeholder(self) -> None:
        config = BindingConfig(choice_placeholder="Pick one")
        assert choice_placeholder(None, config) == "Pick one"
