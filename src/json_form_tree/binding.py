"""Helpers a renderer uses to bind widgets to visit records.

The engine performs no coercion on writes. Translating raw widget input into
the value passed to ``set_at_path`` is the renderer's job; the functions here
are the shared translations every renderer needs:

- ``display_text``:       the text a text-like widget shows for a value.
- ``parse_number``:       raw number-widget input -> int / float.
- ``match_option``:       raw choice-widget selection -> typed option value.
- ``field_label`` / ``append_label``: captions for fields and append buttons.
- ``option_defect`` / ``choice_placeholder``: choice widget edge cases.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Sequence
from typing import Any

from json_form_tree.config import BindingConfig
from json_form_tree.paths import MISSING, is_mapping, is_sequence
from json_form_tree.schema.nodes import ChoiceNode, NodeKind, SchemaNode

__all__ = [
    "append_label",
    "choice_placeholder",
    "display_text",
    "field_label",
    "format_value",
    "match_option",
    "option_defect",
    "parse_number",
]

_DEFAULT_CONFIG = BindingConfig()

# Longest numeric prefix, the way a browser number field reads its input.
_NUMBER_PREFIX = re.compile(
    r"\s*(?P<number>[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)

_KIND_LABELS: dict[NodeKind, str] = {
    NodeKind.FLAG: "Boolean value",
    NodeKind.CONTAINER: "Object",
    NodeKind.REPEATED: "Array",
}

OPTIONS_REQUIRED = "Select field requires options array"


def format_value(value: Any) -> str:
    """Render a scalar the way it appears in a widget.

    Booleans are ``true``/``false`` and integral floats drop their fraction,
    so ``1.0`` and ``1`` render alike.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def display_text(node: SchemaNode, value: Any) -> str:
    """Return the text a text-like widget shows for ``value``.

    ``MISSING`` and ``None`` show the node's default (or nothing). A container
    value shows as compact JSON, or nothing when empty.
    """
    if value is MISSING or value is None:
        default = getattr(node, "default", None)
        return "" if default is None else format_value(default)
    if is_mapping(value) or is_sequence(value):
        if not value:
            return ""
        return json.dumps(value, separators=(",", ":"), default=str)
    return format_value(value)


def parse_number(raw: Any, config: BindingConfig | None = None) -> int | float:
    """Parse raw number-widget input.

    The longest numeric prefix of ``raw`` is used (``"12px"`` -> 12). Input
    with no numeric prefix yields ``config.invalid_number``. Literals without
    a fraction or exponent yield ints.
    """
    config = config if config is not None else _DEFAULT_CONFIG
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if isinstance(raw, float) and math.isnan(raw):
            return config.invalid_number
        return raw
    match = _NUMBER_PREFIX.match(str(raw))
    if match is None:
        return config.invalid_number
    text = match.group("number")
    if "Infinity" in text or any(marker in text for marker in ".eE"):
        return float(text.replace("Infinity", "inf"))
    return int(text)


def match_option(node: ChoiceNode, raw: Any) -> Any:
    """Map a raw selection back to the typed value of the matching option.

    Options are matched by their rendered text. When none matches, ``raw`` is
    returned unchanged.
    """
    wanted = raw if isinstance(raw, str) else format_value(raw)
    for option in node.options:
        if format_value(option.value) == wanted:
            return option.value
    return raw


def field_label(
    node: SchemaNode,
    path: Sequence[Any],
    config: BindingConfig | None = None,
) -> str:
    """Caption for a field or section: display name, else last path segment."""
    if node.name:
        return node.name
    if path:
        return str(path[-1])
    config = config if config is not None else _DEFAULT_CONFIG
    return _KIND_LABELS.get(node.kind, config.fallback_label)


def append_label(node: SchemaNode, path: Sequence[Any]) -> str:
    """Caption for the append button of a repeated collection."""
    target = node.name or (str(path[-1]) if path else "array")
    return f"Add new element to {target}"


def option_defect(node: SchemaNode) -> str | None:
    """Return an error message for a ChoiceNode without options, else None."""
    if isinstance(node, ChoiceNode) and not node.options:
        return OPTIONS_REQUIRED
    return None


def choice_placeholder(value: Any, config: BindingConfig | None = None) -> str | None:
    """Return the prompt to show when a choice field has no current value."""
    config = config if config is not None else _DEFAULT_CONFIG
    if value is MISSING or value is None or value == "":
        return config.choice_placeholder
    return None
