"""SchemaBuilder: converts a declarative schema written as plain dicts into SchemaNode trees.

The input vocabulary is the JSON form-schema format, one item per field::

    {
        "type": "object" | "string" | "number" | "array"
                | "big-string" | "select" | "boolean",
        "mutateable": bool,
        "name": str,                      # optional display name
        "InputProps": {...},              # optional renderer attributes
        "value": ...,                     # see below
        "options": [{"value": ..., "label": str}, ...],   # select only
    }

``value`` holds the child mapping for ``object``, the element item for
``array``, and the default value for every leaf type.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from json_form_tree.schema.nodes import (
    ChoiceNode,
    ContainerNode,
    FlagNode,
    LongTextNode,
    Option,
    RepeatedNode,
    ScalarKind,
    ScalarNode,
    SchemaNode,
)

logger = logging.getLogger(__name__)

__all__ = ["SchemaBuilder"]

# Wire type names accepted in the "type" field.
WIRE_TYPES: tuple[str, ...] = (
    "object",
    "string",
    "number",
    "array",
    "big-string",
    "select",
    "boolean",
)


@dataclass
class SchemaBuilder:
    """Converts schema items in the JSON form-schema format into SchemaNode trees.

    Dispatch is on the ``type`` field of each item. ``mutateable`` (or its
    alias ``mutable``) defaults to False when absent, so a field must opt in
    to being editable.

    Example::
        builder = SchemaBuilder()
        schema = builder.build_fields({
            "name": {"type": "string", "mutateable": True, "value": ""},
            "tags": {
                "type": "array",
                "mutateable": True,
                "value": {"type": "string", "mutateable": True},
            },
        })
        # schema: ContainerNode(children={"name": ScalarNode, "tags": RepeatedNode})
    """

    def build(self, item: Mapping[str, Any], path: tuple[str, ...] = ()) -> SchemaNode:
        """Convert one schema item to a SchemaNode.

        Args:
            item: A schema item mapping (see module docstring).
            path: Field names leading to this item; used in error messages
                and warnings only.

        Returns:
            The SchemaNode variant selected by ``item["type"]``.

        Raises:
            TypeError: If ``item`` (or a nested item) is not a mapping.
            ValueError: If the type is unknown or options are malformed.
        """
        if not isinstance(item, Mapping):
            msg = f"Schema item at {_where(path)} must be a mapping, got {type(item)!r}"
            raise TypeError(msg)

        wire_type = item.get("type")
        common = {
            "mutable": bool(item.get("mutateable", item.get("mutable", False))),
            "name": item.get("name"),
            "attrs": dict(item.get("InputProps") or {}),
        }
        value = item.get("value")

        if wire_type == "object":
            children = value if value is not None else {}
            return ContainerNode(children=self._build_children(children, path), **common)

        if wire_type == "array":
            if value is None:
                msg = f"Array item at {_where(path)} requires an element item in 'value'"
                raise ValueError(msg)
            return RepeatedNode(element=self.build(value, path), **common)

        if wire_type == "string":
            return ScalarNode(scalar_kind=ScalarKind.TEXT, default=value, **common)

        if wire_type == "number":
            return ScalarNode(scalar_kind=ScalarKind.NUMBER, default=value, **common)

        if wire_type == "big-string":
            return LongTextNode(default=value, **common)

        if wire_type == "select":
            options = self._build_options(item.get("options"), path)
            if not options:
                logger.warning(
                    "Select field at %s declares no options", _where(path)
                )
            return ChoiceNode(options=options, default=value, **common)

        if wire_type == "boolean":
            return FlagNode(default=value, **common)

        msg = f"Unknown schema type {wire_type!r} at {_where(path)}; expected one of {WIRE_TYPES}"
        raise ValueError(msg)

    def build_fields(self, fields: Mapping[str, Any]) -> ContainerNode:
        """Build a root ContainerNode from a mapping of field name -> item.

        The root is mutable; editability of each field is governed by its
        own item.
        """
        return ContainerNode(children=self._build_children(fields, ()))

    def _build_children(
        self, fields: Any, path: tuple[str, ...]
    ) -> dict[str, SchemaNode]:
        if not isinstance(fields, Mapping):
            msg = f"Object item at {_where(path)} requires a mapping of children, got {type(fields)!r}"
            raise TypeError(msg)
        return {
            str(name): self.build(child, (*path, str(name)))
            for name, child in fields.items()
        }

    def _build_options(
        self, raw: Any, path: tuple[str, ...]
    ) -> tuple[Option, ...]:
        if raw is None:
            return ()
        options: list[Option] = []
        for entry in raw:
            if not isinstance(entry, Mapping) or "value" not in entry:
                msg = f"Select option at {_where(path)} must be a mapping with a 'value', got {entry!r}"
                raise ValueError(msg)
            label = entry.get("label")
            options.append(
                Option(
                    value=entry["value"],
                    label=str(label) if label is not None else str(entry["value"]),
                )
            )
        return tuple(options)


def _where(path: tuple[str, ...]) -> str:
    return ".".join(path) or "(root)"
