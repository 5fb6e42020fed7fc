"""Schema-conformant default values.

``synthesize`` is used when a repeated collection gains a new element, so the
element starts with the shape its schema describes instead of an empty
placeholder. Repeated collections are never pre-populated.
"""

from __future__ import annotations

from typing import Any

from json_form_tree.schema.nodes import (
    ChoiceNode,
    ContainerNode,
    FlagNode,
    LongTextNode,
    RepeatedNode,
    ScalarKind,
    ScalarNode,
    SchemaNode,
)

__all__ = ["synthesize"]


def synthesize(node: SchemaNode) -> Any:
    """Build the default value for ``node``.

    - ContainerNode -> dict with one entry per child, in declared order.
    - RepeatedNode  -> empty list.
    - ScalarNode (text), LongTextNode -> ``default`` or ``""``.
    - ScalarNode (number)             -> ``default`` or ``0``.
    - ChoiceNode -> ``default``, else the first option's value, else ``""``.
    - FlagNode   -> ``bool(default)``.

    Every call builds fresh containers; callers may mutate the result.
    """
    if isinstance(node, ContainerNode):
        return {name: synthesize(child) for name, child in node.children.items()}

    if isinstance(node, RepeatedNode):
        return []

    if isinstance(node, ScalarNode):
        if node.default is not None:
            return node.default
        return 0 if node.scalar_kind == ScalarKind.NUMBER else ""

    if isinstance(node, LongTextNode):
        return node.default if node.default is not None else ""

    if isinstance(node, ChoiceNode):
        if node.default is not None:
            return node.default
        if node.options:
            return node.options[0].value
        return ""

    if isinstance(node, FlagNode):
        return bool(node.default)

    msg = f"Unsupported schema node type: {type(node)!r}"
    raise TypeError(msg)
