"""Pointwise and structural writes that never touch their input document.

Every operation clones the whole document, edits the clone, and returns it.
The caller's document stays deep-equal to its pre-call state. Irregular
requests (empty path, out-of-range index, a path that is not a repeated
collection) are no-ops that return the input document itself; nothing here
raises for a malformed path or document.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from json_form_tree.accessor import read
from json_form_tree.paths import (
    MISSING,
    SCHEMA_RESOLVER,
    VALUE_RESOLVER,
    as_index,
    is_mapping,
    is_sequence,
    schema_at,
)
from json_form_tree.schema.nodes import RepeatedNode, SchemaNode
from json_form_tree.synthesizer import synthesize

logger = logging.getLogger(__name__)

# Most None slots a write past the end of a list may add before its index.
MAX_PADDING = 1024

_BAD_SEGMENT = "segment cannot address its container"

__all__ = ["clone", "insert_element", "remove_element", "set_at_path"]


def clone(value: Any) -> Any:
    """Return an independent deep copy of a JSON-shaped value.

    Mappings become dicts and sequences (lists or tuples) become lists, so the
    copy can always be edited in place. Scalars are immutable and shared.
    """
    if is_mapping(value):
        return {key: clone(child) for key, child in value.items()}
    if is_sequence(value):
        return [clone(item) for item in value]
    return value


def set_at_path(root: Any, path: Sequence[Any], value: Any) -> Any:
    """Return a copy of ``root`` with ``value`` stored at ``path``.

    Intermediate locations that are absent, ``None``, or scalars are replaced
    by empty mappings, whatever the schema says about them. Sequence segments
    replace an element within range; past the end the list is padded with
    ``None`` up to the index, by at most ``MAX_PADDING`` slots.

    Args:
        root:  The current document. Never modified.
        path:  Ordered segments. An empty path is a no-op.
        value: The value to store. Stored as given, without coercion.

    Returns:
        The new document, or ``root`` itself when the write is a no-op (empty
        path, or a segment addressed to a sequence that is non-numeric or
        lies more than ``MAX_PADDING`` slots past its end).
    """
    path = tuple(path)
    if not path:
        return root

    document = clone(root)
    if not _is_container(document):
        document = {}

    parent = document
    for segment in path[:-1]:
        child = VALUE_RESOLVER.step(parent, segment)
        if not _is_container(child):
            child = {}
            if not _assign(parent, segment, child):
                return _noop("set_at_path", root, path, _BAD_SEGMENT)
        parent = child

    if not _assign(parent, path[-1], value):
        return _noop("set_at_path", root, path, _BAD_SEGMENT)
    return document


def insert_element(
    root: Any,
    schema: SchemaNode,
    path: Sequence[Any],
    element: Any = MISSING,
) -> Any:
    """Return a copy of ``root`` with a new element appended to the list at ``path``.

    ``path`` is resolved against ``schema``; it must lead to a RepeatedNode.
    The new element is ``synthesize(node.element)`` unless ``element`` is
    given, in which case a clone of it is appended instead.

    Absent intermediate locations are materialized from the schema (``{}``
    for a ContainerNode, ``[]`` for a RepeatedNode), and an absent list at
    ``path`` is created empty before the append.

    Returns:
        The new document, or ``root`` itself when ``path`` is not governed by
        a RepeatedNode, an intermediate list index does not exist, or a value
        already present along the way has the wrong container kind.
    """
    path = tuple(path)
    node = schema_at(schema, path)
    if not isinstance(node, RepeatedNode):
        return _noop("insert_element", root, path, "not a repeated collection")

    document = clone(root)
    if document is None:
        document = _empty_for(schema)

    current = document
    current_node: Any = schema
    for segment in path:
        if not _matches(current, current_node):
            return _noop("insert_element", root, path, "value in the way has the wrong shape")
        current_node = SCHEMA_RESOLVER.step(current_node, segment)
        child = VALUE_RESOLVER.step(current, segment)
        if child is MISSING and is_sequence(current):
            return _noop("insert_element", root, path, "list index does not exist")
        if child is MISSING or child is None:
            child = _empty_for(current_node)
            _assign(current, segment, child)
        current = child

    if not is_sequence(current):
        return _noop("insert_element", root, path, "value at path is not a list")

    current.append(synthesize(node.element) if element is MISSING else clone(element))
    return document


def remove_element(root: Any, path: Sequence[Any], index: Any) -> Any:
    """Return a copy of ``root`` without element ``index`` of the list at ``path``.

    The remaining elements keep their relative order.

    Returns:
        The new document, or ``root`` itself when there is no list at ``path``
        or ``index`` is outside ``[0, len)``.
    """
    path = tuple(path)
    position = as_index(index)
    sequence = read(root, path)
    if not is_sequence(sequence):
        return _noop("remove_element", root, path, "value at path is not a list")
    if position is None or position >= len(sequence):
        return _noop("remove_element", root, path, f"index {index!r} out of range")

    document = clone(root)
    del read(document, path)[position]
    return document


def _is_container(value: Any) -> bool:
    return is_mapping(value) or is_sequence(value)


def _matches(value: Any, node: Any) -> bool:
    """True if ``value`` is the container kind ``node`` describes."""
    if isinstance(node, RepeatedNode):
        return is_sequence(value)
    return is_mapping(value)


def _empty_for(node: Any) -> Any:
    return [] if isinstance(node, RepeatedNode) else {}


def _assign(container: Any, segment: Any, value: Any) -> bool:
    """Store ``value`` under ``segment``; False if the segment cannot land."""
    if is_sequence(container):
        index = as_index(segment)
        if index is None or index - len(container) > MAX_PADDING:
            return False
        if index >= len(container):
            container.extend([None] * (index - len(container) + 1))
        container[index] = value
        return True
    try:
        container[segment] = value
    except TypeError:
        return False
    return True


def _noop(operation: str, root: Any, path: tuple[Any, ...], reason: str) -> Any:
    logger.debug("%s at %r is a no-op: %s", operation, path, reason)
    return root
