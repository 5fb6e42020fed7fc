"""Path addresses, the MISSING sentinel, and the shared path walk.

A path is an ordered sequence of segments. Each segment is a mapping key or a
sequence index; indices may be given as non-negative ints or as strings of
decimal digits, so the same path vocabulary works for documents and schemas.

The walk itself lives in one place, ``resolve()``, and is parameterised by a
``Resolver`` strategy:

- ``ValueResolver``  resolves segments against whatever container is present
  in a document (mapping or sequence).
- ``SchemaResolver`` resolves segments against a schema tree, descending into
  ``ContainerNode.children`` by name and into ``RepeatedNode.element`` for
  index-like segments.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeAlias

from json_form_tree.schema.nodes import ContainerNode, RepeatedNode

if TYPE_CHECKING:
    from json_form_tree.protocols import Resolver

__all__ = [
    "MISSING",
    "Missing",
    "PathAddress",
    "SCHEMA_RESOLVER",
    "SchemaResolver",
    "Segment",
    "VALUE_RESOLVER",
    "ValueResolver",
    "as_index",
    "is_mapping",
    "is_sequence",
    "resolve",
    "schema_at",
]


class Missing(Enum):
    """Type of the ``MISSING`` sentinel.

    ``MISSING`` means "nothing was found at this path". It is falsy and
    distinct from ``None`` and from every empty value.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = Missing.MISSING

Segment: TypeAlias = str | int
PathAddress: TypeAlias = tuple[Segment, ...]


def as_index(segment: Any) -> int | None:
    """Return ``segment`` as a non-negative sequence index, or None.

    bool is rejected even though it subclasses int.
    """
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isascii() and segment.isdigit():
        try:
            return int(segment)
        except ValueError:
            # Longer than the interpreter's int string conversion limit
            return None
    return None


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """True for JSON arrays (list or tuple); strings are never sequences here."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class ValueResolver:
    """Resolves path segments against document containers."""

    def step(self, container: Any, segment: Any) -> Any:
        if is_mapping(container):
            try:
                return container.get(segment, MISSING)
            except TypeError:
                # Unhashable segment
                return MISSING
        if is_sequence(container):
            index = as_index(segment)
            if index is None or index >= len(container):
                return MISSING
            return container[index]
        return MISSING


class SchemaResolver:
    """Resolves path segments against schema nodes."""

    def step(self, container: Any, segment: Any) -> Any:
        if isinstance(container, ContainerNode):
            if not isinstance(segment, str):
                return MISSING
            return container.children.get(segment, MISSING)
        if isinstance(container, RepeatedNode):
            return container.element if as_index(segment) is not None else MISSING
        return MISSING


VALUE_RESOLVER: Final = ValueResolver()
SCHEMA_RESOLVER: Final = SchemaResolver()


def resolve(root: Any, path: Sequence[Any], resolver: Resolver) -> Any:
    """Walk ``path`` from ``root`` one segment at a time using ``resolver``.

    Once a step yields ``MISSING`` the remaining segments are skipped. An
    empty path returns ``root`` unchanged.

    Args:
        root:     Starting container (document value or schema node).
        path:     Ordered segments.
        resolver: Any object satisfying the ``Resolver`` protocol.

    Returns:
        The value found at ``path``, or ``MISSING``.
    """
    current = root
    for segment in path:
        if current is MISSING:
            return MISSING
        current = resolver.step(current, segment)
    return current


def schema_at(schema: Any, path: Sequence[Any]) -> Any:
    """Return the schema node governing ``path``, or ``MISSING``."""
    return resolve(schema, path, SCHEMA_RESOLVER)
