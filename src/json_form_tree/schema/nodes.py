"""SchemaNode variants and the NodeKind / ScalarKind StrEnums.

A schema is a tree of immutable nodes describing the expected shape and
editability of a JSON document. The six node kinds are mutually exclusive
variants of the ``SchemaNode`` union; each variant carries only the fields
meaningful to it, plus three fields every variant has:

- ``mutable``: whether the renderer should allow editing.
- ``name``:    optional display name.
- ``attrs``:   opaque renderer-only attributes, passed through untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any, ClassVar

__all__ = [
    "ChoiceNode",
    "ContainerNode",
    "FlagNode",
    "LEAF_KINDS",
    "LongTextNode",
    "NodeKind",
    "Option",
    "RepeatedNode",
    "ScalarKind",
    "ScalarNode",
    "SchemaNode",
]


class NodeKind(StrEnum):
    """Enumeration of the six schema node kinds.

    StrEnum values are the lowercased member names:
    - SCALAR    -> "scalar"    : single-line text or number field
    - LONG_TEXT -> "long_text" : multi-line text field
    - CHOICE    -> "choice"    : pick one of a fixed list of options
    - FLAG      -> "flag"      : boolean toggle
    - CONTAINER -> "container" : named children (JSON object)
    - REPEATED  -> "repeated"  : homogeneous list of elements (JSON array)
    """

    SCALAR = auto()
    LONG_TEXT = auto()
    CHOICE = auto()
    FLAG = auto()
    CONTAINER = auto()
    REPEATED = auto()


class ScalarKind(StrEnum):
    """Value kind of a ScalarNode."""

    TEXT = auto()
    NUMBER = auto()


@dataclass(frozen=True, slots=True)
class Option:
    """One selectable entry of a ChoiceNode."""

    value: str | int | float | bool
    label: str


@dataclass(frozen=True, slots=True)
class ScalarNode:
    """Single-line text or number field."""

    kind: ClassVar[NodeKind] = NodeKind.SCALAR

    scalar_kind: ScalarKind
    default: str | int | float | None = None
    mutable: bool = True
    name: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LongTextNode:
    """Multi-line text field."""

    kind: ClassVar[NodeKind] = NodeKind.LONG_TEXT

    default: str | None = None
    mutable: bool = True
    name: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ChoiceNode:
    """Field whose value is picked from ``options``.

    A ChoiceNode declared without options is a configuration defect; the
    engine tolerates it and leaves reporting to the renderer.
    """

    kind: ClassVar[NodeKind] = NodeKind.CHOICE

    options: tuple[Option, ...] = ()
    default: str | int | float | bool | None = None
    mutable: bool = True
    name: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FlagNode:
    """Boolean toggle."""

    kind: ClassVar[NodeKind] = NodeKind.FLAG

    default: Any = None
    mutable: bool = True
    name: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ContainerNode:
    """Group of named child fields, bound to a JSON object.

    ``children`` is ordered; traversal and synthesis follow declaration order.
    """

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    children: Mapping[str, SchemaNode] = field(default_factory=dict)
    mutable: bool = True
    name: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RepeatedNode:
    """Homogeneous list whose elements all follow ``element``."""

    kind: ClassVar[NodeKind] = NodeKind.REPEATED

    element: SchemaNode
    mutable: bool = True
    name: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict)


SchemaNode = (
    ScalarNode | LongTextNode | ChoiceNode | FlagNode | ContainerNode | RepeatedNode
)

# Kinds that produce exactly one field record during traversal.
LEAF_KINDS: frozenset[NodeKind] = frozenset(
    {NodeKind.SCALAR, NodeKind.LONG_TEXT, NodeKind.CHOICE, NodeKind.FLAG}
)
