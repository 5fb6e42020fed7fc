"""Visit record types emitted by a co-traversal.

A renderer binds one widget per ``FieldRecord`` and one call-to-action per
``AppendRecord`` / ``RemoveRecord``. Each actionable record knows which
mutator call it stands for, so ``record.apply(document, ...)`` returns the
replacement document without the renderer re-deriving paths.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_form_tree.mutator import insert_element, remove_element, set_at_path
from json_form_tree.paths import PathAddress
from json_form_tree.schema.nodes import ContainerNode, RepeatedNode, SchemaNode

__all__ = [
    "AppendRecord",
    "Boundary",
    "FieldRecord",
    "GroupRecord",
    "RemoveRecord",
    "VisitRecord",
]


class Boundary(StrEnum):
    """Which side of a group a GroupRecord marks."""

    OPEN = auto()
    CLOSE = auto()


@dataclass(frozen=True, slots=True)
class FieldRecord:
    """One leaf field bound to its current value.

    Attributes:
        path:    Location of the field in the document.
        node:    The leaf SchemaNode describing the field.
        value:   The value stored at ``path``, or the node's synthesized
                 default when nothing is stored (see ``present``).
        present: False when nothing was stored at ``path``.
    """

    path: PathAddress
    node: SchemaNode
    value: Any
    present: bool

    def apply(self, document: Any, value: Any) -> Any:
        """Return ``document`` with ``value`` written to this field."""
        return set_at_path(document, self.path, value)


@dataclass(frozen=True, slots=True)
class AppendRecord:
    """Call-to-action adding one element to a mutable repeated collection."""

    path: PathAddress
    node: RepeatedNode
    schema: SchemaNode = field(repr=False)

    def apply(self, document: Any) -> Any:
        """Return ``document`` with a synthesized element appended."""
        return insert_element(document, self.schema, self.path)


@dataclass(frozen=True, slots=True)
class RemoveRecord:
    """Call-to-action removing element ``index`` of a repeated collection."""

    path: PathAddress
    node: RepeatedNode
    index: int

    def apply(self, document: Any) -> Any:
        """Return ``document`` without element ``index``."""
        return remove_element(document, self.path, self.index)


@dataclass(frozen=True, slots=True)
class GroupRecord:
    """Opens or closes the section of a ContainerNode or RepeatedNode."""

    path: PathAddress
    node: ContainerNode | RepeatedNode
    boundary: Boundary


VisitRecord = FieldRecord | AppendRecord | RemoveRecord | GroupRecord
