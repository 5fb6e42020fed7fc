"""Synchronizer: walks a schema tree and a document together.

The walk pairs every schema node with the part of the document at the same
path and yields visit records for the renderer:

- ContainerNode: children in declared order, path extended by child name.
- RepeatedNode:  one pass over ``element`` per list index present in the
  document (ascending), then an ``AppendRecord`` if the node is mutable.
- Leaf nodes:    exactly one ``FieldRecord``.

A Synchronizer holds only its inputs. Every ``iter()`` starts a fresh walk,
so the same object can be iterated on each render pass.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from json_form_tree.accessor import read
from json_form_tree.config import TraversalConfig
from json_form_tree.paths import MISSING, PathAddress, is_sequence
from json_form_tree.records import (
    AppendRecord,
    Boundary,
    FieldRecord,
    GroupRecord,
    RemoveRecord,
    VisitRecord,
)
from json_form_tree.schema.nodes import (
    LEAF_KINDS,
    ContainerNode,
    RepeatedNode,
    SchemaNode,
)
from json_form_tree.synthesizer import synthesize

__all__ = ["Synchronizer", "traverse"]


class Synchronizer:
    """Lazy, restartable co-traversal of a schema and a document.

    Example::

        from json_form_tree import traverse

        for record in traverse(schema, {"name": "a", "tags": ["x", "y"]}):
            print(record.path)
        # ('name',)
        # ('tags', 0)
        # ('tags', 1)
        # ('tags',)      <- AppendRecord
    """

    def __init__(
        self,
        schema: SchemaNode,
        document: Any,
        config: TraversalConfig | None = None,
    ) -> None:
        """Initialise the traversal.

        Args:
            schema:   Root SchemaNode. Never modified.
            document: Current document. Never modified.
            config:   Which optional records to emit. Defaults to
                ``TraversalConfig()``.
        """
        self._schema = schema
        self._document = document
        self._config: TraversalConfig = (
            config if config is not None else TraversalConfig()
        )

    @property
    def schema(self) -> SchemaNode:
        return self._schema

    @property
    def document(self) -> Any:
        return self._document

    def __iter__(self) -> Iterator[VisitRecord]:
        return self._visit(self._schema, ())

    def fields(self) -> Iterator[FieldRecord]:
        """Yield only the FieldRecords, in traversal order."""
        return (record for record in self if isinstance(record, FieldRecord))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _visit(self, node: SchemaNode, path: PathAddress) -> Iterator[VisitRecord]:
        if getattr(node, "kind", None) in LEAF_KINDS:
            yield self._field(node, path)
        elif isinstance(node, ContainerNode):
            yield from self._grouped(node, path, self._visit_container(node, path))
        elif isinstance(node, RepeatedNode):
            yield from self._grouped(node, path, self._visit_repeated(node, path))
        else:
            msg = f"Unsupported schema node type: {type(node)!r}"
            raise TypeError(msg)

    def _visit_container(
        self, node: ContainerNode, path: PathAddress
    ) -> Iterator[VisitRecord]:
        for name, child in node.children.items():
            yield from self._visit(child, (*path, name))

    def _visit_repeated(
        self, node: RepeatedNode, path: PathAddress
    ) -> Iterator[VisitRecord]:
        current = read(self._document, path)
        length = len(current) if is_sequence(current) else 0
        for index in range(length):
            if self._config.include_removals:
                yield RemoveRecord(path=path, node=node, index=index)
            yield from self._visit(node.element, (*path, index))
        if node.mutable:
            yield AppendRecord(path=path, node=node, schema=self._schema)

    def _grouped(
        self,
        node: ContainerNode | RepeatedNode,
        path: PathAddress,
        records: Iterator[VisitRecord],
    ) -> Iterator[VisitRecord]:
        if not self._config.include_groups:
            yield from records
            return
        yield GroupRecord(path=path, node=node, boundary=Boundary.OPEN)
        yield from records
        yield GroupRecord(path=path, node=node, boundary=Boundary.CLOSE)

    def _field(self, node: SchemaNode, path: PathAddress) -> FieldRecord:
        value = read(self._document, path)
        present = value is not MISSING
        if not present and self._config.fallback_to_default:
            value = synthesize(node)
        return FieldRecord(path=path, node=node, value=value, present=present)


def traverse(
    schema: SchemaNode,
    document: Any,
    config: TraversalConfig | None = None,
) -> Synchronizer:
    """Return a restartable co-traversal of ``schema`` and ``document``.

    Args:
        schema:   Root SchemaNode.
        document: Current document.
        config:   Optional TraversalConfig.

    Returns:
        A ``Synchronizer``; iterate it (any number of times) for the visit
        records.
    """
    return Synchronizer(schema, document, config=config)
