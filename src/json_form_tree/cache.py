"""DefaultCache: LRU cache of synthesized element templates.

Appending to a repeated collection synthesizes a default element from the
collection's element schema. Within one editing session the schema never
changes, so the synthesized element for a given collection is always the
same; DefaultCache keeps it in an LRU cache keyed by the collection's schema
path and hands out independent clones.

Every element of a repeated collection shares one element schema, so list
indices are folded out of the key: ``("rows", 3, "tags")`` and
``("rows", 0, "tags")`` hit the same entry.

Each ``DefaultCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    cache = DefaultCache(schema, max_size=64)
    first = cache.template(("tags",))     # synthesized and cached
    second = cache.template(("tags",))    # served from memory, new clone
    assert first == second and first is not second
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cachetools import LRUCache

from json_form_tree.mutator import clone
from json_form_tree.paths import MISSING, SCHEMA_RESOLVER, PathAddress, schema_at
from json_form_tree.schema.nodes import RepeatedNode, SchemaNode
from json_form_tree.synthesizer import synthesize

__all__ = ["DefaultCache"]

# Stands in for any list index in a cache key.
_ANY_INDEX = "[]"


class DefaultCache:
    """LRU-backed cache of synthesized elements for one schema.

    Args:
        schema: Root SchemaNode the cached paths are resolved against.
        max_size: Maximum number of templates to hold. Defaults to 128. When
            exceeded, the least-recently-used entry is silently evicted.
    """

    def __init__(self, schema: SchemaNode, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._schema = schema
        self._cache: LRUCache[PathAddress, Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def template(self, path: Sequence[Any]) -> Any:
        """Return a fresh copy of the default element for the list at ``path``.

        Returns:
            An independent clone of ``synthesize(node.element)`` for the
            RepeatedNode governing ``path``, or ``MISSING`` when ``path`` is
            not governed by a RepeatedNode.
        """
        key = self._key(path)
        if key is MISSING:
            return MISSING
        if key not in self._cache:
            node = schema_at(self._schema, path)
            if not isinstance(node, RepeatedNode):
                return MISSING
            self._cache[key] = synthesize(node.element)
        return clone(self._cache[key])

    def __contains__(self, path: Sequence[Any]) -> bool:
        key = self._key(path)
        return key is not MISSING and key in self._cache

    def clear(self) -> None:
        """Drop every cached template."""
        self._cache.clear()

    def _key(self, path: Sequence[Any]) -> Any:
        node: Any = self._schema
        key: list[Any] = []
        for segment in path:
            if node is MISSING:
                return MISSING
            key.append(_ANY_INDEX if isinstance(node, RepeatedNode) else segment)
            node = SCHEMA_RESOLVER.step(node, segment)
        return tuple(key) if node is not MISSING else MISSING
