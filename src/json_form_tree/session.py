"""FormSession: the document-owner side of an editing session.

The engine functions are pure; something still has to hold the current
document between edits and decide whether each replacement is accepted.
FormSession wires the schema, the current document, a ``DefaultCache`` and a
single change callback together:

- ``records()`` returns a fresh traversal of the current document.
- ``edit()`` / ``append()`` / ``remove()`` run the matching mutator call.
  A no-op leaves everything untouched and does not call back. Otherwise the
  full replacement document is passed to ``on_change``; unless the callback
  returns ``False`` the session adopts it.

Thread safety: not thread-safe. Edits are expected one at a time, each
result becoming the authoritative document before the next edit.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from json_form_tree.cache import DefaultCache
from json_form_tree.config import TraversalConfig
from json_form_tree.mutator import insert_element, remove_element, set_at_path
from json_form_tree.paths import MISSING
from json_form_tree.protocols import ChangeCallback
from json_form_tree.schema.nodes import SchemaNode
from json_form_tree.sync import Synchronizer

logger = logging.getLogger(__name__)

__all__ = ["FormSession"]


class FormSession:
    """Holds the authoritative document for one schema-bound form.

    Example::

        from json_form_tree import FormSession

        accepted = []
        session = FormSession(schema, {"name": "a", "tags": []}, accepted.append)
        session.edit(("name",), "b")
        session.append(("tags",))
        print(session.document)   # {'name': 'b', 'tags': ['']}
        print(len(accepted))      # 2
    """

    def __init__(
        self,
        schema: SchemaNode,
        document: Any,
        on_change: ChangeCallback | None = None,
        config: TraversalConfig | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the session.

        Args:
            schema: Root SchemaNode. Read-only for the session's lifetime.
            document: Initial document. The session never modifies it.
            on_change: Called with every replacement document. Returning
                ``False`` rejects it. When None, every change is accepted.
            config: TraversalConfig used by ``records()``. Defaults to
                ``TraversalConfig()``.
            max_cache_size: Maximum number of synthesized element templates
                held by the session's ``DefaultCache``. Defaults to 128.
                This is an infrastructure parameter, not part of
                ``TraversalConfig``.
        """
        self._schema = schema
        self._document = document
        self._on_change = on_change
        self._config: TraversalConfig = (
            config if config is not None else TraversalConfig()
        )
        self._defaults = DefaultCache(schema, max_size=max_cache_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def schema(self) -> SchemaNode:
        return self._schema

    @property
    def document(self) -> Any:
        """The current authoritative document."""
        return self._document

    @property
    def defaults(self) -> DefaultCache:
        return self._defaults

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def records(self) -> Synchronizer:
        """Return a traversal of the current document for one render pass."""
        return Synchronizer(self._schema, self._document, config=self._config)

    def edit(self, path: Sequence[Any], value: Any) -> bool:
        """Write ``value`` at ``path``. Returns True if a change was accepted."""
        return self._propose(set_at_path(self._document, path, value))

    def append(self, path: Sequence[Any]) -> bool:
        """Append a default element to the list at ``path``.

        Returns True if a change was accepted.
        """
        template = self._defaults.template(path)
        if template is MISSING:
            logger.debug("append at %r is a no-op: not a repeated collection", tuple(path))
            return False
        return self._propose(
            insert_element(self._document, self._schema, path, element=template)
        )

    def remove(self, path: Sequence[Any], index: int) -> bool:
        """Remove element ``index`` of the list at ``path``.

        Returns True if a change was accepted.
        """
        return self._propose(remove_element(self._document, path, index))

    def replace(self, document: Any) -> None:
        """Adopt ``document`` wholesale without calling back (e.g. after a reload)."""
        self._document = document

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _propose(self, document: Any) -> bool:
        if document is self._document:
            return False
        if self._on_change is not None and self._on_change(document) is False:
            logger.debug("Replacement document rejected by owner")
            return False
        self._document = document
        logger.debug("Replacement document accepted")
        return True
