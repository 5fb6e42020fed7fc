"""Structural protocols for json-form-tree extension points.

Defines the interfaces collaborators must satisfy. No inheritance is
required: any object with conformant methods passes ``isinstance`` checks.

Example::

    from json_form_tree.paths import MISSING
    from json_form_tree.protocols import Resolver

    class UpperKeyResolver:
        def step(self, container, segment):
            return container.get(str(segment).upper(), MISSING)

    assert isinstance(UpperKeyResolver(), Resolver)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["ChangeCallback", "Resolver"]


@runtime_checkable
class Resolver(Protocol):
    """One resolution strategy for the shared path walk in ``paths.resolve``.

    ``step`` must:
    - Return the child of ``container`` addressed by ``segment``.
    - Return ``paths.MISSING`` when there is no such child.
    - Never raise for malformed segments or non-indexable containers.
    """

    def step(self, container: Any, segment: Any) -> Any: ...


@runtime_checkable
class ChangeCallback(Protocol):
    """Receives every replacement document produced by a ``FormSession``.

    Returning ``False`` rejects the document; any other return value
    (including ``None``) accepts it.
    """

    def __call__(self, document: Any) -> bool | None: ...
