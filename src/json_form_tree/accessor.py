"""Read access into a document by path."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_form_tree.paths import VALUE_RESOLVER, resolve

__all__ = ["read"]


def read(root: Any, path: Sequence[Any]) -> Any:
    """Return the value at ``path`` inside ``root``, or ``MISSING``.

    Segments are resolved against the container actually present at each
    step: keys for mappings, non-negative indices for sequences. A scalar,
    ``None`` or absent value along the way short-circuits to ``MISSING``.
    Never raises, and never synthesizes a value for an absent location.

    Args:
        root: The document.
        path: Ordered segments. An empty path returns ``root`` itself.

    Returns:
        The stored value (which may legitimately be ``None`` or empty), or
        ``MISSING`` when nothing is stored at ``path``.
    """
    return resolve(root, path, VALUE_RESOLVER)
