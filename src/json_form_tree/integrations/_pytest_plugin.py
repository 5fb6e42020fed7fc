"""pytest plugin for json-form-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pytest


@pytest.fixture(scope="session")
def assert_not_mutated() -> Any:
    """Fixture that returns a context manager guarding documents against mutation.

    The fixture is session-scoped because the returned callable is stateless
    (each ``with`` block takes its own snapshots).

    Usage in tests::

        def test_write_keeps_input(assert_not_mutated):
            doc = {"name": "a"}
            with assert_not_mutated(doc):
                set_at_path(doc, ("name",), "b")

    Returns:
        A callable ``_guard(*documents)`` usable as a context manager. On exit
        it raises ``AssertionError`` if any document is no longer deep-equal
        to its snapshot taken on entry.
    """

    @contextmanager
    def _guard(*documents: Any) -> Iterator[None]:
        snapshots = [copy.deepcopy(document) for document in documents]
        yield
        for position, (document, snapshot) in enumerate(
            zip(documents, snapshots, strict=True)
        ):
            if document != snapshot:
                raise AssertionError(
                    f"Document {position} was mutated in place:\n"
                    f"  before: {snapshot}\n"
                    f"  after:  {document}"
                )

    return _guard
