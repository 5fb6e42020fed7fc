"""Shared schemas and documents for the json-form-tree test suite.

Every fixture returns a freshly built object, so tests may not leak edits
into each other even if the code under test misbehaved.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_form_tree.schema.nodes import (
    ChoiceNode,
    ContainerNode,
    FlagNode,
    LongTextNode,
    Option,
    RepeatedNode,
    ScalarKind,
    ScalarNode,
)


@pytest.fixture
def tag_schema() -> ContainerNode:
    """``{name: text, tags: [text]}``."""
    return ContainerNode(
        children={
            "name": ScalarNode(ScalarKind.TEXT, default=""),
            "tags": RepeatedNode(element=ScalarNode(ScalarKind.TEXT, default="")),
        }
    )


@pytest.fixture
def tag_doc() -> dict[str, Any]:
    return {"name": "a", "tags": ["x", "y"]}


@pytest.fixture
def profile_schema() -> ContainerNode:
    """A schema touching every node kind, with a repeated container inside."""
    return ContainerNode(
        children={
            "title": ScalarNode(ScalarKind.TEXT, default="untitled", name="Title"),
            "age": ScalarNode(scalar_kind=ScalarKind.NUMBER),
            "bio": LongTextNode(),
            "role": ChoiceNode(
                options=(Option("admin", "Admin"), Option("user", "User")),
            ),
            "active": FlagNode(default=1),
            "address": ContainerNode(
                children={
                    "city": ScalarNode(ScalarKind.TEXT),
                    "zip": ScalarNode(scalar_kind=ScalarKind.NUMBER, default=1000),
                }
            ),
            "contacts": RepeatedNode(
                element=ContainerNode(
                    children={
                        "kind": ChoiceNode(
                            options=(Option("email", "E-mail"), Option("phone", "Phone")),
                            default="phone",
                        ),
                        "value": ScalarNode(ScalarKind.TEXT),
                        "labels": RepeatedNode(element=ScalarNode(ScalarKind.TEXT)),
                    }
                ),
                name="Contacts",
            ),
            "locked": RepeatedNode(element=ScalarNode(ScalarKind.TEXT), mutable=False),
        }
    )


@pytest.fixture
def profile_doc() -> dict[str, Any]:
    return {
        "title": "Dr",
        "age": 42,
        "role": "user",
        "active": False,
        "address": {"city": "Oslo"},
        "contacts": [
            {"kind": "email", "value": "a@b.c", "labels": ["work"]},
            {"kind": "phone", "value": "123"},
        ],
    }
