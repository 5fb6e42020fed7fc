"""json-form-tree - schema-bound, path-addressed editing of JSON documents."""

from __future__ import annotations

from json_form_tree.accessor import read
from json_form_tree.config import BindingConfig, TraversalConfig
from json_form_tree.mutator import clone, insert_element, remove_element, set_at_path
from json_form_tree.paths import MISSING, Missing
from json_form_tree.records import (
    AppendRecord,
    Boundary,
    FieldRecord,
    GroupRecord,
    RemoveRecord,
)
from json_form_tree.schema import (
    ChoiceNode,
    ContainerNode,
    FlagNode,
    LongTextNode,
    NodeKind,
    Option,
    RepeatedNode,
    ScalarKind,
    ScalarNode,
    SchemaBuilder,
)
from json_form_tree.session import FormSession
from json_form_tree.sync import Synchronizer, traverse
from json_form_tree.synthesizer import synthesize

__version__: str = "0.1.0"
__all__: list[str] = [
    "AppendRecord",
    "BindingConfig",
    "Boundary",
    "ChoiceNode",
    "ContainerNode",
    "FieldRecord",
    "FlagNode",
    "FormSession",
    "GroupRecord",
    "LongTextNode",
    "MISSING",
    "Missing",
    "NodeKind",
    "Option",
    "RemoveRecord",
    "RepeatedNode",
    "ScalarKind",
    "ScalarNode",
    "SchemaBuilder",
    "Synchronizer",
    "TraversalConfig",
    "clone",
    "insert_element",
    "read",
    "remove_element",
    "set_at_path",
    "synthesize",
    "traverse",
]
