"""Schema subpackage: the declarative description of an editable document.

Re-exports the public API for the schema module:
- SchemaNode: union of the six node variants
- NodeKind / ScalarKind: StrEnums naming node and scalar kinds
- Option: one entry of a ChoiceNode
- SchemaBuilder: converts plain-dict form schemas into SchemaNode trees
"""

from json_form_tree.schema.builder import SchemaBuilder
from json_form_tree.schema.nodes import (
    ChoiceNode,
    ContainerNode,
    FlagNode,
    LongTextNode,
    NodeKind,
    Option,
    RepeatedNode,
    ScalarKind,
    ScalarNode,
    SchemaNode,
)

__all__ = [
    "ChoiceNode",
    "ContainerNode",
    "FlagNode",
    "LongTextNode",
    "NodeKind",
    "Option",
    "RepeatedNode",
    "ScalarKind",
    "ScalarNode",
    "SchemaBuilder",
    "SchemaNode",
]
