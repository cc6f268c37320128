"""Structurizr DSL serialization."""

from c4dsl.dsl.errors import (
    DslError,
    IdentifierSpaceExhausted,
    InvalidText,
    SerializerConsumedError,
    UnknownIdentifierReference,
)
from c4dsl.dsl.identifiers import IdentifierGenerator, IdentifierMap, acronym, assign_identifiers
from c4dsl.dsl.serializer import StructurizrDslSerializer
from c4dsl.dsl.styles import ElementStyle, RelationshipStyle, StylesSerializer
from c4dsl.dsl.text import escape_dsl_string
from c4dsl.dsl.views import ViewConfiguration, ViewsSerializer, ViewType
from c4dsl.dsl.workspace_serializer import WorkspaceSerializer
from c4dsl.dsl.writer import DslWriter

__all__ = [
    "DslError",
    "DslWriter",
    "ElementStyle",
    "IdentifierGenerator",
    "IdentifierMap",
    "IdentifierSpaceExhausted",
    "InvalidText",
    "RelationshipStyle",
    "SerializerConsumedError",
    "StructurizrDslSerializer",
    "StylesSerializer",
    "UnknownIdentifierReference",
    "ViewConfiguration",
    "ViewType",
    "ViewsSerializer",
    "WorkspaceSerializer",
    "acronym",
    "assign_identifiers",
    "escape_dsl_string",
]
