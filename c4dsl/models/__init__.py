"""C4 model types."""

from c4dsl.models.elements import (
    CodeElement,
    CodeType,
    Component,
    Container,
    ContainerType,
    Element,
    ElementType,
    InteractionStyle,
    Location,
    Person,
    SoftwareSystem,
)
from c4dsl.models.relationship import Relationship

__all__ = [
    "CodeElement",
    "CodeType",
    "Component",
    "Container",
    "ContainerType",
    "Element",
    "ElementType",
    "InteractionStyle",
    "Location",
    "Person",
    "Relationship",
    "SoftwareSystem",
]
