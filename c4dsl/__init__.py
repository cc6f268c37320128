"""C4 architecture models and their Structurizr DSL serialization.

Example usage:
    from c4dsl import Container, ContainerType, Person, SoftwareSystem, StructurizrDslSerializer

    dsl = (
        StructurizrDslSerializer()
        .with_name("Example")
        .add_person(Person(name="User", description="A user of the system"))
        .add_software_system(
            SoftwareSystem(
                name="API",
                description="Backend API",
                containers=[
                    Container(
                        name="Web App",
                        description="Frontend",
                        container_type=ContainerType.WEB_APPLICATION,
                    )
                ],
            )
        )
        .add_relationship("u", "a", "Uses", "HTTPS")
        .serialize()
    )
"""

from c4dsl.dsl import (
    DslError,
    ElementStyle,
    IdentifierSpaceExhausted,
    InvalidText,
    RelationshipStyle,
    SerializerConsumedError,
    StructurizrDslSerializer,
    UnknownIdentifierReference,
    ViewConfiguration,
    ViewType,
)
from c4dsl.models import (
    CodeElement,
    CodeType,
    Component,
    Container,
    ContainerType,
    ElementType,
    InteractionStyle,
    Location,
    Person,
    Relationship,
    SoftwareSystem,
)
from c4dsl.models.workspace import WorkspaceDefinition, load_workspace

__version__ = "0.1.0"
__all__ = [
    "CodeElement",
    "CodeType",
    "Component",
    "Container",
    "ContainerType",
    "DslError",
    "ElementStyle",
    "ElementType",
    "IdentifierSpaceExhausted",
    "InteractionStyle",
    "InvalidText",
    "Location",
    "Person",
    "Relationship",
    "RelationshipStyle",
    "SerializerConsumedError",
    "SoftwareSystem",
    "StructurizrDslSerializer",
    "UnknownIdentifierReference",
    "ViewConfiguration",
    "ViewType",
    "WorkspaceDefinition",
    "load_workspace",
]
