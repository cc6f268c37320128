"""C4 model elements: Person, SoftwareSystem, Container, Component, CodeElement.

Elements are validated on construction and frozen afterwards. Ownership is a
strict forest: a SoftwareSystem owns its Containers, a Container its
Components, a Component its CodeElements.
"""
from __future__ import annotations

from enum import Enum
from typing import ClassVar, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 1000
MAX_TECHNOLOGY_LENGTH = 255
MAX_LANGUAGE_LENGTH = 255
MAX_FILE_PATH_LENGTH = 512
MAX_RESPONSIBILITY_LENGTH = 500

IDENTIFIER_PATTERN = r"^[A-Za-z0-9_-]+$"


class ElementType(str, Enum):
    PERSON = "Person"
    SOFTWARE_SYSTEM = "SoftwareSystem"
    CONTAINER = "Container"
    COMPONENT = "Component"
    CODE = "Code"


class Location(str, Enum):
    INTERNAL = "Internal"
    EXTERNAL = "External"


class ContainerType(str, Enum):
    WEB_APPLICATION = "Web Application"
    DESKTOP_APPLICATION = "Desktop Application"
    MOBILE_APPLICATION = "Mobile Application"
    DATABASE = "Database"
    FILE_SYSTEM = "File System"
    API = "API"
    MESSAGE_BUS = "Message Bus"


class CodeType(str, Enum):
    CLASS = "Class"
    STRUCT = "Struct"
    FUNCTION = "Function"
    TRAIT = "Trait"
    MODULE = "Module"
    ENUM = "Enum"
    INTERFACE = "Interface"


class InteractionStyle(str, Enum):
    SYNCHRONOUS = "Synchronous"
    ASYNCHRONOUS = "Asynchronous"
    BIDIRECTIONAL = "Bidirectional"


def _require_text(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value


class BaseElement(BaseModel):
    """Fields shared by every C4 element."""

    element_type: ClassVar[ElementType]
    keyword: ClassVar[str]

    name: str = Field(..., max_length=MAX_NAME_LENGTH)
    description: str = Field(..., max_length=MAX_DESCRIPTION_LENGTH)
    identifier: Optional[str] = Field(default=None, pattern=IDENTIFIER_PATTERN)

    model_config = {
        "frozen": True,
    }

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _require_text(value)

    @property
    def children(self) -> List["Element"]:
        return []

    @property
    def technology_label(self) -> Optional[str]:
        """Value rendered in the optional third quoted slot of the DSL line."""
        return None

    @property
    def is_external(self) -> bool:
        return False


class Person(BaseElement):
    element_type: ClassVar[ElementType] = ElementType.PERSON
    keyword: ClassVar[str] = "person"

    location: Location = Location.INTERNAL
    technology: Optional[str] = Field(default=None, max_length=MAX_TECHNOLOGY_LENGTH)

    @property
    def is_external(self) -> bool:
        return self.location == Location.EXTERNAL


class CodeElement(BaseElement):
    element_type: ClassVar[ElementType] = ElementType.CODE
    keyword: ClassVar[str] = "code"

    code_type: CodeType
    language: Optional[str] = Field(default=None, max_length=MAX_LANGUAGE_LENGTH)
    file_path: Optional[str] = Field(default=None, max_length=MAX_FILE_PATH_LENGTH)

    @property
    def technology_label(self) -> Optional[str]:
        return self.language


class Component(BaseElement):
    element_type: ClassVar[ElementType] = ElementType.COMPONENT
    keyword: ClassVar[str] = "component"

    technology: Optional[str] = Field(default=None, max_length=MAX_TECHNOLOGY_LENGTH)
    responsibilities: List[str] = []
    code_elements: List[CodeElement] = []

    @field_validator("responsibilities")
    @classmethod
    def _responsibility_length(cls, values: List[str]) -> List[str]:
        for index, value in enumerate(values):
            if len(value) > MAX_RESPONSIBILITY_LENGTH:
                raise ValueError(
                    f"responsibilities[{index}] exceeds maximum length of "
                    f"{MAX_RESPONSIBILITY_LENGTH} characters (actual: {len(value)})"
                )
        return values

    @property
    def children(self) -> List["Element"]:
        return list(self.code_elements)

    @property
    def technology_label(self) -> Optional[str]:
        return self.technology


class Container(BaseElement):
    element_type: ClassVar[ElementType] = ElementType.CONTAINER
    keyword: ClassVar[str] = "container"

    container_type: Union[ContainerType, str] = Field(..., union_mode="left_to_right")
    technology: Optional[str] = Field(default=None, max_length=MAX_TECHNOLOGY_LENGTH)
    components: List[Component] = []

    @property
    def children(self) -> List["Element"]:
        return list(self.components)

    @property
    def technology_label(self) -> Optional[str]:
        return self.technology


class SoftwareSystem(BaseElement):
    element_type: ClassVar[ElementType] = ElementType.SOFTWARE_SYSTEM
    keyword: ClassVar[str] = "softwareSystem"

    location: Location = Location.INTERNAL
    containers: List[Container] = []

    @property
    def children(self) -> List["Element"]:
        return list(self.containers)

    @property
    def is_external(self) -> bool:
        return self.location == Location.EXTERNAL


Element = Union[Person, SoftwareSystem, Container, Component, CodeElement]
