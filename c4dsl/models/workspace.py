"""Workspace documents: a JSON description of a whole C4 workspace."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from c4dsl.dsl.serializer import StructurizrDslSerializer
from c4dsl.dsl.styles import ElementStyle, RelationshipStyle
from c4dsl.dsl.views import ViewConfiguration
from c4dsl.models.elements import Person, SoftwareSystem
from c4dsl.models.relationship import Relationship
from c4dsl.utils.config import Settings
from c4dsl.utils.file_utils import read_text_file


class WorkspaceDefinition(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    persons: List[Person] = []
    software_systems: List[SoftwareSystem] = []
    relationships: List[Relationship] = []
    views: List[ViewConfiguration] = []
    element_styles: List[ElementStyle] = []
    relationship_styles: List[RelationshipStyle] = []

    def to_serializer(self, settings: Optional[Settings] = None) -> StructurizrDslSerializer:
        serializer = StructurizrDslSerializer(settings=settings)
        if self.name is not None:
            serializer.with_name(self.name)
        if self.description is not None:
            serializer.with_description(self.description)
        for person in self.persons:
            serializer.add_person(person)
        for system in self.software_systems:
            serializer.add_software_system(system)
        for rel in self.relationships:
            serializer.add_relationship(
                rel.source,
                rel.target,
                rel.description,
                technology=rel.technology,
                interaction_style=rel.interaction_style,
            )
        for view in self.views:
            serializer.add_view(view)
        for style in self.element_styles:
            serializer.add_element_style(style)
        for style in self.relationship_styles:
            serializer.add_relationship_style(style)
        return serializer

    def to_dsl(self, settings: Optional[Settings] = None) -> str:
        return self.to_serializer(settings=settings).serialize()


def load_workspace(path: str | Path) -> WorkspaceDefinition:
    return WorkspaceDefinition.model_validate_json(read_text_file(path))
