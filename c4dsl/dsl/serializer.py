"""Structurizr DSL serializer facade.

Collects a workspace (elements, relationships, views, styles) through a
chainable API, then produces the DSL text in two passes: identifiers are
assigned to the whole element forest first, so relationships and views may
reference elements added after them, and only then is text emitted.

The serializer is single-use; once ``serialize()`` has run every further call
raises :class:`SerializerConsumedError`.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from c4dsl.dsl.errors import DslError, SerializerConsumedError
from c4dsl.dsl.identifiers import assign_identifiers
from c4dsl.dsl.styles import ElementStyle, RelationshipStyle, StylesSerializer
from c4dsl.dsl.text import quote
from c4dsl.dsl.views import ViewConfiguration, ViewsSerializer
from c4dsl.dsl.workspace_serializer import WorkspaceSerializer
from c4dsl.dsl.writer import DslWriter
from c4dsl.models.elements import InteractionStyle, Person, SoftwareSystem
from c4dsl.models.relationship import Relationship
from c4dsl.utils.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class StructurizrDslSerializer:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings
        self._name: Optional[str] = None
        self._description: Optional[str] = None
        self._persons: List[Person] = []
        self._systems: List[SoftwareSystem] = []
        self._relationships: List[Relationship] = []
        self._views = ViewsSerializer()
        self._styles = StylesSerializer()
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_open(self) -> None:
        if self._consumed:
            raise SerializerConsumedError("serializer was already consumed by serialize()")

    def with_name(self, name: str) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._name = name
        return self

    def with_description(self, description: str) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._description = description
        return self

    def add_person(self, person: Person) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._persons.append(person.model_copy(deep=True))
        return self

    def add_software_system(self, system: SoftwareSystem) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._systems.append(system.model_copy(deep=True))
        return self

    def add_relationship(
        self,
        source: str,
        target: str,
        description: str,
        technology: Optional[str] = None,
        interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS,
    ) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._relationships.append(
            Relationship(
                source=source,
                target=target,
                description=description,
                technology=technology,
                interaction_style=interaction_style,
            )
        )
        return self

    def add_view(self, view: ViewConfiguration) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._views.add_view(view)
        return self

    def add_element_style(self, style: ElementStyle) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._styles.add_element_style(style)
        return self

    def add_relationship_style(self, style: RelationshipStyle) -> "StructurizrDslSerializer":
        self._ensure_open()
        self._styles.add_relationship_style(style)
        return self

    def serialize(self) -> str:
        """Return the complete DSL document, or raise the first DslError."""
        self._ensure_open()
        self._consumed = True
        try:
            text = self._render()
        except DslError as exc:
            logger.warning("Workspace serialization failed: %s", exc)
            raise
        logger.info(
            "Serialized workspace",
            extra={
                "persons": len(self._persons),
                "software_systems": len(self._systems),
                "relationships": len(self._relationships),
                "views": len(self._views.views),
            },
        )
        return text

    def _render(self) -> str:
        identifiers = assign_identifiers(
            [*self._persons, *self._systems],
            max_suffix=self.settings.max_identifier_suffix,
        )
        logger.debug("Assigned %d identifiers", len(identifiers))
        name = self._name if self._name is not None else self.settings.default_workspace_name
        description = (
            self._description if self._description is not None else self.settings.default_workspace_description
        )

        writer = DslWriter(indent_width=self.settings.indent_width)
        with writer.block(f"workspace {quote(name, 'workspace name')} {quote(description, 'workspace description')}"):
            writer.line("!identifiers hierarchical")
            writer.blank()
            WorkspaceSerializer(identifiers, self._relationships).write(writer)
            if self._views or self._styles:
                writer.blank()
                with writer.block("views"):
                    self._views.write(writer, identifiers)
                    if self._views and self._styles:
                        writer.blank()
                    self._styles.write(writer)
        return writer.getvalue()
