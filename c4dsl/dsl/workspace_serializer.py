"""Emission of the ``model`` block: the element forest, then relationships."""
from __future__ import annotations

from typing import List

from c4dsl.dsl.identifiers import AssignedElement, IdentifierMap
from c4dsl.dsl.text import quote
from c4dsl.dsl.writer import DslWriter
from c4dsl.models.elements import ElementType, InteractionStyle
from c4dsl.models.relationship import Relationship

EXTERNAL_TAG = "External"


def element_header(node: AssignedElement) -> str:
    element = node.element
    label = element.element_type.value
    parts = [
        f"{node.identifier} = {element.keyword}",
        quote(element.name, f"{label} name"),
        quote(element.description, f"{label} description"),
    ]
    if element.technology_label is not None:
        parts.append(quote(element.technology_label, f"{label} technology"))
    return " ".join(parts)


def _has_body(node: AssignedElement) -> bool:
    if node.element.element_type == ElementType.CONTAINER:
        return True
    return bool(node.children) or node.element.is_external


def relationship_line(relationship: Relationship, identifiers: IdentifierMap) -> str:
    context = f"relationship '{relationship.description}'"
    source = identifiers.resolve(relationship.source, context)
    target = identifiers.resolve(relationship.target, context)
    parts = [f"{source} -> {target}", quote(relationship.description, "relationship description")]
    technology = relationship.technology
    if relationship.interaction_style != InteractionStyle.SYNCHRONOUS:
        parts.append(quote(technology or "", "relationship technology"))
        parts.append(quote(relationship.interaction_style.value, "relationship tags"))
    elif technology is not None:
        parts.append(quote(technology, "relationship technology"))
    return " ".join(parts)


class WorkspaceSerializer:
    """Writes the model block from an identified element forest."""

    def __init__(self, identifiers: IdentifierMap, relationships: List[Relationship]) -> None:
        self.identifiers = identifiers
        self.relationships = relationships

    def write(self, writer: DslWriter) -> None:
        # Resolve every endpoint before writing so a bad reference leaves no output.
        lines = [relationship_line(rel, self.identifiers) for rel in self.relationships]
        with writer.block("model"):
            for node in self.identifiers.roots:
                self._write_element(writer, node)
            for line in lines:
                writer.line(line)

    def _write_element(self, writer: DslWriter, node: AssignedElement) -> None:
        header = element_header(node)
        if not _has_body(node):
            writer.line(header)
            return
        if not node.children and not node.element.is_external:
            writer.empty_block(header)
            return
        with writer.block(header):
            if node.element.is_external:
                writer.line(f"tags {quote(EXTERNAL_TAG, 'tags')}")
            for child in node.children:
                self._write_element(writer, child)
