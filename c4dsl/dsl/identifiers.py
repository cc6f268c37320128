"""Identifier assignment for workspace elements.

Each element gets a short identifier built from the first letter or digit of every word
of its name (``"Software System"`` -> ``ss``). Identifiers are unique across
the whole workspace: later collisions take a numeric suffix (``ss1``, ``ss2``).
Nested elements are addressed by a dot-joined path (``ss.wa``).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from c4dsl.dsl.errors import IdentifierSpaceExhausted, UnknownIdentifierReference
from c4dsl.models.elements import Element

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUFFIX = 100_000


def _initial(word: str) -> str:
    for ch in word:
        if ch.isascii() and ch.isalnum():
            return ch.lower()
    return ""


def acronym(name: str) -> str:
    """First ASCII letter or digit of each word; words without one are skipped."""
    return "".join(_initial(word) for word in name.split())


class IdentifierGenerator:
    def __init__(self, max_suffix: int = DEFAULT_MAX_SUFFIX) -> None:
        self.max_suffix = max_suffix
        self._used: Set[str] = set()

    def next_identifier(self, candidate: str) -> str:
        identifier = candidate
        counter = 1
        while identifier in self._used:
            if counter > self.max_suffix:
                raise IdentifierSpaceExhausted(candidate, self.max_suffix)
            identifier = f"{candidate}{counter}"
            counter += 1
        self._used.add(identifier)
        return identifier

    def identifier_for(self, element: Element) -> str:
        candidate = element.identifier or acronym(element.name) or element.element_type.value[0].lower()
        return self.next_identifier(candidate)


@dataclass
class AssignedElement:
    element: Element
    identifier: str
    path: str
    children: List["AssignedElement"] = field(default_factory=list)


@dataclass
class IdentifierMap:
    """Result of the assignment pass: the identified forest plus lookups."""

    roots: List[AssignedElement] = field(default_factory=list)
    by_path: Dict[str, AssignedElement] = field(default_factory=dict)
    by_identifier: Dict[str, AssignedElement] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.by_path)

    def lookup(self, reference: str) -> Optional[AssignedElement]:
        return self.by_path.get(reference) or self.by_identifier.get(reference)

    def resolve(self, reference: str, context: str) -> str:
        """Return the hierarchical path for a path or bare identifier."""
        node = self.lookup(reference)
        if node is None:
            raise UnknownIdentifierReference(reference, context)
        return node.path


def assign_identifiers(roots: Iterable[Element], max_suffix: int = DEFAULT_MAX_SUFFIX) -> IdentifierMap:
    """Assign identifiers depth-first, siblings in insertion order."""
    generator = IdentifierGenerator(max_suffix=max_suffix)
    result = IdentifierMap()

    def _assign(element: Element, parent: Optional[AssignedElement]) -> AssignedElement:
        identifier = generator.identifier_for(element)
        path = f"{parent.path}.{identifier}" if parent else identifier
        node = AssignedElement(element=element, identifier=identifier, path=path)
        result.by_path[path] = node
        result.by_identifier[identifier] = node
        logger.debug("Assigned identifier", extra={"element": element.name, "path": path})
        for child in element.children:
            node.children.append(_assign(child, node))
        return node

    for root in roots:
        result.roots.append(_assign(root, None))
    return result
