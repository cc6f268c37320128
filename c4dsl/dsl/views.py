"""View declarations for the ``views`` block."""
from __future__ import annotations

import re
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from c4dsl.dsl.identifiers import IdentifierMap
from c4dsl.dsl.text import TOKEN_PATTERN, ensure_token, quote
from c4dsl.dsl.writer import DslWriter

WILDCARD = "*"
_EXPRESSION_RE = re.compile(TOKEN_PATTERN)


class ViewType(str, Enum):
    SYSTEM_CONTEXT = "systemContext"
    CONTAINER = "container"
    COMPONENT = "component"
    SYSTEM_LANDSCAPE = "systemLandscape"
    FILTERED = "filtered"
    DYNAMIC = "dynamic"
    DEPLOYMENT = "deployment"
    CUSTOM = "custom"

    @property
    def requires_element_identifier(self) -> bool:
        # Structurizr DSL: `systemLandscape [key]` and `custom [key] [title]` take no element.
        return self not in (ViewType.SYSTEM_LANDSCAPE, ViewType.CUSTOM)


class ViewConfiguration(BaseModel):
    view_type: ViewType = ViewType.SYSTEM_CONTEXT
    element_identifier: str = Field(default=WILDCARD, min_length=1)
    title: str = Field(..., min_length=1)
    include: List[str] = [WILDCARD]
    exclude: List[str] = []

    model_config = {
        "frozen": True,
    }

    @field_validator("include", "exclude")
    @classmethod
    def _expressions_are_tokens(cls, values: List[str]) -> List[str]:
        for index, value in enumerate(values):
            if not value or not _EXPRESSION_RE.fullmatch(value):
                raise ValueError(f"expression [{index}] must be a single token without whitespace, braces or quotes")
        return values

    @property
    def key(self) -> str:
        """Title as a DSL view key (spaces become underscores)."""
        return self.title.replace(" ", "_")


class ViewsSerializer:
    def __init__(self) -> None:
        self.views: List[ViewConfiguration] = []

    def add_view(self, view: ViewConfiguration) -> None:
        self.views.append(view)

    def __bool__(self) -> bool:
        return bool(self.views)

    def _target(self, view: ViewConfiguration, identifiers: IdentifierMap) -> str:
        if view.element_identifier == WILDCARD:
            return WILDCARD
        return identifiers.resolve(view.element_identifier, f"{view.view_type.value} view '{view.title}'")

    def write(self, writer: DslWriter, identifiers: IdentifierMap) -> None:
        """Write one block per view into the enclosing ``views`` block."""
        for view in self.views:
            target = self._target(view, identifiers)
            parts = [view.view_type.value]
            if view.view_type.requires_element_identifier:
                parts.append(target)
            parts.append(quote(view.key, "view title"))
            with writer.block(" ".join(parts)):
                for expression in view.include:
                    writer.line(f"include {ensure_token(expression, 'view include')}")
                for expression in view.exclude:
                    writer.line(f"exclude {ensure_token(expression, 'view exclude')}")
