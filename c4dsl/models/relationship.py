"""Relationships between C4 elements, addressed by DSL identifier."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from c4dsl.models.elements import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TECHNOLOGY_LENGTH,
    InteractionStyle,
)


class Relationship(BaseModel):
    """Non-owning link between two elements.

    ``source`` and ``target`` are DSL identifiers or hierarchical paths
    (``api.wa``); they are resolved when the workspace is serialized.
    """

    source: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    description: str = Field(..., max_length=MAX_DESCRIPTION_LENGTH)
    technology: Optional[str] = Field(default=None, max_length=MAX_TECHNOLOGY_LENGTH)
    interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS

    model_config = {
        "frozen": True,
    }

    @field_validator("description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value
