"""Element and relationship styles for the ``styles`` block."""
from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from c4dsl.dsl.text import TOKEN_PATTERN, ensure_token, quote
from c4dsl.dsl.writer import DslWriter


class ElementStyle(BaseModel):
    selector: str = Field(..., min_length=1)
    background: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    color: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    shape: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    size: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    stroke: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    stroke_width: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)

    model_config = {
        "frozen": True,
    }

    def properties(self) -> List[Tuple[str, str]]:
        rendered = [
            ("background", self.background),
            ("color", self.color),
            ("shape", self.shape),
            ("size", self.size),
            ("stroke", self.stroke),
            ("strokeWidth", self.stroke_width),
        ]
        return [(key, value) for key, value in rendered if value is not None]


class RelationshipStyle(BaseModel):
    tag: Optional[str] = None
    thickness: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    color: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    router: Optional[str] = Field(default=None, pattern=TOKEN_PATTERN)
    dashed: Optional[bool] = None

    model_config = {
        "frozen": True,
    }

    def properties(self) -> List[Tuple[str, str]]:
        dashed = None if self.dashed is None else str(self.dashed).lower()
        rendered = [
            ("thickness", self.thickness),
            ("color", self.color),
            ("router", self.router),
            ("dashed", dashed),
        ]
        return [(key, value) for key, value in rendered if value is not None]


class StylesSerializer:
    def __init__(self) -> None:
        self.element_styles: List[ElementStyle] = []
        self.relationship_styles: List[RelationshipStyle] = []

    def add_element_style(self, style: ElementStyle) -> None:
        self.element_styles.append(style)

    def add_relationship_style(self, style: RelationshipStyle) -> None:
        self.relationship_styles.append(style)

    def __bool__(self) -> bool:
        return bool(self.element_styles or self.relationship_styles)

    @staticmethod
    def _write_properties(writer: DslWriter, properties: List[Tuple[str, str]]) -> None:
        for key, value in properties:
            writer.line(f"{key} {ensure_token(value, f'style {key}')}")

    def write(self, writer: DslWriter) -> None:
        """Write the ``styles`` block; nothing is written when no style was added."""
        if not self:
            return
        with writer.block("styles"):
            for style in self.element_styles:
                with writer.block(f"element {quote(style.selector, 'style selector')}"):
                    self._write_properties(writer, style.properties())
            for style in self.relationship_styles:
                header = "relationship"
                if style.tag is not None:
                    header = f"relationship {quote(style.tag, 'relationship style tag')}"
                with writer.block(header):
                    self._write_properties(writer, style.properties())
