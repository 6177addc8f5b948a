"""
Template models — the line-level shape of generated source.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TemplateLine(BaseModel):
    """One line of a code template.

    Attributes:
        indent_level: Number of indent units prefixed when rendered.
        text:         The code on this line, without indentation.
    """

    indent_level: int = Field(ge=0)
    text: str

    def render(self, indent_unit: str = "    ") -> str:
        return f"{indent_unit * self.indent_level}{self.text}"


class GeneratedSource(BaseModel):
    """Source text produced by a generator.

    Attributes:
        type_name: Simple (unqualified) name of the type the code is for.
        fields:    Field names compared, in declaration order.
        content:   Full rendered source, without a trailing newline.
    """

    type_name: str
    fields: list[str] = Field(default_factory=list)
    content: str
