"""
Reflection models — what one reflective walk over a value discovers.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FieldDescriptor(BaseModel):
    """A named field of an inspected value. Unnamed fields use ``""``."""

    name: str = ""


class TypeShape(BaseModel):
    """Type identity and ordered fields of an inspected value.

    ``qualified_name`` keeps the module prefix; ``type_name`` is the
    simple name used in generated code.
    """

    qualified_name: str
    type_name: str
    fields: list[FieldDescriptor] = Field(default_factory=list)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]
