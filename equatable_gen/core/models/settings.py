"""
Emitter settings — loaded from equatable.yml, defaults otherwise.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class EmitterSettings(BaseModel):
    """Knobs for rendering generated code.

    Attributes:
        indent_width: Spaces per indent level.
        access_level: Swift access modifier on the ``==`` function.
    """

    model_config = ConfigDict(extra="forbid")

    indent_width: int = Field(default=4, ge=1, le=16)
    access_level: Literal["public", "internal", "fileprivate", "private"] = "public"

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_width
