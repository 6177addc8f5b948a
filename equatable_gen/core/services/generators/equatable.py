"""
Equatable generator — produce a Swift ``Equatable`` conformance for a value.

The output is a fixed six-group template:

    extension <Type>: Equatable {
        public static func ==(lhs: <Type>, rhs: <Type>) -> Bool {
            guard lhs.<field> == rhs.<field> else { return false }   # per field
            return true
        }
    }

Field order is declaration order.  Field types are not inspected; each
field is assumed to support ``==`` on its own.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from typing import Any, TextIO

from equatable_gen.core.models.settings import EmitterSettings
from equatable_gen.core.models.template import GeneratedSource, TemplateLine
from equatable_gen.core.services.reflection import reflect

logger = logging.getLogger(__name__)

PROTOCOL_NAME = "Equatable"


# ── Template ────────────────────────────────────────────────────


def build_template(
    type_name: str,
    field_names: Sequence[str],
    access_level: str = "public",
) -> list[TemplateLine]:
    """Assemble the template lines for ``type_name`` comparing ``field_names``."""
    groups: list[list[TemplateLine]] = [
        [TemplateLine(indent_level=0, text=f"extension {type_name}: {PROTOCOL_NAME} {{")],
        [
            TemplateLine(
                indent_level=1,
                text=(
                    f"{access_level} static func ==(lhs: {type_name}, rhs: {type_name})"
                    " -> Bool {"
                ),
            )
        ],
        [
            TemplateLine(
                indent_level=2,
                text=f"guard lhs.{name} == rhs.{name} else {{ return false }}",
            )
            for name in field_names
        ],
        [TemplateLine(indent_level=2, text="return true")],
        [TemplateLine(indent_level=1, text="}")],
        [TemplateLine(indent_level=0, text="}")],
    ]
    return [line for group in groups for line in group]


def render_lines(lines: Iterable[TemplateLine], indent_unit: str = "    ") -> str:
    """Indent each line and join with newlines (no trailing newline)."""
    return "\n".join(line.render(indent_unit) for line in lines)


# ── Generate ────────────────────────────────────────────────────


def generate_equatable_for(
    type_name: str,
    field_names: Sequence[str],
    settings: EmitterSettings | None = None,
) -> GeneratedSource:
    """Generate the conformance from an explicit type name and field list."""
    settings = settings or EmitterSettings()
    names = list(field_names)
    lines = build_template(type_name, names, access_level=settings.access_level)
    content = render_lines(lines, indent_unit=settings.indent_unit)
    logger.info("Generated Equatable for %s (%d field(s))", type_name, len(names))
    return GeneratedSource(type_name=type_name, fields=names, content=content)


def generate_equatable(value: Any, settings: EmitterSettings | None = None) -> GeneratedSource:
    """Reflect ``value`` and generate the conformance for its type."""
    shape = reflect(value)
    return generate_equatable_for(shape.type_name, shape.field_names, settings)


def adopt_equatable(
    value: Any,
    stream: TextIO | None = None,
    settings: EmitterSettings | None = None,
) -> None:
    """Print the ``Equatable`` conformance for ``value``'s type.

    Writes to stdout unless ``stream`` is given, followed by a newline.
    """
    source = generate_equatable(value, settings)
    print(source.content, file=stream or sys.stdout)
