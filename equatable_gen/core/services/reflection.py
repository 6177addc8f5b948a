"""
Reflection — discover a value's type name and declared fields at runtime.

Field enumeration follows the value's own declaration machinery, in this
order of precedence:

    enum (no fields)  →  dataclass  →  pydantic model  →  named tuple  →  __slots__
    →  instance __dict__  →  class annotations  →  nothing

Classes are accepted as well as instances; a class is reflected through
what it declares.  Values with no reflective surface (``5``, ``None``)
simply have no fields.
"""

from __future__ import annotations

import dataclasses
import enum
import inspect
import logging
from typing import Any

from pydantic import BaseModel

from equatable_gen.core.models.reflection import FieldDescriptor, TypeShape

logger = logging.getLogger(__name__)

QUALIFIER_SEPARATOR = "."

# Slot names that are bookkeeping, not fields
_SLOT_SKIP = frozenset({"__dict__", "__weakref__"})


# ── Type names ──────────────────────────────────────────────────


def _subject_type(value: Any) -> type:
    return value if isinstance(value, type) else type(value)


def _qualname(cls: type) -> str:
    qualname = getattr(cls, "__qualname__", cls.__name__)
    # Function-local classes: "make.<locals>.Point" → "Point"
    if "<locals>" in qualname:
        qualname = qualname.rsplit("<locals>" + QUALIFIER_SEPARATOR, 1)[-1]
    return qualname


def qualified_type_name(value: Any) -> str:
    """Return ``"<module>.<qualname>"`` for the value's type."""
    cls = _subject_type(value)
    module = getattr(cls, "__module__", None)
    qualname = _qualname(cls)
    if not module:
        return qualname
    return f"{module}{QUALIFIER_SEPARATOR}{qualname}"


def strip_module_qualifier(full_name: str, separator: str = QUALIFIER_SEPARATOR) -> str:
    """Drop the leading qualifier segment of a dotted type name.

    ``Module.Outer.Person`` → ``Outer.Person``; ``Person`` is returned as is.
    Only the first segment is dropped.
    """
    parts = full_name.split(separator)
    if len(parts) > 1:
        return separator.join(parts[1:])
    return full_name


def simple_type_name(value: Any) -> str:
    """Return the value's type name without its module qualifier.

    The module path (``pkg.models``) counts as one qualifier segment, so a
    nested class ``pkg.models.Outer.Person`` is named ``Outer.Person``.
    """
    return _qualname(_subject_type(value))


# ── Fields ──────────────────────────────────────────────────────


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in _SLOT_SKIP and name not in names:
                names.append(name)
    return names


def _field_names(value: Any) -> list[str]:
    cls = _subject_type(value)

    # Enum cases carry no comparable fields of their own
    if issubclass(cls, enum.Enum):
        return []

    if dataclasses.is_dataclass(value):
        return [f.name for f in dataclasses.fields(value)]

    if issubclass(cls, BaseModel):
        return list(cls.model_fields)

    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return list(cls._fields)

    is_instance = value is not cls
    slots = _slot_names(cls)
    if slots:
        names = slots
        if is_instance and hasattr(value, "__dict__"):
            names += [n for n in vars(value) if n not in names]
        return names

    if is_instance:
        if hasattr(value, "__dict__"):
            return list(vars(value))
        return []

    # A plain class: fall back to what it annotates
    return list(inspect.get_annotations(cls))


def enumerate_fields(value: Any) -> list[FieldDescriptor]:
    """List the value's immediate named fields in declaration order."""
    return [FieldDescriptor(name=name or "") for name in _field_names(value)]


def reflect(value: Any) -> TypeShape:
    """Walk the value once and return its :class:`TypeShape`."""
    shape = TypeShape(
        qualified_name=qualified_type_name(value),
        type_name=simple_type_name(value),
        fields=enumerate_fields(value),
    )
    logger.debug(
        "Reflected %s: %d field(s) %s",
        shape.qualified_name,
        len(shape.fields),
        shape.field_names,
    )
    return shape
