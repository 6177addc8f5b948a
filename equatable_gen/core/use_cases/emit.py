"""
Emit use case — resolve a target, load settings, generate the conformance.

Targets are ``package.module:attribute`` strings, where the attribute may
be dotted (``models:Outer.Person``) and may name a class or an instance.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from equatable_gen.core.config.loader import ConfigError, load_settings
from equatable_gen.core.models.settings import EmitterSettings
from equatable_gen.core.models.template import GeneratedSource
from equatable_gen.core.services.generators.equatable import (
    generate_equatable,
    generate_equatable_for,
)
from equatable_gen.core.services.reflection import strip_module_qualifier

logger = logging.getLogger(__name__)


class TargetError(Exception):
    """Raised when a ``module:attribute`` target cannot be resolved."""


@dataclass
class EmitResult:
    """Result of one emit run."""

    target: str = ""
    source: GeneratedSource | None = None
    settings: EmitterSettings | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.source is not None

    def to_dict(self) -> dict:
        if self.error:
            return {"target": self.target, "error": self.error}
        assert self.source is not None
        return {
            "target": self.target,
            "type_name": self.source.type_name,
            "fields": self.source.fields,
            "content": self.source.content,
            "settings": self.settings.model_dump() if self.settings else None,
        }


def resolve_target(target: str) -> Any:
    """Import ``module:attr`` and return the attribute.

    Raises:
        TargetError: On a malformed or relative target, a module that cannot
            be found or fails while importing, or a missing attribute.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetError(f"Expected 'module:attribute', got '{target}'")

    if module_name.startswith("."):
        raise TargetError(f"Relative module '{module_name}' is not supported; use an absolute name")

    try:
        obj: Any = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        raise TargetError(f"Cannot import module '{module_name}': {e}") from e
    except Exception as e:
        # The target module itself failed while executing
        raise TargetError(f"Error importing '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetError(f"'{module_name}' has no attribute '{attr_path}'") from e

    logger.debug("Resolved %s → %r", target, obj)
    return obj


def run_emit(target: str, config_path: Path | None = None) -> EmitResult:
    """Generate the conformance for an importable target.

    Errors are collected into the result, never raised.
    """
    result = EmitResult(target=target)

    try:
        result.settings = load_settings(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    try:
        value = resolve_target(target)
    except TargetError as e:
        result.error = str(e)
        return result

    result.source = generate_equatable(value, result.settings)
    return result


def run_emit_fields(
    type_name: str,
    field_names: Sequence[str],
    config_path: Path | None = None,
) -> EmitResult:
    """Generate the conformance from an explicit type name and field list.

    ``type_name`` loses its leading qualifier segment (``App.Person`` → ``Person``).
    """
    result = EmitResult(target=type_name)

    try:
        result.settings = load_settings(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.source = generate_equatable_for(
        strip_module_qualifier(type_name),
        field_names,
        result.settings,
    )
    return result
