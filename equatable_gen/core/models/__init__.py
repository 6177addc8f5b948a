"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from equatable_gen.core.models import TemplateLine, TypeShape, EmitterSettings
"""

from equatable_gen.core.models.reflection import FieldDescriptor, TypeShape
from equatable_gen.core.models.settings import EmitterSettings
from equatable_gen.core.models.template import GeneratedSource, TemplateLine

__all__ = [
    # settings.py
    "EmitterSettings",
    # reflection.py
    "FieldDescriptor",
    # template.py
    "GeneratedSource",
    "TemplateLine",
    "TypeShape",
]
