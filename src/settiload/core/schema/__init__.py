# src/settiload/core/schema/__init__.py
"""
Camada de schema do SettiLoad.

Descreve, uma única vez por tipo, quais campos de uma estrutura podem ser
populados e com qual variante de tipo (primitivo ou estrutura aninhada).
"""

from .fields import FieldKind, FieldSpec, StructSchema, is_structure_type, new_structure
from .registry import REGISTRY, SchemaRegistry, describe

__all__ = [
    "FieldKind",
    "FieldSpec",
    "REGISTRY",
    "SchemaRegistry",
    "StructSchema",
    "describe",
    "is_structure_type",
    "new_structure",
]
