# src/settiload/core/schema/fields.py
"""
Descrição de campos de uma estrutura de configuração.

Cada campo elegível é resolvido uma única vez, no registro do schema, em
uma variante fechada: primitivo (`bool`, `int`, `float`, `str`) ou estrutura
aninhada (`NESTED` + tipo da estrutura).
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from ..errors import SchemaDefinitionError


class FieldKind(str, Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "str"
    NESTED = "nested"


PRIMITIVE_KINDS: Dict[type, FieldKind] = {
    bool: FieldKind.BOOL,
    int: FieldKind.INT,
    float: FieldKind.FLOAT,
    str: FieldKind.STRING,
}

# Atributo de classe que marca tipos "carregáveis" (ver `settiload.core.base`).
LOADABLE_MARKER = "_settiload_loadable"

ZERO_VALUES: Dict[FieldKind, Any] = {
    FieldKind.BOOL: False,
    FieldKind.INT: 0,
    FieldKind.FLOAT: 0.0,
    FieldKind.STRING: "",
    FieldKind.NESTED: None,
}


@dataclass(frozen=True)
class FieldSpec:
    """
    Campo elegível para atribuição.

    Campos:
    - name: nome declarado (a comparação com o documento é case-insensitive)
    - kind: variante do tipo declarado
    - nested_type: classe da estrutura quando `kind` é NESTED
    - is_property: campo exposto via `property` com setter
    """

    name: str
    kind: FieldKind
    nested_type: Optional[type] = None
    is_property: bool = False

    @property
    def zero_value(self) -> Any:
        return ZERO_VALUES[self.kind]


@dataclass(frozen=True)
class StructSchema:
    """Schema resolvido de um tipo de estrutura: campos na ordem de declaração."""

    struct_type: type
    fields: Tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        exact = {f.name: f for f in self.fields}
        folded: Dict[str, FieldSpec] = {}
        for f in self.fields:
            folded.setdefault(f.name.casefold(), f)
        object.__setattr__(self, "_exact", exact)
        object.__setattr__(self, "_folded", folded)

    def lookup(self, name: str) -> Optional[FieldSpec]:
        """Nome exato tem prioridade; senão, a primeira declaração case-insensitive."""
        spec = self._exact.get(name)  # type: ignore[attr-defined]
        if spec is not None:
            return spec
        return self._folded.get(name.casefold())  # type: ignore[attr-defined]

    def names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)


def is_structure_type(tp: Any) -> bool:
    """Tipos aninhados aceitos: subclasses de `Section` ou dataclasses."""
    if not isinstance(tp, type):
        return False
    if tp in PRIMITIVE_KINDS:
        return False
    return bool(getattr(tp, LOADABLE_MARKER, False)) or dataclasses.is_dataclass(tp)


def new_structure(tp: Type[Any]) -> Any:
    """Instancia uma estrutura aninhada com valores zero."""
    try:
        return tp()
    except TypeError as e:
        raise SchemaDefinitionError(
            f"{tp.__name__} must be constructible without arguments: {e}"
        ) from e
