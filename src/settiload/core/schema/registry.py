# src/settiload/core/schema/registry.py
"""
Registro de schemas de estruturas de configuração.

Este módulo define o `SchemaRegistry`, responsável por resolver, validar e
memorizar a descrição de campos (`StructSchema`) de cada tipo de estrutura
antes de qualquer mapeamento de documento.

O registry atua como uma camada de proteção antecipada, garantindo que:
    - cada campo elegível tenha um tipo suportado
    - tipos aninhados sejam resolvidos recursivamente
    - a decisão "primitivo ou aninhado" seja tomada uma única vez por tipo

Decisões arquiteturais:
    - A resolução é preguiçosa: acontece no primeiro `describe` do tipo,
      quando referências adiante (forward refs) já podem ser avaliadas
    - Campos elegíveis: anotações de classe públicas e `property` com setter
    - `property` sem setter é campo computado e nunca é alvo de atribuição
    - Anotações `ClassVar` e nomes iniciados com `_` não são campos
    - Erros de schema são falhas fatais (`SchemaDefinitionError`)

Invariantes:
    - Um tipo é descrito no máximo uma vez por registry
    - A ordem dos campos reflete a ordem de declaração (bases primeiro)
    - O registry não guarda instâncias, apenas tipos

Limites explícitos:
    - Não suporta coleções, `Any` ou uniões com mais de um tipo concreto
    - Não lê documentos nem popula instâncias
"""

from __future__ import annotations

import dataclasses
import logging
import threading
import types
import typing
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple

from ..errors import SchemaDefinitionError
from .fields import PRIMITIVE_KINDS, FieldKind, FieldSpec, StructSchema, is_structure_type

logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)
_UNION_ORIGINS = (typing.Union, getattr(types, "UnionType", typing.Union))


def _namespace(tp: type) -> Dict[str, Any]:
    # classes aninhadas (ex.: AppConfig.DatabaseConfig) resolvem pelo corpo da classe
    ns: Dict[str, Any] = {}
    for base in reversed(tp.__mro__):
        ns.update(vars(base))
    ns[tp.__name__] = tp
    return ns


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in _UNION_ORIGINS:
        args = [a for a in typing.get_args(annotation) if a is not _NONE_TYPE]
        if len(args) == 1:
            return args[0]
    return annotation


def _classify(owner: type, name: str, annotation: Any, *, is_property: bool = False) -> FieldSpec:
    target = _unwrap_optional(annotation)
    kind = PRIMITIVE_KINDS.get(target) if isinstance(target, type) else None
    if kind is not None:
        return FieldSpec(name=name, kind=kind, is_property=is_property)
    if is_structure_type(target):
        return FieldSpec(name=name, kind=FieldKind.NESTED, nested_type=target, is_property=is_property)
    raise SchemaDefinitionError(
        f"{owner.__name__}.{name}: unsupported field type {annotation!r} "
        "(expected str, int, float, bool or a nested structure)"
    )


def _resolve_hints(obj: Any, ns: Dict[str, Any], owner: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(obj, localns=ns)
    except (NameError, TypeError) as e:
        raise SchemaDefinitionError(f"{owner.__name__}: cannot resolve annotations: {e}") from e


def _is_class_var(annotation: Any) -> bool:
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _collect_fields(tp: type) -> Tuple[FieldSpec, ...]:
    ns = _namespace(tp)
    hints = _resolve_hints(tp, ns, tp)

    properties: Dict[str, property] = {}
    for base in reversed(tp.__mro__):
        for name, attr in vars(base).items():
            if isinstance(attr, property):
                properties[name] = attr
            elif name in properties:
                # redefinido como atributo comum numa subclasse
                del properties[name]

    if dataclasses.is_dataclass(tp):
        declared = [f.name for f in dataclasses.fields(tp)]
    else:
        declared = list(hints)

    specs: List[FieldSpec] = []
    for name in declared:
        if name.startswith("_") or name in properties:
            continue
        annotation = hints.get(name)
        if annotation is None or _is_class_var(annotation):
            continue
        specs.append(_classify(tp, name, annotation))

    for name, prop in properties.items():
        if name.startswith("_"):
            continue
        if prop.fset is None or prop.fget is None:
            logger.debug("skipping computed property %s.%s", tp.__name__, name)
            continue
        ret = _resolve_hints(prop.fget, ns, tp).get("return")
        if ret is None:
            raise SchemaDefinitionError(
                f"{tp.__name__}.{name}: settable property needs a return annotation"
            )
        specs.append(_classify(tp, name, ret, is_property=True))

    return tuple(specs)


@dataclass
class SchemaRegistry:
    """
    Registro canônico de schemas de estrutura.

    Decisões arquiteturais:
        - A descrição é memorizada por tipo
        - O acesso é protegido por lock: loads concorrentes em instâncias
          distintas compartilham o mesmo registry sem corrida
        - Tipos aninhados são descritos no registro do tipo pai

    Limites explícitos:
        - Não valida documentos
        - Não instancia estruturas
    """

    _schemas: Dict[type, StructSchema] = field(default_factory=dict, init=False, repr=False)
    _lock: Any = field(default_factory=threading.RLock, init=False, repr=False)

    def describe(self, tp: type) -> StructSchema:
        if not isinstance(tp, type):
            raise SchemaDefinitionError(f"expected a structure type, got: {tp!r}")
        schema = self._schemas.get(tp)
        if schema is not None:
            return schema
        with self._lock:
            return self._register(tp, set())

    def _register(self, tp: type, visiting: Set[type]) -> StructSchema:
        schema = self._schemas.get(tp)
        if schema is not None:
            return schema
        visiting.add(tp)
        schema = StructSchema(struct_type=tp, fields=_collect_fields(tp))
        for spec in schema.fields:
            if spec.nested_type is not None and spec.nested_type not in visiting:
                self._register(spec.nested_type, visiting)
        self._schemas[tp] = schema
        logger.debug("registered schema %s: %s", tp.__name__, ", ".join(schema.names()))
        return schema

    def has(self, tp: type) -> bool:
        return tp in self._schemas

    def list(self) -> List[type]:
        return list(self._schemas)


REGISTRY = SchemaRegistry()


def describe(tp: type) -> StructSchema:
    """Retorna o schema resolvido de `tp` no registry padrão."""
    return REGISTRY.describe(tp)
