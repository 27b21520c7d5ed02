# src/settiload/core/document/tree.py
"""
Árvore genérica de documento.

Representação intermediária, independente de formato, produzida pelos readers
e consumida pelo mapper estrutural.

Variantes:
    - Scalar    → valor folha (texto cru do XML ou valor tipado do JSON/YAML)
    - Composite → sequência ordenada de pares (nome, nó)

Invariantes:
    - Nós são imutáveis
    - A ordem do documento é preservada em `Composite.entries`
    - Nomes duplicados são mantidos; o mapper aplica todos em ordem
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Scalar:
    """
    Valor folha de um documento.

    `lexical=True` indica texto ainda não interpretado (XML): a coerção faz o
    parse conforme o tipo declarado do campo. `lexical=False` indica um valor
    já tipado por um parser (JSON/YAML): `str`, `int`, `float`, `bool` ou `None`.
    """

    value: Any
    lexical: bool = False


@dataclass(frozen=True)
class Composite:
    """Nó com filhos nomeados, na ordem em que aparecem no documento."""

    entries: Tuple[Tuple[str, "Node"], ...] = ()

    def __iter__(self) -> Iterator[Tuple[str, "Node"]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def get(self, name: str) -> Optional["Node"]:
        # última ocorrência vence, igual à aplicação em ordem
        found: Optional[Node] = None
        for key, node in self.entries:
            if key == name:
                found = node
        return found


Node = Union[Scalar, Composite]


def from_mapping(mapping: Mapping[Any, Any]) -> Composite:
    """Converte um mapa de parser tipado (ex.: YAML) em `Composite`; chaves viram texto."""
    return Composite(tuple((str(k), from_python(v)) for k, v in mapping.items()))


def from_python(value: Any) -> Node:
    """Converte valores de parsers tipados (dict/list/escalares) em nós genéricos."""
    if isinstance(value, dict):
        return from_mapping(value)
    return Scalar(value)


def from_pairs(pairs: Any) -> Composite:
    """`object_pairs_hook` do json: mantém chaves duplicadas e a ordem original."""
    return Composite(tuple((str(k), v if isinstance(v, Composite) else Scalar(v)) for k, v in pairs))
