# src/settiload/core/hashing.py
"""
Snapshot e fingerprint canônicos de uma configuração carregada.

Este módulo gera uma representação `dict` dos campos elegíveis de uma
estrutura e um hash determinístico dessa representação.

O fingerprint representa a **identidade estrutural** da configuração e é
utilizado para:
    - rastreabilidade (logado a cada load bem-sucedido)
    - comparação entre formatos (JSON e XML com os mesmos valores lógicos
      produzem o mesmo fingerprint)

Política de hashing (v1):
    - Serialização JSON canônica do snapshot
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Campos computados (property sem setter) não participam do snapshot
    - Nenhuma mutação ocorre sobre a instância

Limites explícitos:
    - Não carrega documentos
    - Não persiste o hash
"""

import hashlib
import json
from typing import Any, Dict

from .schema import FieldKind, describe


def to_dict(instance: Any) -> Dict[str, Any]:
    """
    Converte uma estrutura carregável em `dict`, recursivamente.

    Args:
        instance: instância de `Section` ou dataclass descrita pelo registry.

    Returns:
        Dict[str, Any]: nome declarado do campo → valor (estruturas aninhadas
        viram `dict`; estruturas não instanciadas viram `None`).
    """
    schema = describe(type(instance))
    out: Dict[str, Any] = {}
    for spec in schema.fields:
        value = getattr(instance, spec.name, spec.zero_value)
        if spec.kind is FieldKind.NESTED and value is not None:
            value = to_dict(value)
        out[spec.name] = value
    return out


def compute_fingerprint(instance: Any) -> str:
    """
    Gera o SHA-256 do snapshot canônico de uma estrutura carregável.

    Args:
        instance: estrutura carregada (ou recém-criada).

    Returns:
        str: hash SHA-256 hexadecimal do JSON canônico de `to_dict(instance)`.
    """
    canonical_json = json.dumps(
        to_dict(instance),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
