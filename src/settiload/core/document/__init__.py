# src/settiload/core/document/__init__.py
"""
Camada de documento do SettiLoad.

Converte bytes crus (JSON, XML ou YAML) em uma árvore genérica navegável,
independente de formato, que alimenta o mapper estrutural.
"""

from .readers import (
    FALLBACK_ORDER,
    READERS,
    READERS_BY_SUFFIX,
    ReadResult,
    formats_for_suffix,
    read_json,
    read_xml,
    read_yaml,
)
from .tree import Composite, Node, Scalar

__all__ = [
    "Composite",
    "FALLBACK_ORDER",
    "Node",
    "READERS",
    "READERS_BY_SUFFIX",
    "ReadResult",
    "Scalar",
    "formats_for_suffix",
    "read_json",
    "read_xml",
    "read_yaml",
]
