# src/settiload/core/mapping/__init__.py
"""
Camada de mapeamento estrutural do SettiLoad.

Projeta a árvore genérica de documento sobre instâncias tipadas, campo a
campo, por nome (case-insensitive), com coerção de tipos primitivos.
"""

from .coercion import coerce_scalar
from .mapper import apply_document

__all__ = ["apply_document", "coerce_scalar"]
