# src/settiload/core/base.py
"""
Tipos base de estruturas carregáveis.

Este módulo define `Section` (estrutura aninhada de configuração) e `Config`
(estrutura raiz, com a operação `load`). Subclasses declaram seus campos por
anotação de classe ou por `property` com setter:

    class AppConfig(Config):
        class DatabaseConfig(Section):
            ConnectionString: str
            Timeout: int

        Database: Optional[DatabaseConfig]
        IsFeatureEnabled: bool

Decisões arquiteturais:
    - O construtor sem argumentos atribui o valor zero de cada campo
      (`""`, `0`, `0.0`, `False`, `None` para estruturas aninhadas)
    - Um default declarado na própria classe prevalece sobre o valor zero
    - `load` muta a instância in-place; a referência do chamador nunca é trocada

Limites explícitos:
    - Não valida semântica de domínio
    - Não aplica defaults além do valor zero do tipo
"""

from __future__ import annotations

import os
from typing import Any, Dict, Union

from .schema import describe
from .hashing import compute_fingerprint, to_dict
from .loader import load_into

_MISSING = object()


class Section:
    """Estrutura aninhada de configuração (marcador de tipo carregável)."""

    # ver schema.fields.LOADABLE_MARKER
    _settiload_loadable = True

    def __init__(self) -> None:
        schema = describe(type(self))
        for spec in schema.fields:
            if spec.is_property:
                continue
            if getattr(type(self), spec.name, _MISSING) is not _MISSING:
                # default declarado na classe: leitura cai no atributo de classe
                continue
            setattr(self, spec.name, spec.zero_value)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot em `dict` dos campos elegíveis (campos computados fora)."""
        return to_dict(self)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({values})"


class Config(Section):
    """
    Estrutura raiz carregável a partir de um arquivo JSON, XML ou YAML.

    Uso:
        config = AppConfig()
        if not config.load("appsettings.json"):
            ...
    """

    def load(self, file_path: Union[str, "os.PathLike[str]"], throw_on_error: bool = False) -> bool:
        """
        Carrega o arquivo e aplica seus valores sobre esta instância.

        Args:
            file_path: caminho do arquivo de configuração.
            throw_on_error: quando verdadeiro, relança a exceção original.

        Returns:
            bool: True se o documento foi lido e mapeado por completo.

        Raises:
            SettiLoadError: somente quando `throw_on_error=True`.
        """
        return load_into(self, file_path, throw_on_error=throw_on_error)

    def fingerprint(self) -> str:
        """SHA-256 (hex) do snapshot canônico da configuração carregada."""
        return compute_fingerprint(self)


