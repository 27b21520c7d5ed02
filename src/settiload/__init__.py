# src/settiload/__init__.py
"""
SettiLoad — carregamento de configuração JSON/XML/YAML em estruturas tipadas.

A aplicação declara o schema como uma árvore de classes (`Config` na raiz,
`Section` ou dataclasses nos níveis aninhados) e o SettiLoad hidrata essas
classes a partir de um arquivo, casando campos por nome (case-insensitive) e
convertendo valores para os tipos declarados.

Exemplo:
    class AppConfig(Config):
        class DatabaseConfig(Section):
            ConnectionString: str
            Timeout: int

        Database: Optional[DatabaseConfig]
        IsFeatureEnabled: bool

    config = AppConfig()
    ok = config.load("appConfig.json")

Limites explícitos:
    - Não é um serializador genérico (sem listas de estruturas, sem polimorfismo)
    - Não valida schema nem aplica defaults além do valor zero do tipo
"""

from .core.base import Config, Section
from .core.errors import (
    FileAccessError,
    MappingError,
    ParseError,
    SchemaDefinitionError,
    SettiLoadError,
    UnsupportedFormatError,
)
from .core.hashing import compute_fingerprint, to_dict
from .core.loader import load_into

__all__ = [
    "Config",
    "FileAccessError",
    "MappingError",
    "ParseError",
    "SchemaDefinitionError",
    "Section",
    "SettiLoadError",
    "UnsupportedFormatError",
    "compute_fingerprint",
    "load_into",
    "to_dict",
]
