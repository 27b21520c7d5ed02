# src/settiload/core/errors.py
"""
Exceções canônicas do SettiLoad.

Este módulo define a hierarquia oficial de exceções utilizadas durante a
leitura de documentos de configuração (JSON/XML/YAML), a resolução de
schemas e o mapeamento estrutural sobre instâncias tipadas.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Cada categoria de falha possui uma classe própria
    - Mensagens de erro são curtas e direcionadas ao usuário

Taxonomia:
    - FileAccessError         → arquivo ausente, ilegível ou sem permissão
    - ParseError              → JSON/XML/YAML malformado ou raiz inválida
    - MappingError            → dado incompatível com o tipo declarado do campo
    - UnsupportedFormatError  → nenhum reader aceitou um formato inferido
    - SchemaDefinitionError   → schema declarado pela aplicação é inválido

Invariantes:
    - Todas as exceções herdam de `SettiLoadError`
    - `SchemaDefinitionError` representa erro de programação, nunca de arquivo

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs
"""

from __future__ import annotations

from typing import Optional, Sequence


class SettiLoadError(Exception):
    """
    Exceção base para erros do SettiLoad.

    Permite captura genérica de falhas de carregamento na fronteira do
    `Config.load`, preservando a classe específica para diagnóstico.
    """


class FileAccessError(SettiLoadError):
    """Arquivo de configuração ausente, ilegível ou sem permissão de leitura."""


class ParseError(SettiLoadError):
    """
    Exceção levantada quando o conteúdo não é um documento válido.

    Cobre:
        - JSON malformado
        - XML não bem-formado
        - YAML malformado
        - raiz que não é objeto/mapa (JSON e YAML)

    Atributos:
        fmt (Optional[str]): formato do reader que rejeitou o conteúdo.
    """

    def __init__(self, message: str, *, fmt: Optional[str] = None) -> None:
        super().__init__(message)
        self.fmt = fmt


class MappingError(SettiLoadError):
    """
    Exceção levantada quando um nó do documento não pode ser atribuído ao campo.

    Casos:
        - campo escalar recebeu um nó composto
        - campo de estrutura aninhada recebeu um escalar
        - coerção escalar → primitivo falhou (ex.: "abc" em campo int)

    Atributos:
        path (str): caminho pontuado do campo (ex.: "Database.Timeout").
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class UnsupportedFormatError(SettiLoadError):
    """
    Nenhum reader candidato aceitou o conteúdo de um arquivo sem extensão conhecida.

    Atributos:
        attempts (Sequence[SettiLoadError]): falhas de cada candidato, na ordem tentada.
    """

    def __init__(self, message: str, *, attempts: Sequence[SettiLoadError] = ()) -> None:
        super().__init__(message)
        self.attempts = tuple(attempts)


class SchemaDefinitionError(SettiLoadError, TypeError):
    """Tipo de estrutura declara um campo que o mapper não sabe popular."""
