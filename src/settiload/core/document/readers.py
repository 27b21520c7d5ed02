# src/settiload/core/document/readers.py
"""
Readers de documento (JSON, XML, YAML).

Cada reader transforma os bytes crus de um arquivo em uma árvore genérica
(`Composite` na raiz) ou devolve uma falha explícita.

Decisões arquiteturais:
    - Readers não levantam exceção para conteúdo malformado: retornam
      `ReadResult.failure(ParseError)`; "formato errado" é um resultado
      esperado durante a inferência de formato, não uma exceção
    - Readers são funções puras: mesmos bytes, mesma árvore
    - JSON e YAML produzem escalares tipados; XML produz escalares léxicos
    - Documentos aninhados além do limite de recursão do interpretador
      são tratados como conteúdo malformado

Invariantes:
    - Um resultado de sucesso sempre carrega um `Composite`
    - Atributos XML são ignorados
    - YAML só é usado quando a extensão o declara
    - JSON segue a RFC 8259: `NaN` e `Infinity` não são aceitos

Limites explícitos:
    - Não lê arquivos do disco
    - Não conhece o schema de destino
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import yaml  # PyYAML

from ..errors import ParseError
from .tree import Composite, Node, Scalar, from_mapping, from_pairs

ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class ReadResult:
    """Resultado de um reader: `node` em caso de sucesso, `error` caso contrário."""

    node: Optional[Composite] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, node: Composite) -> "ReadResult":
        return cls(node=node)

    @classmethod
    def failure(cls, error: ParseError) -> "ReadResult":
        return cls(error=error)


Reader = Callable[[bytes], ReadResult]


def _decode(raw: bytes, fmt: str) -> Tuple[Optional[str], Optional[ParseError]]:
    try:
        return raw.decode(ENCODING), None
    except UnicodeDecodeError as e:
        return None, ParseError(f"{fmt} content is not valid UTF-8: {e}", fmt=fmt)


def _reject_constant(name: str) -> float:
    # json aceita NaN/Infinity/-Infinity por padrão; a RFC 8259 não
    raise ValueError(f"non-standard JSON constant: {name}")


def read_json(raw: bytes) -> ReadResult:
    """
    Lê um documento JSON (RFC 8259) e devolve sua árvore genérica.

    Decisões arquiteturais:
        - Chaves duplicadas são mantidas, em ordem de documento
          (`object_pairs_hook`), para que o mapper aplique a última
        - Um BOM UTF-8 inicial é tolerado
        - `NaN`, `Infinity` e `-Infinity` são rejeitados

    Invariantes:
        - A raiz precisa ser um objeto
        - Escalares produzidos são tipados (`lexical=False`)

    Args:
        raw (bytes): Conteúdo cru do arquivo.

    Returns:
        ReadResult: `Composite` raiz, ou falha com `ParseError(fmt="json")`
        para texto não UTF-8, JSON inválido, aninhamento excessivo ou raiz
        que não é objeto.
    """
    text, err = _decode(raw, "json")
    if err is not None:
        return ReadResult.failure(err)
    try:
        data = json.loads(text, object_pairs_hook=from_pairs, parse_constant=_reject_constant)
    except ValueError as e:
        return ReadResult.failure(ParseError(f"invalid JSON: {e}", fmt="json"))
    except RecursionError:
        return ReadResult.failure(ParseError("invalid JSON: document is nested too deeply", fmt="json"))
    if not isinstance(data, Composite):
        return ReadResult.failure(
            ParseError(f"JSON root must be an object, got: {type(data).__name__}", fmt="json")
        )
    return ReadResult.success(data)


def _local_name(tag: str) -> str:
    # "{urn:x}Database" -> "Database"
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def _fold_element(element: ET.Element) -> Node:
    children = [child for child in element if isinstance(child.tag, str)]
    if not children:
        return Scalar(element.text or "", lexical=True)
    return Composite(tuple((_local_name(child.tag), _fold_element(child)) for child in children))


def read_xml(raw: bytes) -> ReadResult:
    """
    Lê um documento XML bem-formado e devolve sua árvore genérica.

    Os filhos diretos do elemento raiz viram os campos do `Composite` raiz.
    Elementos sem filhos viram `Scalar` léxico com o texto interno; elementos
    com filhos são dobrados recursivamente.

    Decisões arquiteturais:
        - O nome do elemento raiz é irrelevante
        - Namespaces são descartados: vale o nome local da tag
        - Raiz sem elementos filhos equivale a um documento sem campos

    Invariantes:
        - Atributos, comentários e instruções de processamento são ignorados
        - Escalares produzidos são léxicos (`lexical=True`)

    Args:
        raw (bytes): Conteúdo cru do arquivo; a codificação segue o prólogo XML.

    Returns:
        ReadResult: `Composite` raiz, ou falha com `ParseError(fmt="xml")`
        para XML malformado ou aninhamento excessivo.
    """
    try:
        root = ET.fromstring(raw)
        node = _fold_element(root)
    except ET.ParseError as e:
        return ReadResult.failure(ParseError(f"invalid XML: {e}", fmt="xml"))
    except RecursionError:
        return ReadResult.failure(ParseError("invalid XML: document is nested too deeply", fmt="xml"))
    if isinstance(node, Scalar):
        # raiz sem elementos filhos: documento sem campos
        node = Composite()
    return ReadResult.success(node)


def read_yaml(raw: bytes) -> ReadResult:
    """
    Lê um documento YAML via `yaml.safe_load`.

    Decisões arquiteturais:
        - Apenas `safe_load`: tags arbitrárias de Python não são construídas
        - Documento vazio equivale a um mapa vazio
        - Chaves não textuais são convertidas com `str`

    Args:
        raw (bytes): Conteúdo cru do arquivo.

    Returns:
        ReadResult: `Composite` raiz, ou falha com `ParseError(fmt="yaml")`
        para YAML inválido, aninhamento excessivo ou raiz que não é mapa.
    """
    text, err = _decode(raw, "yaml")
    if err is not None:
        return ReadResult.failure(err)
    try:
        data = yaml.safe_load(text)
        if data is None:
            # YAML vazio -> documento sem campos
            data = {}
        if not isinstance(data, dict):
            return ReadResult.failure(
                ParseError(f"YAML root must be a mapping, got: {type(data).__name__}", fmt="yaml")
            )
        return ReadResult.success(from_mapping(data))
    except yaml.YAMLError as e:
        return ReadResult.failure(ParseError(f"invalid YAML: {e}", fmt="yaml"))
    except RecursionError:
        return ReadResult.failure(ParseError("invalid YAML: document is nested too deeply", fmt="yaml"))


READERS: Dict[str, Reader] = {
    "json": read_json,
    "xml": read_xml,
    "yaml": read_yaml,
}

READERS_BY_SUFFIX: Dict[str, str] = {
    ".json": "json",
    ".xml": "xml",
    ".yaml": "yaml",
    ".yml": "yaml",
}

# Ordem documentada para extensões desconhecidas: JSON primeiro, depois XML.
FALLBACK_ORDER: Tuple[str, ...] = ("json", "xml")


def formats_for_suffix(suffix: str) -> Tuple[str, ...]:
    """
    Resolve os formatos candidatos para a extensão de um arquivo.

    Decisões arquiteturais:
        - A comparação de extensão é case-insensitive
        - Extensão desconhecida (ou ausente) devolve `FALLBACK_ORDER`;
          o loader tenta cada candidato em ordem
        - YAML nunca entra na inferência

    Args:
        suffix (str): Extensão com ponto (ex.: ".json"), ou "" sem extensão.

    Returns:
        Tuple[str, ...]: Um único formato para extensões conhecidas, ou a
        ordem de fallback.
    """
    fmt = READERS_BY_SUFFIX.get(suffix.lower())
    if fmt is not None:
        return (fmt,)
    return FALLBACK_ORDER
