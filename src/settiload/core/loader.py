# src/settiload/core/loader.py
"""
Loader canônico do SettiLoad.

Este módulo orquestra o carregamento de um arquivo de configuração sobre
uma estrutura tipada: leitura do arquivo, seleção de reader pela extensão,
mapeamento estrutural e conversão de falhas em resultado booleano.

Política de seleção de formato:
    - `.json`          → apenas o reader JSON
    - `.xml`           → apenas o reader XML
    - `.yaml` / `.yml` → apenas o reader YAML
    - qualquer outra extensão (ou nenhuma) → JSON e, só se falhar, XML

Decisões arquiteturais:
    - A extensão é comparada sem diferenciar maiúsculas/minúsculas
    - Na inferência, um candidato só é aceito após sucesso estrutural: o
      documento precisa mapear sem erro sobre uma cópia descartável do alvo
      antes de a instância real ser mutada
    - Falhas de arquivo, parse e mapeamento seguem o mesmo caminho de erro
    - `SchemaDefinitionError` sempre propaga: indica schema quebrado, não
      arquivo ruim

Invariantes:
    - A instância do chamador é mutada in-place, nunca substituída
    - Em falha de leitura ou parse, a instância não é tocada
    - Em falha de mapeamento, campos já atribuídos permanecem (não transacional)

Limites explícitos:
    - Não faz retry, timeout ou cancelamento
    - Não sincroniza acesso concorrente à mesma instância
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, List, Union

from .document import READERS, formats_for_suffix
from .errors import (
    FileAccessError,
    MappingError,
    SchemaDefinitionError,
    SettiLoadError,
    UnsupportedFormatError,
)
from .hashing import compute_fingerprint
from .mapping import apply_document
from .schema import is_structure_type

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def read_file(file_path: PathLike) -> bytes:
    """Lê o arquivo inteiro; qualquer `OSError` vira `FileAccessError`."""
    path = Path(file_path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileAccessError(f"cannot read config file {path}: {e.strerror or e}") from e


def _apply_explicit(target: Any, fmt: str, raw: bytes) -> str:
    result = READERS[fmt](raw)
    if not result.ok:
        raise result.error
    apply_document(target, result.node)
    return fmt


def _apply_inferred(target: Any, candidates: tuple, raw: bytes, path: Path) -> str:
    attempts: List[SettiLoadError] = []
    mapping_failure = None
    for fmt in candidates:
        result = READERS[fmt](raw)
        if not result.ok:
            logger.debug("%s: not %s (%s)", path, fmt, result.error)
            attempts.append(result.error)
            continue
        try:
            apply_document(copy.deepcopy(target), result.node)
        except MappingError as e:
            logger.debug("%s: parsed as %s but does not fit %s (%s)", path, fmt, type(target).__name__, e)
            attempts.append(e)
            if mapping_failure is None:
                mapping_failure = e
            continue
        apply_document(target, result.node)
        return fmt

    if mapping_failure is not None:
        raise mapping_failure
    raise UnsupportedFormatError(
        f"{path}: content is not any of {', '.join(candidates)}",
        attempts=attempts,
    )


def load_into(target: Any, file_path: PathLike, *, throw_on_error: bool = False) -> bool:
    """
    Carrega `file_path` e aplica seus valores sobre `target`.

    Args:
        target: instância carregável (`Config`, `Section` ou dataclass).
        file_path: caminho do arquivo de configuração.
        throw_on_error: relança a exceção original em vez de retornar False.

    Returns:
        bool: True se o arquivo foi lido e mapeado por completo.

    Raises:
        SchemaDefinitionError: se `target` não for carregável ou o schema for inválido.
        FileAccessError, ParseError, MappingError, UnsupportedFormatError:
            somente quando `throw_on_error=True`.
    """
    if not is_structure_type(type(target)):
        raise SchemaDefinitionError(
            f"{type(target).__name__} is not a loadable structure (subclass Config/Section or use a dataclass)"
        )

    path = Path(file_path)
    try:
        raw = read_file(path)
        candidates = formats_for_suffix(path.suffix)
        if len(candidates) == 1:
            fmt = _apply_explicit(target, candidates[0], raw)
        else:
            fmt = _apply_inferred(target, candidates, raw, path)
    except SchemaDefinitionError:
        raise
    except SettiLoadError as e:
        logger.warning("failed to load %s into %s: %s", path, type(target).__name__, e)
        if throw_on_error:
            raise
        return False

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "loaded %s into %s (format=%s, fingerprint=%s)",
            path,
            type(target).__name__,
            fmt,
            compute_fingerprint(target)[:12],
        )
    return True
