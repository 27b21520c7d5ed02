# src/settiload/core/mapping/mapper.py
"""
Mapper estrutural: projeta uma árvore genérica sobre uma estrutura tipada.

Algoritmo (para cada par `(nome, nó)` do `Composite`, em ordem de documento):
    1. Procura o campo elegível pelo nome: exato primeiro, depois
       case-insensitive. Sem correspondência, o par é ignorado.
    2. Campo de estrutura aninhada: exige `Composite`, instancia uma estrutura
       nova com valores zero, aplica recursivamente e só então atribui.
    3. Campo primitivo: coerção do escalar e atribuição direta.

Decisões arquiteturais:
    - Chaves desconhecidas nunca geram erro
    - Campos ausentes no documento mantêm o valor atual (zero, em instância nova)
    - O mapeamento não é transacional: campos atribuídos antes de uma falha
      permanecem atribuídos
    - Chaves duplicadas são aplicadas em ordem; a última vence

Invariantes:
    - Nenhum estado global é alterado (o registry apenas memoriza schemas)
    - Toda falha de tipo é `MappingError` com o caminho pontuado do campo

Limites explícitos:
    - Não lê arquivos
    - Não decide formato de documento
"""

from __future__ import annotations

import logging
from typing import Any

from ..document.tree import Composite, Node, Scalar
from ..errors import MappingError
from ..schema import FieldKind, FieldSpec, describe, new_structure
from .coercion import coerce_scalar

logger = logging.getLogger(__name__)


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _is_blank_text(node: Node) -> bool:
    # <Logging/> ou <Logging>   </Logging> no XML: estrutura vazia
    return isinstance(node, Scalar) and node.lexical and not str(node.value).strip()


def _build_nested(spec: FieldSpec, node: Node, path: str) -> Any:
    if _is_blank_text(node):
        node = Composite()
    if not isinstance(node, Composite):
        raise MappingError(
            f"expected a nested {spec.nested_type.__name__} object, got a scalar value",
            path=path,
        )
    instance = new_structure(spec.nested_type)
    apply_document(instance, node, _path=path)
    return instance


def apply_document(target: Any, node: Composite, *, _path: str = "") -> Any:
    """
    Aplica um `Composite` sobre `target`, mutando-o in-place.

    Esta função é o ponto único de projeção documento → estrutura: todos os
    readers (JSON, XML, YAML) desembocam aqui, o que garante que o mesmo
    conteúdo lógico produza a mesma estrutura em qualquer formato.

    Decisões arquiteturais:
        - O schema de `type(target)` é resolvido uma vez e memorizado no
          registry padrão
        - Estruturas aninhadas presentes no documento são sempre substituídas
          por uma instância nova; valores anteriores não são mesclados
        - A instância aninhada só é atribuída depois de preenchida
        - Chaves sem campo correspondente são registradas em DEBUG e ignoradas

    Invariantes:
        - Pares são aplicados em ordem de documento
        - Campos não citados no documento não são tocados
        - O caminho das falhas usa o nome declarado do campo, não o do documento

    Limites explícitos:
        - Não é transacional: em caso de falha, `target` pode ficar
          parcialmente atualizado (o loader usa uma cópia quando precisa)
        - Não valida semântica de domínio dos valores

    Args:
        target (Any): Instância de estrutura carregável (`Section` ou dataclass).
        node (Composite): Nó composto com os valores do documento.

    Returns:
        Any: A própria instância `target`.

    Raises:
        MappingError: Se algum dado for incompatível com o tipo declarado do campo.
        SchemaDefinitionError: Se o tipo de `target` declarar campos não suportados.
    """
    if not isinstance(node, Composite):
        raise MappingError("expected an object/element with named children", path=_path)

    schema = describe(type(target))
    for name, child in node:
        spec = schema.lookup(name)
        path = _join(_path, spec.name if spec is not None else name)
        if spec is None:
            logger.debug("ignoring unknown key %s on %s", path, schema.struct_type.__name__)
            continue

        if spec.kind is FieldKind.NESTED:
            value = _build_nested(spec, child, path)
        elif isinstance(child, Composite):
            raise MappingError(
                f"expected a {spec.kind.value} value, got a nested object", path=path
            )
        else:
            value = coerce_scalar(child, spec.kind, path)

        setattr(target, spec.name, value)
    return target
