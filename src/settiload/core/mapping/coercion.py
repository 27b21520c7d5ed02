# src/settiload/core/mapping/coercion.py
"""
Coerção de escalares para os tipos primitivos declarados.

Política de coerção (v1):

    | tipo  | escalar tipado (JSON/YAML)        | escalar léxico (XML)                    |
    |-------|-----------------------------------|-----------------------------------------|
    | str   | `str` literal; `null` → None      | texto literal (sem strip)               |
    | int   | `int` (não `bool`); float recusado | texto base-10 `[+-]?\\d+`               |
    | bool  | `bool` apenas                     | "true"/"false" (case-insensitive)       |
    | float | `int` ou `float` (não `bool`)     | literal decimal                         |

Invariantes:
    - Nenhuma conversão "criativa" (ex.: "yes" → True, 1 → True)
    - Dígitos são apenas ASCII: "٣٠" não é um inteiro
    - Toda falha vira `MappingError` com o caminho do campo, inclusive
      literais inteiros acima do limite de dígitos do interpretador
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict

from ..document.tree import Scalar
from ..errors import MappingError
from ..schema.fields import FieldKind

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _describe(value: Any) -> str:
    if isinstance(value, str):
        return f"{value!r}"
    return type(value).__name__


def _to_str(scalar: Scalar, path: str) -> Any:
    value = scalar.value
    if scalar.lexical or isinstance(value, str):
        return value
    if value is None:
        return None
    raise MappingError(f"expected a string, got {_describe(value)}", path=path)


def _to_int(scalar: Scalar, path: str) -> int:
    value = scalar.value
    if scalar.lexical:
        text = value.strip()
        if _INT_RE.fullmatch(text):
            try:
                return int(text, 10)
            except ValueError as e:
                # limite de dígitos da conversão str -> int do interpretador
                raise MappingError(f"integer literal too long: {len(text)} characters", path=path) from e
        raise MappingError(f"cannot parse {value!r} as an integer", path=path)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise MappingError(f"expected an integral number, got {_describe(value)}", path=path)


def _to_bool(scalar: Scalar, path: str) -> bool:
    value = scalar.value
    if scalar.lexical:
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
        raise MappingError(f"cannot parse {value!r} as a boolean", path=path)
    if isinstance(value, bool):
        return value
    raise MappingError(f"expected true or false, got {_describe(value)}", path=path)


def _to_float(scalar: Scalar, path: str) -> float:
    value = scalar.value
    if scalar.lexical:
        text = value.strip()
        if _FLOAT_RE.fullmatch(text):
            return float(text)
        raise MappingError(f"cannot parse {value!r} as a decimal number", path=path)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise MappingError(f"expected a number, got {_describe(value)}", path=path)


COERCERS: Dict[FieldKind, Callable[[Scalar, str], Any]] = {
    FieldKind.STRING: _to_str,
    FieldKind.INT: _to_int,
    FieldKind.BOOL: _to_bool,
    FieldKind.FLOAT: _to_float,
}


def coerce_scalar(scalar: Scalar, kind: FieldKind, path: str = "") -> Any:
    """Converte `scalar` para o primitivo `kind` ou levanta `MappingError`."""
    coercer = COERCERS.get(kind)
    if coercer is None:
        raise MappingError(f"{kind.value} is not a primitive field kind", path=path)
    return coercer(scalar, path)
