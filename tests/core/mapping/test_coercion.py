# tests/core/mapping/test_coercion.py
"""
Testes da tabela de coerção escalar → primitivo (`coerce_scalar`).

Os testes asseguram que:
- escalares tipados (JSON/YAML) só são aceitos com o tipo exato do campo
- escalares léxicos (XML) são interpretados com regras estritas
- dígitos não ASCII e literais inteiros acima do limite do interpretador
  são rejeitados
- toda falha é `MappingError` com o caminho pontuado do campo

Decisões arquiteturais:
    - Casos de aceite verificam também o tipo exato do valor produzido

Limites explícitos:
    - Não aplica documentos sobre estruturas (ver test_mapper)
"""

from __future__ import annotations

import pytest

from settiload.core.document import Scalar
from settiload.core.errors import MappingError
from settiload.core.mapping import coerce_scalar
from settiload.core.schema import FieldKind


def _typed(value):
    return Scalar(value)


def _text(value):
    return Scalar(value, lexical=True)


@pytest.mark.parametrize(
    "scalar, kind, expected",
    [
        (_typed("Info"), FieldKind.STRING, "Info"),
        (_typed(None), FieldKind.STRING, None),
        (_typed(30), FieldKind.INT, 30),
        (_typed(-7), FieldKind.INT, -7),
        (_typed(True), FieldKind.BOOL, True),
        (_typed(False), FieldKind.BOOL, False),
        (_typed(1.5), FieldKind.FLOAT, 1.5),
        (_typed(2), FieldKind.FLOAT, 2.0),
        (_text("  spaced  "), FieldKind.STRING, "  spaced  "),
        (_text(" 30 "), FieldKind.INT, 30),
        (_text("+5"), FieldKind.INT, 5),
        (_text("TRUE"), FieldKind.BOOL, True),
        (_text("False"), FieldKind.BOOL, False),
        (_text("2.5e3"), FieldKind.FLOAT, 2500.0),
        (_text("-.5"), FieldKind.FLOAT, -0.5),
        (_text("42"), FieldKind.FLOAT, 42.0),
    ],
)
def test_coerce_scalar_accepts(scalar, kind, expected):
    value = coerce_scalar(scalar, kind, "Field")

    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize(
    "scalar, kind",
    [
        (_typed(30), FieldKind.STRING),
        (_typed(True), FieldKind.STRING),
        (_typed("30"), FieldKind.INT),
        (_typed(30.0), FieldKind.INT),
        (_typed(True), FieldKind.INT),
        (_typed(None), FieldKind.INT),
        (_typed("true"), FieldKind.BOOL),
        (_typed(1), FieldKind.BOOL),
        (_typed("1.5"), FieldKind.FLOAT),
        (_typed(False), FieldKind.FLOAT),
        (_typed([1, 2]), FieldKind.STRING),
        (_text("abc"), FieldKind.INT),
        (_text("1_000"), FieldKind.INT),
        (_text("3.0"), FieldKind.INT),
        (_text("yes"), FieldKind.BOOL),
        (_text("1"), FieldKind.BOOL),
        (_text("nan"), FieldKind.FLOAT),
        (_text(""), FieldKind.FLOAT),
        (_text("٣٠"), FieldKind.INT),
        (_text("٣.٥"), FieldKind.FLOAT),
        (_text("9" * 5000), FieldKind.INT),
    ],
)
def test_coerce_scalar_rejects(scalar, kind):
    with pytest.raises(MappingError) as exc:
        coerce_scalar(scalar, kind, "Database.Timeout")

    assert exc.value.path == "Database.Timeout"
    assert str(exc.value).startswith("Database.Timeout: ")


def test_nested_kind_is_not_a_primitive():
    with pytest.raises(MappingError):
        coerce_scalar(_typed("x"), FieldKind.NESTED)
