# tests/core/document/test_readers.py
"""
Testes dos readers de documento (JSON, XML, YAML).

Os testes asseguram que:
- documentos válidos viram um `Composite` na raiz, em ordem de documento
- JSON/YAML produzem escalares tipados e XML produz escalares léxicos
- conteúdo malformado (inclusive aninhamento excessivo) vira `ReadResult`
  de falha, nunca exceção
- constantes JSON fora da RFC 8259 (`NaN`, `Infinity`) são rejeitadas
- raízes que não são objeto/mapa são rejeitadas
- atributos XML são ignorados

Limites explícitos:
    - Não valida mapeamento sobre estruturas
    - Não lê arquivos do disco
"""

from __future__ import annotations

import pytest

from settiload.core.document import (
    Composite,
    Scalar,
    formats_for_suffix,
    read_json,
    read_xml,
    read_yaml,
)
from settiload.core.errors import ParseError


def test_read_json_builds_composite_in_document_order():
    res = read_json(b'{"b": 1, "a": {"x": "y"}, "c": true}')

    assert res.ok
    assert res.node.names() == ("b", "a", "c")
    assert res.node.get("b") == Scalar(1)
    assert res.node.get("a") == Composite((("x", Scalar("y")),))
    assert res.node.get("c") == Scalar(True)


def test_read_json_keeps_duplicate_keys():
    res = read_json(b'{"Timeout": 1, "Timeout": 2}')

    assert res.ok
    assert len(res.node) == 2
    assert res.node.get("Timeout") == Scalar(2)


def test_read_json_tolerates_utf8_bom():
    res = read_json('\ufeff{"a": "é"}'.encode("utf-8"))

    assert res.ok
    assert res.node.get("a") == Scalar("é")


@pytest.mark.parametrize("raw", [b"not valid json", b'{"a": 1', b"", b"\xff\xfe"])
def test_read_json_malformed_is_failure(raw):
    res = read_json(raw)

    assert not res.ok
    assert res.node is None
    assert isinstance(res.error, ParseError)
    assert res.error.fmt == "json"


@pytest.mark.parametrize("raw", [b"[1, 2]", b'"text"', b"42", b"null"])
def test_read_json_non_object_root_is_failure(raw):
    res = read_json(raw)

    assert not res.ok
    assert "root must be an object" in str(res.error)


@pytest.mark.parametrize(
    "raw",
    [b'{"Ratio": NaN, "Limit": Infinity}', b'{"Limit": -Infinity}'],
)
def test_read_json_rejects_non_standard_constants(raw):
    res = read_json(raw)

    assert not res.ok
    assert res.error.fmt == "json"
    assert "non-standard JSON constant" in str(res.error)


def test_read_json_deep_nesting_is_failure():
    raw = b'{"Name":' + b"[" * 100_000 + b"]" * 100_000 + b"}"

    res = read_json(raw)

    assert not res.ok
    assert res.error.fmt == "json"
    assert "nested too deeply" in str(res.error)


def test_read_xml_folds_children_and_ignores_attributes():
    raw = b"""<Root version="2">
      <Database kind="sql">
        <Timeout unit="s">30</Timeout>
      </Database>
      <IsFeatureEnabled>true</IsFeatureEnabled>
      <Empty/>
    </Root>"""
    res = read_xml(raw)

    assert res.ok
    assert res.node.names() == ("Database", "IsFeatureEnabled", "Empty")
    database = res.node.get("Database")
    assert isinstance(database, Composite)
    assert database.get("Timeout") == Scalar("30", lexical=True)
    assert res.node.get("IsFeatureEnabled") == Scalar("true", lexical=True)
    assert res.node.get("Empty") == Scalar("", lexical=True)


def test_read_xml_uses_local_name_of_namespaced_tags():
    res = read_xml(b'<c:Root xmlns:c="urn:cfg"><c:LogLevel>Info</c:LogLevel></c:Root>')

    assert res.ok
    assert res.node.get("LogLevel") == Scalar("Info", lexical=True)


def test_read_xml_root_without_children_is_empty_composite():
    res = read_xml(b"<Root>text only</Root>")

    assert res.ok
    assert res.node == Composite()


@pytest.mark.parametrize("raw", [b"not valid json", b'{"a": 1}', b"<Root><a></Root>", b""])
def test_read_xml_malformed_is_failure(raw):
    res = read_xml(raw)

    assert not res.ok
    assert isinstance(res.error, ParseError)
    assert res.error.fmt == "xml"


def test_read_xml_deep_nesting_is_failure():
    raw = b"<c>" + b"<a>" * 5000 + b"</a>" * 5000 + b"</c>"

    res = read_xml(raw)

    assert not res.ok
    assert res.error.fmt == "xml"
    assert "nested too deeply" in str(res.error)


def test_read_yaml_mapping_root():
    res = read_yaml(b"Database:\n  Timeout: 30\nIsFeatureEnabled: true\n")

    assert res.ok
    assert res.node.get("Database") == Composite((("Timeout", Scalar(30)),))
    assert res.node.get("IsFeatureEnabled") == Scalar(True)


def test_read_yaml_empty_document_is_empty_composite():
    res = read_yaml(b"")

    assert res.ok
    assert res.node == Composite()


def test_read_yaml_non_text_keys_become_names():
    res = read_yaml(b"1: one\ntrue: yes\n")

    assert res.ok
    assert isinstance(res.node, Composite)
    assert res.node.names() == ("1", "True")


@pytest.mark.parametrize("raw", [b"- a\n- b\n", b"a: [1, 2\n"])
def test_read_yaml_invalid_is_failure(raw):
    res = read_yaml(raw)

    assert not res.ok
    assert res.error.fmt == "yaml"


@pytest.mark.parametrize(
    "suffix, expected",
    [
        (".json", ("json",)),
        (".JSON", ("json",)),
        (".xml", ("xml",)),
        (".Xml", ("xml",)),
        (".yaml", ("yaml",)),
        (".yml", ("yaml",)),
        ("", ("json", "xml")),
        (".config", ("json", "xml")),
    ],
)
def test_formats_for_suffix(suffix, expected):
    assert formats_for_suffix(suffix) == expected
