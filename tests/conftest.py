# tests/conftest.py
"""
Fixtures compartilhados para testes do SettiLoad.

Este módulo define:
- o schema de referência `AppConfig` (Database / Logging / IsFeatureEnabled)
- conteúdos de arquivos de configuração equivalentes em JSON e XML
- uma factory para gravar arquivos de configuração em `tmp_path`

Decisões arquiteturais:
    - O schema de referência é declarado em nível de módulo para que as
      anotações sejam resolvidas sem depender de escopo local de função
    - Conteúdos de arquivo são fornecidos como string; a gravação é explícita
    - Os valores espelham os arquivos de cenário clássicos
      (appConfig, alternativeConfig, partialConfig, typeTestConfig)

Invariantes:
    - Fixtures são determinísticos e isolados por teste
    - Nenhuma fixture configura logging global
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from settiload import Config, Section


class DatabaseConfig(Section):
    ConnectionString: str
    Timeout: int


class LoggingConfig(Section):
    LogLevel: str
    LogFilePath: str


class AppConfig(Config):
    Database: Optional[DatabaseConfig]
    Logging: Optional[LoggingConfig]
    IsFeatureEnabled: bool


CONNECTION = "Server=myServerAddress;Database=myDataBase;User Id=myUsername;Password=myPassword;"
ALT_CONNECTION = (
    "Server=anotherServerAddress;Database=anotherDataBase;User Id=anotherUsername;Password=anotherPassword;"
)


@pytest.fixture
def app_config_cls():
    return AppConfig


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory: grava `content` em `tmp_path / name` (UTF-8) e devolve o caminho."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def app_config_json() -> str:
    return (
        '{"Database":{"ConnectionString":"%s","Timeout":30},'
        '"Logging":{"LogLevel":"Info","LogFilePath":"/var/log/app.log"},'
        '"IsFeatureEnabled":true}' % CONNECTION
    )


@pytest.fixture
def app_config_xml() -> str:
    return f"""\
<?xml version="1.0" encoding="utf-8"?>
<AppConfig>
  <Database>
    <ConnectionString>{CONNECTION}</ConnectionString>
    <Timeout>30</Timeout>
  </Database>
  <Logging>
    <LogLevel>Info</LogLevel>
    <LogFilePath>/var/log/app.log</LogFilePath>
  </Logging>
  <IsFeatureEnabled>true</IsFeatureEnabled>
</AppConfig>
"""


@pytest.fixture
def alternative_config_json() -> str:
    return f"""\
{{
  "Database": {{
    "ConnectionString": "{ALT_CONNECTION}",
    "Timeout": 60
  }},
  "Logging": {{
    "LogLevel": "Debug",
    "LogFilePath": "/var/log/anotherapp.log"
  }},
  "IsFeatureEnabled": false
}}
"""


@pytest.fixture
def partial_config_json() -> str:
    return '{"Database": {"ConnectionString": "%s"}}' % CONNECTION


@pytest.fixture
def type_test_config_json() -> str:
    return f"""\
{{
  "database": {{"connectionString": "{CONNECTION}", "TIMEOUT": 45}},
  "LOGGING": {{"loglevel": "Verbose", "logFilePath": "/var/log/complex.log"}},
  "isFeatureEnabled": true,
  "UnknownSection": {{"Anything": [1, 2, 3]}},
  "Comment": null
}}
"""
