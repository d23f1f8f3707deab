# tests/conftest.py
"""
Fixtures compartilhados para testes do modelo de entidades.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos YAML de configuração (defaults + local)
- props canônicas de File
- uma fábrica de File

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são novos a cada uso (sem compartilhamento mutável)
    - Imports do pacote são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Limites explícitos:
    - Nenhuma fixture realiza I/O (arquivos temporários usam `tmp_path`)
"""

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def entity_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de propriedades base (defaults) de uma entidade.

    Usado por:
        - Testes do loader de props
        - Testes de `Entity.from_config_files`

    Returns:
        str: Conteúdo YAML representando as props padrão.
    """
    return """\
title: Button
status:
  tag: wip
  label: Work in progress
tags:
  - ui
  - atoms
"""


@pytest.fixture
def entity_local_yaml() -> str:
    """
    Fixture que fornece um YAML de overrides locais.

    Returns:
        str: Conteúdo YAML representando overrides locais.
    """
    return """\
status:
  tag: ready
tags:
  - ui
"""


# =====================================================
# File fixtures
# =====================================================

FILE_CONTENTS = "var x = 123"


@pytest.fixture
def file_contents() -> str:
    return FILE_CONTENTS


@pytest.fixture
def base_file_data() -> dict:
    """
    Props canônicas de um File relativo (cwd na raiz, base `test/`).

    Returns:
        dict: props novas a cada uso.
    """
    return {
        "cwd": "/",
        "base": "test/",
        "path": "test/file.js",
        "contents": FILE_CONTENTS.encode("utf-8"),
    }


@pytest.fixture
def make_file(base_file_data):
    """Fábrica de File: sem argumento usa `base_file_data`."""
    from pipeline_entities import File

    def _make(props=None):
        return File(props if props is not None else base_file_data)

    return _make
