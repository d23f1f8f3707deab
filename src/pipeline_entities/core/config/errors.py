# src/pipeline_entities/core/config/errors.py
"""
Exceções canônicas da camada de configuração.

Este módulo define as exceções levantadas durante o carregamento e a
resolução (deep-merge) de arquivos que alimentam o store de config de
uma Entity.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - `ConfigError` herda de `EntityError`

Limites explícitos:
    - Não realiza fallback ou recovery
"""

from ..errors import EntityError


class ConfigError(EntityError):
    """
    Exceção base para erros relacionados a arquivos de configuração.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas de carregamento e uso incorreto da Entity
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"meta": {"draft": true}}
        - override: {"meta": "published"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
