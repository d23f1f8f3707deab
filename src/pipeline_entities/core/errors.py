# src/pipeline_entities/core/errors.py
"""
Exceções canônicas do modelo de entidades.

Este módulo define a hierarquia oficial de exceções levantadas por Entity,
File, pelo motor de pipelines (getters/setters) e pela camada de configuração.

As exceções aqui definidas representam **uso incorreto explícito** do modelo
de objetos, e não falhas genéricas de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros são levantados de forma síncrona no ponto de uso incorreto
    - Nenhum erro é silenciado ou reexecutado internamente

Invariantes:
    - Todas as exceções do pacote herdam de `EntityError`
    - Erros de I/O de `File.from_path` NÃO são encapsulados (família `OSError`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos nem persiste erros
"""

from __future__ import annotations

from typing import Optional


class EntityError(Exception):
    """
    Exceção base para erros do modelo de entidades.

    Permite captura genérica de qualquer falha levantada pelo pacote,
    mantendo a distinção entre erros de uso (esta hierarquia) e erros
    de I/O do sistema operacional.
    """


class InvalidPropertiesError(EntityError, TypeError):
    """
    Exceção levantada quando as propriedades passadas ao construtor
    não estão em forma de mapeamento (`dict`) nem ausentes (`None`).
    """


class SchemaValidationError(InvalidPropertiesError, ValueError):
    """
    Exceção levantada quando as propriedades de um File não satisfazem
    o schema declarado de arquivo.

    A mensagem sempre identifica o atributo inválido.
    """


class InvalidPathError(EntityError, TypeError):
    """
    Exceção levantada quando um `path` inválido é passado a `set`/`unset`
    (ex.: valor não-string) ou quando se tenta escrever em um atributo
    derivado de arquivo.
    """


class PipelineHandlerError(EntityError):
    """
    Exceção levantada quando um handler registrado (getter ou setter)
    falha durante a redução do pipeline.

    A exceção original é sempre preservada como `__cause__`.

    Atributos:
        path: path exato cujo pipeline estava em execução
        stage: "getter" ou "setter"
    """

    def __init__(self, message: str, *, path: str, stage: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        self.stage = stage
