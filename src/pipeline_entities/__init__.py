# src/pipeline_entities/__init__.py
"""
Pipeline Entities — modelo de objetos com configuração imutável e overlay mutável.

Este pacote raiz define o namespace público do modelo de entidades usado
como representação uniforme de registros genéricos (Entity) e de arquivos
(File) dentro de um pipeline de build/documentação.

Princípios centrais:
    - Toda leitura e escrita passa pelo protocolo de acesso por path
    - Getters e setters formam pipelines ordenados por path exato
    - O store de config nunca é mutado; o store de data é o overlay
    - Cópias profundas isolam os stores de valores mantidos pelo chamador

Arquitetura em alto nível:
    - core.paths     → leitura/escrita/remoção por path (`foo.bar[0]`)
    - core.pipeline  → registro ordenado de handlers e redução
    - core.hashing   → hash canônico (SHA-256 sobre JSON canônico)
    - core.config    → carregamento YAML/JSON e deep-merge
    - entities       → Entity, File e VirtualFile

Limites explícitos:
    - Não é um banco de dados nem store persistente
    - Não coordena concorrência
    - Não configura logging (apenas emite registros DEBUG)
"""

from .core.errors import (
    EntityError,
    InvalidPathError,
    InvalidPropertiesError,
    PipelineHandlerError,
    SchemaValidationError,
)
from .entities import Entity, File, VirtualFile

__all__ = [
    "Entity",
    "EntityError",
    "File",
    "InvalidPathError",
    "InvalidPropertiesError",
    "PipelineHandlerError",
    "SchemaValidationError",
    "VirtualFile",
]
