# src/pipeline_entities/core/config/__init__.py
"""
Camada de configuração de entidades.

Este pacote carrega e resolve, a partir de arquivos YAML/JSON, o
mapeamento usado como store de config imutável de uma Entity.

Princípios fundamentais:
    - Overrides são sempre explícitos
    - A mesma entrada sempre produz a mesma configuração final
    - Conflitos estruturais são tratados como erro
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .loader import load_props
from .merge import deep_merge, merge_layers

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "load_props",
    "merge_layers",
]
