# src/pipeline_entities/core/pipeline/types.py
"""
Tipos canônicos do motor de pipelines de getters/setters.

Componentes principais:
    - HandlerFn → assinatura `handler(acumulador, entidade) -> próximo acumulador`
    - Handler   → registro imutável (path, handler)

Invariantes:
    - Um Handler é associado a exatamente um path textual
    - Handler é imutável após criado

Limites explícitos:
    - Não executa handlers
    - Não decide ordem de execução
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

HandlerFn = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Handler:
    """
    Registro imutável de um estágio de pipeline.

    Campos:
        - path: path exato ao qual o handler se aplica (sem prefixo ou glob)
        - handler: função `(acc, entity) -> acc`
    """
    path: str
    handler: HandlerFn
