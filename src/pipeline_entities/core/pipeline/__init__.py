# src/pipeline_entities/core/pipeline/__init__.py
"""
# Pipeline Core — getters e setters

Este pacote define o motor de pipelines usado por Entity e File para
interceptar, validar, coagir ou computar valores durante `get`/`set`.

## Componentes

- **types**
  - `Handler`: registro imutável (path, handler)
  - `HandlerFn`: assinatura `(acc, entity) -> acc`

- **registry**
  - `HandlerRegistry`: lista ordenada, filtro por path exato e left-fold

## Invariantes

- A ordem de execução é a ordem de registro
- Apenas handlers com path exatamente igual ao consultado são executados
- Uma falha de handler aborta o `get`/`set` em andamento
"""

from .registry import HandlerRegistry
from .types import Handler, HandlerFn

__all__ = ["Handler", "HandlerFn", "HandlerRegistry"]
