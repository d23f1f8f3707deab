# src/pipeline_entities/core/pipeline/registry.py
"""
Registro ordenado de handlers de pipeline.

Este módulo define o `HandlerRegistry`, responsável por registrar handlers
escopados por path e reduzir um valor através dos handlers registrados
para um path exato.

Cada Entity possui dois registries independentes: um para getters e
outro para setters.

Responsabilidades do módulo:
    - Preservar a ordem de registro dos handlers
    - Filtrar handlers por igualdade exata de path
    - Executar o left-fold `acc(i) = handler_i(acc(i-1), context)`

Decisões arquiteturais:
    - O registro é append-only
    - Nenhum handler é pulado, reexecutado ou reordenado
    - Falhas de handler interrompem a redução e são propagadas
      como `PipelineHandlerError` encadeada à exceção original

Invariantes:
    - A lista de handlers reflete exatamente a ordem de registro
    - Apenas handlers com `path` textual e `handler` chamável são aceitos

Limites explícitos:
    - Não realiza casamento por prefixo ou wildcard
    - Não copia valores (responsabilidade da Entity)
    - Não escreve em stores
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..errors import InvalidPathError, PipelineHandlerError
from .types import Handler, HandlerFn

logger = logging.getLogger(__name__)


@dataclass
class HandlerRegistry:
    """
    Registro canônico de handlers para um estágio ("getter" ou "setter").

    Decisões arquiteturais:
        - A ordem de inserção é a ordem de execução
        - A estrutura interna não é exposta diretamente

    Invariantes:
        - `run` nunca altera a lista de handlers
        - O valor inicial é retornado sem alteração quando nenhum
          handler corresponde ao path
    """

    stage: str = "handler"
    _handlers: List[Handler] = field(default_factory=list, init=False, repr=False)

    def add(self, path: str, handler: HandlerFn) -> Handler:
        if not isinstance(path, str):
            raise InvalidPathError(
                f"{self.stage} path must be a string, received: {type(path).__name__}"
            )
        if not callable(handler):
            raise TypeError(f"{self.stage} handler for '{path}' must be callable")

        entry = Handler(path=path, handler=handler)
        self._handlers.append(entry)
        return entry

    def list(self, path: Optional[str] = None) -> List[Handler]:
        if path is None:
            return list(self._handlers)
        return [h for h in self._handlers if h.path == path]

    def run(self, path: Any, initial: Any, context: Any) -> Any:
        """
        Reduz `initial` através dos handlers registrados para `path`.

        Args:
            path: path exato consultado.
            initial: valor inicial do acumulador.
            context: objeto passado como segundo argumento a cada handler.

        Returns:
            Any: acumulador final.

        Raises:
            PipelineHandlerError: se algum handler levantar exceção.
        """
        matching = self.list(path) if isinstance(path, str) else []
        if not matching:
            return initial

        logger.debug("running %d %s handler(s) for '%s'", len(matching), self.stage, path)

        acc = initial
        for position, entry in enumerate(matching):
            try:
                acc = entry.handler(acc, context)
            except PipelineHandlerError:
                raise
            except Exception as e:
                raise PipelineHandlerError(
                    f"{self.stage} handler #{position} for '{path}' failed: {e}",
                    path=path,
                    stage=self.stage,
                ) from e
        return acc

    def __len__(self) -> int:
        return len(self._handlers)
