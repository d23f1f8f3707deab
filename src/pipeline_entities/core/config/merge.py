# src/pipeline_entities/core/config/merge.py
"""
Deep-merge de camadas de configuração de entidades.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list/tuple → sobrescrita total (tuplas viram listas, como no store de data)
    - escalar → sobrescrita direta
    - None em qualquer lado → sobrescrita direta (nunca é conflito)
    - conflito de tipos → `ConfigTypeConflictError` com o path completo da chave
      (mesma sintaxe aceita por `Entity.get`, ex.: `status.tag`)

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado; o resultado não compartilha referências
"""

from copy import deepcopy
from typing import Any, Dict, Iterable

from .errors import ConfigTypeConflictError


def _join(trail: str, key: Any) -> str:
    key = str(key)
    return f"{trail}.{key}" if trail else key


def _merge_value(current: Any, incoming: Any, trail: str) -> Any:
    if isinstance(current, dict) and isinstance(incoming, dict):
        return _merge_dicts(current, incoming, trail)
    if isinstance(incoming, (list, tuple)):
        return deepcopy(list(incoming))
    if current is None or incoming is None:
        return deepcopy(incoming)
    if isinstance(current, (list, tuple)) or type(current) is not type(incoming):
        raise ConfigTypeConflictError(
            f"Conflito de tipo em '{trail}': "
            f"{type(current).__name__} vs {type(incoming).__name__}"
        )
    return deepcopy(incoming)


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any], trail: str) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, incoming in override.items():
        if key in merged:
            merged[key] = _merge_value(merged[key], incoming, _join(trail, key))
        else:
            merged[key] = deepcopy(incoming)
    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` e retorna um novo dicionário.

    Raises:
        ConfigTypeConflictError: Se os dois lados não forem dicts, ou se uma
            chave mudar de tipo entre as camadas.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_dicts(base, override, "")


def merge_layers(layers: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Aplica as camadas em ordem; a última tem prioridade."""
    result: Dict[str, Any] = {}
    for layer in layers:
        result = deep_merge(result, layer)
    return result
