# src/pipeline_entities/core/cloning.py
"""
Cópia profunda de valores que entram ou saem dos stores de uma Entity.

Streams binários abertos (`io.IOBase`) não são copiáveis; eles atravessam
a cópia por referência, inclusive quando aninhados em dicts e listas.
"""

from __future__ import annotations

import io
from copy import deepcopy
from typing import Any, Dict, Optional


def clone_deep(value: Any, memo: Optional[Dict[int, Any]] = None) -> Any:
    """Retorna uma cópia profunda de `value`, preservando streams por referência."""
    if memo is None:
        memo = {}
    if isinstance(value, io.IOBase):
        return value
    if type(value) is dict:
        return {key: clone_deep(item, memo) for key, item in value.items()}
    if type(value) is list:
        return [clone_deep(item, memo) for item in value]
    return deepcopy(value, memo)
