# src/pipeline_entities/core/hashing.py
"""
Hashing canônico de propriedades de entidades.

Este módulo implementa a geração de hash determinístico a partir das
propriedades computadas de uma Entity (ou File), utilizado por
colaboradores externos para detecção de mudanças e chaves de cache.

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo estável (SHA-256)

Política de serialização (v1):
    - chaves ordenadas, separadores compactos, UTF-8
    - bytes/bytearray → {"__bytes__": <hex>}
    - stream com `getvalue()` → como seus bytes; demais streams → null
    - objeto com `st_mode` (stat) → dict dos atributos `st_*`
    - set/frozenset   → lista ordenada
    - objetos com `to_json()` → sua projeção
    - demais tipos não serializáveis → TypeError

Limites explícitos:
    - Não é um hash criptográfico de segurança (apenas identidade estrutural)
    - Não persiste o hash
"""

import hashlib
import io
import json
from typing import Any, Dict


def _canonical_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return {"__bytes__": bytes(value).hex()}
    if isinstance(value, io.IOBase):
        getvalue = getattr(value, "getvalue", None)
        return _canonical_default(getvalue()) if callable(getvalue) else None
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(getattr(value, "st_mode", None), int):
        return {name: getattr(value, name) for name in dir(value) if name.startswith("st_")}
    raise TypeError(f"Valor não serializável para hashing: {type(value).__name__}")


def canonical_json(props: Dict[str, Any]) -> str:
    """Serializa `props` em JSON canônico (sort_keys, separadores compactos)."""
    return json.dumps(
        props,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_canonical_default,
    )


def compute_props_hash(props: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico das propriedades fornecidas.

    Invariantes:
        - O valor retornado é uma string hexadecimal de 64 caracteres
        - Estruturas equivalentes produzem o mesmo hash
        - Nenhuma mutação ocorre sobre o input

    Args:
        props (Dict[str, Any]): Propriedades computadas da entidade.

    Returns:
        str: Hash SHA-256 hexadecimal.

    Raises:
        TypeError: Se `props` não for um dicionário ou contiver valores
            não serializáveis.
    """
    if not isinstance(props, dict):
        raise TypeError(
            f"Props para hashing devem ser dict, recebido: {type(props).__name__}"
        )

    return hashlib.sha256(canonical_json(props).encode("utf-8")).hexdigest()
