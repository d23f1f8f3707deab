# src/pipeline_entities/core/paths.py
"""
Acesso a estruturas aninhadas por path textual.

Este módulo resolve expressões de path com segmentos separados por ponto e
índices entre colchetes (ex.: `foo.bar[0]`, `items[2].name`, `a["b.c"]`)
contra estruturas aninhadas de dicionários, listas e objetos.

Operações:
    - parse_path  → converte a expressão em lista de segmentos
    - get_path    → leitura com fallback (nunca falha em segmento ausente)
    - set_path    → escrita com criação automática de containers intermediários
    - unset_path  → remoção do alvo
    - has_path    → teste de existência

Política de auto-vivificação (v1):
    - próximo segmento inteiro → cria `list`
    - caso contrário            → cria `dict`
    - listas são completadas com `None` até o índice escrito

Limites explícitos:
    - Não copia valores (a cópia é responsabilidade do chamador)
    - Não executa pipelines
    - Não possui estado
"""

from __future__ import annotations

import re
from typing import Any, List, Sequence, Union

from .errors import InvalidPathError

Segment = Union[str, int]

_MISSING = object()

_SEGMENT_RE = re.compile(
    r"""
    [^.\[\]]+                       # chave simples
    | \[ (?: (-?\d+)                # [0]
           | (["'])(.*?)\2          # ["chave"] ou ['chave']
           ) \]
    """,
    re.VERBOSE,
)


def parse_path(path: Any) -> List[Segment]:
    """
    Converte uma expressão de path em lista de segmentos.

    Exemplos:
        "foo.bar[0]"  → ["foo", "bar", 0]
        'a["b.c"].d'  → ["a", "b.c", "d"]
        3             → [3]

    Listas e tuplas já segmentadas são retornadas como lista.
    """
    if isinstance(path, (list, tuple)):
        return list(path)
    if not isinstance(path, str):
        return [path]

    segments: List[Segment] = []
    for match in _SEGMENT_RE.finditer(path):
        index, _, quoted = match.groups()
        if index is not None:
            segments.append(int(index))
        elif quoted is not None:
            segments.append(quoted)
        else:
            segments.append(match.group(0))
    return segments


def _step(node: Any, segment: Segment) -> Any:
    if isinstance(node, dict):
        return node.get(segment, _MISSING)
    if isinstance(node, (list, tuple)):
        if isinstance(segment, int) and -len(node) <= segment < len(node):
            return node[segment]
        return _MISSING
    if isinstance(segment, str) and node is not None:
        return getattr(node, segment, _MISSING)
    return _MISSING


def _resolve(root: Any, segments: Sequence[Segment]) -> Any:
    node = root
    for segment in segments:
        node = _step(node, segment)
        if node is _MISSING:
            return _MISSING
    return node


def get_path(root: Any, path: Any, fallback: Any = None) -> Any:
    """Lê o valor em `path`, retornando `fallback` quando algum segmento não existe."""
    segments = parse_path(path)
    if not segments:
        return fallback
    value = _resolve(root, segments)
    return fallback if value is _MISSING else value


def has_path(root: Any, path: Any) -> bool:
    segments = parse_path(path)
    return bool(segments) and _resolve(root, segments) is not _MISSING


def _check_negative_indexes(root: Any, segments: Sequence[Segment]) -> None:
    # containers ausentes ou escalares serão criados vazios
    node = root
    for segment in segments:
        if isinstance(segment, int) and segment < 0 and not isinstance(node, dict):
            length = len(node) if isinstance(node, (list, tuple)) else 0
            if segment < -length:
                raise InvalidPathError(
                    f"negative index {segment} out of range for list of length {length}"
                )
        node = _step(node, segment) if node is not _MISSING else _MISSING


def _assign(node: Any, segment: Segment, value: Any) -> None:
    if isinstance(node, list) and isinstance(segment, int):
        if segment >= len(node):
            node.extend([None] * (segment + 1 - len(node)))
        node[segment] = value
    elif isinstance(node, dict):
        node[segment] = value
    else:
        setattr(node, segment, value)


def set_path(root: Any, path: Any, value: Any) -> Any:
    """
    Escreve `value` em `path`, criando containers intermediários ausentes.

    Um intermediário existente que não seja container (ex.: um escalar)
    é substituído pelo container adequado ao próximo segmento. Tuplas
    intermediárias são convertidas em listas, preservando os elementos.

    Returns:
        Any: a própria estrutura `root`, para encadeamento.

    Raises:
        InvalidPathError: path vazio, ou índice negativo além do início da lista.
    """
    segments = parse_path(path)
    if not segments:
        raise InvalidPathError("path must contain at least one segment")
    _check_negative_indexes(root, segments)

    node = root
    for segment, following in zip(segments, segments[1:]):
        child = _step(node, segment)
        if isinstance(child, tuple):
            child = list(child)
            _assign(node, segment, child)
        elif not isinstance(child, (dict, list)):
            child = [] if isinstance(following, int) else {}
            _assign(node, segment, child)
        node = child

    _assign(node, segments[-1], value)
    return root


def unset_path(root: Any, path: Any) -> bool:
    """
    Remove o valor em `path`.

    Elementos de lista são removidos com `pop` (os índices seguintes deslocam).

    Returns:
        bool: True se algum valor foi removido.
    """
    segments = parse_path(path)
    if not segments:
        return False

    parent = _resolve(root, segments[:-1])
    last = segments[-1]

    if isinstance(parent, dict) and last in parent:
        del parent[last]
        return True
    if isinstance(parent, list) and isinstance(last, int) and -len(parent) <= last < len(parent):
        parent.pop(last)
        return True
    return False
