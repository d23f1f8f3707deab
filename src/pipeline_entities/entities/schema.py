"""
Schema canônico de propriedades de File (v1).

A validação é estrutural e feita sem dependências externas, no mesmo
estilo da validação de contrato: cada regra violada levanta
`SchemaValidationError` com o nome do atributo.
"""

from __future__ import annotations

import io
from typing import Any, Mapping

from ..core.errors import SchemaValidationError
from .vfile import is_stat_like

# Atributos aceitos pelo valor de arquivo na construção.
FILE_ATTRIBUTES = ("cwd", "base", "path", "history", "contents", "stat", "symlink")

# Atributos derivados que podem ser atribuídos (reescrevem `path`).
DERIVED_WRITABLE = ("dirname", "basename", "stem", "extname")

# Atributos derivados somente leitura.
DERIVED_READONLY = ("relative",)

FILE_READABLE = FILE_ATTRIBUTES + DERIVED_WRITABLE + DERIVED_READONLY
FILE_WRITABLE = FILE_ATTRIBUTES + DERIVED_WRITABLE


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise SchemaValidationError(msg)


def validate_file_props(props: Any) -> None:
    """Valida as propriedades de construção de um File."""
    _expect(props is None or isinstance(props, Mapping), "File properties must be a mapping/dict")
    if not props:
        return

    for key in props:
        _expect(isinstance(key, str), f"property names must be strings, received: {key!r}")

    for key in ("cwd", "path"):
        if props.get(key) is not None:
            _expect(_is_non_empty_str(props[key]), f"{key} must be a non-empty string")

    for key in ("base", "symlink"):
        if props.get(key) is not None:
            _expect(_is_non_empty_str(props[key]), f"{key} must be a non-empty string or null")

    history = props.get("history")
    if history is not None:
        _expect(isinstance(history, (list, tuple)), "history must be a list")
        for i, entry in enumerate(history):
            _expect(_is_non_empty_str(entry), f"history[{i}] must be a non-empty string")

    contents = props.get("contents")
    _expect(
        contents is None or isinstance(contents, (bytes, bytearray, io.IOBase)),
        "contents must be bytes, a binary stream or null",
    )

    stat = props.get("stat")
    _expect(stat is None or is_stat_like(stat), "stat must be a stat result (st_mode) or null")

    for key in DERIVED_READONLY:
        _expect(key not in props, f"{key} is derived from base and path and cannot be provided")

    has_path = bool(props.get("path")) or bool(props.get("history"))
    for key in DERIVED_WRITABLE:
        if key in props:
            _expect(isinstance(props[key], str), f"{key} must be a string")
            _expect(has_path, f"{key} requires a path")
