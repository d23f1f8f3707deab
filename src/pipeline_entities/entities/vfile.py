# src/pipeline_entities/entities/vfile.py
"""
VirtualFile — valor de arquivo virtual com atributos derivados ao vivo.

Este módulo define o valor de arquivo possuído exclusivamente por um File.
Ele guarda metadados e conteúdo de origem filesystem:

    - cwd, base, path, history, contents, stat, symlink

e expõe atributos derivados, recalculados a cada leitura (nunca cacheados):

    - relative, dirname, basename, stem, extname

Política de normalização (v1):
    - paths são normalizados com `os.path.normpath`
    - separadores finais são removidos (exceto na raiz)
    - `base` acompanha `cwd` enquanto não for definido explicitamente
    - `path` é sempre o último item de `history`

Invariantes:
    - Escrever um `path` diferente do atual o anexa a `history`
    - `dirname`/`basename`/`stem`/`extname` reescrevem `path` quando atribuídos
    - `relative` é somente leitura

Limites explícitos:
    - Não realiza I/O (ver `File.from_path`)
    - Não conhece Entity nem pipelines
"""

from __future__ import annotations

import io
import os
import stat as stat_module
from copy import copy
from typing import Any, List, Optional, Union

Contents = Union[bytes, bytearray, io.IOBase, None]


def normalize(path: str) -> str:
    return remove_trailing_sep(os.path.normpath(path))


def remove_trailing_sep(path: str) -> str:
    stripped = path.rstrip(os.sep)
    if os.altsep:
        stripped = stripped.rstrip(os.altsep)
    return stripped or path[:1]


def is_stream(value: Any) -> bool:
    return isinstance(value, io.IOBase)


def is_buffer(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray))


def is_stat_like(value: Any) -> bool:
    """`os.stat_result` ou qualquer objeto com `st_mode` inteiro (sem `to_json`)."""
    if callable(getattr(value, "to_json", None)):
        return False
    return isinstance(getattr(value, "st_mode", None), int)


class VirtualFile:
    """
    Valor de arquivo virtual com path, base, cwd, histórico e conteúdo.

    Args:
        cwd: diretório de trabalho (default: `os.getcwd()`).
        base: diretório base (default: acompanha `cwd`).
        path: path atual do arquivo.
        history: paths anteriores (o `path`, se informado, é anexado ao fim).
        contents: bytes, stream binário ou None.
        stat: resultado de `os.stat` (ou objeto com `st_mode`) ou None.
        symlink: alvo do link simbólico ou None.
    """

    def __init__(
        self,
        *,
        cwd: Optional[str] = None,
        base: Optional[str] = None,
        path: Optional[str] = None,
        history: Optional[List[str]] = None,
        contents: Contents = None,
        stat: Any = None,
        symlink: Optional[str] = None,
    ) -> None:
        self.stat = stat
        self.contents = contents

        self._history: List[str] = []
        for entry in list(history or []) + ([path] if path else []):
            self.path = entry

        self.cwd = cwd or os.getcwd()
        self._base: Optional[str] = None
        self.base = base
        self._symlink: Optional[str] = None
        self.symlink = symlink

    # -----------------------------
    # Stored attributes
    # -----------------------------
    @property
    def contents(self) -> Contents:
        return self._contents

    @contents.setter
    def contents(self, value: Contents) -> None:
        if value is not None and not is_buffer(value) and not is_stream(value):
            raise TypeError("VirtualFile.contents can only be bytes, a binary stream or None")
        self._contents = value

    @property
    def cwd(self) -> str:
        return self._cwd

    @cwd.setter
    def cwd(self, value: str) -> None:
        if not value or not isinstance(value, str):
            raise TypeError("cwd must be a non-empty string")
        self._cwd = normalize(value)

    @property
    def base(self) -> str:
        return self._base or self._cwd

    @base.setter
    def base(self, value: Optional[str]) -> None:
        if value is None:
            self._base = None
            return
        if not value or not isinstance(value, str):
            raise TypeError("base must be a non-empty string, or None")
        value = normalize(value)
        self._base = None if value == self._cwd else value

    @property
    def path(self) -> Optional[str]:
        return self._history[-1] if self._history else None

    @path.setter
    def path(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("path should be a string")
        value = normalize(value)
        if value and value != self.path:
            self._history.append(value)

    @property
    def history(self) -> List[str]:
        return self._history

    @history.setter
    def history(self, value: List[str]) -> None:
        if not isinstance(value, list) or not all(isinstance(p, str) and p for p in value):
            raise TypeError("history must be a list of non-empty strings")
        self._history = []
        for entry in value:
            self.path = entry

    @property
    def symlink(self) -> Optional[str]:
        return self._symlink

    @symlink.setter
    def symlink(self, value: Optional[str]) -> None:
        if value is None:
            self._symlink = None
            return
        if not isinstance(value, str):
            raise TypeError("symlink should be a string")
        self._symlink = normalize(value)

    # -----------------------------
    # Derived attributes
    # -----------------------------
    @property
    def relative(self) -> Optional[str]:
        if not self.path:
            return None
        return os.path.relpath(self.path, self.base)

    @relative.setter
    def relative(self, value: Any) -> None:
        raise AttributeError(
            "relative is generated from the base and path attributes, do not modify it"
        )

    @property
    def dirname(self) -> Optional[str]:
        if not self.path:
            return None
        return os.path.dirname(self.path)

    @dirname.setter
    def dirname(self, value: str) -> None:
        self._require_path("dirname")
        self.path = os.path.join(value, self.basename)

    @property
    def basename(self) -> Optional[str]:
        if not self.path:
            return None
        return os.path.basename(self.path)

    @basename.setter
    def basename(self, value: str) -> None:
        self._require_path("basename")
        self.path = os.path.join(self.dirname, value)

    @property
    def stem(self) -> Optional[str]:
        if not self.path:
            return None
        return os.path.splitext(self.basename)[0]

    @stem.setter
    def stem(self, value: str) -> None:
        self._require_path("stem")
        self.path = os.path.join(self.dirname, value + self.extname)

    @property
    def extname(self) -> Optional[str]:
        if not self.path:
            return None
        return os.path.splitext(self.basename)[1]

    @extname.setter
    def extname(self, value: str) -> None:
        self._require_path("extname")
        self.path = os.path.join(self.dirname, self.stem + value)

    def _require_path(self, attribute: str) -> None:
        if not self.path:
            raise ValueError(f"No path specified! Can not set {attribute}.")

    # -----------------------------
    # Classification
    # -----------------------------
    def is_buffer(self) -> bool:
        return is_buffer(self._contents)

    def is_stream(self) -> bool:
        return is_stream(self._contents)

    def is_null(self) -> bool:
        return self._contents is None

    def is_directory(self) -> bool:
        return self.is_null() and self._stat_mode_is(stat_module.S_ISDIR)

    def is_symbolic(self) -> bool:
        return self.is_null() and self._stat_mode_is(stat_module.S_ISLNK)

    def _stat_mode_is(self, predicate) -> bool:
        mode = getattr(self.stat, "st_mode", None)
        return mode is not None and predicate(mode)

    # -----------------------------
    # Cloning
    # -----------------------------
    def clone(self, deep: bool = True, contents: bool = True) -> "VirtualFile":
        """
        Retorna uma cópia independente do arquivo.

        Args:
            deep: copia também `stat` (senão é compartilhado).
            contents: copia o conteúdo; com False o clone compartilha a
                referência de `contents`.

        Streams que expõem `getvalue()` (ex.: `io.BytesIO`) são duplicados;
        demais streams são compartilhados.
        """
        cloned = VirtualFile(
            cwd=self.cwd,
            base=self._base,
            history=list(self._history),
            stat=copy(self.stat) if deep and self.stat is not None else self.stat,
        )
        cloned.contents = _clone_contents(self._contents) if contents else self._contents
        cloned.symlink = self._symlink
        return cloned

    def __deepcopy__(self, memo) -> "VirtualFile":
        return self.clone(deep=True)

    def __repr__(self) -> str:
        return f"<VirtualFile {self.relative!r}>" if self.path else "<VirtualFile>"


def _clone_contents(contents: Contents) -> Contents:
    if isinstance(contents, bytearray):
        return bytearray(contents)
    if is_stream(contents) and hasattr(contents, "getvalue"):
        duplicate = io.BytesIO(contents.getvalue())
        duplicate.seek(contents.tell())
        return duplicate
    return contents
