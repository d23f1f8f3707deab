# src/pipeline_entities/entities/file.py
"""
File — Entity especializada em metadados e conteúdo de arquivos.

Um File combina:
    - um `VirtualFile` possuído exclusivamente (cwd, base, path, history,
      contents, stat, symlink e os derivados relative/dirname/basename/
      stem/extname)
    - os stores herdados de Entity, que guardam apenas propriedades
      customizadas (não pertencentes ao arquivo)

Roteamento de acesso:
    - paths cujo segmento raiz é um atributo de arquivo → VirtualFile
    - demais paths → stores de Entity (config/data)

Decisões arquiteturais:
    - Atributos derivados são lidos ao vivo do VirtualFile (nunca cacheados)
    - Escritas em atributos de arquivo passam pelos setters e são atribuídas
      diretamente ao VirtualFile
    - Atributos de arquivo nunca são sombreados por propriedades customizadas
      em `to_json`/`get_computed_props`

Invariantes:
    - Props de construção são validadas contra o schema de File
    - `clone` não compartilha estado mutável com o original
    - `from_path` só constrói o File após stat e leitura completos

Limites explícitos:
    - Não escreve arquivos em disco
    - Não faz retry de I/O
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Union

import aiofiles
import aiofiles.os

from ..core.cloning import clone_deep
from ..core.errors import InvalidPathError
from ..core.paths import get_path, parse_path
from .entity import Entity, is_serializable_prop, project_json_value
from .schema import (
    DERIVED_WRITABLE,
    FILE_ATTRIBUTES,
    FILE_READABLE,
    FILE_WRITABLE,
    validate_file_props,
)
from .vfile import VirtualFile, is_stat_like

logger = logging.getLogger(__name__)


class File(Entity):
    """
    Entity que multiplexa o acesso entre um `VirtualFile` e os stores
    de propriedades customizadas.

    Raises:
        SchemaValidationError: se as props não satisfizerem o schema de File.
    """

    __slots__ = ("__file",)

    def __init__(self, props: Optional[Dict[str, Any]] = None) -> None:
        if props is self:
            return
        self.validate(props)

        props = dict(props or {})
        custom_props = {k: v for k, v in props.items() if k not in FILE_WRITABLE}
        file_props = clone_deep({k: props[k] for k in FILE_ATTRIBUTES if k in props})

        super().__init__(custom_props)

        vfile = VirtualFile(**file_props)
        for key in DERIVED_WRITABLE:
            if key in props:
                setattr(vfile, key, props[key])
        self.__file = vfile

    # -----------------------------
    # Accessors
    # -----------------------------
    def get(self, path: Any, fallback: Any = None) -> Any:
        segments = parse_path(path)
        if segments and segments[0] in FILE_READABLE:
            initial = clone_deep(get_path(self.__file, segments, fallback))
            return self._compute_final_getter(path, initial)
        return super().get(path, fallback)

    def set(self, path: str, value: Any) -> Any:
        self._assert_path(path, "set")
        segments = parse_path(path)
        if not segments or segments[0] not in FILE_READABLE:
            return super().set(path, value)

        # paths de arquivo somente leitura (`relative`, `history[0]`) não caem
        # nos stores customizados: seriam sombreados pelo VirtualFile na leitura
        if path not in FILE_WRITABLE:
            raise InvalidPathError(f"File.set: '{path}' is not a writable file attribute")

        initial = clone_deep(value)
        final = self._compute_final_setter(path, initial)
        setattr(self.__file, path, final)
        return clone_deep(final)

    def __contains__(self, key: Any) -> bool:
        return key in FILE_READABLE or super().__contains__(key)

    # -----------------------------
    # Serialization, cloning
    # -----------------------------
    def get_computed_props(self) -> Dict[str, Any]:
        props = super().get_computed_props()
        props.update(clone_deep({name: getattr(self.__file, name) for name in FILE_READABLE}))
        return props

    def to_json(self) -> Dict[str, Any]:
        props = self.get_computed_props()
        return {
            key: project_json_value(value)
            for key, value in props.items()
            if is_serializable_prop(key, value) and not is_stat_like(value)
        }

    def clone(self) -> "File":
        vfile = self.__file.clone(deep=True)
        props = self.get_config()
        props.update(
            cwd=vfile.cwd,
            base=vfile.base,
            history=list(vfile.history),
            stat=vfile.stat,
            contents=vfile.contents,
            symlink=vfile.symlink,
        )
        logger.debug("cloning File %r", vfile.path)
        return self._add_data_entries(type(self)(props))

    def __str__(self) -> str:
        contents = self.__file.contents
        if isinstance(contents, (bytes, bytearray)):
            return bytes(contents).decode("utf-8", errors="replace")
        return ""

    def __repr__(self) -> str:
        return f"<File {self.__file.path!r}>"

    # -----------------------------
    # Classification
    # -----------------------------
    def is_directory(self) -> bool:
        return self.__file.is_directory()

    def is_null(self) -> bool:
        return self.__file.is_null()

    def is_stream(self) -> bool:
        return self.__file.is_stream()

    def is_buffer(self) -> bool:
        return self.__file.is_buffer()

    def is_symbolic(self) -> bool:
        return self.__file.is_symbolic()

    # -----------------------------
    # Factories
    # -----------------------------
    @staticmethod
    def validate(props: Any) -> None:
        validate_file_props(props)

    @staticmethod
    def is_file(item: Any) -> bool:
        return isinstance(item, File)

    @classmethod
    async def from_path(
        cls,
        path: Union[str, "os.PathLike[str]"],
        cwd: Optional[str] = None,
        base: Optional[str] = None,
    ) -> "File":
        """
        Constrói um File a partir de um arquivo em disco (stat e depois leitura).

        Args:
            path: caminho do arquivo.
            cwd: diretório de trabalho (default: `os.getcwd()`).
            base: diretório base (default: `cwd`).

        Raises:
            OSError: propagado sem alteração do stat/leitura.
        """
        path = os.fspath(path)
        stat = await aiofiles.os.stat(path)
        async with aiofiles.open(path, "rb") as f:
            contents = await f.read()

        cwd = cwd or os.getcwd()
        base = base or cwd
        logger.debug("read %d byte(s) from %s", len(contents), path)
        return cls({"path": path, "cwd": cwd, "base": base, "stat": stat, "contents": contents})
