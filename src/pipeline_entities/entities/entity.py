# src/pipeline_entities/entities/entity.py
"""
Entity — contêiner de propriedades com dois stores e pipelines de acesso.

Este módulo define a `Entity`, a representação uniforme de registros
genéricos dentro do pipeline de build/documentação.

Uma Entity mantém dois stores explícitos:
    - config: baseline estabelecido na construção, nunca mutado in-place
    - data:   overlay mutável, escrito exclusivamente via `set`/`unset`

Toda leitura e escrita passa pelo protocolo de acesso por path:
    - get(path)      → cópia profunda do valor resolvido (data > config > fallback),
                       reduzida pelos getters registrados para o path exato
    - set(path, v)   → cópia profunda de `v`, reduzida pelos setters e só então
                       gravada em `data`

O acesso por atributo (`entity.foo`, `entity.foo = v`, `del entity.foo`) é
redirecionado para `get`/`set`/`unset` sempre que o nome não é membro da
classe, de modo que qualquer acesso externo observa a mesma semântica
de pipeline.

Decisões arquiteturais:
    - Estado privado em slots name-mangled (não enumerável via get/set)
    - Getters e setters são `HandlerRegistry` independentes por instância
    - `get_computed_props` ignora os getters: serialização e hashing usam
      valores crus (pré-pipeline)
    - `clone` reaplica os dados via `set` na nova instância (não é cópia de memória)

Invariantes:
    - `config` nunca é alterado por `set`/`unset`
    - Nenhum store compartilha referência com valores do chamador
    - Um `set` que falha no pipeline não escreve em `data`

Limites explícitos:
    - Não persiste dados
    - Não coordena concorrência (modelo single-thread)
"""

from __future__ import annotations

import io
import logging
from typing import Any, Dict, Mapping, Optional

from ..core.cloning import clone_deep
from ..core.config import load_props
from ..core.errors import InvalidPathError, InvalidPropertiesError
from ..core.hashing import compute_props_hash
from ..core.paths import get_path, has_path, set_path, unset_path
from ..core.pipeline import HandlerFn, HandlerRegistry

logger = logging.getLogger(__name__)

PRIVATE_PREFIX = "_"


def project_json_value(value: Any) -> Any:
    """
    Projeta um valor para `to_json`.

    bytes viram texto; streams com `getvalue()` são decodificados sem mover
    a posição de leitura, os demais viram None; objetos com `to_json` são
    projetados.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, io.IOBase):
        getvalue = getattr(value, "getvalue", None)
        return project_json_value(getvalue()) if callable(getvalue) else None
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    return value


def is_serializable_prop(key: Any, value: Any) -> bool:
    if isinstance(key, str) and key.startswith(PRIVATE_PREFIX):
        return False
    return not callable(value)


class Entity:
    """
    Contêiner genérico de propriedades com store de config imutável,
    overlay de dados mutável e pipelines de getters/setters.

    Construção:
        - `Entity()` ou `Entity(None)` → config vazio
        - `Entity({...})` → config é uma cópia profunda do mapeamento
        - `Entity(outra_entity)` → retorna a mesma instância (identidade)

    Raises:
        InvalidPropertiesError: se `props` não for mapeamento nem `None`.
    """

    __slots__ = ("__config", "__data", "__getters", "__setters", "__weakref__")

    def __new__(cls, props: Any = None):
        if isinstance(props, cls):
            return props
        return super().__new__(cls)

    def __init__(self, props: Optional[Mapping[str, Any]] = None) -> None:
        if props is self:
            return
        self._validate_or_throw(props)

        self.__config = clone_deep(dict(props or {}))
        self.__data = {}
        self.__getters = HandlerRegistry(stage="getter")
        self.__setters = HandlerRegistry(stage="setter")

        logger.debug("created %s with %d config key(s)", type(self).__name__, len(self.__config))

    # -----------------------------
    # Accessors
    # -----------------------------
    def get(self, path: Any, fallback: Any = None) -> Any:
        fallback = get_path(self.__config, path, fallback)
        initial = clone_deep(get_path(self.__data, path, fallback))
        return self._compute_final_getter(path, initial)

    def set(self, path: str, value: Any) -> Any:
        self._assert_path(path, "set")
        initial = clone_deep(value)
        final = self._compute_final_setter(path, initial)
        set_path(self.__data, path, final)
        return clone_deep(final)

    def unset(self, path: str) -> bool:
        self._assert_path(path, "unset")
        return unset_path(self.__data, path)

    # -----------------------------
    # Introspection
    # -----------------------------
    def get_config(self) -> Dict[str, Any]:
        return clone_deep(self.__config)

    def get_data(self) -> Dict[str, Any]:
        return clone_deep(self.__data)

    def get_computed_props(self) -> Dict[str, Any]:
        """
        Visão achatada de config e data (data vence em colisão de chave).

        O merge é raso (por chave de primeiro nível) e NÃO executa os getters.
        O resultado é uma cópia: alterá-lo nunca afeta a entidade.
        """
        return clone_deep({**self.__config, **self.__data})

    # -----------------------------
    # Pipelines
    # -----------------------------
    def define_getter(self, path: str, getter: HandlerFn) -> None:
        self.__getters.add(path, getter)

    def define_setter(self, path: str, setter: HandlerFn) -> None:
        self.__setters.add(path, setter)

    def _compute_final_getter(self, path: Any, initial: Any) -> Any:
        return self.__getters.run(path, initial, self)

    def _compute_final_setter(self, path: Any, initial: Any) -> Any:
        return self.__setters.run(path, initial, self)

    # -----------------------------
    # Serialization, cloning, hashing
    # -----------------------------
    def to_json(self) -> Dict[str, Any]:
        """
        Representação serializável das propriedades computadas.

        Regras:
            - chaves iniciadas por `_` são omitidas
            - valores chamáveis são omitidos
            - bytes viram texto (UTF-8)
            - valores com `to_json()` são projetados recursivamente
        """
        props = self.get_computed_props()
        return {
            key: project_json_value(value)
            for key, value in props.items()
            if is_serializable_prop(key, value)
        }

    def clone(self) -> "Entity":
        cloned = type(self)(self.get_config())
        logger.debug("cloning %s (%d data key(s))", type(self).__name__, len(self.__data))
        return self._add_data_entries(cloned)

    def hash(self) -> str:
        merged = self.get_computed_props()
        hash_props = {}
        for key, value in merged.items():
            sub_hash = getattr(value, "hash", None)
            hash_props[key] = sub_hash() if callable(sub_hash) else value
        return compute_props_hash(hash_props)

    def _add_data_entries(self, target: "Entity") -> "Entity":
        for key, value in self.__data.items():
            target.set(key, value)
        return target

    # -----------------------------
    # Transparent property access
    # -----------------------------
    def __getattr__(self, name: str) -> Any:
        # só é chamado quando a busca normal falha
        if name.startswith("__") or hasattr(type(self), name):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("__") or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("__") or hasattr(type(self), name):
            object.__delattr__(self, name)
        else:
            self.unset(name)

    def __contains__(self, key: Any) -> bool:
        if isinstance(key, str) and hasattr(type(self), key):
            return True
        return has_path(self.__data, key) or has_path(self.__config, key)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.get_computed_props()!r}>"

    # -----------------------------
    # Validation
    # -----------------------------
    def _validate_or_throw(self, props: Any) -> None:
        if props is not None and not isinstance(props, Mapping):
            raise InvalidPropertiesError(
                f"{type(self).__name__}: properties must be a mapping or None, "
                f"received: {type(props).__name__}"
            )

    def _assert_path(self, path: Any, operation: str) -> None:
        if not isinstance(path, str):
            raise InvalidPathError(
                f"{type(self).__name__}.{operation}: 'path' must be a string, "
                f"received: {type(path).__name__}"
            )
        if not path:
            raise InvalidPathError(f"{type(self).__name__}.{operation}: 'path' must not be empty")

    # -----------------------------
    # Factories
    # -----------------------------
    @classmethod
    def from_props(cls, props: Any = None) -> "Entity":
        return cls(props)

    @classmethod
    def from_config_files(cls, defaults_path, *local_paths) -> "Entity":
        """
        Constrói a entidade com o store de config carregado de YAML/JSON.

        Em um File, atributos de arquivo presentes nas camadas (ex.: `path`,
        `base`) são validados e roteados ao VirtualFile como na construção.
        """
        return cls(load_props(defaults_path, *local_paths))

    @staticmethod
    def is_entity(item: Any) -> bool:
        return isinstance(item, Entity)
