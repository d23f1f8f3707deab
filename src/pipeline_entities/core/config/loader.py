# src/pipeline_entities/core/config/loader.py
"""
Loader de props de configuração de entidades.

Este módulo resolve, a partir de arquivos, o mapeamento usado como store
de config (imutável) de uma Entity:

    defaults (obrigatório) → local_1 → local_2 → ... (opcionais, em ordem)

Cada camada é um documento YAML (`.yaml`/`.yml`) ou JSON (`.json`) cuja
raiz é um mapeamento. As camadas são combinadas por `merge_layers`.

Decisões arquiteturais:
    - O parser é escolhido pela extensão (tabela `_PARSERS`)
    - Documento vazio equivale a `{}`
    - Camadas locais ausentes (ou `None`) são ignoradas

Invariantes:
    - O resultado é sempre um `dict` novo
    - Nenhum resultado parcial é retornado em caso de erro

Limites explícitos:
    - Não valida schema de File (responsabilidade de `entities.schema`)
    - Não constrói entidades (ver `Entity.from_config_files`)
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import merge_layers

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _read_layer(path: Path) -> Dict[str, Any]:
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: '{path.suffix}' ({path}); "
            f"use um de {sorted(_PARSERS)}"
        )

    text = path.read_text(encoding="utf-8")
    data = parser(text) if text.strip() else None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Raiz de {path} deve ser um mapeamento, recebido: {type(data).__name__}"
        )
    return data


def load_props(defaults_path: PathLike, *local_paths: Optional[PathLike]) -> Dict[str, Any]:
    """
    Carrega e resolve as props de configuração de uma entidade.

    Args:
        defaults_path: arquivo base (obrigatório).
        *local_paths: overrides locais, aplicados em ordem; ausentes são ignorados.

    Raises:
        DefaultsNotFoundError: se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: extensão não suportada.
        InvalidConfigRootTypeError: raiz do documento não é um mapeamento.
        ConfigTypeConflictError: conflito estrutural entre camadas.
    """
    defaults_file = Path(defaults_path)
    if not defaults_file.is_file():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {defaults_file}")

    layers = [_read_layer(defaults_file)]
    logger.debug("loaded config defaults from %s (%d keys)", defaults_file, len(layers[0]))

    for local_path in local_paths:
        if local_path is None:
            continue
        local_file = Path(local_path)
        if not local_file.is_file():
            logger.debug("skipping missing config layer %s", local_file)
            continue
        layers.append(_read_layer(local_file))
        logger.debug("loaded config layer from %s", local_file)

    return merge_layers(layers)
