# src/pipeline_entities/entities/__init__.py
"""
Entidades do pipeline.

    - Entity       → contêiner genérico com stores config/data e pipelines
    - File         → Entity especializada com um VirtualFile possuído
    - VirtualFile  → valor de arquivo virtual com atributos derivados ao vivo
"""

from .entity import Entity
from .file import File
from .schema import validate_file_props
from .vfile import VirtualFile

__all__ = ["Entity", "File", "VirtualFile", "validate_file_props"]
