# -*- coding: utf-8 -*-
"""
Загрузка OBJ целиком: разбор → триангуляция → унификация вершин.
"""

from pathlib import Path

from obj2webgl.mesh.artifact import MeshArtifact
from obj2webgl.mesh.unifier import unify
from obj2webgl.parser.obj_parser import parse_obj
from obj2webgl.utils.logger import logger
from obj2webgl.utils.profiler import Profiler


def load_mesh(source, wide_indices: bool = False) -> MeshArtifact:
    """Строка, bytes или файловый объект → MeshArtifact."""
    with Profiler("load_mesh"):
        data = parse_obj(source)
        return unify(data, wide_indices=wide_indices)


def load_obj(path, wide_indices: bool = False) -> MeshArtifact:
    """Прочитать OBJ‑файл с диска."""
    path = Path(path)
    with path.open("rb") as f:
        artifact = load_mesh(f, wide_indices=wide_indices)
    logger.info(f"[Loader] {path.name}: {artifact!r}")
    return artifact
