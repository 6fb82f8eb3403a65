"""
obj2webgl – конвертер Wavefront OBJ в индексированный меш, готовый для GPU,
и генератор JavaScript‑кода для WebGL.
"""

from obj2webgl.utils import logger
from obj2webgl.parser import ObjParser, ObjParseError, ErrorKind, parse_obj
from obj2webgl.mesh import MeshArtifact, Mesh, VertexUnifier, unify
from obj2webgl.emit import WebGLEmitter, emit_webgl
from obj2webgl.utils.loader import load_mesh, load_obj

__version__ = "1.0.0"

__all__ = [
    "ObjParser",
    "ObjParseError",
    "ErrorKind",
    "parse_obj",
    "MeshArtifact",
    "Mesh",
    "VertexUnifier",
    "unify",
    "WebGLEmitter",
    "emit_webgl",
    "load_mesh",
    "load_obj",
]
