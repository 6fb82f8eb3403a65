# obj2webgl/mesh/artifact.py
"""
Готовый к загрузке в GPU меш: чередующийся буфер вершин (float32)
и буфер индексов треугольников (uint16, либо uint32 по запросу).

Порядок каналов фиксирован: position(3), texcoord(2)?, normal(3)?
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from obj2webgl.parser.obj_data import ObjMetadata

FLOAT_SIZE = 4

# стандартные location‑ы атрибутов в шейдере
ATTRIBUTE_LOCATIONS = {"position": 0, "normal": 1, "texcoord": 2}


@dataclass(frozen=True)
class VertexAttribute:
    name: str
    size: int       # компонент float32
    offset: int     # байт от начала вершины
    location: int


@dataclass(frozen=True, eq=False)
class MeshArtifact:
    """Неизменяемый результат: массивы помечены только для чтения."""
    vertex_buffer: np.ndarray
    index_buffer: np.ndarray
    has_texcoord: bool
    has_normal: bool
    smooth: bool = False
    metadata: ObjMetadata = field(default_factory=ObjMetadata)

    def __post_init__(self):
        self.vertex_buffer.setflags(write=False)
        self.index_buffer.setflags(write=False)

    # -----------------------------------------------------------------
    @property
    def floats_per_vertex(self) -> int:
        return 3 + (2 if self.has_texcoord else 0) + (3 if self.has_normal else 0)

    @property
    def vertex_stride_bytes(self) -> int:
        return self.floats_per_vertex * FLOAT_SIZE

    @property
    def vertex_count(self) -> int:
        return len(self.vertex_buffer) // self.floats_per_vertex

    @property
    def triangle_count(self) -> int:
        return len(self.index_buffer) // 3

    @property
    def index_type(self) -> str:
        """"uint16" или "uint32"."""
        return self.index_buffer.dtype.name

    # -----------------------------------------------------------------
    def attributes(self) -> List[VertexAttribute]:
        """Раскладка каналов внутри одной вершины."""
        layout = [("position", 3, True),
                  ("texcoord", 2, self.has_texcoord),
                  ("normal", 3, self.has_normal)]
        attrs = []
        offset = 0
        for name, size, present in layout:
            if not present:
                continue
            attrs.append(VertexAttribute(name, size, offset, ATTRIBUTE_LOCATIONS[name]))
            offset += size * FLOAT_SIZE
        return attrs

    def vertices(self) -> np.ndarray:
        """Вершины как матрица (vertex_count, floats_per_vertex)."""
        return self.vertex_buffer.reshape((-1, self.floats_per_vertex))

    def __repr__(self) -> str:
        return (f"MeshArtifact(vertices={self.vertex_count}, triangles={self.triangle_count}, "
                f"texcoord={self.has_texcoord}, normal={self.has_normal}, "
                f"index_type={self.index_type})")
