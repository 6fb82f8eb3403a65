# obj2webgl/mesh/unifier.py
"""
Унификация вершин: каждому различному ключу (p, t, n) – свой слот в
буфере вершин, слоты раздаются в порядке первого появления начиная с 0.
"""

import numpy as np

from obj2webgl.mesh.artifact import MeshArtifact
from obj2webgl.parser.errors import ErrorKind, ObjParseError
from obj2webgl.parser.obj_data import NO_INDEX, ObjData, VertexKey
from obj2webgl.utils.logger import logger

# предел для индексов uint16
MAX_UINT16_VERTICES = 1 << 16


class VertexUnifier:
    """Дедупликация углов и упаковка чередующегося буфера."""

    def __init__(self, data: ObjData, wide_indices: bool = False):
        self.data = data
        self.wide_indices = wide_indices
        self._table: dict[VertexKey, int] = {}

    def _lookup(self, table: list, index: int, name: str, line: int):
        if index == NO_INDEX:
            return ()
        if not 0 <= index < len(table):
            raise ObjParseError(
                ErrorKind.INDEX_OUT_OF_RANGE, line,
                f"{name} index {index + 1} out of range (have {len(table)})")
        return table[index]

    def _vertex_data(self, key: VertexKey, line: int) -> list:
        p, t, n = key
        data = self.data
        # w не попадает в буфер – только x, y, z
        values = list(self._lookup(data.positions, p, "position", line)[:3])
        values.extend(self._lookup(data.texcoords, t, "texcoord", line))
        values.extend(self._lookup(data.normals, n, "normal", line))
        return values

    # -----------------------------------------------------------------
    def unify(self) -> MeshArtifact:
        corners = self.data.corners
        table = self._table
        limit = None if self.wide_indices else MAX_UINT16_VERTICES

        vertex_data = []
        index_data = []
        for i in range(len(corners)):
            key = corners.key(i)
            index = table.get(key)
            if index is None:
                index = len(table)
                if limit is not None and index >= limit:
                    raise ObjParseError(
                        ErrorKind.INDEX_OVERFLOW, corners.lines[i],
                        f"more than {limit} unique vertices do not fit 16-bit indices")
                vertex_data.extend(self._vertex_data(key, corners.lines[i]))
                table[key] = index
            index_data.append(index)

        index_dtype = np.uint32 if self.wide_indices else np.uint16
        artifact = MeshArtifact(
            vertex_buffer=np.array(vertex_data, dtype=np.float32),
            index_buffer=np.array(index_data, dtype=index_dtype),
            has_texcoord=corners.has_texcoord,
            has_normal=corners.has_normal,
            smooth=self.data.smooth,
            metadata=self.data.metadata,
        )
        logger.debug(f"[Unifier] {len(corners)} corners -> {len(table)} unique vertices")
        return artifact


def unify(data: ObjData, wide_indices: bool = False) -> MeshArtifact:
    return VertexUnifier(data, wide_indices).unify()
