"""
OpenGL‑бэкенд (PyOpenGL). Требует активный GL‑контекст.
"""

import ctypes
from typing import Any, Optional, Sequence

from OpenGL import GL

from obj2webgl.graphics.backend import GraphicsBackend
from obj2webgl.mesh.artifact import VertexAttribute
from obj2webgl.utils.logger import gl_check_error

_TARGETS = {
    "vertex": GL.GL_ARRAY_BUFFER,
    "index": GL.GL_ELEMENT_ARRAY_BUFFER,
}

_INDEX_TYPES = {
    "uint16": GL.GL_UNSIGNED_SHORT,
    "uint32": GL.GL_UNSIGNED_INT,
}


class GLBackend(GraphicsBackend):
    """Загрузка буферов и отрисовка через чистый OpenGL."""

    def create_buffer(self, data: bytes, usage: str = "vertex") -> Any:
        target = _TARGETS[usage]
        buf = GL.glGenBuffers(1)
        GL.glBindBuffer(target, buf)
        GL.glBufferData(target, len(data), data, GL.GL_STATIC_DRAW)
        gl_check_error(f"create_buffer({usage})")
        return buf

    def set_vertex_buffers(self, vb: Any, ib: Optional[Any] = None) -> None:
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, vb)
        if ib is not None:
            GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, ib)

    def set_vertex_layout(self, stride: int, attributes: Sequence[VertexAttribute]) -> None:
        for attr in attributes:
            GL.glEnableVertexAttribArray(attr.location)
            GL.glVertexAttribPointer(attr.location, attr.size, GL.GL_FLOAT, False,
                                     stride, ctypes.c_void_p(attr.offset))
        gl_check_error("set_vertex_layout")

    def draw_indexed(self, index_count: int, index_type: str = "uint16") -> None:
        GL.glDrawElements(GL.GL_TRIANGLES, index_count, _INDEX_TYPES[index_type], None)
        gl_check_error("draw_indexed")

    def release(self, buffer: Any) -> None:
        GL.glDeleteBuffers(1, [buffer])
