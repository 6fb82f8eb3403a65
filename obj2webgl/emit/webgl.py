# obj2webgl/emit/webgl.py
"""
Генерация JavaScript‑модуля для WebGL из MeshArtifact.

Результат – объект NAME с полями data / indexData и функциями
NAME.init() (создание буферов) и NAME.render(a_Position, a_Normal, a_TexCo).
Ожидается глобальный `gl` (WebGLRenderingContext).
"""

import io
import re
from typing import Optional, TextIO

from obj2webgl.mesh.artifact import MeshArtifact
from obj2webgl.utils.logger import logger

HEADER = (
    "/*\n"
    " * This file was generated using the obj2webgl tool.\n"
    " */\n\n"
)

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_INDEX_ARRAYS = {
    "uint16": ("Uint16Array", "gl.UNSIGNED_SHORT"),
    "uint32": ("Uint32Array", "gl.UNSIGNED_INT"),
}

# имя атрибута меша → (параметр render(), заголовок if‑блока)
_OPTIONAL_ATTRIBUTES = {
    "texcoord": ("a_TexCo", "if(a_TexCo!==undefined) {"),
    "normal": ("a_Normal", "if(a_Normal!==undefined){"),
}


def is_identifier(name: str) -> bool:
    return _IDENTIFIER.fullmatch(name) is not None


def _format_float(value) -> str:
    # 6 значащих цифр, как у std::ostream по умолчанию
    return format(float(value), "g")


class WebGLEmitter:
    """Пишет JS‑код для одного меша."""

    def __init__(self, artifact: MeshArtifact, name: str, header: bool = True):
        if not is_identifier(name):
            raise ValueError(f"'{name}' is not a valid JavaScript identifier")
        self.artifact = artifact
        self.name = name
        self.header = header

    # -----------------------------------------------------------------
    def _data(self) -> str:
        floats = ",".join(_format_float(v) for v in self.artifact.vertex_buffer)
        indices = ",".join(str(int(i)) for i in self.artifact.index_buffer)
        array_type, _ = _INDEX_ARRAYS[self.artifact.index_type]
        n = self.name
        return (f"const {n}={{}};"
                f"{n}.data=new Float32Array([{floats}]);"
                f"{n}.indexData=new {array_type}([{indices}]);")

    def _init(self) -> str:
        n = self.name
        return (f"{n}.init=function(){{"
                f"{n}.vbo=gl.createBuffer();"
                f"{n}.ibo=gl.createBuffer();"
                f"gl.bindBuffer(gl.ARRAY_BUFFER,{n}.vbo);"
                f"gl.bindBuffer(gl.ELEMENT_ARRAY_BUFFER,{n}.ibo);"
                f"gl.bufferData(gl.ARRAY_BUFFER,{n}.data,gl.STATIC_DRAW);"
                f"gl.bufferData(gl.ELEMENT_ARRAY_BUFFER,{n}.indexData,gl.STATIC_DRAW);"
                f"}};")

    def _render(self) -> str:
        n = self.name
        stride = self.artifact.vertex_stride_bytes
        parts = [f"{n}.render=function(a_Position,a_Normal,a_TexCo){{",
                 f"gl.bindBuffer(gl.ARRAY_BUFFER,{n}.vbo);",
                 f"gl.bindBuffer(gl.ELEMENT_ARRAY_BUFFER,{n}.ibo);",
                 f"gl.vertexAttribPointer(a_Position,3,gl.FLOAT,false,{stride},null);",
                 "gl.enableVertexAttribArray(a_Position);"]

        for attr in self.artifact.attributes():
            if attr.name not in _OPTIONAL_ATTRIBUTES:
                continue
            param, guard = _OPTIONAL_ATTRIBUTES[attr.name]
            parts.append(guard)
            parts.append(f"gl.vertexAttribPointer({param},{attr.size},gl.FLOAT,false,"
                         f"{stride},{attr.offset});")
            parts.append(f"gl.enableVertexAttribArray({param});")
            parts.append("}")

        _, gl_type = _INDEX_ARRAYS[self.artifact.index_type]
        parts.append(f"gl.drawElements(gl.TRIANGLES,{len(self.artifact.index_buffer)},{gl_type},0);")
        parts.append("};")
        return "".join(parts)

    # -----------------------------------------------------------------
    def write(self, out: TextIO) -> None:
        if self.header:
            out.write(HEADER)
        out.write(self._data())
        out.write(self._init())
        out.write(self._render())
        logger.debug(f"[Emitter] wrote '{self.name}' ({self.artifact!r})")


def emit_webgl(artifact: MeshArtifact, name: str,
               out: Optional[TextIO] = None, header: bool = True) -> str:
    """Сгенерировать код; если передан `out`, код также пишется туда."""
    buf = io.StringIO()
    WebGLEmitter(artifact, name, header).write(buf)
    code = buf.getvalue()
    if out is not None:
        out.write(code)
    return code
