# -*- coding: utf-8 -*-
"""
conftest.py – мок‑бэкенд и общие OBJ‑фикстуры.
Не требует OpenGL‑контекста, а проверяет, что Mesh → Backend вызывают
ожидаемые методы.
"""

import ctypes
from typing import Any, Optional, Sequence, Tuple
import pytest

from obj2webgl.graphics.backend import GraphicsBackend
from obj2webgl.mesh.artifact import VertexAttribute
from obj2webgl.utils.config import Config


# ----------------------------------------------------------------------
# MockBackend – полностью реализует интерфейс GraphicsBackend.
# ----------------------------------------------------------------------
class MockBackend(GraphicsBackend):
    """
    Минимальная имитация GL‑бэкенда.
    Каждый метод только записывает вызов в `self.calls`.
    """

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: list[Tuple[str, Tuple[Any, ...], dict]] = []
        # Список ресурсов – чтобы видеть, что освобождено
        self._resources: list[Any] = []
        self.released: list[Any] = []

    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]

    # -----------------------------------------------------------------
    def create_buffer(self, data: bytes, usage: str = "vertex") -> Any:
        self._record("create_buffer", data, usage)
        ptr = ctypes.c_void_p(0xB0B0 + len(self._resources))
        self._resources.append(ptr)
        return ptr

    def set_vertex_buffers(self, vb: Any, ib: Optional[Any] = None) -> None:
        self._record("set_vertex_buffers", vb, ib)

    def set_vertex_layout(self, stride: int, attributes: Sequence[VertexAttribute]) -> None:
        self._record("set_vertex_layout", stride, list(attributes))

    def draw_indexed(self, index_count: int, index_type: str = "uint16") -> None:
        self._record("draw_indexed", index_count, index_type)

    def release(self, buffer: Any) -> None:
        self._record("release", buffer)
        self.released.append(buffer)


# ----------------------------------------------------------------------
# Фикстуры
# ----------------------------------------------------------------------
@pytest.fixture
def backend() -> MockBackend:
    return MockBackend()


@pytest.fixture(autouse=True)
def _fresh_config():
    """Config – синглтон, между тестами его нужно сбрасывать."""
    Config.reset()
    yield
    Config.reset()


CUBE_OBJ = """\
# cube with texcoords and normals
mtllib cube.mtl
o Cube
v 1.000000 -1.000000 -1.000000
v 1.000000 -1.000000 1.000000
v -1.000000 -1.000000 1.000000
v -1.000000 -1.000000 -1.000000
v 1.000000 1.000000 -0.999999
v 0.999999 1.000000 1.000001
v -1.000000 1.000000 1.000000
v -1.000000 1.000000 -1.000000
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
vn 0.0 -1.0 0.0
vn 0.0 1.0 0.0
vn 1.0 0.0 0.0
vn -0.0 -0.0 1.0
vn -1.0 -0.0 -0.0
vn 0.0 0.0 -1.0
usemtl Material
s off
f 1/1/1 2/2/1 3/3/1 4/4/1
f 5/1/2 8/2/2 7/3/2 6/4/2
f 1/1/3 5/2/3 6/3/3 2/4/3
f 2/1/4 6/2/4 7/3/4 3/4/4
f 3/1/5 7/2/5 8/3/5 4/4/5
f 5/1/6 1/2/6 4/3/6 8/4/6
"""


@pytest.fixture
def cube_obj() -> str:
    return CUBE_OBJ
