"""
Абстрактный интерфейс для графических бекендов.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from obj2webgl.mesh.artifact import VertexAttribute


class GraphicsBackend(ABC):
    """Base interface for graphics backends."""

    @abstractmethod
    def create_buffer(self, data: bytes, usage: str = "vertex") -> Any:
        pass

    @abstractmethod
    def set_vertex_buffers(self, vb: Any, ib: Optional[Any] = None) -> None:
        pass

    @abstractmethod
    def set_vertex_layout(self, stride: int, attributes: Sequence[VertexAttribute]) -> None:
        pass

    @abstractmethod
    def draw_indexed(self, index_count: int, index_type: str = "uint16") -> None:
        pass

    @abstractmethod
    def release(self, buffer: Any) -> None:
        pass
