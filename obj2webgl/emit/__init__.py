"""
Пакет emit – сериализация MeshArtifact в код для хост‑API.
"""

from obj2webgl.emit.webgl import WebGLEmitter, emit_webgl, is_identifier

__all__ = ["WebGLEmitter", "emit_webgl", "is_identifier"]
