"""
Graphics package: абстрактный бэкенд. GLBackend импортируется явно
(`from obj2webgl.graphics.gl_backend import GLBackend`) – ему нужен PyOpenGL.
"""

from obj2webgl.graphics.backend import GraphicsBackend

__all__ = ["GraphicsBackend"]
