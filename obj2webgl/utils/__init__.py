# obj2webgl/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – готовый объект logging.Logger (с level INFO)
    * gl_check_error – вспомогательная функция, проверяющая GL‑ошибки
    * Profiler    – замер времени блока кода
"""

from .logger import logger, gl_check_error, set_level
from .profiler import Profiler

__all__ = ["logger", "gl_check_error", "set_level", "Profiler"]
