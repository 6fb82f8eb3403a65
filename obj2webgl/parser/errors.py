# obj2webgl/parser/errors.py
"""
Ошибки разбора OBJ. Любая из них фатальна: частичный меш не возвращается.
"""

from enum import Enum


class ErrorKind(Enum):
    UNEXPECTED_TOKEN = "unexpected token"
    INVALID_FACE_CHANNEL_MISMATCH = "face channel mismatch"
    MALFORMED_NUMBER = "malformed number"
    INDEX_OVERFLOW = "index overflow"
    INDEX_OUT_OF_RANGE = "index out of range"


class ObjParseError(ValueError):
    """Ошибка разбора с номером строки исходного файла."""

    def __init__(self, kind: ErrorKind, line: int, message: str):
        self.kind = kind
        self.line = line
        self.message = message
        super().__init__(f"line {line}: {message}")
