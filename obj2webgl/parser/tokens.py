# obj2webgl/parser/tokens.py
"""
Типы токенов OBJ‑лексера и таблица ключевых слов.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    COMMENT = auto()
    VERTEX = auto()
    NORMAL = auto()
    TEXCOORD = auto()
    FACE = auto()
    USE_MATERIAL = auto()
    MATERIAL_LIB = auto()
    OBJECT = auto()
    GROUP = auto()
    SHADE = auto()
    INDEX_SEPARATOR = auto()
    NUMBER = auto()
    STRING = auto()
    END_OF_LINE = auto()
    END_OF_FILE = auto()
    ON = auto()
    OFF = auto()
    UNKNOWN = auto()


KEYWORDS = {
    "v": TokenType.VERTEX,
    "vn": TokenType.NORMAL,
    "vt": TokenType.TEXCOORD,
    "f": TokenType.FACE,
    "usemtl": TokenType.USE_MATERIAL,
    "mtllib": TokenType.MATERIAL_LIB,
    "o": TokenType.OBJECT,
    "g": TokenType.GROUP,
    "s": TokenType.SHADE,
    "on": TokenType.ON,
    "off": TokenType.OFF,
}


@dataclass(frozen=True)
class Token:
    """Токен: тип, исходный текст (для NUMBER/STRING/UNKNOWN/COMMENT) и строка."""
    type: TokenType
    text: str = ""
    line: int = 1

    def __repr__(self) -> str:
        if self.text:
            return f"Token({self.type.name}, {self.text!r}, line={self.line})"
        return f"Token({self.type.name}, line={self.line})"
