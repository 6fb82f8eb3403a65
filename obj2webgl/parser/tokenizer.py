# obj2webgl/parser/tokenizer.py
"""
Лексер Wavefront OBJ.

Символы читаются последовательно (кусками по CHUNK_SIZE) из строки,
bytes или файлового объекта; токены выдаются лениво, по одному.
`TokenStream` держит ровно один текущий токен – парсеру больше не нужно.
"""

import codecs
import io
from typing import Iterator, Optional

from obj2webgl.parser.errors import ErrorKind, ObjParseError
from obj2webgl.parser.tokens import KEYWORDS, Token, TokenType

DIGITS = frozenset("0123456789")
NUMBER_CHARS = DIGITS | frozenset(".eE")
NEWLINES = "\r\n"


class CharReader:
    """Источник символов с одним символом заглядывания вперёд."""

    CHUNK_SIZE = 64 * 1024

    def __init__(self, source):
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        self._stream = source
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buf = ""
        self._pos = 0
        self._eof = False

    def _fill(self) -> bool:
        while self._pos >= len(self._buf):
            if self._eof:
                return False
            chunk = self._stream.read(self.CHUNK_SIZE)
            if isinstance(chunk, (bytes, bytearray)):
                text = self._decoder.decode(chunk, final=not chunk)
            else:
                text = chunk
            if not chunk:
                self._eof = True
            self._buf = text
            self._pos = 0
        return True

    def peek(self) -> str:
        """Следующий символ без извлечения ("" в конце потока)."""
        if not self._fill():
            return ""
        return self._buf[self._pos]

    def get(self) -> str:
        """Извлечь следующий символ ("" в конце потока)."""
        if not self._fill():
            return ""
        c = self._buf[self._pos]
        self._pos += 1
        return c


class Tokenizer:
    """Превращает поток символов в поток токенов OBJ."""

    def __init__(self, source):
        self._reader = CharReader(source)
        self.line = 1

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            yield token
            if token.type is TokenType.END_OF_FILE:
                return

    # -----------------------------------------------------------------
    def _skip_blanks(self) -> str:
        c = self._reader.get()
        while c and c.isspace() and c not in NEWLINES:
            c = self._reader.get()
        return c

    def _read_until_newline(self) -> str:
        chars = []
        while self._reader.peek() not in ("", "\n", "\r"):
            chars.append(self._reader.get())
        return "".join(chars)

    # -----------------------------------------------------------------
    def next(self) -> Token:
        """Прочитать следующий токен."""
        reader = self._reader
        c = self._skip_blanks()
        line = self.line

        if not c:
            return Token(TokenType.END_OF_FILE, line=line)

        if c in NEWLINES:
            # CRLF и LFCR – один перевод строки
            pair = "\n" if c == "\r" else "\r"
            if reader.peek() == pair:
                reader.get()
            self.line += 1
            return Token(TokenType.END_OF_LINE, line=line)

        if c.isalpha():
            chars = [c]
            while reader.peek().isalnum():
                chars.append(reader.get())
            word = "".join(chars)
            kind = KEYWORDS.get(word, TokenType.UNKNOWN)
            return Token(kind, word, line)

        if c in DIGITS or c == "-":
            chars = [c]
            while True:
                nc = reader.peek()
                if nc in NUMBER_CHARS:
                    chars.append(reader.get())
                elif nc in ("+", "-") and chars[-1] in "eE":
                    # знак экспоненты: 1.5e-05
                    chars.append(reader.get())
                else:
                    break
            return Token(TokenType.NUMBER, "".join(chars), line)

        if c == "#":
            return Token(TokenType.COMMENT, c + self._read_until_newline(), line)

        if c == "/":
            return Token(TokenType.INDEX_SEPARATOR, c, line)

        return Token(TokenType.UNKNOWN, c, line)

    def read_line_as_string(self) -> Token:
        """Остаток строки целиком как STRING (имена материалов, пути, ...)."""
        line = self.line
        return Token(TokenType.STRING, self._read_until_newline().strip(), line)


class TokenStream:
    """Итератор токенов с одним текущим токеном: current / advance()."""

    def __init__(self, source):
        self._tokenizer = Tokenizer(source)
        self.current = self._tokenizer.next()

    @property
    def line(self) -> int:
        return self.current.line

    def advance(self) -> Token:
        """Вернуть текущий токен и перейти к следующему."""
        token = self.current
        self.current = self._tokenizer.next()
        return token

    def accept(self, kind: TokenType) -> Optional[Token]:
        if self.current.type is kind:
            return self.advance()
        return None

    def expect(self, kind: TokenType) -> Token:
        token = self.accept(kind)
        if token is None:
            raise ObjParseError(
                ErrorKind.UNEXPECTED_TOKEN,
                self.current.line,
                f"expected '{kind.name}' got '{self.current.type.name}'",
            )
        return token

    def read_line_as_string(self) -> Token:
        """Заменить текущий токен остатком строки (тип STRING)."""
        self.current = self._tokenizer.read_line_as_string()
        return self.current
