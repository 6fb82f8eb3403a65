# -*- coding: utf-8 -*-
"""
Построчный парсер подмножества Wavefront OBJ:
v, vn, vt, f, usemtl, mtllib, o, g, s и комментарии.

Каждая строка разбирается по типу первого токена (Directive); неизвестные
директивы (l, vp, curv, …) молча пропускаются до конца строки. Любая
ошибка фатальна – ObjParseError с номером строки, частичный результат
не возвращается.
"""

from enum import Enum, auto

from obj2webgl.mesh.triangulate import triangulate_face
from obj2webgl.parser.errors import ErrorKind, ObjParseError
from obj2webgl.parser.obj_data import Face, ObjData
from obj2webgl.parser.tokenizer import TokenStream
from obj2webgl.parser.tokens import Token, TokenType
from obj2webgl.utils.logger import logger

# значение по умолчанию для w в `v x y z` (так делал исходный obj2webgl)
DEFAULT_W = 0.0
DEFAULT_V = 0.0


class Directive(Enum):
    BLANK = auto()
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
    UNKNOWN = auto()


DIRECTIVES = {
    TokenType.END_OF_LINE: Directive.BLANK,
    TokenType.END_OF_FILE: Directive.BLANK,
    TokenType.COMMENT: Directive.COMMENT,
    TokenType.VERTEX: Directive.VERTEX,
    TokenType.NORMAL: Directive.NORMAL,
    TokenType.TEXCOORD: Directive.TEXCOORD,
    TokenType.FACE: Directive.FACE,
    TokenType.USE_MATERIAL: Directive.USE_MATERIAL,
    TokenType.MATERIAL_LIB: Directive.MATERIAL_LIB,
    TokenType.OBJECT: Directive.OBJECT,
    TokenType.GROUP: Directive.GROUP,
    TokenType.SHADE: Directive.SHADE,
}

LINE_END = (TokenType.END_OF_LINE, TokenType.END_OF_FILE)


class ObjParser:
    """Разбирает один поток; экземпляр одноразовый."""

    def __init__(self, source):
        self._stream = TokenStream(source)
        self.data = ObjData()
        self._handlers = {
            Directive.BLANK: lambda: None,
            Directive.COMMENT: self._stream.advance,
            Directive.VERTEX: self._parse_vertex,
            Directive.NORMAL: self._parse_normal,
            Directive.TEXCOORD: self._parse_texcoord,
            Directive.FACE: self._parse_face,
            Directive.USE_MATERIAL: lambda: self._parse_name(self.data.metadata.materials),
            Directive.MATERIAL_LIB: lambda: self._parse_name(self.data.metadata.material_libs),
            Directive.OBJECT: lambda: self._parse_name(self.data.metadata.objects),
            Directive.GROUP: lambda: self._parse_name(self.data.metadata.groups),
            Directive.SHADE: self._parse_shade,
            Directive.UNKNOWN: self._skip_line,
        }

    # -----------------------------------------------------------------
    def parse(self) -> ObjData:
        stream = self._stream
        while True:
            directive = DIRECTIVES.get(stream.current.type, Directive.UNKNOWN)
            self._handlers[directive]()
            if stream.accept(TokenType.END_OF_LINE) is None:
                stream.expect(TokenType.END_OF_FILE)
                break

        data = self.data
        logger.debug(
            f"[Parser] {len(data.positions)} positions, {len(data.texcoords)} texcoords, "
            f"{len(data.normals)} normals, {data.corners.triangle_count} triangles"
        )
        return data

    # -----------------------------------------------------------------
    # операнды
    # -----------------------------------------------------------------
    @staticmethod
    def _to_float(token: Token) -> float:
        try:
            return float(token.text)
        except ValueError:
            raise ObjParseError(ErrorKind.MALFORMED_NUMBER, token.line,
                                f"malformed number '{token.text}'") from None

    @staticmethod
    def _to_index(token: Token) -> int:
        """1‑based индекс из файла → 0‑based."""
        try:
            value = int(token.text)
        except ValueError:
            raise ObjParseError(ErrorKind.MALFORMED_NUMBER, token.line,
                                f"malformed index '{token.text}'") from None
        if value < 1:
            raise ObjParseError(ErrorKind.INDEX_OUT_OF_RANGE, token.line,
                                f"index {value} is not supported (indices start at 1)")
        return value - 1

    def _number(self) -> float:
        return self._to_float(self._stream.expect(TokenType.NUMBER))

    def _optional_number(self, default: float) -> float:
        token = self._stream.accept(TokenType.NUMBER)
        return default if token is None else self._to_float(token)

    # -----------------------------------------------------------------
    # директивы
    # -----------------------------------------------------------------
    def _parse_vertex(self):
        self._stream.advance()
        x, y, z = self._number(), self._number(), self._number()
        w = self._optional_number(DEFAULT_W)
        self.data.positions.append((x, y, z, w))

    def _parse_normal(self):
        self._stream.advance()
        self.data.normals.append((self._number(), self._number(), self._number()))

    def _parse_texcoord(self):
        self._stream.advance()
        u = self._number()
        v = self._optional_number(DEFAULT_V)
        self.data.texcoords.append((u, v))

    def _parse_face(self):
        stream = self._stream
        face = Face(line=stream.advance().line)

        while stream.current.type is TokenType.NUMBER:
            p = self._to_index(stream.advance())
            t = n = None
            if stream.accept(TokenType.INDEX_SEPARATOR):
                if stream.current.type is TokenType.NUMBER:
                    t = self._to_index(stream.advance())
                if stream.accept(TokenType.INDEX_SEPARATOR):
                    if stream.current.type is TokenType.NUMBER:
                        n = self._to_index(stream.advance())
            face.add_corner(p, t, n)

        self._check_channels(face)
        if len(face) < 3:
            logger.warning(f"[Parser] line {face.line}: face with {len(face)} corner(s) skipped")
            return
        triangulate_face(face, self.data.corners)

    def _check_channels(self, face: Face):
        for name, indices in (("texcoord", face.texcoords), ("normal", face.normals)):
            if indices and len(indices) != len(face):
                raise ObjParseError(
                    ErrorKind.INVALID_FACE_CHANNEL_MISMATCH, face.line,
                    f"{len(indices)} of {len(face)} face corners have a {name} index")

        # один чередующийся буфер на весь файл – наборы каналов должны совпадать
        corners = self.data.corners
        if len(corners) and len(face) >= 3:
            if (corners.has_texcoord != bool(face.texcoords)
                    or corners.has_normal != bool(face.normals)):
                raise ObjParseError(
                    ErrorKind.INVALID_FACE_CHANNEL_MISMATCH, face.line,
                    "face attribute channels differ from previous faces")

    def _parse_name(self, target: list):
        self._stream.read_line_as_string()
        target.append(self._stream.expect(TokenType.STRING).text)

    def _parse_shade(self):
        stream = self._stream
        stream.advance()
        token = stream.accept(TokenType.NUMBER)
        if token is not None:
            if token.text == "1":
                self.data.smooth = True
            else:
                logger.warning(f"[Parser] line {token.line}: unknown shade type '{token.text}'")
        elif stream.accept(TokenType.ON):
            self.data.smooth = True
        else:
            stream.expect(TokenType.OFF)
            self.data.smooth = False

    def _skip_line(self):
        stream = self._stream
        while stream.current.type not in LINE_END:
            stream.advance()


def parse_obj(source) -> ObjData:
    """Разобрать OBJ из строки, bytes или файлового объекта."""
    return ObjParser(source).parse()
