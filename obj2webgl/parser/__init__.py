"""
Пакет parser – лексер и построчный парсер Wavefront OBJ.
"""

from obj2webgl.parser.errors import ErrorKind, ObjParseError
from obj2webgl.parser.tokens import Token, TokenType
from obj2webgl.parser.tokenizer import Tokenizer, TokenStream
from obj2webgl.parser.obj_data import ObjData, ObjMetadata, FaceCorners, Face
from obj2webgl.parser.obj_parser import ObjParser, Directive, parse_obj

__all__ = ["ErrorKind", "ObjParseError", "Token", "TokenType", "Tokenizer",
           "TokenStream", "ObjData", "ObjMetadata", "FaceCorners", "Face",
           "ObjParser", "Directive", "parse_obj"]
