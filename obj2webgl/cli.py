# obj2webgl/cli.py
"""
Командная строка: OBJ (stdin или файл) → JavaScript‑модуль для WebGL.

    obj2webgl teapot < teapot.obj > teapot.js
    obj2webgl teapot -i teapot.obj -o teapot.js --wide-indices
"""

import argparse
import sys

from obj2webgl.emit.webgl import emit_webgl, is_identifier
from obj2webgl.parser.errors import ObjParseError
from obj2webgl.utils.config import Config
from obj2webgl.utils.loader import load_mesh
from obj2webgl.utils.logger import logger, set_level
from obj2webgl.utils.profiler import Profiler


def _js_identifier(value: str) -> str:
    if not is_identifier(value):
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid JavaScript identifier")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obj2webgl",
        description="Read a Wavefront OBJ mesh and write JavaScript code that "
                    "creates and renders it with WebGL.",
    )
    parser.add_argument("name", type=_js_identifier,
                        help="name of the generated JavaScript object")
    parser.add_argument("-i", "--input", default=None,
                        help="OBJ file to read (default: stdin)")
    parser.add_argument("-o", "--output", default=None,
                        help="file to write (default: stdout)")
    parser.add_argument("--wide-indices", action="store_true", default=None,
                        help="use 32-bit indices instead of 16-bit")
    parser.add_argument("--no-header", action="store_true",
                        help="omit the generated-file comment")
    parser.add_argument("--config", default="obj2webgl.json",
                        help="JSON configuration file (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    config = Config(args.config)
    set_level("DEBUG" if args.verbose else config["log_level"])

    wide = config.wide_indices if args.wide_indices is None else args.wide_indices
    header = bool(config["emit"].get("header", True)) and not args.no_header

    try:
        with Profiler("obj2webgl") as prof:
            if args.input is None:
                # байты, если есть: битые символы заменяет декодер токенизатора
                artifact = load_mesh(getattr(sys.stdin, "buffer", sys.stdin), wide_indices=wide)
            else:
                with open(args.input, "rb") as f:
                    artifact = load_mesh(f, wide_indices=wide)

            if args.output is None:
                emit_webgl(artifact, args.name, out=sys.stdout, header=header)
            else:
                with open(args.output, "w", encoding="utf-8") as f:
                    emit_webgl(artifact, args.name, out=f, header=header)
    except ObjParseError as exc:
        logger.error(f"error parsing obj[{exc.line}]: {exc.message}")
        return 1
    except (OSError, ValueError) as exc:
        logger.error(str(exc))
        return 1

    logger.info(f"[CLI] {args.name}: {artifact!r}")
    logger.debug(f"[CLI] {args.name}: converted in {prof.elapsed_ms:.2f} ms")
    return 0
