"""``zoconfig`` command: print the contents of a zc file.

Also runnable as ``python -m zoconfig``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .accessor import convert
from .document import Document, ZObject
from .errors import ZoconfigError
from .loader import load

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: object) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _fmt_object(name: str, obj: ZObject) -> str:
    if not obj:
        return f"[{name}] {{}}"
    width = max(len(k) for k in obj)
    lines = [f"[{name}] {{"]
    for key, value in obj.items():
        lines.append(f"  {key:<{width}} : {_fmt_inline(value)}")
    lines.append("}")
    return "\n".join(lines)


def _show_document(doc: Document, dest: IO[str]) -> None:
    """Print every object of *doc*."""
    if not doc:
        print("  (no objects declared)", file=dest)
        return
    for name, obj in doc.items():
        print(_fmt_object(name, obj), file=dest)


def _show_value(doc: Document, name: str, key: str, kind: str | None, dest: IO[str]) -> None:
    """Print ``doc[name][key]``, converted to *kind* when given."""
    if name not in doc:
        raise ZoconfigError(f"No object named [{name}]")
    obj = doc[name]
    if key not in obj:
        raise ZoconfigError(f"No key [{key}] in [{name}]")
    if kind is None:
        print(obj[key], file=dest)
        return
    print(_fmt_inline(convert(obj[key], kind)), file=dest)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zoconfig", description="Print the contents of a zc file")
    parser.add_argument("path", help="Path to a *.zc file")
    parser.add_argument(
        "--get", nargs=2, metavar=("OBJECT", "KEY"), help="Print a single value"
    )
    parser.add_argument(
        "--as", dest="kind", metavar="KIND", help="Convert the --get value (int, float, bool ...)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.kind and not args.get:
        parser.error("--as requires --get")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    out: IO[str] = dest if dest is not None else sys.stdout

    try:
        doc = load(args.path)
        if args.get:
            _show_value(doc, args.get[0], args.get[1], args.kind, out)
        else:
            _show_document(doc, out)
    except ZoconfigError as exc:
        logger.debug("command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
