"""zoconfig — parser and typed accessor for zc configuration files."""

from .accessor import convert, default_for
from .document import Document, ZObject
from .errors import ConversionError, MalformedConfigError, SourceUnavailableError, ZoconfigError
from .kinds import ScalarKind
from .loader import load, load_async, read_source
from .parser import parse

__all__ = [
    "parse",
    "load",
    "load_async",
    "read_source",
    "convert",
    "default_for",
    "Document",
    "ZObject",
    "ScalarKind",
    "ZoconfigError",
    "MalformedConfigError",
    "SourceUnavailableError",
    "ConversionError",
]
