"""Scalar kinds understood by the typed accessor."""

from __future__ import annotations

import struct
from enum import Enum

from .errors import ConversionError


# ---------------------------------------------------------------------------
# ScalarKind
# ---------------------------------------------------------------------------

class ScalarKind(Enum):
    """Closed set of target types; values are the names used in zc type hints."""

    Bool = "bool"
    Byte = "byte"
    SByte = "sbyte"
    Short = "short"
    UShort = "ushort"
    Int = "int"
    UInt = "uint"
    Long = "long"
    ULong = "ulong"
    NInt = "nint"
    NUInt = "nuint"
    Float = "float"
    Double = "double"
    Decimal = "decimal"
    Char = "char"
    String = "string"

    @classmethod
    def from_name(cls, name: str) -> ScalarKind:
        """Resolve a type-hint name such as ``"int"`` to a kind."""
        key = name.strip()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            raise ConversionError(f"Unknown scalar kind {name!r}", kind=name) from None


_ALIASES: dict[str, ScalarKind] = {
    "object": ScalarKind.String,
}


# ---------------------------------------------------------------------------
# Integer ranges
# ---------------------------------------------------------------------------

_POINTER_BITS = struct.calcsize("P") * 8


def _signed(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _unsigned(bits: int) -> tuple[int, int]:
    return 0, (1 << bits) - 1


INTEGER_RANGES: dict[ScalarKind, tuple[int, int]] = {
    ScalarKind.Byte: _unsigned(8),
    ScalarKind.SByte: _signed(8),
    ScalarKind.Short: _signed(16),
    ScalarKind.UShort: _unsigned(16),
    ScalarKind.Int: _signed(32),
    ScalarKind.UInt: _unsigned(32),
    ScalarKind.Long: _signed(64),
    ScalarKind.ULong: _unsigned(64),
    ScalarKind.NInt: _signed(_POINTER_BITS),
    ScalarKind.NUInt: _unsigned(_POINTER_BITS),
}
