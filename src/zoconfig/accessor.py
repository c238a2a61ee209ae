"""Typed accessor: interpret stored raw text as a scalar kind on demand."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import ConversionError
from .kinds import INTEGER_RANGES, ScalarKind

_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_REAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_SPECIAL_FLOATS = {
    "nan": math.nan,
    "+nan": math.nan,
    "-nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
}
_DECIMAL_MAX = Decimal(2 ** 96 - 1)
# Smallest magnitude that rounds to infinity in single precision
_SINGLE_OVERFLOW = 2.0 ** 128 - 2.0 ** 103


# ---------------------------------------------------------------------------
# Per-kind converters
# ---------------------------------------------------------------------------

def _fail(raw: str, kind: ScalarKind, reason: str = "malformed") -> ConversionError:
    return ConversionError(
        f"Cannot convert {raw!r} to {kind.value}: {reason}", raw=raw, kind=kind
    )


def _to_bool(raw: str, kind: ScalarKind) -> bool:
    token = raw.strip().lower()
    if token == "true":
        return True
    if token == "false":
        return False
    raise _fail(raw, kind)


def _to_integer(raw: str, kind: ScalarKind) -> int:
    text = raw.strip()
    if not _INTEGER_RE.match(text):
        raise _fail(raw, kind)
    value = int(text)
    low, high = INTEGER_RANGES[kind]
    if not low <= value <= high:
        raise _fail(raw, kind, f"out of range [{low}, {high}]")
    return value


def _to_double(raw: str, kind: ScalarKind) -> float:
    text = raw.strip()
    if text.lower() in _SPECIAL_FLOATS:
        return _SPECIAL_FLOATS[text.lower()]
    if not _REAL_RE.match(text):
        raise _fail(raw, kind)
    value = float(text)
    if math.isinf(value):
        raise _fail(raw, kind, "out of range")
    return value


def _to_single(raw: str, kind: ScalarKind) -> float:
    value = _to_double(raw, kind)
    if math.isfinite(value) and abs(value) >= _SINGLE_OVERFLOW:
        raise _fail(raw, kind, "out of range for single precision")
    result = struct.unpack("f", struct.pack("f", value))[0]
    if math.isinf(result) and not math.isinf(value):
        raise _fail(raw, kind, "out of range for single precision")
    return result


def _to_decimal(raw: str, kind: ScalarKind) -> Decimal:
    text = raw.strip()
    if not _REAL_RE.match(text):
        raise _fail(raw, kind)
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise _fail(raw, kind) from None
    if abs(value) > _DECIMAL_MAX:
        raise _fail(raw, kind, "out of range")
    return value


def _to_char(raw: str, kind: ScalarKind) -> str:
    if len(raw) != 1:
        raise _fail(raw, kind, "expected exactly one character")
    return raw


def _to_string(raw: str, kind: ScalarKind) -> str:
    return raw


_CONVERTERS: dict[ScalarKind, Callable[[str, ScalarKind], Any]] = {
    ScalarKind.Bool: _to_bool,
    ScalarKind.Byte: _to_integer,
    ScalarKind.SByte: _to_integer,
    ScalarKind.Short: _to_integer,
    ScalarKind.UShort: _to_integer,
    ScalarKind.Int: _to_integer,
    ScalarKind.UInt: _to_integer,
    ScalarKind.Long: _to_integer,
    ScalarKind.ULong: _to_integer,
    ScalarKind.NInt: _to_integer,
    ScalarKind.NUInt: _to_integer,
    ScalarKind.Float: _to_single,
    ScalarKind.Double: _to_double,
    ScalarKind.Decimal: _to_decimal,
    ScalarKind.Char: _to_char,
    ScalarKind.String: _to_string,
}

_DEFAULTS: dict[ScalarKind, Any] = {
    ScalarKind.Bool: False,
    ScalarKind.Float: 0.0,
    ScalarKind.Double: 0.0,
    ScalarKind.Decimal: Decimal(0),
    ScalarKind.Char: "\0",
    ScalarKind.String: "",
    **{k: 0 for k in INTEGER_RANGES},
}


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def default_for(kind: ScalarKind | str) -> Any:
    """Zero value for *kind*, returned when the raw value is absent."""
    if not isinstance(kind, ScalarKind):
        kind = ScalarKind.from_name(kind)
    return _DEFAULTS[kind]


def convert(raw: str | None, kind: ScalarKind | str) -> Any:
    """Interpret *raw* as *kind*.

    *kind* may be a :class:`ScalarKind` or a type-hint name (``"int"``,
    ``"float"`` ...).  ``None`` yields the kind's default value; text that
    does not parse raises :class:`ConversionError`.
    """
    if not isinstance(kind, ScalarKind):
        kind = ScalarKind.from_name(kind)
    if raw is None:
        return _DEFAULTS[kind]
    return _CONVERTERS[kind](raw, kind)
