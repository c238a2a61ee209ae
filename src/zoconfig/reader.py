"""Reader layer: line splitting and per-line token helpers for zc text."""

from __future__ import annotations

from .errors import MalformedConfigError


COMMENT = "#"
OBJECT_OPEN = "["
OBJECT_CLOSE = "]"
BIND = ":"
TYPE_OPEN = "("
TYPE_CLOSE = ")"
SCOPE_OPEN = "{"
SCOPE_CLOSE = "}"


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[tuple[int, str]]:
    """Return ``(lineno, stripped_line)`` for every significant line.

    Line endings are normalised to ``\\n`` first.  Blank lines and
    ``#`` comments are dropped; numbering is 1-based over the raw lines.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines: list[tuple[int, str]] = []
    for lineno, raw in enumerate(normalized.split("\n"), 1):
        stripped = raw.strip()
        if not stripped or stripped[0] == COMMENT:
            continue
        lines.append((lineno, stripped))
    return lines


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------

def parse_name(text: str, lineno: int | None = None) -> str:
    """Extract ``identifier`` from ``[identifier]``."""
    text = text.strip()
    if len(text) < 2 or text[0] != OBJECT_OPEN or text[-1] != OBJECT_CLOSE:
        raise MalformedConfigError(f"{text} does not have proper syntax.", lineno, text)
    name = text[1:-1]
    if not name.strip():
        raise MalformedConfigError(f"{text} declares an empty name.", lineno, text)
    return name


def parse_type_hint(text: str, lineno: int | None = None) -> str | None:
    """Return the ``(hint)`` token at the start of *text*, or ``None``.

    The hint is validated for closure only; callers do not store it.
    """
    text = text.strip()
    if not text.startswith(TYPE_OPEN):
        return None
    close = text.find(TYPE_CLOSE)
    if close == -1:
        raise MalformedConfigError(
            f"{text} does not provide closure for type specifier.", lineno, text
        )
    return text[1:close]


def parse_value(text: str, lineno: int | None = None) -> str:
    """Extract the raw value from ``[(hint)][text]``.

    The first ``[`` and the first ``]`` of the whole text delimit the value.
    """
    text = text.strip()
    if not text:
        raise MalformedConfigError("binding has no value.", lineno, text)
    parse_type_hint(text, lineno)
    open_ = text.find(OBJECT_OPEN)
    close = text.find(OBJECT_CLOSE)
    if open_ == -1 or close == -1 or close < open_:
        raise MalformedConfigError(f"{text} syntax malformed.", lineno, text)
    return text[open_ + 1:close]


def split_binding(line: str, lineno: int | None = None) -> tuple[str, str]:
    """Split ``[key]: value`` into its key name and raw value."""
    parts = line.split(BIND)
    if len(parts) != 2:
        raise MalformedConfigError(
            f"{line} must contain exactly one binding character '{BIND}'", lineno, line
        )
    left, right = parts
    return parse_name(left, lineno), parse_value(right, lineno)
