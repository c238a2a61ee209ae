"""Exception hierarchy for zoconfig."""

from __future__ import annotations


class ZoconfigError(Exception):
    """Base class for every error raised by zoconfig."""


class MalformedConfigError(ZoconfigError):
    """Raised when zc source text violates the grammar.

    ``lineno`` is 1-based and ``None`` for conditions that are not tied to
    a single line (e.g. an unclosed scope at end of input).
    """

    def __init__(self, message: str, lineno: int | None = None, line: str | None = None) -> None:
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class SourceUnavailableError(ZoconfigError):
    """Raised when a zc file is missing or cannot be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not load data {path}")


class ConversionError(ZoconfigError, ValueError):
    """Raised when a raw value cannot be interpreted as the requested kind."""

    def __init__(self, message: str, raw: str | None = None, kind: object = None) -> None:
        self.raw = raw
        self.kind = kind
        super().__init__(message)
