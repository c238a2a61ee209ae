"""File loading for zc sources."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .document import Document
from .errors import SourceUnavailableError
from .parser import parse

logger = logging.getLogger(__name__)


def read_source(path: str | Path) -> str:
    """Read the whole zc file at *path* as UTF-8 text."""
    if not str(path).strip():
        raise SourceUnavailableError(str(path))
    p = Path(path)
    if not p.is_file():
        raise SourceUnavailableError(str(path))
    try:
        text = p.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(str(path)) from exc
    logger.debug("read %d character(s) from %s", len(text), p)
    return text


def load(path: str | Path) -> Document:
    """Read and parse the zc file at *path*."""
    return parse(read_source(path))


async def load_async(path: str | Path) -> Document:
    """Like :func:`load`, reading the file on a worker thread."""
    text = await asyncio.to_thread(read_source, path)
    return parse(text)
