"""Parser: line-classification state machine producing a Document."""

from __future__ import annotations

import logging

from .document import Document, ZObject
from .errors import MalformedConfigError
from .reader import SCOPE_CLOSE, SCOPE_OPEN, parse_name, split_binding, split_lines

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(text: str) -> Document:
    """Parse zc source *text* and return a new Document.

    Raises :class:`MalformedConfigError` on the first grammar violation;
    nothing is returned for a source that fails part way.
    """
    objects: dict[str, dict[str, str]] = {}
    current: str | None = None
    in_scope = False
    opened_at = 0

    for lineno, line in split_lines(text):
        # Scope opens only for a pending object
        if line == SCOPE_OPEN and current is not None:
            in_scope = True
            continue

        if not in_scope:
            if current is not None:
                raise MalformedConfigError("Multiple objects declared in a row.", lineno, line)
            name = parse_name(line, lineno)
            if name in objects:
                raise MalformedConfigError(f"Object [{name}] is already declared.", lineno, line)
            objects[name] = {}
            current = name
            opened_at = lineno
            continue

        if line == SCOPE_CLOSE:
            logger.debug("closed [%s] with %d key(s)", current, len(objects[current]))
            in_scope = False
            current = None
            continue

        key, value = split_binding(line, lineno)
        bindings = objects[current]
        if key in bindings:
            raise MalformedConfigError(
                f"Key [{key}] is already bound in [{current}].", lineno, line
            )
        bindings[key] = value

    if current is not None:
        missing = SCOPE_CLOSE if in_scope else SCOPE_OPEN
        raise MalformedConfigError(
            f"Object [{current}] declared on line {opened_at} is missing '{missing}'."
        )

    logger.debug("parsed %d object(s)", len(objects))
    return Document({name: ZObject(data) for name, data in objects.items()})
