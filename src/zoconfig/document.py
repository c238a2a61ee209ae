"""Document — the result of parsing a zc source."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .accessor import convert
from .kinds import ScalarKind


class ZObject(Mapping[str, str]):
    """A named, flat set of key -> raw text bindings.

    Values are stored exactly as written between the value brackets; use
    :meth:`get_as` to read one as a scalar type.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ZObject({self._data!r})"

    def get_as(self, key: str, kind: ScalarKind | str) -> Any:
        """Return the value bound to *key* converted to *kind*.

        A missing key is treated as an absent value and yields the default
        for *kind* (``0``, ``False``, ``""`` ...).
        """
        return convert(self._data.get(key), kind)

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)


class Document(Mapping[str, ZObject]):
    """Holds every object declared in one zc source, keyed by name."""

    __slots__ = ("_objects",)

    def __init__(self, objects: Mapping[str, ZObject] | None = None) -> None:
        self._objects: dict[str, ZObject] = dict(objects or {})

    def __getitem__(self, name: str) -> ZObject:
        return self._objects[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return f"Document({list(self._objects)!r})"

    # -- Convenience accessors ------------------------------------------

    @property
    def names(self) -> list[str]:
        """Object names in declaration order."""
        return list(self._objects)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Plain nested ``dict`` copy of the document."""
        return {name: obj.to_dict() for name, obj in self._objects.items()}
