"""String-keyed associative map.

Entries live in a private ``dict``, never as attributes of the map, so
a key such as ``"clear"`` or ``"__class__"`` cannot shadow or collide
with the map's own members.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

V = TypeVar("V")
R = TypeVar("R")


class HashMap(Generic[V]):
    """Mutable mapping from ``str`` keys to values of one type.

    Each key maps to at most one value and :meth:`put` overwrites.
    Iteration order is not part of the contract, so callers comparing
    results of :meth:`to_list` should compare them as sets.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, V] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Remove every entry."""
        self._data = {}

    def contains_key(self, key: str) -> bool:
        """Return ``True`` if *key* has an entry, even a falsy one."""
        return key in self._data

    def get(self, key: str) -> V | None:
        """Return the value stored under *key*, or ``None`` if absent.

        Use :meth:`contains_key` to tell a missing key from a stored
        ``None``.
        """
        return self._data.get(key)

    def put(self, key: str, value: V) -> None:
        """Insert or overwrite the entry for *key*."""
        self._data[key] = value

    def remove(self, key: str) -> bool:
        """Delete the entry for *key*.

        Returns ``False`` without mutating anything when *key* is absent.
        """
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def to_list(self, logic: Callable[[str, V], R]) -> list[R]:
        """Apply ``logic(key, value)`` to every entry and collect the results."""
        return [logic(key, value) for key, value in self._data.items()]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
