"""Small data structures for libext.

Value types are **frozen** dataclasses: immutable records whose only
behaviour is formatting.  :class:`StringBuffer` and
:class:`BoundProperty` are the two mutable / behavioural exceptions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from libext.core.scalars import to_padded_string

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


# ---------------------------------------------------------------------------
# Pair
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Pair(Generic[T1, T2]):
    """Immutable two-slot holder.

    No relationship between the two values is enforced.  A pair unpacks
    like a 2-tuple: ``matched, unmatched = partition(items, pred)``.
    """

    first: T1
    second: T2

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second


# ---------------------------------------------------------------------------
# String accumulator
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class StringBuffer:
    """Append-only accumulator of string fragments.

    Materialising the buffer is a pure concatenation in append order and
    may be repeated any number of times.
    """

    fragments: list[str] = field(default_factory=list)

    def append(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def to_string(self) -> str:
        return "".join(self.fragments)

    def __str__(self) -> str:
        return self.to_string()


# ---------------------------------------------------------------------------
# Bound accessor
# ---------------------------------------------------------------------------

class BoundProperty(Generic[T]):
    """Read/write indirection over an externally owned value.

    Neither :meth:`get` nor :meth:`set` validates anything; whatever the
    underlying getter or setter raises reaches the caller unchanged.

    Parameters
    ----------
    getter:
        Zero-argument callable returning the current value.
    setter:
        One-argument callable storing a new value.
    """

    __slots__ = ("_getter", "_setter")

    def __init__(self, getter: Callable[[], T], setter: Callable[[T], None]) -> None:
        self._getter: Callable[[], T] = getter
        self._setter: Callable[[T], None] = setter

    @classmethod
    def bind(cls, target: object, name: str) -> BoundProperty[Any]:
        """Create an accessor over attribute *name* of *target*.

        The attribute is looked up on every call, so a missing attribute
        surfaces as :class:`AttributeError` from :meth:`get`, not here.
        """

        def _get() -> Any:
            return getattr(target, name)

        def _set(value: Any) -> None:
            setattr(target, name, value)

        return cls(_get, _set)

    def get(self) -> T:
        return self._getter()

    def set(self, value: T) -> None:
        self._setter(value)


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Colour:
    """RGB colour with channels in ``0..255``.

    Channels may be whole-valued floats; they are rendered as integers.
    """

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        """Return ``"#RRGGBB"`` in upper case, two digits per channel."""
        return "#" + "".join(
            to_padded_string(format(int(channel), "x"), 2) for channel in (self.r, self.g, self.b)
        ).upper()


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Point2D:
    x: float
    y: float

    def __str__(self) -> str:
        return f"{{x: {self.x}, y: {self.y}}}"


@dataclass(frozen=True, slots=True)
class Point3D:
    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return f"{{x: {self.x}, y: {self.y}, z: {self.z}}}"


@dataclass(frozen=True, slots=True)
class Dimension2D:
    """Width/height pair, e.g. the inner size of a window."""

    width: float
    height: float

    def __str__(self) -> str:
        return f"{{width: {self.width}, height: {self.height}}}"


@dataclass(frozen=True, slots=True)
class Dimension3D:
    width: float
    height: float
    depth: float

    def __str__(self) -> str:
        return f"{{width: {self.width}, height: {self.height}, depth: {self.depth}}}"
