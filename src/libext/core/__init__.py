"""Core layer — pure functions and small data structures.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``ui`` or ``infra``.
* Guard conditions return fallback values instead of raising.
"""

from libext.core.hashmap import HashMap
from libext.core.models import (
    BoundProperty,
    Colour,
    Dimension2D,
    Dimension3D,
    Pair,
    Point2D,
    Point3D,
    StringBuffer,
)
from libext.core.protocols import ClassedElement, WindowLike
from libext.core.scalars import (
    contains,
    ends_with,
    is_integer,
    repeat,
    split_populated,
    starts_with,
    to_padded_string,
)
from libext.core.scope import apply, let, when
from libext.core.sequences import (
    drop,
    first,
    for_each_breakable,
    partition,
    remove,
    take,
    windowed,
)

__all__: list[str] = [
    "BoundProperty",
    "ClassedElement",
    "Colour",
    "Dimension2D",
    "Dimension3D",
    "HashMap",
    "Pair",
    "Point2D",
    "Point3D",
    "StringBuffer",
    "WindowLike",
    "apply",
    "contains",
    "drop",
    "ends_with",
    "first",
    "for_each_breakable",
    "is_integer",
    "let",
    "partition",
    "remove",
    "repeat",
    "split_populated",
    "starts_with",
    "take",
    "to_padded_string",
    "when",
    "windowed",
]
