"""Pure operations over ordered sequences.

Every function here accepts any :class:`~collections.abc.Sequence` and
returns a fresh ``list``; only :func:`remove` mutates its argument.

Guard policy: a count or window size that is not a positive integer
never raises; it selects a documented fallback instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableSequence, Sequence
from typing import TypeVar

from libext.core.models import Pair
from libext.core.scalars import is_integer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _valid_count(count: object, caller: str) -> bool:
    """Return ``True`` for positive integer counts, logging rejections."""
    if is_integer(count) and count >= 1:  # type: ignore[operator]
        return True
    logger.debug("%s: count %r rejected", caller, count)
    return False


# ---------------------------------------------------------------------------
# Bounded slicing
# ---------------------------------------------------------------------------

def take(seq: Sequence[T], count: int) -> list[T]:
    """Return the first *count* elements (fewer if *seq* is shorter).

    ``[]`` when *count* is below one or not an integer.
    """
    if not _valid_count(count, "take"):
        return []
    return list(seq[: int(count)])


def drop(seq: Sequence[T], count: int) -> list[T]:
    """Return everything after the first *count* elements.

    Guarded exactly like :func:`take`: an invalid *count* gives ``[]``,
    not the whole sequence.
    """
    if not _valid_count(count, "drop"):
        return []
    return list(seq[int(count):])


# ---------------------------------------------------------------------------
# Predicate search and traversal
# ---------------------------------------------------------------------------

def first(seq: Sequence[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first element satisfying *predicate*, or ``None``."""
    for element in seq:
        if predicate(element):
            return element
    return None


def for_each_breakable(seq: Sequence[T], predicate: Callable[[T], bool]) -> None:
    """Visit elements in order until *predicate* returns a falsy value.

    The element whose result is falsy is the last one visited.
    """
    for element in seq:
        if not predicate(element):
            return


def partition(
    seq: Sequence[T],
    predicate: Callable[[T], bool],
) -> Pair[list[T], list[T]]:
    """Split *seq* into ``(matched, unmatched)`` preserving relative order.

    *predicate* is evaluated exactly once per element.
    """
    matched: list[T] = []
    unmatched: list[T] = []
    for element in seq:
        (matched if predicate(element) else unmatched).append(element)
    return Pair(matched, unmatched)


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------

def remove(seq: MutableSequence[T], value: T) -> bool:
    """Delete the first element equal to *value* in place.

    Returns ``True`` if an element was removed, ``False`` if there was no
    match (the sequence is left untouched).
    """
    try:
        index = seq.index(value)
    except ValueError:
        return False
    del seq[index]
    return True


# ---------------------------------------------------------------------------
# Windowing
# ---------------------------------------------------------------------------

def windowed(seq: Sequence[T], size: int) -> list[list[T]]:
    """Chunk *seq* into consecutive windows of *size* elements.

    The last window carries the remainder and is always present, so an
    empty input yields ``[[]]``.  When ``len(seq)`` is an exact multiple
    of *size* the last window is full; no empty trailing window is
    emitted.  A *size* that is not a positive integer yields a single
    window holding every element.

    >>> windowed([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4], [5]]
    >>> windowed([1, 2, 3, 4], 2)
    [[1, 2], [3, 4]]
    """
    if not is_integer(size) or size < 1:
        logger.debug("windowed: size %r rejected, using a single window", size)
        return [list(seq)]

    step = int(size)
    result: list[list[T]] = []
    window: list[T] = []
    for element in seq:
        if len(window) == step:
            result.append(window)
            window = []
        window.append(element)
    result.append(window)
    return result
