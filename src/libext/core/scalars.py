"""Pure helpers over numeric and text scalars.

Every function here is total: invalid input produces a well-defined
fallback (``False``, ``""`` or ``[]``) instead of an exception.
"""

from __future__ import annotations

import logging
import math
from numbers import Integral, Rational, Real

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def is_integer(value: object) -> bool:
    """Return ``True`` when *value* is a finite real number with no fraction.

    ``bool`` is rejected even though it subclasses ``int``; so are
    ``NaN``, infinities and anything that is not a real number.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return True
    if isinstance(value, Rational):
        return value.denominator == 1
    if isinstance(value, float):
        return value.is_integer()
    try:
        return math.isfinite(value) and math.floor(value) == value
    except (OverflowError, ValueError):
        return False


def to_padded_string(value: object, min_digits: int) -> str:
    """Render *value* with leading zeros up to *min_digits* characters.

    The natural representation is never truncated:
    ``to_padded_string(1234, 2) == "1234"``.  Whole-valued floats render
    without a fraction or exponent, so ``7.0`` pads to ``"007"``; other
    values use ``str()``.
    """
    if isinstance(value, float) and value.is_integer():
        result = str(int(value))
    else:
        result = str(value)
    return "0" * max(min_digits - len(result), 0) + result


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def repeat(text: str, count: object) -> str:
    """Return exactly *count* copies of *text*.

    Zero, negative and non-integer counts give ``""``.
    """
    if not is_integer(count) or count < 1:  # type: ignore[operator]
        logger.debug("repeat: count %r rejected", count)
        return ""
    if not text:
        return ""
    return text * int(count)  # type: ignore[call-overload]


def contains(text: str, needle: str) -> bool:
    """Case-sensitive literal substring test."""
    return needle in text


def starts_with(text: str, prefix: str) -> bool:
    return text[: len(prefix)] == prefix


def ends_with(text: str, suffix: str) -> bool:
    if not suffix:
        return True
    return text[-len(suffix):] == suffix


def split_populated(text: str, delimiter: str) -> list[str]:
    """Split *text* on a literal *delimiter*, mapping ``""`` to ``[]``.

    Empty fragments between delimiters are kept:
    ``split_populated("a,,b", ",") == ["a", "", "b"]``.  An empty
    delimiter cannot split anything, so the whole text comes back as a
    single fragment.
    """
    if not text:
        return []
    if not delimiter:
        logger.debug("split_populated: empty delimiter, returning text whole")
        return [text]
    return text.split(delimiter)
