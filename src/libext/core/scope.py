"""Scope helpers and explicit case dispatch.

:func:`when` matches a subject against a closed set of case values by
equality.  Case values are compared as objects and never stringified, so
``1`` and ``"1"`` are different cases.  For :class:`enum.Enum` subjects
without a fallback the case set is checked for exhaustiveness.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar, Union

from libext.exceptions import NonExhaustiveWhenError

S = TypeVar("S")
R = TypeVar("R")

Cases = Union[Mapping[Any, Callable[[], R]], Iterable[tuple[Any, Callable[[], R]]]]


def apply(subject: S, logic: Callable[[S], object]) -> S:
    """Run *logic* against *subject* and return *subject* itself."""
    logic(subject)
    return subject


def let(subject: S, logic: Callable[[S], R]) -> R:
    """Run *logic* against *subject* and return its result."""
    return logic(subject)


def _case_pairs(cases: Cases[R]) -> list[tuple[Any, Callable[[], R]]]:
    if isinstance(cases, Mapping):
        return list(cases.items())
    return list(cases)


def _missing_members(subject: Enum, pairs: list[tuple[Any, Callable[[], R]]]) -> tuple[str, ...]:
    covered = [value for value, _ in pairs]
    return tuple(member.name for member in type(subject) if member not in covered)


def when(
    subject: object,
    cases: Cases[R],
    otherwise: Callable[[], R] | None = None,
) -> R | None:
    """Invoke the handler of the first case equal to *subject*.

    Parameters
    ----------
    subject:
        Value to dispatch on.
    cases:
        Mapping, or iterable of ``(case, handler)`` pairs for unhashable
        case values.  Handlers take no arguments.
    otherwise:
        Handler run when no case matches.  May be ``None``.

    Returns
    -------
    The result of the handler that ran, or ``None`` when nothing matched
    and no *otherwise* was given.

    Raises
    ------
    NonExhaustiveWhenError
        If *subject* is an enum member, *otherwise* is ``None`` and some
        members of its enum have no case.  Raised before any handler runs.
    """
    pairs = _case_pairs(cases)

    if isinstance(subject, Enum) and otherwise is None:
        missing = _missing_members(subject, pairs)
        if missing:
            raise NonExhaustiveWhenError(
                f"when() over {type(subject).__name__} is missing cases: "
                + ", ".join(missing),
                missing=missing,
                hint="Add the missing cases or pass an 'otherwise' handler.",
            )

    for value, handler in pairs:
        if value == subject:
            return handler()

    if otherwise is not None:
        return otherwise()
    return None
