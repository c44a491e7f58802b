"""Protocols (interfaces) for host environment objects.

The infra adapters in :mod:`libext.infra.host` operate on these
contracts only.  Any object exposing the right attributes satisfies a
protocol structurally, such as a DOM binding or a plain
test double.
"""

from __future__ import annotations

from typing import Protocol


class ClassedElement(Protocol):
    """An element carrying a space-separated list of class names.

    ``class_name`` is read and written as a whole string
    (e.g. ``"card active"``).
    """

    class_name: str


class WindowLike(Protocol):
    """A window reporting the size of its content area."""

    @property
    def inner_width(self) -> float:
        """Width of the content area."""
        ...  # pragma: no cover

    @property
    def inner_height(self) -> float:
        """Height of the content area."""
        ...  # pragma: no cover
