"""Infrastructure: thin adapters over host environment objects.

These helpers carry no logic of their own beyond reshaping the host's
values: class-list edits go through :func:`split_populated` and
:func:`remove`, window queries come back as :class:`Dimension2D`.

Rules
-----
* Hosts are reached only through :mod:`libext.core.protocols`.
* No rendering and no host-specific imports.
* Host errors (e.g. a read-only ``class_name``) propagate unchanged.
"""

from __future__ import annotations

from libext.core.models import Dimension2D
from libext.core.protocols import ClassedElement, WindowLike
from libext.core.scalars import split_populated
from libext.core.sequences import remove

_CLASS_DELIMITER = " "


# ---------------------------------------------------------------------------
# Class lists
# ---------------------------------------------------------------------------

def get_class_array(element: ClassedElement) -> list[str]:
    """Return the element's classes; an empty ``class_name`` gives ``[]``."""
    return split_populated(element.class_name, _CLASS_DELIMITER)


def add_class(element: ClassedElement, value: str) -> None:
    """Add *value* to the element's classes unless already present."""
    classes = get_class_array(element)
    if value not in classes:
        classes.append(value)
    element.class_name = _CLASS_DELIMITER.join(classes)


def remove_class(element: ClassedElement, value: str) -> None:
    """Remove the first occurrence of *value* from the element's classes."""
    classes = get_class_array(element)
    remove(classes, value)
    element.class_name = _CLASS_DELIMITER.join(classes)


# ---------------------------------------------------------------------------
# Window geometry
# ---------------------------------------------------------------------------

def inner_size(window: WindowLike) -> Dimension2D:
    """Return the window's content-area size."""
    return Dimension2D(window.inner_width, window.inner_height)
