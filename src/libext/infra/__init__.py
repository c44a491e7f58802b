"""Infrastructure layer — adapters over host environment objects.

Rules
-----
* No imports from ``ui``.
* No user-facing output.
* Hosts are consumed through the protocols in ``core.protocols``.
"""

from libext.infra.host import add_class, get_class_array, inner_size, remove_class

__all__: list[str] = [
    "add_class",
    "get_class_array",
    "inner_size",
    "remove_class",
]
