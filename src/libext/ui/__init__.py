"""Presentation layer — optional Rich rendering of libext values.

This layer may import from ``core``; nothing else may import from it.
"""

from libext.ui.console import colour_swatch, get_rich_console, hashmap_table, print_hashmap

__all__: list[str] = [
    "colour_swatch",
    "get_rich_console",
    "hashmap_table",
    "print_hashmap",
]
