"""libext — sequence, text and small data-structure utilities.

Pure, synchronous helpers over native Python containers, with a thin
adapter layer for host environment objects and optional Rich rendering.
"""

from libext.version import __version__

__all__: list[str] = ["__version__"]
