"""Shared utilities — logging setup and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O beyond the log handler a caller explicitly asks for.
* Importable by any layer.
"""

from libext.utils.log import LOG_LEVEL_ENV, setup_logger

__all__: list[str] = ["LOG_LEVEL_ENV", "setup_logger"]
