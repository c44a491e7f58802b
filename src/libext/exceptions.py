"""Custom exception hierarchy for libext.

The utilities in :mod:`libext.core` favour fallback values over raising
for expected edge cases (bad counts, missing keys, no match).  The
exceptions defined here cover the few conditions that have no sensible
default.  Errors raised by caller-supplied callables (predicates,
handlers, bound getters and setters) are never wrapped and propagate
unchanged.

Hierarchy
---------
LibextError
├── EnvironmentError
└── NonExhaustiveWhenError
"""

from __future__ import annotations


class LibextError(Exception):
    """Base exception for all libext errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(LibextError):
    """Raised when an optional runtime dependency is not available."""


# --- Dispatch --------------------------------------------------------------

class NonExhaustiveWhenError(LibextError):
    """Raised when :func:`~libext.core.scope.when` misses enum members.

    Attributes
    ----------
    missing : tuple[str, ...]
        Names of the enum members with no matching case.
    """

    def __init__(
        self,
        message: str,
        *,
        missing: tuple[str, ...] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.missing: tuple[str, ...] = missing


def missing_dependency_hint(package: str) -> str:
    """Return the standard install hint for an optional *package*."""
    return f"Install with: pip install {package}"
