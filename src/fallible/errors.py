"""Exception hierarchy for fallible."""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapFailure(FallibleError):
    """A payload was extracted from the variant that does not hold it.

    Raised only by the "extract or fail" accessors (``unwrap``,
    ``unwrap_error``, ``expect``, ``expect_failure``). It signals misuse by
    the caller and is never the domain error carried inside a ``Failure``.
    """

    DEFAULT_MESSAGE = "Unwrap failed."

    def __init__(self, message: str | None = None, *, hint: str | None = None) -> None:
        super().__init__(message or self.DEFAULT_MESSAGE, hint=hint)


class ConfigurationError(FallibleError):
    """Configuration validation or resolution failed."""
