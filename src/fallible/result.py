"""Result: a closed success-or-failure container.

A ``Result[T, E]`` is exactly one of ``Success(value)`` or ``Failure(error)``.
Both variants are frozen dataclasses, so every combinator returns a value
instead of mutating the receiver, and failures become an ordinary part of the
data flow rather than something to catch.

Example:
    parsed = success("42").map(int).and_then(check_positive)
    match parsed:
        case Success(value):
            ...
        case Failure(error):
            ...
"""

from __future__ import annotations

import abc
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Never, Self, cast

from fallible._format import describe
from fallible.errors import UnwrapFailure

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from fallible.option import Option

__all__ = ["Failure", "Result", "Success", "failure", "success"]

log = logging.getLogger(__name__)

_UNWRAP_HINT = "Check is_success() first, or use unwrap_or()/unwrap_or_else()."
_UNWRAP_ERROR_HINT = "Check is_failure() first, or use error_as_option()."


class Result[T, E](abc.ABC):
    """Outcome of an operation: ``Success[T, E]`` or ``Failure[T, E]``.

    The hierarchy is sealed; only the two variants defined in this module
    exist. Methods that take a callable invoke it at most once, and only on
    the variant named in their docstring.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Result is sealed; {cls.__qualname__} cannot extend it. "
                "Use success() or failure() to build values."
            )

    def __bool__(self) -> Never:
        raise TypeError("Result has no truth value; use is_success() / is_failure().")

    # --- Predicates ---

    @abc.abstractmethod
    def is_success(self) -> bool:
        """Return True for ``Success``."""

    @abc.abstractmethod
    def is_failure(self) -> bool:
        """Return True for ``Failure``."""

    @abc.abstractmethod
    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if this is a ``Success`` whose value satisfies ``predicate``."""

    @abc.abstractmethod
    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return True if this is a ``Failure`` whose error satisfies ``predicate``."""

    # --- Transformations ---

    @abc.abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to a success value, leaving a ``Failure`` untouched."""

    @abc.abstractmethod
    def map_error[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to a failure error, leaving a ``Success`` untouched."""

    @abc.abstractmethod
    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Return ``fn(value)`` on success, else the eagerly supplied ``default``."""

    @abc.abstractmethod
    def map_or_else[U](self, default_fn: Callable[[E], U], fn: Callable[[T], U]) -> U:
        """Return ``fn(value)`` on success, else ``default_fn(error)``."""

    @abc.abstractmethod
    def inspect(self, fn: Callable[[T], object]) -> Self:
        """Call ``fn`` with the success value for its side effect; return ``self``."""

    @abc.abstractmethod
    def inspect_error(self, fn: Callable[[E], object]) -> Self:
        """Call ``fn`` with the failure error for its side effect; return ``self``."""

    # --- Conversions ---

    @abc.abstractmethod
    def to_option(self) -> Option[T]:
        """Return ``Present(value)`` on success, ``Absent()`` on failure.

        The error is discarded.
        """

    @abc.abstractmethod
    def error_as_option(self) -> Option[E]:
        """Return ``Present(error)`` on failure, ``Absent()`` on success.

        The success value is discarded.
        """

    # --- Extraction ---

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            UnwrapFailure: On ``Failure``; the message includes the error.
        """

    @abc.abstractmethod
    def unwrap_error(self) -> E:
        """Return the failure error.

        Raises:
            UnwrapFailure: On ``Success``; the message includes the value.
        """

    @abc.abstractmethod
    def expect(self, message: str) -> T:
        """Return the success value, raising ``UnwrapFailure(message)`` on failure."""

    @abc.abstractmethod
    def expect_failure(self, message: str) -> E:
        """Return the failure error, raising ``UnwrapFailure(message)`` on success."""

    @abc.abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the success value or ``default``."""

    @abc.abstractmethod
    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Return the success value or ``fn(error)``."""

    # --- Chaining ---

    @abc.abstractmethod
    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` if this is a success, otherwise this failure."""

    @abc.abstractmethod
    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Return ``fn(value)`` if this is a success, otherwise this failure."""

    @abc.abstractmethod
    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return this success, otherwise ``other``."""

    @abc.abstractmethod
    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Return this success, otherwise ``fn(error)``."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yield the success value once, or nothing for a failure."""


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T, E](Result[T, E]):
    """A successful outcome holding ``value``."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        return False

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        return Success(fn(self.value))

    def map_error[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        return cast("Result[T, F]", self)

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def map_or_else[U](self, default_fn: Callable[[E], U], fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def inspect(self, fn: Callable[[T], object]) -> Self:
        fn(self.value)
        return self

    def inspect_error(self, fn: Callable[[E], object]) -> Self:
        return self

    def to_option(self) -> Option[T]:
        from fallible.option import Present

        return Present(self.value)

    def error_as_option(self) -> Option[E]:
        from fallible.option import absent

        return absent()

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> Never:
        _raise_unwrap_failure(
            f"called unwrap_error() on a Success: {describe(self.value)}",
            hint=_UNWRAP_ERROR_HINT,
        )

    def expect(self, message: str) -> T:
        return self.value

    def expect_failure(self, message: str) -> Never:
        _raise_unwrap_failure(message, hint=_UNWRAP_ERROR_HINT)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return self.value

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        return other

    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        return cast("Result[T, F]", self)

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return cast("Result[T, F]", self)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T, E](Result[T, E]):
    """A failed outcome holding ``error``."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        return False

    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        return bool(predicate(self.error))

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        return cast("Result[U, E]", self)

    def map_error[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        return Failure(fn(self.error))

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        return default

    def map_or_else[U](self, default_fn: Callable[[E], U], fn: Callable[[T], U]) -> U:
        return default_fn(self.error)

    def inspect(self, fn: Callable[[T], object]) -> Self:
        return self

    def inspect_error(self, fn: Callable[[E], object]) -> Self:
        fn(self.error)
        return self

    def to_option(self) -> Option[T]:
        from fallible.option import absent

        return absent()

    def error_as_option(self) -> Option[E]:
        from fallible.option import Present

        return Present(self.error)

    def unwrap(self) -> Never:
        _raise_unwrap_failure(
            f"called unwrap() on a Failure: {describe(self.error)}",
            hint=_UNWRAP_HINT,
            cause=self.error,
        )

    def unwrap_error(self) -> E:
        return self.error

    def expect(self, message: str) -> Never:
        _raise_unwrap_failure(message, hint=_UNWRAP_HINT, cause=self.error)

    def expect_failure(self, message: str) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        return cast("Result[U, E]", self)

    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return cast("Result[U, E]", self)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.error)

    def __iter__(self) -> Iterator[T]:
        return iter(())


def success[T](value: T) -> Result[T, Any]:
    """Build a ``Success`` holding ``value``."""
    return Success(value)


def failure[E](error: E) -> Result[Any, E]:
    """Build a ``Failure`` holding ``error``."""
    return Failure(error)


def _raise_unwrap_failure(
    message: str, *, hint: str, cause: object = None
) -> Never:
    # Exception payloads become the __cause__.
    log.debug("Raising UnwrapFailure: %s", message)
    exc = UnwrapFailure(message, hint=hint)
    if isinstance(cause, BaseException):
        raise exc from cause
    raise exc
