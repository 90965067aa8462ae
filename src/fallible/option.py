"""Option: a closed value-or-absence container.

``Option[T]`` is exactly one of ``Present(value)`` or ``Absent()``. It shares
Result's combinator discipline and adds set-style ``filter`` and ``xor``.
Use it where ``None`` would otherwise need checking at every step, and
convert with ``to_result()`` once an absence should become an error.
"""

from __future__ import annotations

import abc
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Never, Self, cast

from fallible.errors import UnwrapFailure
from fallible.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from fallible.result import Result

__all__ = ["Absent", "Option", "Present", "absent", "from_optional", "present"]

log = logging.getLogger(__name__)

_UNWRAP_HINT = "Check is_present() first, or use unwrap_or()/unwrap_or_else()."


class Option[T](abc.ABC):
    """Optional value: ``Present[T]`` or ``Absent[T]``.

    Sealed like ``Result``. Callables passed to combinators are invoked at
    most once, and never on ``Absent`` unless they compute a fallback.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Option is sealed; {cls.__qualname__} cannot extend it. "
                "Use present() or absent() to build values."
            )

    def __bool__(self) -> Never:
        raise TypeError("Option has no truth value; use is_present() / is_absent().")

    @abc.abstractmethod
    def is_present(self) -> bool:
        """Return True for ``Present``."""

    @abc.abstractmethod
    def is_absent(self) -> bool:
        """Return True for ``Absent``."""

    @abc.abstractmethod
    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if a value is present and satisfies ``predicate``."""

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the value.

        Raises:
            UnwrapFailure: On ``Absent``.
        """

    @abc.abstractmethod
    def expect(self, message: str) -> T:
        """Return the value, raising ``UnwrapFailure(message)`` when absent."""

    @abc.abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the value or ``default``."""

    @abc.abstractmethod
    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Return the value or ``fn()``."""

    @abc.abstractmethod
    def unwrap_or_none(self) -> T | None:
        """Return the value or ``None``."""

    @abc.abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Option[U]:
        """Apply ``fn`` to a present value; ``Absent`` stays absent."""

    @abc.abstractmethod
    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Return ``fn(value)`` when present, else ``default``."""

    @abc.abstractmethod
    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        """Return ``fn(value)`` when present, else ``default_fn()``."""

    @abc.abstractmethod
    def inspect(self, fn: Callable[[T], object]) -> Self:
        """Call ``fn`` with a present value for its side effect; return ``self``."""

    @abc.abstractmethod
    def to_result[E](self, error: E) -> Result[T, E]:
        """Return ``Success(value)`` when present, else ``Failure(error)``."""

    @abc.abstractmethod
    def to_result_else[E](self, error_fn: Callable[[], E]) -> Result[T, E]:
        """Return ``Success(value)`` when present, else ``Failure(error_fn())``."""

    def ok_or[E](self, error: E) -> Result[T, E]:
        """Alias of ``to_result``."""
        return self.to_result(error)

    def ok_or_else[E](self, error_fn: Callable[[], E]) -> Result[T, E]:
        """Alias of ``to_result_else``."""
        return self.to_result_else(error_fn)

    @abc.abstractmethod
    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return ``other`` when present, else ``Absent``."""

    @abc.abstractmethod
    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Return ``fn(value)`` when present, else ``Absent``."""

    @abc.abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep a present value only if ``predicate`` holds."""

    @abc.abstractmethod
    def or_(self, other: Option[T]) -> Option[T]:
        """Return ``self`` when present, else ``other``."""

    @abc.abstractmethod
    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Return ``self`` when present, else ``fn()``."""

    @abc.abstractmethod
    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever of ``self``/``other`` is present if exactly one is.

        Both present or both absent yields ``Absent``.
        """

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yield the value once, or nothing when absent."""


@dataclasses.dataclass(frozen=True, slots=True)
class Present[T](Option[T]):
    """A present ``value``."""

    value: T

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return self.value

    def unwrap_or_none(self) -> T | None:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Option[U]:
        return Present(fn(self.value))

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def inspect(self, fn: Callable[[T], object]) -> Self:
        fn(self.value)
        return self

    def to_result[E](self, error: E) -> Result[T, E]:
        return Success(self.value)

    def to_result_else[E](self, error_fn: Callable[[], E]) -> Result[T, E]:
        return Success(self.value)

    def and_[U](self, other: Option[U]) -> Option[U]:
        return other

    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else _ABSENT

    def or_(self, other: Option[T]) -> Option[T]:
        return self

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        return _ABSENT if other.is_present() else self

    def __iter__(self) -> Iterator[T]:
        yield self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Absent[T](Option[T]):
    """No value. All instances compare equal."""

    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        return False

    def unwrap(self) -> Never:
        _raise_unwrap_failure("called unwrap() on an Absent value")

    def expect(self, message: str) -> Never:
        _raise_unwrap_failure(message)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return fn()

    def unwrap_or_none(self) -> T | None:
        return None

    def map[U](self, fn: Callable[[T], U]) -> Option[U]:
        return cast("Option[U]", self)

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        return default

    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        return default_fn()

    def inspect(self, fn: Callable[[T], object]) -> Self:
        return self

    def to_result[E](self, error: E) -> Result[T, E]:
        return Failure(error)

    def to_result_else[E](self, error_fn: Callable[[], E]) -> Result[T, E]:
        return Failure(error_fn())

    def and_[U](self, other: Option[U]) -> Option[U]:
        return cast("Option[U]", self)

    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return cast("Option[U]", self)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self

    def or_(self, other: Option[T]) -> Option[T]:
        return other

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        return fn()

    def xor(self, other: Option[T]) -> Option[T]:
        return other if other.is_present() else self

    def __iter__(self) -> Iterator[T]:
        return iter(())


_ABSENT: Absent[Any] = Absent()


def present[T](value: T) -> Option[T]:
    """Build a ``Present`` holding ``value``."""
    return Present(value)


def absent() -> Option[Any]:
    """Return the shared ``Absent`` instance."""
    return _ABSENT


def from_optional[T](value: T | None) -> Option[T]:
    """Lift a nullable value: ``None`` becomes ``Absent``, anything else ``Present``."""
    return _ABSENT if value is None else Present(value)


def _raise_unwrap_failure(message: str) -> Never:
    log.debug("Raising UnwrapFailure: %s", message)
    raise UnwrapFailure(message, hint=_UNWRAP_HINT)
