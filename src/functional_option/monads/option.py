__all__ = ("Absent", "Option", "Present", "absent", "is_absent", "is_present", "of", "option")


from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from functools import total_ordering, wraps
from typing import Any, Literal, NoReturn, ParamSpec, TypeVar, cast, final, overload

from functional_option.monads.base import AbstractMonad, MonadT, R, T, U


class AbstractOption(AbstractMonad[T]):
    """Abstract base for an optional value, either `Present` or `Absent`."""

    @abstractmethod
    def is_present(self) -> bool:
        """Returns `True` if a value is contained."""
        ...

    @abstractmethod
    def is_absent(self) -> bool:
        """Returns `True` if no value is contained."""
        ...

    @abstractmethod
    def match(self, on_absent: Callable[[], R], on_present: Callable[[T], R]) -> R:
        """Calls exactly one of the two branches and returns its result."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained value if any, else raises `TypeError`."""
        ...

    @abstractmethod
    def get_or_else(self, fallback: Callable[[], T]) -> T:
        """Returns the contained value if any, else the result of calling `fallback`."""
        ...

    @abstractmethod
    def get_or_else_value(self, fallback: T) -> T:
        """Returns the contained value if any, else `fallback`."""
        ...

    @abstractmethod
    def or_else(self, fallback: Callable[[], "Option[T]"]) -> "Option[T]":
        """Returns itself if a value is contained, else the option produced by `fallback`."""
        ...

    @abstractmethod
    def or_else_value(self, fallback: "Option[T]") -> "Option[T]":
        """Returns itself if a value is contained, else `fallback`."""
        ...

    @abstractmethod
    def __lt__(self, other: "Option[T]") -> bool: ...


OptionT = TypeVar("OptionT", bound="AbstractOption[Any]")


@final
@total_ordering
@dataclass(slots=True, frozen=True)
class Present(AbstractOption[T]):
    """A value of type `T` that is present.

    The payload is never inspected once wrapped: only `of` checks for the absence sentinel, so `Present(None)`
    can be built explicitly or through `map`. Frozen dataclass semantics provide `__repr__`, `__eq__` and
    `__hash__`; ordering proxies the `__lt__` operator of the payloads and an `Absent` is **always** less
    than a `Present`.
    """

    value: T

    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Wraps the result of `func` in `Present`, even when it is `None`.

        Use `bind` with `of` instead to turn a `None` result into `Absent`.
        """
        return Present(func(self.value))

    def bind(self, func: Callable[[T], OptionT]) -> OptionT:
        return func(self.value)

    def join(self: "Present[MonadT]") -> MonadT:
        return self.value

    def is_present(self) -> Literal[True]:
        return True

    def is_absent(self) -> Literal[False]:
        return False

    def match(self, on_absent: Callable[[], R], on_present: Callable[[T], R]) -> R:  # noqa: ARG002
        return on_present(self.value)

    def unwrap(self) -> T:
        return self.value

    def get_or_else(self, fallback: Callable[[], T]) -> T:  # noqa: ARG002
        return self.value

    def get_or_else_value(self, fallback: T) -> T:  # noqa: ARG002
        return self.value

    def or_else(self, fallback: Callable[[], "Option[T]"]) -> "Option[T]":  # noqa: ARG002
        return self

    def or_else_value(self, fallback: "Option[T]") -> "Option[T]":  # noqa: ARG002
        return self

    def __lt__(self, other: "Present[T] | Absent[T]") -> bool:
        # annotating this with `Option[T]` breaks when `functools.total_ordering` is applied
        match other:
            case Present(value):
                return cast(bool, self.value < value)  # pyright: ignore[reportOperatorIssue]
            case _:
                return False


@final
@total_ordering
@dataclass(slots=True, frozen=True)
class Absent(AbstractOption[T]):
    """No value of type `T`.

    All instances compare equal and hash alike. Combinators return the instance itself where the result
    is absent too, which is safe since it carries no state.
    """

    def map(self, func: Callable[[T], U]) -> "Option[U]":  # noqa: ARG002
        return cast(Absent[U], self)

    def bind(self, func: Callable[[T], OptionT]) -> OptionT:  # noqa: ARG002
        return cast(OptionT, self)

    def join(self) -> "Absent[T]":
        return self

    def is_present(self) -> Literal[False]:
        return False

    def is_absent(self) -> Literal[True]:
        return True

    def match(self, on_absent: Callable[[], R], on_present: Callable[[T], R]) -> R:  # noqa: ARG002
        return on_absent()

    def unwrap(self) -> NoReturn:
        msg = "called `unwrap` on an absent value"
        raise TypeError(msg)

    def get_or_else(self, fallback: Callable[[], T]) -> T:
        return fallback()

    def get_or_else_value(self, fallback: T) -> T:
        return fallback

    def or_else(self, fallback: Callable[[], "Option[T]"]) -> "Option[T]":
        return fallback()

    def or_else_value(self, fallback: "Option[T]") -> "Option[T]":
        return fallback

    def __lt__(self, other: "Present[T] | Absent[T]") -> bool:
        # annotating this with `Option[T]` breaks when `functools.total_ordering` is applied
        match other:
            case Present():
                return True
            case _:
                return False


Option = Present[T] | Absent[T]
"""Either a present value of type `T` or nothing."""


def of(value: T | None) -> Option[T]:
    """Wraps `value` in `Present`, unless it is `None`.

    Falsy values such as `False`, `0` or `""` are present values.
    """
    if value is None:
        return Absent()
    return Present(value)


def absent() -> Option[Any]:
    return Absent()


def is_present(option: Option[Any]) -> bool:
    return option.match(lambda: False, lambda _: True)


def is_absent(option: Option[Any]) -> bool:
    return not is_present(option)


P = ParamSpec("P")


@overload
def option(func: Callable[P, Option[T] | None]) -> Callable[P, Option[T]]: ...


@overload
def option(func: Callable[P, T | None]) -> Callable[P, Option[T]]: ...


def option(func: Callable[P, Any]) -> Callable[P, Option[Any]]:
    """Wraps the result of a function in an `Option`.

    `None` becomes `Absent`, an `Option` is returned as is and any other value is made `Present`.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Option[Any]:
        match result := func(*args, **kwargs):
            case Present() | Absent():
                return cast(Option[Any], result)
            case None:
                return Absent()
            case _:
                return Present(result)

    return wrapper
