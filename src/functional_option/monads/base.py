from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=object)
U = TypeVar("U", bound=object)
R = TypeVar("R", bound=object)


class AbstractMonad(ABC, Generic[T]):
    """Abstract base for monadic types.

    Implementations are expected to obey the monad laws with respect to their unit constructor:
    left identity, right identity and associativity of `bind`, as well as the functor laws for `map`.
    """

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "AbstractMonad[U]":
        """Apply a plain function to the contained value and wrap the result in the same context."""
        ...

    @abstractmethod
    def bind(self, func: Callable[[T], "AbstractMonad[U]"]) -> "AbstractMonad[U]":
        """Apply a function returning the same context to the contained value and return its result as is."""
        ...

    @abstractmethod
    def join(self: "AbstractMonad[MonadT]") -> "MonadT":
        """Flatten one level of nesting."""
        ...


MonadT = TypeVar("MonadT", bound="AbstractMonad[Any]")
