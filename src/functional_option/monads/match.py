__all__ = ("Match2Pattern", "match2")


from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, final

from functional_option.monads.base import R, T, U
from functional_option.monads.option import Option, Present


@final
@dataclass(slots=True, frozen=True)
class Match2Pattern(Generic[T, U, R]):
    """Handlers for the four presence cases of a pair of options.

    Calling a pattern with two options is the same as calling `match2` with them.
    """

    first: Callable[[T], R]
    second: Callable[[U], R]
    both: Callable[[T, U], R]
    neither: Callable[[], R]

    def __call__(self, first: Option[T], second: Option[U]) -> R:
        return match2(first, second, self)


def match2(first: Option[T], second: Option[U], pattern: Match2Pattern[T, U, R]) -> R:
    """Calls exactly one handler of `pattern`, picked in the order both, first, second, neither."""
    match first, second:
        case Present(a), Present(b):
            return pattern.both(a, b)
        case Present(a), _:
            return pattern.first(a)
        case _, Present(b):
            return pattern.second(b)
        case _:
            return pattern.neither()
