__all__ = ("all_present", "bool_to_option", "cat_options", "lift_a2")


from collections.abc import Callable, Iterable

from functional_option.monads.base import R, T, U
from functional_option.monads.option import Absent, Option, Present, of


def all_present(options: Iterable[Option[T]], func: Callable[[list[T]], R]) -> Option[R]:
    """Calls `func` with all contained values, in order, if every option is present.

    Iteration stops at the first `Absent`, in which case `func` is never called. An empty iterable
    calls `func` with an empty list.
    """
    values: list[T] = []
    for item in options:
        match item:
            case Present(value):
                values.append(value)
            case _:
                return Absent()
    return of(func(values))


def lift_a2(first: Option[T], second: Option[U], func: Callable[[T, U], R]) -> Option[R]:
    """Combines two options of possibly different types, see `all_present` for options of one type."""
    return first.bind(lambda a: second.bind(lambda b: of(func(a, b))))


def cat_options(options: Iterable[Option[T]]) -> list[T]:
    """Returns the contained values of all present options, dropping absent ones."""
    return [item.value for item in options if isinstance(item, Present)]


def bool_to_option(flag: bool) -> Option[bool]:  # noqa: FBT001
    """Returns `Present(True)` for a truthy flag and `Absent` otherwise.

    Unlike `of`, `False` is treated as absence, which allows guarding a chain on a condition:

    >>> bool_to_option(1 < 2).map(lambda _: "guarded")
    Present(value='guarded')
    >>> bool_to_option(1 > 2).map(lambda _: "guarded")
    Absent()
    """
    if flag:
        return Present(True)
    return Absent()
