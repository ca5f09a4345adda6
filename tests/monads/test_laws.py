from collections.abc import Callable

import pytest

from functional_option.monads import Absent, Option, Present, absent, of

OPTIONS: list[Option[int]] = [Present(13), Present(0), Absent()]
FUNCS: list[Callable[[int], Option[int]]] = [
    lambda x: of(x + 1),
    lambda x: of(x) if x > 0 else absent(),
    lambda _: absent(),
]


def identity(x: int) -> int:
    return x


class TestFunctorLaws:
    @pytest.mark.parametrize("m", OPTIONS)
    def test_identity(self, m: Option[int]):
        assert m.map(identity) == m

    @pytest.mark.parametrize("m", OPTIONS)
    def test_composition(self, m: Option[int]):
        def f(x: int) -> int:
            return x * 2

        def g(x: int) -> str:
            return str(x)

        assert m.map(lambda x: g(f(x))) == m.map(f).map(g)

    def test_composition_through_none(self):
        def f(_: int) -> None:
            return None

        def g(x: None) -> str:
            return repr(x)

        assert of(1).map(lambda x: g(f(x))) == of(1).map(f).map(g) == Present("None")


class TestMonadLaws:
    @pytest.mark.parametrize("x", [13, 0, -4])
    @pytest.mark.parametrize("f", FUNCS)
    def test_left_identity(self, x: int, f: Callable[[int], Option[int]]):
        assert of(x).bind(f) == f(x)

    @pytest.mark.parametrize("m", OPTIONS)
    def test_right_identity(self, m: Option[int]):
        assert m.bind(of) == m

    @pytest.mark.parametrize("m", OPTIONS)
    @pytest.mark.parametrize("f", FUNCS)
    @pytest.mark.parametrize("g", FUNCS)
    def test_associativity(self, m: Option[int], f: Callable[[int], Option[int]], g: Callable[[int], Option[int]]):
        assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))
