import functools
import operator

import pytest

from pyposet import (
    NoRealizerError,
    Poset,
    SearchExhaustedError,
    critical_pairs,
    dimension,
    realizer,
)

from ..common import antichain, chain, random_poset, standard_example, subset_lattice


def check_realizer(poset: Poset, extensions: list[Poset]) -> None:
    n = len(poset)

    for ext in extensions:
        assert len(ext) == n
        assert ext.nrelations == n * (n - 1) // 2
        assert poset <= ext

    assert functools.reduce(operator.and_, extensions) == poset


class TestCriticalPairs:

    def test_standard_example(self):
        assert critical_pairs(standard_example(3)) == [(1, 4), (2, 5), (3, 6)]

    def test_chain(self):
        assert critical_pairs(chain(5)) == []

    def test_antichain(self):
        pairs = critical_pairs(antichain(3))

        assert sorted(pairs) == [
            (a, b) for a in range(1, 4) for b in range(1, 4) if a != b
        ]

    @pytest.mark.parametrize("seed", (0, 1, 2))
    def test_incomparable(self, seed):
        p = random_poset(10, 3, seed)

        assert all(p.are_incomparable(a, b) for a, b in critical_pairs(p))


class TestRealizer:

    @pytest.mark.parametrize("size", (0, -1))
    def test_badsize(self, size):
        with pytest.raises(ValueError) as excinfo:
            _ = realizer(chain(3), size)
        assert "`size` must be positive" in str(excinfo.value)

    def test_badtype(self):
        with pytest.raises(TypeError) as excinfo:
            _ = realizer(chain(3), 2.0)
        assert "`size` must be of type `int`" in str(excinfo.value)

    def test_too_small(self):
        with pytest.raises(NoRealizerError) as excinfo:
            _ = realizer(standard_example(3), 2)
        assert "poset has dimension greater than 2" in str(excinfo.value)
        assert isinstance(excinfo.value, SearchExhaustedError)

    def test_chain(self):
        p = chain(5)
        found = realizer(p, 1)

        assert found == [p]

    def test_padded(self):
        p = chain(4)
        found = realizer(p, 3)

        assert len(found) == 3
        assert all(ext == p for ext in found)
        assert found[0] is not found[1]

    def test_empty(self):
        found = realizer(Poset(), 2)

        assert len(found) == 2
        assert all(len(ext) == 0 for ext in found)

    @pytest.mark.parametrize("n", (2, 3, 4))
    def test_standard_example(self, n):
        p = standard_example(n)
        found = realizer(p, n)

        assert len(found) == n
        check_realizer(p, found)

    def test_antichain(self):
        p = antichain(4)
        found = realizer(p, 2)

        check_realizer(p, found)

    @pytest.mark.parametrize("seed", (0, 1, 2, 3))
    def test_random(self, seed):
        p = random_poset(8, 3, seed)
        d = dimension(p)

        check_realizer(p, realizer(p, d))
        check_realizer(p, realizer(p, d + 1))

        if d > 1:
            with pytest.raises(NoRealizerError):
                _ = realizer(p, d - 1)


class TestDimension:

    @pytest.mark.parametrize(
        "poset, expected",
        (
            (Poset(), 1),
            (Poset(1), 1),
            (chain(6), 1),
            (antichain(2), 2),
            (antichain(5), 2),
            (chain(2) + chain(3), 2),
            (subset_lattice(3), 3),
        ),
        ids=("empty", "single", "chain", "antichain2", "antichain5", "sum", "cube"),
    )
    def test_known(self, poset, expected):
        assert dimension(poset) == expected

    @pytest.mark.parametrize("n", (2, 3, 4))
    def test_standard_example(self, n):
        assert dimension(standard_example(n)) == n

    @pytest.mark.parametrize("seed", (0, 1, 2, 3))
    def test_random_two_dimensional(self, seed):
        assert dimension(random_poset(10, 2, seed)) <= 2

    def test_dual(self):
        p = standard_example(3)

        assert dimension(p.reverse()) == dimension(p)
