import pytest

from pyposet import (
    Poset,
    antichain_cover,
    chain_cover,
    height,
    max_antichain,
    max_chain,
    width,
)

from ..common import antichain, brute_width, chain, random_poset, standard_example


class TestExtremal:

    @pytest.mark.parametrize(
        "solver, expected",
        (
            (height, 0),
            (width, 0),
            (max_chain, []),
            (max_antichain, []),
            (chain_cover, []),
            (antichain_cover, []),
        ),
        ids=(
            "height",
            "width",
            "max_chain",
            "max_antichain",
            "chain_cover",
            "antichain_cover",
        ),
    )
    def test_empty(self, solver, expected):
        assert solver(Poset()) == expected

    def test_chain(self):
        p = chain(10)

        assert width(p) == 1
        assert height(p) == 10
        assert max_chain(p) == [*range(1, 11)]
        assert len(max_antichain(p)) == 1
        assert chain_cover(p) == [[*range(1, 11)]]
        assert antichain_cover(p) == [[k] for k in range(1, 11)]

    def test_antichain(self):
        p = antichain(7)

        assert width(p) == 7
        assert height(p) == 1
        assert len(max_chain(p)) == 1
        assert max_antichain(p) == [*range(1, 8)]
        assert sorted(chain_cover(p)) == [[k] for k in range(1, 8)]
        assert antichain_cover(p) == [[*range(1, 8)]]

    def test_standard_example(self):
        p = standard_example(4)

        assert width(p) == 4
        assert height(p) == 2
        assert antichain_cover(p) == [[1, 2, 3, 4], [5, 6, 7, 8]]

    def test_stacked(self):
        p = antichain(3) / chain(4)

        assert width(p) == 3
        assert height(p) == 5
        assert max_chain(p)[:4] == [4, 5, 6, 7]
        assert max_antichain(p) == [1, 2, 3]

    @pytest.mark.parametrize("seed", (0, 1, 2, 3, 4))
    def test_random_width(self, seed):
        p = random_poset(9, 3, seed)
        found = max_antichain(p)
        chains = chain_cover(p)

        assert width(p) == brute_width(p)
        assert len(found) == width(p)
        assert p.is_antichain(found)

        # chains partition the elements
        assert len(chains) == width(p)
        assert sorted(v for c in chains for v in c) == [*range(1, 10)]
        assert all(p.is_chain(c) for c in chains)
        assert all(p.has_relation(a, b) for c in chains for a, b in zip(c, c[1:]))

    @pytest.mark.parametrize("seed", (0, 1, 2, 3, 4))
    def test_random_height(self, seed):
        p = random_poset(12, 2, seed)
        found = max_chain(p)
        layers = antichain_cover(p)

        assert len(found) == height(p)
        assert all(p.has_relation(a, b) for a, b in zip(found, found[1:]))

        # antichains partition the elements
        assert len(layers) == height(p)
        assert sorted(v for layer in layers for v in layer) == [*range(1, 13)]
        assert all(p.is_antichain(layer) for layer in layers)

        # no chain is longer than the number of antichains covering it
        assert all(len(c) <= len(layers) for c in chain_cover(p))
