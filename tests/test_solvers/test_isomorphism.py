import pytest

from pyposet import NotIsomorphicError, Poset, Relation, iso, iso_check

from ..common import antichain, chain, random_poset, relabeled, standard_example


def preserves_order(p: Poset, q: Poset, f: dict[int, int]) -> bool:
    n = len(p)
    return sorted(f) == sorted(f.values()) == [*range(1, n + 1)] and all(
        p(a, b) == q(f[a], f[b]) for a in range(1, n + 1) for b in range(1, n + 1)
    )


def vee_and_wedge() -> tuple[Poset, Poset]:
    # same number of relations and the same up-set and down-set sizes
    p = Poset.from_relations(
        6, [Relation(1, 2), Relation(1, 3), Relation(4, 6), Relation(5, 6)]
    )
    q = Poset.from_relations(
        6, [Relation(1, 2), Relation(1, 3), Relation(4, 2), Relation(5, 6)]
    )
    return p, q


class TestIso:

    def test_empty(self):
        assert iso(Poset(), Poset()) == {}

    def test_identity(self):
        p = standard_example(3)

        assert preserves_order(p, p, iso(p, p))

    @pytest.mark.parametrize(
        "poset",
        (chain(6), antichain(5), standard_example(4), chain(2) / antichain(3)),
        ids=("chain", "antichain", "standard", "stack"),
    )
    def test_relabeled(self, poset):
        q, _ = relabeled(poset, seed=7)

        assert preserves_order(poset, q, iso(poset, q))

    @pytest.mark.parametrize("seed", (0, 1, 2, 3, 4))
    def test_relabeled_random(self, seed):
        p = random_poset(12, 3, seed)
        q, _ = relabeled(p, seed)

        assert preserves_order(p, q, iso(p, q))
        assert preserves_order(q, p, iso(q, p))

    def test_nelements(self, monkeypatch):
        def no_search(lhs, rhs):
            raise AssertionError("search should not run")

        monkeypatch.setattr("pyposet.solvers.isomorphism._search", no_search)

        with pytest.raises(NotIsomorphicError) as excinfo:
            _ = iso(chain(3), chain(4))
        assert "posets have different numbers of elements, 3 and 4" in str(
            excinfo.value
        )

    def test_nrelations(self, monkeypatch):
        def no_search(lhs, rhs):
            raise AssertionError("search should not run")

        monkeypatch.setattr("pyposet.solvers.isomorphism._search", no_search)

        with pytest.raises(NotIsomorphicError) as excinfo:
            _ = iso(chain(3), Poset(3))
        assert "posets have different numbers of relations, 3 and 0" in str(
            excinfo.value
        )
        assert not iso_check(chain(3), Poset(3))

    def test_signatures(self):
        p = Poset.from_relations(4, [Relation(1, 2), Relation(1, 3), Relation(1, 4)])
        q = Poset.from_relations(4, [Relation(1, 4), Relation(2, 4), Relation(3, 4)])

        with pytest.raises(NotIsomorphicError) as excinfo:
            _ = iso(p, q)
        assert "posets have different up-set and down-set sizes" in str(excinfo.value)

    def test_exhausted(self):
        p, q = vee_and_wedge()

        with pytest.raises(NotIsomorphicError) as excinfo:
            _ = iso(p, q)
        assert "posets are not isomorphic" in str(excinfo.value)


class TestIsoCheck:

    def test_isomorphic(self):
        p = random_poset(10, 2, 3)
        q, _ = relabeled(p, 11)

        assert iso_check(p, q)

    def test_dual(self):
        p = standard_example(3)

        assert iso_check(p.reverse(), p)
        assert not iso_check(chain(2) / antichain(2), antichain(2) / chain(2))

    def test_not_isomorphic(self):
        p, q = vee_and_wedge()

        assert not iso_check(p, q)
        assert iso_check(p, p.copy())
