import pytest

from pyposet import (
    ForeignElementError,
    PendingRelationsError,
    Poset,
    PosetElement,
    Relation,
)

from ..common import chain, standard_example, subset_lattice


class TestPosetElement:

    def test_init_badelement(self):
        p = chain(3)

        with pytest.raises(IndexError) as excinfo:
            _ = p[4]
        assert "poset has no element 4" in str(excinfo.value)

    def test_properties(self):
        p = chain(3)
        x = p[2]

        assert isinstance(x, PosetElement)
        assert x.poset is p
        assert x.element == 2
        assert int(x) == 2
        assert [0, 10, 20][x] == 20

    def test_operators_chain(self):
        p = chain(3)
        a, b = p[1], p[3]

        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a <= p[1]
        assert a >= p[1]
        assert not a < p[1]
        assert not b < a

    def test_operators_incomparable(self):
        p = standard_example(2)
        a, b = p[1], p[2]

        assert not a < b
        assert not a > b
        assert not a <= b
        assert not a >= b
        assert a.incomparable(b)
        assert not a.comparable(b)

    def test_equality(self):
        p = chain(3)

        assert p[2] == p[2]
        assert p[1] != p[2]
        assert p[2] != 2
        assert len({p[1], p[1], p[2]}) == 2

    def test_foreign(self):
        p, q = chain(3), chain(3)

        with pytest.raises(ForeignElementError) as excinfo:
            _ = p[1] < q[2]
        assert "cannot compare elements of different posets" in str(excinfo.value)

        with pytest.raises(ForeignElementError):
            _ = p[1] == q[1]

    def test_badtype(self):
        p = chain(3)

        with pytest.raises(TypeError) as excinfo:
            _ = p[1].less_than(2)
        assert "`other` must be a `PosetElement`" in str(excinfo.value)

    def test_stale_handle(self):
        p = chain(3)
        x = p[3]

        p.remove_element(1)

        with pytest.raises(IndexError) as excinfo:
            _ = x > p[1]
        assert "element handle no longer refers to an element" in str(excinfo.value)

    def test_covers(self):
        p = chain(4)

        assert p[2].covered_by(p[3])
        assert not p[2].covered_by(p[4])
        assert p[3].covers(p[2])
        assert not p[4].covers(p[2])

    def test_join_meet(self):
        p = subset_lattice(3)
        a, b = p[1 + 0b001], p[1 + 0b010]

        assert a.join(b) == p[1 + 0b011]
        assert a.meet(b) == p[1]

    def test_join_meet_missing(self):
        p = standard_example(2)

        assert p[1].join(p[2]) is None
        assert p[3].meet(p[4]) is None

    def test_pending(self):
        p = Poset(2)
        p.stage_relations([Relation(1, 2)])

        with pytest.raises(PendingRelationsError):
            _ = p[1]

    def test_repr(self):
        assert repr(chain(2)[1]) == (
            "PosetElement(1 in Poset(nelements=2, nrelations=1))"
        )
