from __future__ import annotations
import logging
import operator
from collections.abc import Callable, Iterable, Iterator, Sequence

import networkx as nx
import torch

from ..exceptions import CorruptedPosetError, CycleError, PendingRelationsError
from ..infra import (
    RelationMatrix,
    chain_matrix,
    close_,
    compose,
    cyclic_elements,
    extend_closure_,
    is_transitive,
    linear_order,
)
from .element import PosetElement
from .relation import (
    CommitResult,
    Corrupted,
    PosetState,
    Relation,
    RemovalStrategy,
    Valid,
)

logger = logging.getLogger(__name__)


class _ElementView(Iterable[int]):
    r"""Restartable view of the elements selected from the order relation.

    Each iteration reads the current relation, so changes made to the poset
    between iterations are reflected.

    Args:
        poset (Poset): poset to read from.
        select (Callable[..., torch.Tensor]): maps the relation matrix and the
            zero-based indices of ``anchors`` to a boolean mask over elements.
        *anchors (int): elements the selection is relative to. If any of them is
            not an element when iterated, the view is empty.
    """

    __slots__ = ("_poset", "_select", "_anchors")

    def __init__(
        self,
        poset: Poset,
        select: Callable[..., torch.Tensor],
        *anchors: int,
    ) -> None:
        self._poset = poset
        self._select = select
        self._anchors = anchors

    def __iter__(self) -> Iterator[int]:
        rel = self._poset._matrix
        idx = [self._poset._lookup(a) for a in self._anchors]
        if None in idx:
            return iter(())
        mask = self._select(rel, *idx)
        return (k + 1 for k in mask.nonzero().squeeze(1).tolist())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[*self]})"


def _upper_covers(rel: torch.Tensor, i: int) -> torch.Tensor:
    up = rel[i : i + 1]
    return (up & ~compose(up, rel))[0]


def _lower_covers(rel: torch.Tensor, i: int) -> torch.Tensor:
    down = rel[:, i : i + 1]
    return (down & ~compose(rel, down))[:, 0]


def _acyclic_or_raise(rel: torch.Tensor, source: str) -> torch.Tensor:
    close_(rel)
    cycle = cyclic_elements(rel)
    if cycle.numel() > 0:
        raise CycleError(
            f"{source} induces a cycle through elements "
            f"{', '.join(str(v + 1) for v in cycle.tolist())}"
        )
    return rel


class Poset:
    r"""Finite partially ordered set on the elements ``1, 2, ..., n``.

    The strict order relation is stored transitively closed as a dense boolean
    matrix, so testing if ``a < b`` takes constant time.

    Args:
        source (int | Poset, optional): number of (unrelated) elements, or a poset
            to copy. Defaults to ``0``.

    Raises:
        TypeError: ``source`` must be an ``int`` or a :py:class:`Poset`.
        ValueError: ``source`` cannot be a negative number of elements.

    Note:
        Removing an element renumbers the poset: the last element takes the
        identifier of the removed one. See :py:meth:`remove_element`.
    """

    _store: RelationMatrix
    _state: PosetState

    def __init__(self, source: int | Poset = 0) -> None:
        if isinstance(source, Poset):
            self._store = RelationMatrix.wrap(source._matrix)
        elif isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError("`source` cannot be a negative number of elements")
            self._store = RelationMatrix(source)
        else:
            raise TypeError("`source` must be an `int` or a `Poset`")

        self._state = PosetState.VALID

    @classmethod
    def _wrap(cls, rel: torch.Tensor) -> Poset:
        poset = cls.__new__(cls)
        poset._store = RelationMatrix.wrap(rel)
        poset._state = PosetState.VALID
        return poset

    @classmethod
    def from_relations(cls, nelements: int, relations: Iterable[Relation]) -> Poset:
        r"""Creates a poset from the transitive closure of a relation.

        Args:
            nelements (int): number of elements.
            relations (Iterable[Relation]): relations to close.

        Returns:
            Poset: poset whose order is the transitive closure of ``relations``.

        Raises:
            TypeError: elements of ``relations`` must be of type :py:class:`Relation`.
            IndexError: a relation refers to an element outside of ``1..nelements``.
            ~pyposet.CycleError: the closure of ``relations`` contains a cycle.

        Note:
            Relations of an element with itself are ignored, as with
            :py:meth:`from_digraph`.
        """
        poset = cls(nelements)
        rel = torch.zeros(nelements, nelements, dtype=torch.bool)

        for pair in relations:
            if not isinstance(pair, Relation):
                raise TypeError("elements of `relations` must be of type `Relation`")
            i, j = poset._index(pair.lesser), poset._index(pair.greater)
            if i != j:
                rel[i, j] = True

        return cls._wrap(_acyclic_or_raise(rel, "`relations`"))

    @classmethod
    def from_digraph(cls, graph: nx.DiGraph) -> Poset:
        r"""Creates a poset from the transitive closure of a directed graph.

        Args:
            graph (~networkx.DiGraph): directed graph whose nodes are exactly the
                integers ``1`` through ``graph.number_of_nodes()``.

        Returns:
            Poset: poset in which ``a < b`` exactly when ``graph`` has a path from
            ``a`` to ``b``.

        Raises:
            TypeError: ``graph`` must be a :py:class:`~networkx.DiGraph`.
            ValueError: nodes of ``graph`` must be the integers ``1..n``.
            ~pyposet.CycleError: ``graph`` contains a cycle.

        Note:
            Self loops in ``graph`` are ignored.
        """
        if not isinstance(graph, nx.DiGraph):
            raise TypeError("`graph` must be a `DiGraph`")

        n = graph.number_of_nodes()
        if set(graph.nodes) != set(range(1, n + 1)):
            raise ValueError(f"nodes of `graph` must be the integers 1 through {n}")

        # ignore self loops
        dag = nx.restricted_view(graph, (), list(nx.selfloop_edges(graph)))
        if not nx.is_directed_acyclic_graph(dag):
            raise CycleError("`graph` contains a cycle")

        rel = torch.zeros(n, n, dtype=torch.bool)
        edges = list(dag.edges)
        if edges:
            idx = torch.tensor(edges, dtype=torch.int64) - 1
            rel[idx[:, 0], idx[:, 1]] = True

        return cls._wrap(close_(rel))

    @classmethod
    def from_matrix(cls, matrix: torch.Tensor) -> Poset:
        r"""Creates a poset from the transitive closure of a square matrix.

        Args:
            matrix (~torch.Tensor): square matrix where a nonzero entry ``(i, j)``
                specifies ``i + 1 < j + 1``. Any value accepted by
                :py:func:`torch.as_tensor` may be used.

        Returns:
            Poset: poset specified by ``matrix``.

        Raises:
            ValueError: ``matrix`` must be square.
            ~pyposet.CycleError: ``matrix`` induces a cycle.

        Note:
            Diagonal entries of ``matrix`` are ignored.
        """
        matrix = torch.as_tensor(matrix)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(
                f"`matrix` must be square, got shape {(*matrix.shape,)}"
            )

        n = int(matrix.shape[0])
        rel = (matrix != 0) & ~torch.eye(n, dtype=torch.bool)

        return cls._wrap(_acyclic_or_raise(rel, "`matrix`"))

    def _check(self) -> None:
        match self._state:
            case PosetState.CORRUPTED:
                raise CorruptedPosetError(
                    "poset has become corrupted and must be discarded"
                )
            case PosetState.PENDING:
                raise PendingRelationsError(
                    "poset has staged relations, `commit()` must be called first"
                )

    @property
    def _matrix(self) -> torch.Tensor:
        self._check()
        return self._store.view

    def _lookup(self, element: object) -> int | None:
        # any integral type is accepted except bool
        if isinstance(element, bool):
            return None
        try:
            idx = operator.index(element) - 1
        except TypeError:
            return None
        return idx if 0 <= idx < len(self._store) else None

    def _index(self, element: int) -> int:
        idx = self._lookup(element)
        if idx is None:
            raise IndexError(f"poset has no element {element}")
        return idx

    def __contains__(self, element: object) -> bool:
        self._check()
        return self._lookup(element) is not None

    def __len__(self) -> int:
        return len(self._matrix)

    def __call__(self, a: int, b: int) -> bool:
        return self.has_relation(a, b)

    def __getitem__(self, element: int) -> PosetElement:
        self._check()
        return PosetElement(self, element)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poset):
            return False
        lhs, rhs = self._matrix, other._matrix
        return lhs.shape == rhs.shape and bool(torch.equal(lhs, rhs))

    __hash__ = None  # type: ignore[assignment]

    def __le__(self, other: Poset) -> bool:
        return self.issubset(other)

    def __add__(self, other: Poset) -> Poset:
        return self.disjoint_union(other)

    def __truediv__(self, other: Poset) -> Poset:
        return self.stack(other)

    def __and__(self, other: Poset) -> Poset:
        return self.intersection(other)

    def __repr__(self) -> str:
        if self._state is not PosetState.VALID:
            return (
                f"{type(self).__name__}(nelements={len(self._store)}, "
                f"state={self._state.name})"
            )
        return (
            f"{type(self).__name__}(nelements={len(self._store)}, "
            f"nrelations={self.nrelations})"
        )

    @property
    def state(self) -> PosetState:
        r"""Consistency state of the poset.

        Returns:
            PosetState: current state.
        """
        return self._state

    @property
    def nelements(self) -> int:
        r"""Number of elements in the poset.

        Returns:
            int: number of elements.
        """
        return len(self)

    @property
    def nrelations(self) -> int:
        r"""Number of relations ``a < b`` in the poset.

        Returns:
            int: number of related pairs.
        """
        return int(self._matrix.sum())

    def copy(self) -> Poset:
        r"""Returns an independent copy of the poset.

        Returns:
            Poset: deep copy of ``self``.
        """
        return Poset(self)

    def relations(self) -> Iterator[Relation]:
        r"""Iterates over every relation of the poset exactly once.

        Returns:
            Iterator[Relation]: relations of the poset.
        """
        pairs = self._matrix.nonzero().tolist()
        return (Relation(i + 1, j + 1) for i, j in pairs)

    def add_element(self, count: int = 1) -> range:
        r"""Appends new elements, unrelated to each other and to existing elements.

        Args:
            count (int, optional): number of elements to add. Defaults to ``1``.

        Returns:
            range: identifiers of the new elements.

        Raises:
            TypeError: ``count`` must be of type ``int``.
            ValueError: ``count`` must be nonnegative.
        """
        if not isinstance(count, int):
            raise TypeError("`count` must be of type `int`")
        if count < 0:
            raise ValueError("`count` must be nonnegative")

        n = len(self)
        self._store.grow(count)
        return range(n + 1, n + count + 1)

    def add_relation(self, a: int, b: int) -> bool:
        r"""Adds the relation ``a < b`` along with everything it implies.

        For every ``x <= a`` and every ``y >= b`` the relation ``x < y`` is added,
        which is the least work needed to keep the relation transitively closed.

        Args:
            a (int): lesser element.
            b (int): greater element.

        Returns:
            bool: ``True`` if ``a < b`` holds afterwards, ``False`` if adding it
            would violate irreflexivity or antisymmetry (the poset is unchanged).

        Raises:
            IndexError: ``a`` or ``b`` is not an element of the poset.
        """
        rel = self._matrix
        i, j = self._index(a), self._index(b)

        if i == j or rel[j, i]:
            return False

        if not rel[i, j]:
            extend_closure_(rel, i, j)

        return True

    def stage_relations(self, relations: Iterable[Relation]) -> int:
        r"""Inserts raw relations without closing or checking for cycles.

        The poset cannot be used again until :py:meth:`commit` is called.

        Args:
            relations (Iterable[Relation]): relations to insert.

        Returns:
            int: number of relations staged, not counting those of an element
            with itself, which are ignored.

        Raises:
            TypeError: elements of ``relations`` must be of type :py:class:`Relation`.
            IndexError: a relation refers to an element not in the poset.
            ~pyposet.CorruptedPosetError: the poset has been corrupted.

        Warning:
            A cycle among the staged relations corrupts the poset on commit.
        """
        if self._state is PosetState.CORRUPTED:
            self._check()

        pairs = []
        for pair in relations:
            if not isinstance(pair, Relation):
                raise TypeError("elements of `relations` must be of type `Relation`")
            i, j = self._index(pair.lesser), self._index(pair.greater)
            if i != j:
                pairs.append((i, j))

        if pairs:
            idx = torch.tensor(pairs, dtype=torch.int64)
            self._store.view[idx[:, 0], idx[:, 1]] = True

        self._state = PosetState.PENDING
        return len(pairs)

    def commit(self) -> CommitResult:
        r"""Closes staged relations and checks the result for consistency.

        Returns:
            Valid | Corrupted: :py:class:`Valid` with the new relation count, or
            :py:class:`Corrupted` with the elements found on a cycle, in which case
            the poset is unusable.

        Raises:
            ~pyposet.CorruptedPosetError: the poset has already been corrupted.
        """
        if self._state is PosetState.VALID:
            return Valid(self.nrelations)
        if self._state is PosetState.CORRUPTED:
            self._check()

        rel = close_(self._store.view)
        cycle = cyclic_elements(rel)

        if cycle.numel() > 0:
            self._state = PosetState.CORRUPTED
            logger.warning(
                "committed relations form a cycle through %d elements, "
                "poset is now corrupted",
                cycle.numel(),
            )
            return Corrupted(tuple(v + 1 for v in cycle.tolist()))

        self._state = PosetState.VALID
        return Valid(self.nrelations)

    def add_relations(self, relations: Iterable[Relation]) -> CommitResult:
        r"""Adds many relations with a single closure pass.

        Equivalent to :py:meth:`stage_relations` followed by :py:meth:`commit`.

        Args:
            relations (Iterable[Relation]): relations to add.

        Returns:
            Valid | Corrupted: outcome of the commit.

        Warning:
            If the relations contain a cycle, the poset is left corrupted.
        """
        self.stage_relations(relations)
        return self.commit()

    def remove_relation(
        self,
        a: int,
        b: int,
        strategy: RemovalStrategy = RemovalStrategy.INTERVAL,
    ) -> bool:
        r"""Removes the relation ``a < b`` and the relations through the interval.

        For every ``x`` with ``a < x < b``, both ``a < x`` and ``x < b`` are removed
        so that ``a < b`` cannot be derived again by transitivity.

        Args:
            a (int): lesser element.
            b (int): greater element.
            strategy (RemovalStrategy, optional): whether ``a < b`` itself is
                removed. Defaults to ``RemovalStrategy.INTERVAL``.

        Returns:
            bool: ``True`` if ``a < b`` held before the call, otherwise ``False``
            and the poset is unchanged.

        Raises:
            TypeError: ``strategy`` is not a valid :py:class:`RemovalStrategy`.
            ~pyposet.CorruptedPosetError: the result is not transitively closed.

        Note:
            With ``RemovalStrategy.RETAIN_DIRECT`` the call only clears the
            interval, so ``a < b`` still holds afterwards.
        """
        if not isinstance(strategy, RemovalStrategy):
            raise TypeError("`strategy` is not a valid `RemovalStrategy`")
        if not self.has_relation(a, b):
            return False

        rel = self._matrix
        i, j = self._index(a), self._index(b)
        inside = rel[i] & rel[:, j]

        rel[i, inside] = False
        rel[inside, j] = False

        match strategy:
            case RemovalStrategy.INTERVAL:
                rel[i, j] = False
            case RemovalStrategy.RETAIN_DIRECT:
                pass

        if not is_transitive(rel):
            self._state = PosetState.CORRUPTED
            raise CorruptedPosetError(
                f"removing {a} < {b} left the relation without transitive closure"
            )

        return True

    def remove_element(self, element: int) -> None:
        r"""Removes an element, renumbering the last element to take its place.

        The relations of ``element`` are discarded. The element previously named
        ``n`` is then named ``element`` and keeps the relations it had as ``n``.

        Args:
            element (int): element to remove.

        Raises:
            IndexError: ``element`` is not an element of the poset.
        """
        self._check()
        self._store.swap_remove(self._index(element))

    def has_relation(self, a: int, b: int) -> bool:
        r"""Tests if ``a < b``.

        Args:
            a (int): possible lesser element.
            b (int): possible greater element.

        Returns:
            bool: if ``a < b``, ``False`` when either is not an element.
        """
        rel = self._matrix
        i, j = self._lookup(a), self._lookup(b)
        return i is not None and j is not None and bool(rel[i, j])

    def are_comparable(self, a: int, b: int) -> bool:
        r"""Tests if ``a < b``, ``a == b`` or ``a > b``.

        Args:
            a (int): first element.
            b (int): second element.

        Returns:
            bool: if ``a`` and ``b`` are comparable, ``False`` when either is not
            an element.
        """
        rel = self._matrix
        i, j = self._lookup(a), self._lookup(b)
        if i is None or j is None:
            return False
        return i == j or bool(rel[i, j] | rel[j, i])

    def are_incomparable(self, a: int, b: int) -> bool:
        r"""Tests if ``a`` and ``b`` are distinct and unrelated.

        Args:
            a (int): first element.
            b (int): second element.

        Returns:
            bool: if ``a`` and ``b`` are incomparable, ``False`` when either is not
            an element.
        """
        if a not in self or b not in self:
            return False
        return not self.are_comparable(a, b)

    def above(self, a: int) -> Iterable[int]:
        r"""Iterates over the elements strictly above ``a``.

        Args:
            a (int): element.

        Returns:
            Iterable[int]: restartable view of the elements ``k`` with ``a < k``.
        """
        self._check()
        return _ElementView(self, lambda rel, i: rel[i], a)

    def below(self, a: int) -> Iterable[int]:
        r"""Iterates over the elements strictly below ``a``.

        Args:
            a (int): element.

        Returns:
            Iterable[int]: restartable view of the elements ``k`` with ``k < a``.
        """
        self._check()
        return _ElementView(self, lambda rel, i: rel[:, i], a)

    def between(self, a: int, b: int) -> Iterable[int]:
        r"""Iterates over the elements strictly between ``a`` and ``b``.

        Args:
            a (int): lower element.
            b (int): upper element.

        Returns:
            Iterable[int]: restartable view of the elements ``k`` with
            ``a < k < b``.
        """
        self._check()
        return _ElementView(self, lambda rel, i, j: rel[i] & rel[:, j], a, b)

    def covered_by(self, a: int, b: int) -> bool:
        r"""Tests if ``a`` is covered by ``b``.

        Args:
            a (int): lower element.
            b (int): upper element.

        Returns:
            bool: if ``a < b`` and no ``c`` satisfies ``a < c < b``.
        """
        if not self.has_relation(a, b):
            return False
        rel = self._matrix
        i, j = self._index(a), self._index(b)
        return not bool((rel[i] & rel[:, j]).any())

    def just_above(self, a: int) -> Iterable[int]:
        r"""Iterates over the elements covering ``a``.

        Args:
            a (int): element.

        Returns:
            Iterable[int]: elements ``k`` such that ``a`` is covered by ``k``.
        """
        self._check()
        return _ElementView(self, _upper_covers, a)

    def just_below(self, a: int) -> Iterable[int]:
        r"""Iterates over the elements covered by ``a``.

        Args:
            a (int): element.

        Returns:
            Iterable[int]: elements ``k`` such that ``k`` is covered by ``a``.
        """
        self._check()
        return _ElementView(self, _lower_covers, a)

    def is_chain(self, elements: Iterable[int]) -> bool:
        r"""Tests if every two of the given elements are comparable.

        Args:
            elements (Iterable[int]): elements to test.

        Returns:
            bool: if ``elements`` form a chain, ``False`` if any is not an element.
        """
        sub = self._restrict(elements)
        if sub is None:
            return False
        return bool((sub | sub.T | torch.eye(len(sub), dtype=torch.bool)).all())

    def is_antichain(self, elements: Iterable[int]) -> bool:
        r"""Tests if no two of the given elements are comparable.

        Args:
            elements (Iterable[int]): elements to test.

        Returns:
            bool: if ``elements`` form an antichain, ``False`` if any is not an
            element.
        """
        sub = self._restrict(elements)
        if sub is None:
            return False
        return not bool(sub.any())

    def _restrict(self, elements: Iterable[int]) -> torch.Tensor | None:
        rel = self._matrix
        found = [self._lookup(e) for e in elements]
        if None in found:
            return None
        # drop repeats
        idx = torch.tensor([*dict.fromkeys(found)], dtype=torch.int64)
        return rel[idx][:, idx]

    def issubset(self, other: Poset) -> bool:
        r"""Tests if this poset is contained in another.

        Args:
            other (Poset): possible superset.

        Returns:
            bool: if ``other`` has at least as many elements and every relation of
            ``self`` holds in ``other``.
        """
        lhs, rhs = self._matrix, other._matrix
        n = len(lhs)
        if n > len(rhs):
            return False
        return not bool((lhs & ~rhs[:n, :n]).any())

    def minimals(self) -> Iterable[int]:
        r"""Iterates over the minimal elements.

        Returns:
            Iterable[int]: elements with nothing below them.
        """
        self._check()
        return _ElementView(self, lambda rel: ~rel.any(0))

    def maximals(self) -> Iterable[int]:
        r"""Iterates over the maximal elements.

        Returns:
            Iterable[int]: elements with nothing above them.
        """
        self._check()
        return _ElementView(self, lambda rel: ~rel.any(1))

    def minimum(self) -> int | None:
        r"""Returns the element below every other element.

        Returns:
            int | None: least element, or ``None`` if there is none.
        """
        rel = self._matrix
        found = (rel.sum(1) == len(rel) - 1).nonzero().squeeze(1).tolist()
        return found[0] + 1 if found else None

    def maximum(self) -> int | None:
        r"""Returns the element above every other element.

        Returns:
            int | None: greatest element, or ``None`` if there is none.
        """
        rel = self._matrix
        found = (rel.sum(0) == len(rel) - 1).nonzero().squeeze(1).tolist()
        return found[0] + 1 if found else None

    def join(self, a: int, b: int) -> int | None:
        r"""Least element above or equal to both ``a`` and ``b``.

        Args:
            a (int): first element.
            b (int): second element.

        Returns:
            int | None: the join of ``a`` and ``b``, or ``None`` if it does not
            exist.

        Raises:
            IndexError: ``a`` or ``b`` is not an element of the poset.
        """
        rel = self._matrix
        i, j = self._index(a), self._index(b)
        upper = rel[i].clone()
        upper[i] = True
        other = rel[j].clone()
        other[j] = True
        return self._extreme(upper & other, rel)

    def meet(self, a: int, b: int) -> int | None:
        r"""Greatest element below or equal to both ``a`` and ``b``.

        Args:
            a (int): first element.
            b (int): second element.

        Returns:
            int | None: the meet of ``a`` and ``b``, or ``None`` if it does not
            exist.

        Raises:
            IndexError: ``a`` or ``b`` is not an element of the poset.
        """
        rel = self._matrix
        i, j = self._index(a), self._index(b)
        lower = rel[:, i].clone()
        lower[i] = True
        other = rel[:, j].clone()
        other[j] = True
        return self._extreme(lower & other, rel.T)

    @staticmethod
    def _extreme(bounds: torch.Tensor, rel: torch.Tensor) -> int | None:
        # the bound related (through ``rel``) to every other bound
        for c in bounds.nonzero().squeeze(1).tolist():
            if int((bounds & ~rel[c]).sum()) == 1:
                return c + 1
        return None

    def reverse(self) -> Poset:
        r"""Returns the dual poset, with every relation reversed.

        Returns:
            Poset: poset in which ``a < b`` exactly when ``b < a`` in ``self``.
        """
        return Poset._wrap(self._matrix.T)

    def disjoint_union(self, other: Poset) -> Poset:
        r"""Returns the disjoint union of two posets.

        Args:
            other (Poset): poset placed alongside ``self``.

        Returns:
            Poset: poset where elements ``1..n`` are a copy of ``self`` and the
            following elements are a copy of ``other``, with no relations between
            the two.
        """
        lhs, rhs = self._matrix, other._matrix
        n, m = len(lhs), len(rhs)

        rel = torch.zeros(n + m, n + m, dtype=torch.bool)
        rel[:n, :n] = lhs
        rel[n:, n:] = rhs
        return Poset._wrap(rel)

    def stack(self, other: Poset) -> Poset:
        r"""Returns a poset with a copy of ``self`` placed above a copy of ``other``.

        Args:
            other (Poset): poset placed below ``self``.

        Returns:
            Poset: poset numbered as :py:meth:`disjoint_union`, where every element
            of ``other`` is below every element of ``self``.
        """
        n = len(self)
        stacked = self.disjoint_union(other)
        stacked._store.view[n:, :n] = True
        return stacked

    def intersection(self, other: Poset) -> Poset:
        r"""Returns the relations common to two posets.

        Args:
            other (Poset): poset to intersect with.

        Returns:
            Poset: poset on the smaller number of elements, in which ``a < b``
            exactly when it holds in both ``self`` and ``other``.
        """
        lhs, rhs = self._matrix, other._matrix
        k = min(len(lhs), len(rhs))
        return Poset._wrap(lhs[:k, :k] & rhs[:k, :k])

    def induced_subposet(self, elements: Sequence[int]) -> tuple[Poset, dict[int, int]]:
        r"""Returns the subposet induced on a set of elements.

        Args:
            elements (Sequence[int]): elements to keep, in their new order.

        Returns:
            tuple[Poset, dict[int, int]]: tuple of the subposet and a mapping from
            each element of the subposet to the element of ``self`` it came from.

        Raises:
            IndexError: an entry of ``elements`` is not an element of the poset.
            ValueError: ``elements`` cannot contain duplicate entries.
        """
        rel = self._matrix
        idx = [self._index(e) for e in elements]
        if len(set(idx)) != len(idx):
            raise ValueError("`elements` cannot contain duplicate entries")

        sel = torch.tensor(idx, dtype=torch.int64)
        return (
            Poset._wrap(rel[sel][:, sel]),
            {k + 1: v + 1 for k, v in enumerate(idx)},
        )

    def linear_extension(self) -> Poset:
        r"""Returns a total order containing this poset.

        Returns:
            Poset: linear extension of ``self``.
        """
        return Poset._wrap(chain_matrix(linear_order(self._matrix)))

    def zeta_matrix(self, dtype: torch.dtype = torch.int64) -> torch.Tensor:
        r"""Returns the zeta matrix, with ``(i, j)`` set when ``i + 1 <= j + 1``.

        Args:
            dtype (~torch.dtype, optional): dtype of the result.
                Defaults to ``torch.int64``.

        Returns:
            ~torch.Tensor: dense zeta matrix.
        """
        rel = self._matrix
        return (rel | torch.eye(len(rel), dtype=torch.bool)).to(dtype)

    def strict_zeta_matrix(self, dtype: torch.dtype = torch.int64) -> torch.Tensor:
        r"""Returns the strict zeta matrix, with ``(i, j)`` set when ``i + 1 < j + 1``.

        Args:
            dtype (~torch.dtype, optional): dtype of the result.
                Defaults to ``torch.int64``.

        Returns:
            ~torch.Tensor: dense strict zeta matrix.
        """
        return self._matrix.to(dtype, copy=True)

    def mobius_matrix(self) -> torch.Tensor:
        r"""Returns the Möbius matrix, the inverse of the zeta matrix.

        Returns:
            ~torch.Tensor: dense integer Möbius matrix.
        """
        zeta = self.zeta_matrix(torch.float64)
        if zeta.numel() == 0:
            return zeta.to(torch.int64)
        return torch.linalg.inv(zeta).round().to(torch.int64)

    def comparability_graph(self) -> nx.Graph:
        r"""Returns the comparability graph of the poset.

        Returns:
            ~networkx.Graph: graph on ``1..n`` with an edge between every pair of
            distinct comparable elements.
        """
        graph = nx.Graph()
        graph.add_nodes_from(range(1, len(self) + 1))
        graph.add_edges_from((r.lesser, r.greater) for r in self.relations())
        return graph

    def cover_digraph(self) -> nx.DiGraph:
        r"""Returns the cover digraph (Hasse diagram) of the poset.

        Returns:
            ~networkx.DiGraph: directed graph on ``1..n`` with an edge from ``a``
            to ``b`` exactly when ``a`` is covered by ``b``.
        """
        rel = self._matrix
        covers = rel & ~compose(rel, rel)

        graph = nx.DiGraph()
        graph.add_nodes_from(range(1, len(rel) + 1))
        graph.add_edges_from((i + 1, j + 1) for i, j in covers.nonzero().tolist())
        return graph
