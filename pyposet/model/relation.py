from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Relation:
    r"""Ordered pair of elements in a poset, ``lesser`` below ``greater``.

    This is the only shape in which relations are requested in bulk and the shape
    in which they are enumerated.

    Args:
        lesser (int): the lesser element.
        greater (int): the greater element.
    """

    lesser: int
    greater: int

    def __repr__(self) -> str:
        return f"Relation({self.lesser} < {self.greater})"

    @property
    def src(self) -> int:
        r"""Lesser element of the relation.

        Returns:
            int: lesser element.
        """
        return self.lesser

    @property
    def dst(self) -> int:
        r"""Greater element of the relation.

        Returns:
            int: greater element.
        """
        return self.greater


class PosetState(Enum):
    r"""Consistency states of a poset.

    - ``VALID``: all invariants hold.
    - ``PENDING``: raw relations have been staged and await a commit.
    - ``CORRUPTED``: a commit produced a cycle, the poset is unusable.
    """

    VALID = auto()
    PENDING = auto()
    CORRUPTED = auto()


class RemovalStrategy(Enum):
    r"""Strategies for removing a relation ``a < b`` from a poset.

    Both strategies remove ``a < x`` and ``x < b`` for every ``x`` strictly between
    ``a`` and ``b``.

    - ``INTERVAL``: ``a < b`` itself is removed as well.
    - ``RETAIN_DIRECT``: ``a < b`` itself is kept.
    """

    INTERVAL = auto()
    RETAIN_DIRECT = auto()


@dataclass(frozen=True, slots=True)
class Valid:
    r"""Outcome of a commit which left the poset consistent.

    Args:
        nrelations (int): number of relations after closing.
    """

    nrelations: int


@dataclass(frozen=True, slots=True)
class Corrupted:
    r"""Outcome of a commit which left the poset with a cycle.

    Args:
        cycle (tuple[int, ...]): elements lying on at least one cycle.
    """

    cycle: tuple[int, ...]


type CommitResult = Valid | Corrupted
