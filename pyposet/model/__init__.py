from .element import PosetElement
from .poset import Poset
from .relation import (
    CommitResult,
    Corrupted,
    PosetState,
    Relation,
    RemovalStrategy,
    Valid,
)

__all__ = [
    "Poset",
    "PosetElement",
    "Relation",
    "PosetState",
    "RemovalStrategy",
    "CommitResult",
    "Valid",
    "Corrupted",
]
