from . import model, solvers
from .exceptions import (
    CorruptedPosetError,
    CycleError,
    ForeignElementError,
    NoRealizerError,
    NotIsomorphicError,
    PendingRelationsError,
    SearchExhaustedError,
)
from .model import (
    CommitResult,
    Corrupted,
    Poset,
    PosetElement,
    PosetState,
    Relation,
    RemovalStrategy,
    Valid,
)
from .solvers import (
    antichain_cover,
    chain_cover,
    critical_pairs,
    dimension,
    height,
    iso,
    iso_check,
    max_antichain,
    max_chain,
    realizer,
    width,
)

__all__ = [
    # core model
    "Poset",
    "PosetElement",
    "Relation",
    "PosetState",
    "RemovalStrategy",
    "CommitResult",
    "Valid",
    "Corrupted",
    # solvers
    "height",
    "width",
    "max_chain",
    "max_antichain",
    "chain_cover",
    "antichain_cover",
    "critical_pairs",
    "realizer",
    "dimension",
    "iso",
    "iso_check",
    # errors
    "CycleError",
    "CorruptedPosetError",
    "PendingRelationsError",
    "ForeignElementError",
    "SearchExhaustedError",
    "NoRealizerError",
    "NotIsomorphicError",
    # additional modules
    "model",
    "solvers",
]

__version__ = "0.0.1"
