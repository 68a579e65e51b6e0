from .extremal import (
    antichain_cover,
    chain_cover,
    height,
    max_antichain,
    max_chain,
    width,
)
from .isomorphism import iso, iso_check
from .realizer import critical_pairs, dimension, realizer

__all__ = [
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
]
