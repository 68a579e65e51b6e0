import logging

import networkx as nx
import torch

from .._internal import _Grading
from ..infra import linear_order
from ..model import Poset

logger = logging.getLogger(__name__)


def _ranks(rel: torch.Tensor) -> torch.Tensor:
    r"""Computes the size of the largest chain with each element on top.

    Args:
        rel (~torch.Tensor): transitively closed, acyclic square boolean matrix.

    Returns:
        ~torch.Tensor: rank of each element, minimal elements having rank 1.
    """
    ranks = torch.zeros(len(rel), dtype=torch.int64)

    # everything below an element precedes it in a linear extension
    for v in linear_order(rel).tolist():
        below = rel[:, v]
        ranks[v] = ranks[below].max() + 1 if below.any() else 1

    return ranks


def _split_matching(
    rel: torch.Tensor,
) -> tuple[nx.Graph, list[tuple[str, int]], dict[tuple[str, int], tuple[str, int]]]:
    r"""Computes a maximum matching on the split graph of a relation.

    The split graph has a lower copy ``("lo", v)`` and an upper copy ``("hi", v)``
    of every element, with an edge ``("lo", a)``-``("hi", b)`` for every ``a < b``.

    Args:
        rel (~torch.Tensor): transitively closed, acyclic square boolean matrix.

    Returns:
        tuple[~networkx.Graph, list, dict]: tuple of the split graph, its lower
        nodes, and the matching (with both directions of each matched edge).
    """
    n = len(rel)
    lower = [("lo", v) for v in range(n)]

    graph = nx.Graph()
    graph.add_nodes_from(lower, bipartite=0)
    graph.add_nodes_from((("hi", v) for v in range(n)), bipartite=1)
    graph.add_edges_from((("lo", a), ("hi", b)) for a, b in rel.nonzero().tolist())

    matching = nx.bipartite.hopcroft_karp_matching(graph, top_nodes=lower)
    logger.debug(
        "split graph with %d edges has a matching of size %d",
        graph.number_of_edges(),
        len(matching) // 2,
    )

    return graph, lower, matching


def height(poset: Poset) -> int:
    r"""Size of a largest chain.

    Args:
        poset (~pyposet.Poset): poset to measure.

    Returns:
        int: height of ``poset``, ``0`` when it is empty.
    """
    rel = poset.strict_zeta_matrix(torch.bool)
    if len(rel) == 0:
        return 0
    return int(_ranks(rel).max())


def width(poset: Poset) -> int:
    r"""Size of a largest antichain.

    By Dilworth's theorem this is the number of chains in a smallest chain
    partition, which is ``n`` minus the size of a maximum matching in the split
    graph.

    Args:
        poset (~pyposet.Poset): poset to measure.

    Returns:
        int: width of ``poset``, ``0`` when it is empty.
    """
    rel = poset.strict_zeta_matrix(torch.bool)
    if len(rel) == 0:
        return 0
    _, lower, matching = _split_matching(rel)
    return len(rel) - sum(1 for node in lower if node in matching)


def max_chain(poset: Poset) -> list[int]:
    r"""Finds a largest chain.

    Args:
        poset (~pyposet.Poset): poset to search.

    Returns:
        list[int]: elements of a largest chain, lowest first.

    Note:
        When several chains have the largest size, which is returned is unspecified.
    """
    rel = poset.strict_zeta_matrix(torch.bool)
    if len(rel) == 0:
        return []

    ranks = _ranks(rel)
    chain = [int(ranks.argmax())]

    # walk down through elements exactly one rank lower
    while ranks[chain[-1]] > 1:
        top = chain[-1]
        step = rel[:, top] & (ranks == ranks[top] - 1)
        chain.append(int(step.nonzero()[0, 0]))

    return [v + 1 for v in reversed(chain)]


def max_antichain(poset: Poset) -> list[int]:
    r"""Finds a largest antichain.

    A minimum vertex cover of the split graph (König's theorem) leaves both copies
    of exactly ``width`` elements uncovered, and those elements are pairwise
    incomparable.

    Args:
        poset (~pyposet.Poset): poset to search.

    Returns:
        list[int]: elements of a largest antichain, in increasing order.

    Note:
        When several antichains have the largest size, which is returned is
        unspecified.
    """
    rel = poset.strict_zeta_matrix(torch.bool)
    if len(rel) == 0:
        return []

    graph, lower, matching = _split_matching(rel)
    cover = nx.bipartite.to_vertex_cover(graph, matching, top_nodes=lower)

    return [
        v + 1
        for v in range(len(rel))
        if ("lo", v) not in cover and ("hi", v) not in cover
    ]


def chain_cover(poset: Poset) -> list[list[int]]:
    r"""Partitions the elements into as few chains as possible.

    Each matched split-graph edge ``("lo", a)``-``("hi", b)`` places ``b``
    directly after ``a`` in a chain.

    Args:
        poset (~pyposet.Poset): poset to partition.

    Returns:
        list[list[int]]: chains, each listed lowest first. There are exactly
        ``width(poset)`` of them.
    """
    rel = poset.strict_zeta_matrix(torch.bool)
    if len(rel) == 0:
        return []

    _, lower, matching = _split_matching(rel)
    successor = {a: matching[("lo", a)][1] for _, a in lower if ("lo", a) in matching}

    chains = []
    for start in range(len(rel)):
        # chains start at elements with no matched predecessor
        if ("hi", start) in matching:
            continue

        chain = [start]
        while chain[-1] in successor:
            chain.append(successor[chain[-1]])
        chains.append([v + 1 for v in chain])

    return chains


def antichain_cover(poset: Poset) -> list[list[int]]:
    r"""Partitions the elements into as few antichains as possible.

    Elements are grouped by the size of the largest chain they sit on top of. By
    Mirsky's theorem this uses exactly ``height(poset)`` antichains.

    Args:
        poset (~pyposet.Poset): poset to partition.

    Returns:
        list[list[int]]: antichains, the minimal elements first.
    """
    rel = poset.strict_zeta_matrix(torch.bool)

    grading = _Grading[int]()
    for v, rank in enumerate(_ranks(rel).tolist()):
        grading[v + 1] = rank - 1

    return grading.layers()
