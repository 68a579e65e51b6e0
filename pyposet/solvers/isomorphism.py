import logging
from collections import Counter

import einops as ein
import torch

from ..exceptions import NotIsomorphicError
from ..model import Poset

logger = logging.getLogger(__name__)


def _signatures(rel: torch.Tensor) -> list[tuple[int, int]]:
    below = ein.reduce(rel.to(torch.int64), "i j -> j", "sum")
    above = ein.reduce(rel.to(torch.int64), "i j -> i", "sum")
    return [*zip(below.tolist(), above.tolist())]


def _search(lhs: torch.Tensor, rhs: torch.Tensor) -> list[int] | None:
    r"""Backtracking search for an order-preserving bijection.

    Args:
        lhs (~torch.Tensor): relation of the domain poset.
        rhs (~torch.Tensor): relation of the codomain poset, same size as ``lhs``.

    Returns:
        list[int] | None: zero-based image of each domain element, or ``None`` if
        the relations are not isomorphic.
    """
    n = len(lhs)
    lsig, rsig = _signatures(lhs), _signatures(rhs)

    # an element can only map to one with as many elements below and above it
    candidates = [[w for w in range(n) if rsig[w] == lsig[v]] for v in range(n)]
    order = sorted(range(n), key=lambda v: len(candidates[v]))

    image = [-1] * n
    used = [False] * n
    tried = [0] * (n + 1)
    depth = 0

    while depth >= 0:
        if depth == n:
            return image

        v = order[depth]

        # undo the previous choice at this depth
        if image[v] >= 0:
            used[image[v]] = False
            image[v] = -1

        mapped = torch.tensor(order[:depth], dtype=torch.int64)
        images = torch.tensor([image[u] for u in order[:depth]], dtype=torch.int64)

        while tried[depth] < len(candidates[v]):
            w = candidates[v][tried[depth]]
            tried[depth] += 1

            if used[w]:
                continue
            if not torch.equal(lhs[v, mapped], rhs[w, images]):
                continue
            if not torch.equal(lhs[mapped, v], rhs[images, w]):
                continue

            image[v] = w
            used[w] = True
            break

        if image[v] >= 0:
            depth += 1
            tried[depth] = 0
        else:
            tried[depth] = 0
            depth -= 1

    return None


def _mismatch(lhs: torch.Tensor, rhs: torch.Tensor) -> str | None:
    r"""Compares cheap isomorphism invariants.

    Returns:
        str | None: description of the first invariant that differs, or ``None``.
    """
    if len(lhs) != len(rhs):
        return f"posets have different numbers of elements, {len(lhs)} and {len(rhs)}"
    if int(lhs.sum()) != int(rhs.sum()):
        return (
            f"posets have different numbers of relations, "
            f"{int(lhs.sum())} and {int(rhs.sum())}"
        )
    if Counter(_signatures(lhs)) != Counter(_signatures(rhs)):
        return "posets have different up-set and down-set sizes"
    return None


def iso(p: Poset, q: Poset) -> dict[int, int]:
    r"""Finds an isomorphism between two posets.

    Posets with different numbers of elements or relations are rejected without
    searching.

    Args:
        p (~pyposet.Poset): domain poset.
        q (~pyposet.Poset): codomain poset.

    Returns:
        dict[int, int]: bijection ``f`` from the elements of ``p`` to those of
        ``q`` such that ``a < b`` in ``p`` exactly when ``f[a] < f[b]`` in ``q``.

    Raises:
        ~pyposet.NotIsomorphicError: ``p`` and ``q`` are not isomorphic.

    Note:
        When several isomorphisms exist, which is returned is unspecified.
    """
    lhs = p.strict_zeta_matrix(torch.bool)
    rhs = q.strict_zeta_matrix(torch.bool)

    reason = _mismatch(lhs, rhs)
    if reason is not None:
        raise NotIsomorphicError(reason)

    logger.debug("searching for an isomorphism between posets of size %d", len(lhs))
    image = _search(lhs, rhs)

    if image is None:
        raise NotIsomorphicError("posets are not isomorphic")

    return {v + 1: w + 1 for v, w in enumerate(image)}


def iso_check(p: Poset, q: Poset) -> bool:
    r"""Tests if two posets are isomorphic.

    Args:
        p (~pyposet.Poset): first poset.
        q (~pyposet.Poset): second poset.

    Returns:
        bool: if an isomorphism from ``p`` to ``q`` exists.
    """
    lhs = p.strict_zeta_matrix(torch.bool)
    rhs = q.strict_zeta_matrix(torch.bool)
    return _mismatch(lhs, rhs) is None and _search(lhs, rhs) is not None
