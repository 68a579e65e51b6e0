import logging

import torch

from ..exceptions import NoRealizerError
from ..infra import chain_matrix, compose, extend_closure_, linear_order
from ..model import Poset

logger = logging.getLogger(__name__)


def _critical_mask(rel: torch.Tensor) -> torch.Tensor:
    r"""Marks the critical pairs of a transitively closed relation.

    An incomparable pair ``(a, b)`` is critical when everything below ``a`` is
    below ``b`` and everything above ``b`` is above ``a``.

    Args:
        rel (~torch.Tensor): transitively closed, acyclic square boolean matrix.

    Returns:
        ~torch.Tensor: boolean matrix with ``(a, b)`` set for each critical pair.
    """
    down = rel.T
    comparable = rel | rel.T | torch.eye(len(rel), dtype=torch.bool)

    down_subset = ~compose(down, ~down.T)
    up_subset = ~compose(rel, ~rel.T).T

    return ~comparable & down_subset & up_subset


def _reversing_extensions(
    rel: torch.Tensor, pairs: list[tuple[int, int]], size: int
) -> list[torch.Tensor] | None:
    r"""Searches for at most ``size`` extensions which together reverse every pair.

    Each pair ``(a, b)`` is assigned to an extension in which ``b < a`` is forced,
    which is possible exactly when that extension does not already have ``a < b``.
    The search is a depth-first backtrack over an explicit stack of partial
    assignments, new extensions only being opened one at a time.

    Args:
        rel (~torch.Tensor): transitively closed, acyclic square boolean matrix.
        pairs (list[tuple[int, int]]): zero-based incomparable pairs to reverse.
        size (int): maximum number of extensions.

    Returns:
        list[~torch.Tensor] | None: transitively closed relations containing
        ``rel``, one per extension used, or ``None`` if no assignment exists.
    """
    stack: list[tuple[int, tuple[torch.Tensor, ...]]] = [(0, ())]

    while stack:
        depth, extensions = stack.pop()

        if depth == len(pairs):
            return [*extensions]

        a, b = pairs[depth]

        # already reversed as a consequence of earlier assignments
        if any(bool(ext[b, a]) for ext in extensions):
            stack.append((depth + 1, extensions))
            continue

        children = []
        for slot in range(min(len(extensions) + 1, size)):
            base = extensions[slot] if slot < len(extensions) else rel
            if base[a, b]:
                continue

            forced = extend_closure_(base.clone(), b, a)
            children.append(
                (depth + 1, extensions[:slot] + (forced,) + extensions[slot + 1 :])
            )

        # lowest slot is explored first
        stack.extend(reversed(children))

    return None


def critical_pairs(poset: Poset) -> list[tuple[int, int]]:
    r"""Lists the critical pairs of a poset.

    A family of linear extensions is a realizer exactly when every critical pair
    ``(a, b)`` is reversed (``b < a``) in at least one of them.

    Args:
        poset (~pyposet.Poset): poset to inspect.

    Returns:
        list[tuple[int, int]]: critical pairs ``(a, b)``.
    """
    rel = poset.strict_zeta_matrix(torch.bool)
    return [(a + 1, b + 1) for a, b in _critical_mask(rel).nonzero().tolist()]


def realizer(poset: Poset, size: int) -> list[Poset]:
    r"""Finds linear extensions whose intersection is the poset.

    Args:
        poset (~pyposet.Poset): poset to realize.
        size (int): number of linear extensions.

    Returns:
        list[~pyposet.Poset]: ``size`` total orders whose intersection equals
        ``poset``. Extensions are repeated if fewer than ``size`` are required.

    Raises:
        TypeError: ``size`` must be of type ``int``.
        ValueError: ``size`` must be positive.
        ~pyposet.NoRealizerError: the dimension of ``poset`` exceeds ``size``.

    Warning:
        Finding a realizer is NP-hard for ``size >= 3`` and this search is
        exponential in the worst case.
    """
    if not isinstance(size, int):
        raise TypeError("`size` must be of type `int`")
    if size < 1:
        raise ValueError("`size` must be positive")

    rel = poset.strict_zeta_matrix(torch.bool)
    pairs = [(a, b) for a, b in _critical_mask(rel).nonzero().tolist()]

    logger.debug(
        "searching for a realizer of size %d over %d critical pairs", size, len(pairs)
    )
    extensions = _reversing_extensions(rel, pairs, size)

    if extensions is None:
        raise NoRealizerError(
            f"poset has dimension greater than {size}, no realizer found"
        )
    if not extensions:
        extensions = [rel]

    orders = [Poset._wrap(chain_matrix(linear_order(ext))) for ext in extensions]
    return orders + [orders[k % len(orders)].copy() for k in range(size - len(orders))]


def dimension(poset: Poset) -> int:
    r"""Computes the size of a smallest realizer.

    Sizes ``1, 2, 3, ...`` are tried in turn. A poset has dimension ``1`` exactly
    when it is a total order (including the empty poset).

    Args:
        poset (~pyposet.Poset): poset to measure.

    Returns:
        int: dimension of ``poset``.

    Warning:
        Computing the dimension is NP-hard, this may be slow even for posets of
        moderate size.
    """
    rel = poset.strict_zeta_matrix(torch.bool)
    pairs = [(a, b) for a, b in _critical_mask(rel).nonzero().tolist()]

    size = 1
    while _reversing_extensions(rel, pairs, size) is None:
        logger.debug("no realizer of size %d exists", size)
        size += 1

    return size
