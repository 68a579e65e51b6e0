import itertools
import random

import torch

from pyposet import Poset, Relation


def chain(n: int) -> Poset:
    return Poset.from_relations(n, [Relation(i, i + 1) for i in range(1, n)])


def antichain(n: int) -> Poset:
    return Poset(n)


def standard_example(n: int) -> Poset:
    assert n > 0
    return Poset.from_relations(
        2 * n,
        [
            Relation(i, n + j)
            for i in range(1, n + 1)
            for j in range(1, n + 1)
            if i != j
        ],
    )


def subset_lattice(d: int) -> Poset:
    size = 2**d
    return Poset.from_matrix(
        [[(a & b) == a and a != b for b in range(size)] for a in range(size)]
    )


def random_poset(n: int, d: int = 2, seed: int | None = None) -> Poset:
    rng = random.Random(seed)

    positions = []
    for _ in range(d):
        perm = list(range(n))
        rng.shuffle(perm)
        positions.append(perm)

    return Poset.from_matrix(
        [
            [all(pos[a] < pos[b] for pos in positions) for b in range(n)]
            for a in range(n)
        ]
    )


def relabeled(poset: Poset, seed: int | None = None) -> tuple[Poset, dict[int, int]]:
    rng = random.Random(seed)
    perm = list(range(1, len(poset) + 1))
    rng.shuffle(perm)
    mapping = {old: new for old, new in zip(range(1, len(poset) + 1), perm)}

    return (
        Poset.from_relations(
            len(poset),
            [
                Relation(mapping[r.lesser], mapping[r.greater])
                for r in poset.relations()
            ],
        ),
        mapping,
    )


def is_partial_order(poset: Poset) -> bool:
    rel = poset.strict_zeta_matrix(torch.bool)
    n = len(rel)

    for a in range(n):
        if rel[a, a]:
            return False
        for b in range(n):
            if rel[a, b] and rel[b, a]:
                return False
            for c in range(n):
                if rel[a, b] and rel[b, c] and not rel[a, c]:
                    return False

    return True


def brute_width(poset: Poset) -> int:
    elements = range(1, len(poset) + 1)
    for size in reversed(range(len(poset) + 1)):
        for subset in itertools.combinations(elements, size):
            if poset.is_antichain(subset):
                return size
    return 0
