from collections.abc import Hashable, Iterator, MutableMapping


class _Grading[T: Hashable](MutableMapping):
    r"""Assignment of items to nonnegative integer ranks.

    Items are kept both in a lookup from item to rank and in one insertion-ordered
    layer per rank, so that the items of a rank can be listed without a scan.

    Raises:
        TypeError: assigned ranks must be of type ``int``.
        ValueError: assigned ranks must be nonnegative.

    Important:
        Type ``T`` must be a subtype of :py:type:`~typing.Hashable`.

    Tip:
        Ranks need not be contiguous. An item may be placed at rank 2 while rank 1
        stays empty, in which case :py:meth:`layers` skips rank 1.
    """

    _rank_of: dict[T, int]
    _by_rank: list[dict[T, None]]

    def __init__(self) -> None:
        self._rank_of = {}
        self._by_rank = []

    def __contains__(self, item: object) -> bool:
        return item in self._rank_of

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Grading) and self._rank_of == other._rank_of

    def __getitem__(self, item: T) -> int:
        if item not in self._rank_of:
            raise KeyError(f"grading contains no item '{item}'")
        return self._rank_of[item]

    def __setitem__(self, item: T, rank: int) -> None:
        if not isinstance(rank, int):
            raise TypeError("`rank` must be of type `int`")
        if rank < 0:
            raise ValueError("`rank` must be nonnegative")

        if item in self._rank_of:
            self._by_rank[self._rank_of[item]].pop(item)

        while len(self._by_rank) <= rank:
            self._by_rank.append({})

        self._by_rank[rank][item] = None
        self._rank_of[item] = rank

    def __delitem__(self, item: T) -> None:
        if item not in self._rank_of:
            raise KeyError(f"grading contains no item '{item}'")

        self._by_rank[self._rank_of.pop(item)].pop(item)

    def __iter__(self) -> Iterator[T]:
        for layer in self._by_rank:
            yield from layer

    def __len__(self) -> int:
        return len(self._rank_of)

    def layers(self) -> list[list[T]]:
        r"""Items of each nonempty rank, lowest rank first.

        Returns:
            list[list[T]]: one list per occupied rank.
        """
        return [[*layer] for layer in self._by_rank if layer]
