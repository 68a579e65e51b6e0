from __future__ import annotations

import einops as ein
import torch


class RelationMatrix:
    r"""Dense square boolean matrix with amortized growth.

    Entry ``(i, j)`` is ``True`` exactly when element ``i`` is related to element
    ``j``, where indices are zero-based. Storage is allocated in powers of two so
    that appending elements one at a time costs amortized constant time per
    element.

    Args:
        size (int, optional): initial number of rows/columns. Defaults to ``0``.

    Raises:
        TypeError: ``size`` must be of type ``int``.
        ValueError: ``size`` must be nonnegative.

    Important:
        Only the leading ``size × size`` block is meaningful. All storage outside of
        that block is kept ``False`` so growing never exposes stale relations.
    """

    _data: torch.Tensor
    _size: int

    def __init__(self, size: int = 0) -> None:
        if not isinstance(size, int):
            raise TypeError("`size` must be of type `int`")
        if size < 0:
            raise ValueError("`size` must be nonnegative")

        self._size = size
        self._data = torch.zeros(
            _capacity_for(size), _capacity_for(size), dtype=torch.bool
        )

    @classmethod
    def wrap(cls, data: torch.Tensor) -> RelationMatrix:
        r"""Creates a matrix holding a copy of an existing square boolean tensor.

        Args:
            data (~torch.Tensor): square tensor to copy, cast to ``torch.bool``.

        Returns:
            RelationMatrix: new matrix with the same entries as ``data``.

        Raises:
            ValueError: ``data`` must be a square matrix.
        """
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(
                f"`data` must be a square matrix, got shape {(*data.shape,)}"
            )

        matrix = cls(int(data.shape[0]))
        matrix.view.copy_(data.to(torch.bool))
        return matrix

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        r"""Number of rows/columns allocated.

        Returns:
            int: allocated dimension of the underlying storage.
        """
        return int(self._data.shape[0])

    @property
    def view(self) -> torch.Tensor:
        r"""Live view of the meaningful block of the matrix.

        Returns:
            ~torch.Tensor: ``size × size`` view sharing storage with the matrix.
        """
        return self._data[: self._size, : self._size]

    def copy(self) -> RelationMatrix:
        r"""Returns an independent copy of the matrix.

        Returns:
            RelationMatrix: deep copy of ``self``.
        """
        return RelationMatrix.wrap(self.view)

    def grow(self, count: int) -> None:
        r"""Appends rows and columns with no entries set.

        Args:
            count (int): number of rows/columns to append.
        """
        size = self._size + count

        if size > self.capacity:
            data = torch.zeros(
                _capacity_for(size), _capacity_for(size), dtype=torch.bool
            )
            data[: self._size, : self._size] = self.view
            self._data = data

        self._size = size

    def swap_remove(self, index: int) -> None:
        r"""Removes a row/column, moving the last row/column into its place.

        Args:
            index (int): zero-based index of the row/column to remove.
        """
        last = self._size - 1

        self._data[index, : self._size] = False
        self._data[: self._size, index] = False

        if index != last:
            self._data[index, : self._size] = self._data[last, : self._size]
            self._data[: self._size, index] = self._data[: self._size, last]

        # keep storage outside the live block empty
        self._data[last, : self._size] = False
        self._data[: self._size, last] = False
        self._size = last


def _capacity_for(size: int) -> int:
    capacity = 1
    while capacity < size:
        capacity *= 2
    return capacity


def close_(rel: torch.Tensor) -> torch.Tensor:
    r"""Computes the transitive closure of a square boolean matrix in place.

    Uses the Floyd-Warshall recurrence, one vectorized rank-one update per pivot.

    Args:
        rel (~torch.Tensor): square boolean matrix to close.

    Returns:
        ~torch.Tensor: ``rel`` after closing.
    """
    for k in range(rel.shape[0]):
        rel |= ein.rearrange(rel[:, k], "i -> i 1") & ein.rearrange(
            rel[k, :], "j -> 1 j"
        )
    return rel


def extend_closure_(rel: torch.Tensor, lesser: int, greater: int) -> torch.Tensor:
    r"""Adds a relation to a transitively closed matrix and restores closure in place.

    Every element below or equal to ``lesser`` becomes related to every element
    above or equal to ``greater``.

    Args:
        rel (~torch.Tensor): transitively closed square boolean matrix.
        lesser (int): zero-based index of the lesser element.
        greater (int): zero-based index of the greater element.

    Returns:
        ~torch.Tensor: ``rel`` after the update.

    Important:
        The caller is responsible for ensuring ``greater`` is not already below
        ``lesser``, otherwise the result will contain a cycle.
    """
    ups = rel[:, lesser].clone()
    ups[lesser] = True
    downs = rel[greater, :].clone()
    downs[greater] = True

    rows = ups.nonzero().squeeze(1)
    cols = downs.nonzero().squeeze(1)
    rel[ein.rearrange(rows, "i -> i 1"), ein.rearrange(cols, "j -> 1 j")] = True
    return rel


def compose(lhs: torch.Tensor, rhs: torch.Tensor) -> torch.Tensor:
    r"""Boolean product of two relations.

    Args:
        lhs (~torch.Tensor): boolean matrix of shape ``(n, m)``.
        rhs (~torch.Tensor): boolean matrix of shape ``(m, k)``.

    Returns:
        ~torch.Tensor: boolean matrix where ``(i, j)`` is set when some ``z`` has
        ``lhs[i, z]`` and ``rhs[z, j]``.
    """
    return (
        ein.einsum(lhs.to(torch.float64), rhs.to(torch.float64), "i z, z j -> i j")
        > 0
    )


def is_transitive(rel: torch.Tensor) -> bool:
    r"""Tests if a square boolean matrix is transitively closed.

    Args:
        rel (~torch.Tensor): square boolean matrix.

    Returns:
        bool: if every two-step path is also a direct relation.
    """
    return not bool((compose(rel, rel) & ~rel).any())


def cyclic_elements(rel: torch.Tensor) -> torch.Tensor:
    r"""Finds the elements lying on a cycle of a transitively closed matrix.

    Args:
        rel (~torch.Tensor): transitively closed square boolean matrix.

    Returns:
        ~torch.Tensor: zero-based indices whose diagonal entry is set.
    """
    return torch.diagonal(rel).nonzero().squeeze(1)


def linear_order(rel: torch.Tensor) -> torch.Tensor:
    r"""Orders the elements of a transitively closed, acyclic matrix topologically.

    If ``x`` is below ``y`` then everything below ``x`` is also below ``y``, so
    ``x`` has strictly fewer elements beneath it. Sorting by the size of the
    down-set is therefore a linear extension.

    Args:
        rel (~torch.Tensor): transitively closed, acyclic square boolean matrix.

    Returns:
        ~torch.Tensor: zero-based indices, lowest element first.
    """
    return torch.argsort(
        ein.reduce(rel.to(torch.int64), "i j -> j", "sum"), stable=True
    )


def chain_matrix(order: torch.Tensor) -> torch.Tensor:
    r"""Builds the relation of a total order.

    Args:
        order (~torch.Tensor): zero-based indices, lowest element first.

    Returns:
        ~torch.Tensor: square boolean matrix where ``(i, j)`` is set when ``i``
        precedes ``j`` in ``order``.
    """
    position = torch.empty_like(order)
    position[order] = torch.arange(order.numel(), dtype=order.dtype)
    return ein.rearrange(position, "i -> i 1") < ein.rearrange(position, "j -> 1 j")
