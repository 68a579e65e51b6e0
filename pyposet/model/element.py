from __future__ import annotations
import operator
from typing import TYPE_CHECKING

from ..exceptions import ForeignElementError

if TYPE_CHECKING:
    from .poset import Poset


class PosetElement:
    r"""Handle to an element of a specific poset.

    Handles are created with ``poset[element]`` and compare using the order of the
    poset they were taken from. They do not own the poset, and renumbering the
    poset (see :py:meth:`~pyposet.Poset.remove_element`) is not tracked.

    Args:
        poset (~pyposet.Poset): poset containing the element.
        element (int): the element.

    Raises:
        IndexError: ``element`` is not an element of ``poset``.

    Important:
        Comparing handles taken from different posets raises
        :py:class:`~pyposet.ForeignElementError`, even when the posets are equal.
    """

    _poset: Poset
    _element: int

    def __init__(self, poset: Poset, element: int) -> None:
        if element not in poset:
            raise IndexError(f"poset has no element {element}")

        self._poset = poset
        self._element = operator.index(element)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._element} in {self._poset!r})"

    def __int__(self) -> int:
        return self._element

    def __index__(self) -> int:
        return self._element

    def __hash__(self) -> int:
        return hash((id(self._poset), self._element))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PosetElement):
            return NotImplemented
        return self._element == self._peer(other)

    def __lt__(self, other: PosetElement) -> bool:
        return self.less_than(other)

    def __le__(self, other: PosetElement) -> bool:
        return self.less_equal(other)

    def __gt__(self, other: PosetElement) -> bool:
        return self.greater_than(other)

    def __ge__(self, other: PosetElement) -> bool:
        return self.greater_equal(other)

    def _peer(self, other: PosetElement) -> int:
        if not isinstance(other, PosetElement):
            raise TypeError("`other` must be a `PosetElement`")
        if other._poset is not self._poset:
            raise ForeignElementError("cannot compare elements of different posets")
        if self._element not in self._poset or other._element not in self._poset:
            raise IndexError("element handle no longer refers to an element")
        return other._element

    @property
    def poset(self) -> Poset:
        r"""Poset the element belongs to.

        Returns:
            ~pyposet.Poset: containing poset.
        """
        return self._poset

    @property
    def element(self) -> int:
        r"""Identifier of the element.

        Returns:
            int: element identifier.
        """
        return self._element

    def less_than(self, other: PosetElement) -> bool:
        r"""Tests if this element is strictly below ``other``."""
        return self._poset.has_relation(self._element, self._peer(other))

    def less_equal(self, other: PosetElement) -> bool:
        r"""Tests if this element is below or equal to ``other``."""
        b = self._peer(other)
        return self._element == b or self._poset.has_relation(self._element, b)

    def greater_than(self, other: PosetElement) -> bool:
        r"""Tests if this element is strictly above ``other``."""
        return self._poset.has_relation(self._peer(other), self._element)

    def greater_equal(self, other: PosetElement) -> bool:
        r"""Tests if this element is above or equal to ``other``."""
        b = self._peer(other)
        return self._element == b or self._poset.has_relation(b, self._element)

    def comparable(self, other: PosetElement) -> bool:
        r"""Tests if this element is comparable to ``other``."""
        return self._poset.are_comparable(self._element, self._peer(other))

    def incomparable(self, other: PosetElement) -> bool:
        r"""Tests if this element is incomparable to ``other``."""
        return self._poset.are_incomparable(self._element, self._peer(other))

    def covered_by(self, other: PosetElement) -> bool:
        r"""Tests if this element is covered by ``other``."""
        return self._poset.covered_by(self._element, self._peer(other))

    def covers(self, other: PosetElement) -> bool:
        r"""Tests if this element covers ``other``."""
        return self._poset.covered_by(self._peer(other), self._element)

    def join(self, other: PosetElement) -> PosetElement | None:
        r"""Least element above or equal to both this element and ``other``.

        Args:
            other (PosetElement): element of the same poset.

        Returns:
            PosetElement | None: the join, or ``None`` if it does not exist.

        Raises:
            ~pyposet.ForeignElementError: ``other`` belongs to a different poset.
        """
        found = self._poset.join(self._element, self._peer(other))
        return None if found is None else PosetElement(self._poset, found)

    def meet(self, other: PosetElement) -> PosetElement | None:
        r"""Greatest element below or equal to both this element and ``other``.

        Args:
            other (PosetElement): element of the same poset.

        Returns:
            PosetElement | None: the meet, or ``None`` if it does not exist.

        Raises:
            ~pyposet.ForeignElementError: ``other`` belongs to a different poset.
        """
        found = self._poset.meet(self._element, self._peer(other))
        return None if found is None else PosetElement(self._poset, found)
