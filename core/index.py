# core/index.py

"""
Position of a person in the displayed list.

Users refer to persons by their one-based position, while the `Database`
works with zero-based positions. `Index` keeps both views of the same value
so callers never convert by hand.
"""

from __future__ import annotations


class Index:

    def __init__(self, zero_based: int):
        if zero_based < 0:
            raise IndexError("Index must not be negative.")
        self._zero_based = zero_based

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        return cls(one_based - 1)

    # === properties ===

    @property
    def zero_based(self) -> int:
        return self._zero_based

    @property
    def one_based(self) -> int:
        return self._zero_based + 1

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self._zero_based == other._zero_based

    def __hash__(self) -> int:
        return hash(self._zero_based)

    def __repr__(self) -> str:
        return f"Index({self._zero_based})"
