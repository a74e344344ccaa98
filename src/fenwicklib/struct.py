"""
Fenwick tree (binary indexed tree) over a caller-owned buffer.

The tree never allocates storage of its own. It borrows a fixed-length mutable
buffer (a list, an array.array or a 1-D numpy array) and keeps the implicit-tree
encoding in it, so that prefix sums and point updates both take O(log n).

Example usage:

import numpy as np
from fenwicklib.struct import Fenwick

buf = np.zeros(5, dtype=np.int32)
tree = Fenwick.from_values(buf, [-1, -5, -1, 0, 5])
tree.prefix_sum(1)      # -6
tree.range_sum(1, 2)    # -6
tree.set(4, 7)
tree.total()            # 0

Once wrapped, the buffer must only be changed through the tree. Writing to it
directly breaks the encoding and nothing will notice.
"""

import logging
import operator
from typing import Generic, TypeVar

import numpy as np

from fenwicklib.bits import prefix_path, update_path
from fenwicklib.errors import IndexOutOfRange, InvalidRange, LengthMismatch

logger = logging.getLogger(__name__)

T = TypeVar("T")

def _default_zero(buffer):
    if isinstance(buffer, np.ndarray):
        return buffer.dtype.type(0)
    return 0

def _check_buffer(buffer):
    if isinstance(buffer, np.ndarray):
        if buffer.ndim != 1:
            raise ValueError(f"buffer must be 1-D, got {buffer.ndim} dimensions")
        if not buffer.flags.writeable:
            raise ValueError("buffer must be writeable")

class Fenwick(Generic[T]):
    """Implements a Fenwick tree on a borrowed buffer.

    Slot i holds the sum of the original values over (i - lowbit(i+1), i].
    """

    def __init__(self, buffer, *, zero=None):
        """Wraps buffer as-is. It must already hold a valid encoding (e.g. all
        zeros); use from_zero / from_values to initialize a fresh buffer."""
        _check_buffer(buffer)
        self._v = buffer
        self._n = len(buffer)
        self._zero = _default_zero(buffer) if zero is None else zero
        logger.debug("wrapped %s buffer of %d slots (zero=%r)",
                     type(buffer).__name__, self._n, self._zero)

    __slots__ = ("_v", "_n", "_zero")

    @classmethod
    def from_zero(cls, buffer, *, zero=None) -> "Fenwick[T]":
        """Clears buffer and wraps it. O(n)."""
        tree = cls(buffer, zero=zero)
        tree.clear()
        return tree

    @classmethod
    def from_values(cls, buffer, values, *, zero=None) -> "Fenwick[T]":
        """Builds a tree holding values in buffer. O(n log n).

        buffer and values must have the same length."""
        if len(buffer) != len(values):
            raise LengthMismatch(len(buffer), len(values))
        tree = cls.from_zero(buffer, zero=zero)
        for (i, val) in enumerate(values):
            tree.update(i, val)
        return tree

    @property
    def buffer(self):
        """The borrowed backing buffer."""
        return self._v

    @property
    def zero(self) -> T:
        return self._zero

    def _check_index(self, index) -> int:
        index = operator.index(index)
        if not 0 <= index < self._n:
            raise IndexOutOfRange(index, self._n)
        return index

    def clear(self):
        """Resets every element to zero."""
        if isinstance(self._v, np.ndarray):
            self._v.fill(self._zero)
        else:
            for i in range(self._n):
                self._v[i] = self._zero

    def prefix_sum(self, index: int) -> T:
        """Returns the sum of values up to position index (inclusive)."""
        index = self._check_index(index)
        ret = self._zero
        for i in prefix_path(index):
            ret += self._v[i]
        return ret

    def range_sum(self, left: int, right: int) -> T:
        """Returns the sum of values in [left, right] (both inclusive)."""
        left = self._check_index(left)
        right = self._check_index(right)
        if left > right:
            raise InvalidRange(left, right)
        if left == 0:
            return self.prefix_sum(right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    def update(self, index: int, delta: T):
        """Adds delta to position index. delta may be negative for signed types."""
        index = self._check_index(index)
        for i in update_path(index, self._n):
            self._v[i] += delta

    def get(self, index: int) -> T:
        """Returns the value at position index. O(log index)."""
        index = self._check_index(index)
        val = self._v[index]
        # slot index covers a run of lower slots, one per trailing one bit of
        # index; peel them off to leave the single value
        bit = 1
        while index & bit:
            val -= self._v[index - bit]
            bit <<= 1
        return val

    def set(self, index: int, value: T):
        """Sets position index to value."""
        self.update(index, value - self.get(index))

    def total(self) -> T:
        """Returns the sum of all values (zero for an empty tree)."""
        if self._n == 0:
            return self._zero
        return self.prefix_sum(self._n - 1)

    def __len__(self): return self._n
    def __getitem__(self, index): return self.get(index)
    def __setitem__(self, index, value): self.set(index, value)

    def __iter__(self):
        for i in range(self._n):
            yield self.get(i)

    def __repr__(self):
        return f"Fenwick(n={self._n}, buffer={type(self._v).__name__})"
