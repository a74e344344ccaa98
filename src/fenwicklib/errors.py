"""
Errors raised by fenwicklib.

Every error is a broken precondition on the caller's side. Each one also derives
from the builtin exception a plain Python container would raise in the same
situation, so `except IndexError` and friends keep working.
"""

class FenwickError(Exception):
    """Base class for all fenwicklib errors."""

class LengthMismatch(FenwickError, ValueError):
    """The backing buffer and the input values have different lengths."""

    def __init__(self, buffer_len: int, values_len: int):
        super().__init__(
            f"buffer has {buffer_len} slots but {values_len} values were given")
        self.buffer_len = buffer_len
        self.values_len = values_len

class IndexOutOfRange(FenwickError, IndexError):
    """An index argument falls outside [0, n)."""

    def __init__(self, index: int, n: int):
        super().__init__(f"index {index} out of range for {n} elements")
        self.index = index
        self.n = n

class InvalidRange(FenwickError, ValueError):
    """A range query was given left > right."""

    def __init__(self, left: int, right: int):
        super().__init__(f"invalid range [{left}, {right}]: left > right")
        self.left = left
        self.right = right
