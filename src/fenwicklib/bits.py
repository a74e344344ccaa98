"""
Bit tricks for walking the implicit tree of a Fenwick structure.

All indices here are 0-based. Slot i of the tree stores the sum of the original
values over covered_range(i). That range always ends at i, and its length is
lowbit(i+1).
"""

def lowbit(k: int) -> int:
    """Value of the lowest set bit of k (k > 0). lowbit(12) == 4."""
    return k & (-k)

# Next slot visited by a prefix query; -1 once the walk is done.
# i & (i+1) clears the trailing run of ones in i, which is the same as
# stripping lowbit(i+1) from the 1-based index.
def parent_index(i: int) -> int:
    return (i & (i + 1)) - 1

# Next slot whose range also covers i; used by point updates.
def next_index(i: int) -> int:
    return i | (i + 1)

def covered_range(i: int):
    """Returns (lo, hi), the inclusive range of original indices summed in slot i."""
    return (i - lowbit(i + 1) + 1, i)

def prefix_path(i: int):
    """Yields the slots a prefix query on index i reads, in order."""
    while i >= 0:
        yield i
        i = parent_index(i)

def update_path(i: int, n: int):
    """Yields the slots an update at index i writes, for a tree of n slots."""
    while i < n:
        yield i
        i = next_index(i)
