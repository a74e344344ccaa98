"""
Shared fixtures for the fenwicklib tests.
"""

from array import array

import numpy as np
import pytest

# Each factory returns a fresh zero-filled buffer of n signed ints.
BUFFER_FACTORIES = {
    "list": lambda n: [0] * n,
    "array": lambda n: array("i", [0] * n),
    "ndarray": lambda n: np.zeros(n, dtype=np.int32),
}

@pytest.fixture(params=sorted(BUFFER_FACTORIES))
def make_buffer(request):
    """Builds a signed integer buffer of the kind under test."""
    return BUFFER_FACTORIES[request.param]

def gauss(n):
    """Sum of 1..n."""
    return n * (n + 1) // 2
