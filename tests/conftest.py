"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def small_matrix():
    """A 4x4 half matrix (10 cells)."""
    from halfmatrix.core import HalfMatrix
    return HalfMatrix(4)


@pytest.fixture
def medium_matrix():
    """A 32x32 half matrix (528 cells)."""
    from halfmatrix.core import HalfMatrix
    return HalfMatrix(32)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
