"""
halfmatrix: compact storage for symmetric boolean relations

For N elements, "does i relate to j" is one bit per unordered pair,
diagonal included: N*(N+1)/2 bits instead of N*N.

Core concepts:
- The relation is symmetric: cell(i, j) IS cell(j, i)
- Only the lower triangle (row >= column) is stored, packed row by row
- Coordinates may be given in either order; they are swapped as needed
- Capacity is fixed at construction (at most 5792 elements)
"""

from halfmatrix.core import HalfMatrix, BitSet

__version__ = "0.1.0"

__all__ = ["HalfMatrix", "BitSet", "__version__"]
