"""
Core storage primitives.

- BitSet: fixed-capacity packed bits, addressed by integer index
- HalfMatrix: symmetric boolean relation over N elements, stored as the
  packed lower triangle of an N×N matrix on top of a BitSet
"""

from halfmatrix.core.bitset import BitSet, MAX_BITS
from halfmatrix.core.half_matrix import HalfMatrix, MAX_SIZE, triangular_number

__all__ = [
    "BitSet",
    "MAX_BITS",
    "HalfMatrix",
    "MAX_SIZE",
    "triangular_number",
]
