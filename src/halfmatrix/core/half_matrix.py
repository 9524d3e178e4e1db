"""
HalfMatrix: a symmetric boolean relation stored as a packed lower triangle.

Only cells with row >= column are kept, row major:

      ABCD
    A -
    B --
    C ---
    D ----

In memory the rows are laid end to end:

    -|--|---|----

Cell (row, column) lives at index row*(row+1)/2 + column. Callers may pass
coordinates in either order; (column, row) is swapped into (row, column),
so cell(i, j) and cell(j, i) are the same bit.

The relation's meaning (collision, interaction, adjacency) is up to the
caller. There is no locking: one owner mutates the matrix.
"""

from __future__ import annotations
import math

from halfmatrix.core.bitset import BitSet, MAX_BITS
from halfmatrix.log import get_logger


logger = get_logger(__name__)

# Largest N whose triangle N*(N+1)/2 fits in the bit primitive (5792)
MAX_SIZE = (math.isqrt(8 * MAX_BITS + 1) - 1) // 2


def triangular_number(n: int) -> int:
    """Number of cells in rows 0..n-1 of the lower triangle, n*(n+1)/2."""
    return n * (n + 1) // 2


class HalfMatrix:
    """
    A square boolean matrix where only half of it is stored.

    `size` is the number of elements on one side: valid coordinates are
    0..size-1 on both axes. Every cell starts disabled.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"Size of HalfMatrix must be non-negative, got {size}.")
        if size > MAX_SIZE:
            logger.error("Rejected HalfMatrix size %d (maximum %d)", size, MAX_SIZE)
            raise ValueError(
                f"Size of HalfMatrix too big! Maximum size is {MAX_SIZE} "
                f"and requested size is {size}."
            )

        self._size = size
        self._cell_count = triangular_number(size)
        self._bits = BitSet(self._cell_count)
        logger.debug("HalfMatrix size=%d allocated %d cells", size, self._cell_count)

    @property
    def size(self) -> int:
        """Number of elements on one side of the matrix."""
        return self._size

    @property
    def cell_count(self) -> int:
        """Number of stored cells, size*(size+1)/2."""
        return self._cell_count

    def index_of(self, row: int, column: int) -> int:
        """
        Linear index of cell (row, column) in the packed bits.

        index_of(0, 0) == 0 is (A, A). The pair is swapped if row < column.

        Raises:
            IndexError: if either coordinate is negative or >= size.
        """
        if row >= column:
            a, b = row, column
        else:
            a, b = column, row

        if b < 0:
            raise IndexError(f"HalfMatrix coordinates must be non-negative, got ({row}, {column})")

        index = triangular_number(a) + b

        # a >= size always lands past the last cell
        if index >= self._cell_count:
            raise IndexError(
                f"Cell ({row}, {column}) out of range for HalfMatrix of size {self._size}"
            )

        return index

    def enable(self, row: int, column: int):
        """Enable the cell (row, column)."""
        self._bits.add(self.index_of(row, column))

    def disable(self, row: int, column: int):
        """Disable the cell (row, column)."""
        self._bits.remove(self.index_of(row, column))

    def contains(self, row: int, column: int) -> bool:
        """Whether the cell (row, column) is enabled."""
        return self._bits.contains(self.index_of(row, column))

    def copy(self) -> HalfMatrix:
        """Create an independent copy of this matrix."""
        result = HalfMatrix(self._size)
        result._bits = self._bits.copy()
        return result

    def __repr__(self) -> str:
        return f"HalfMatrix(size={self._size}, cell_count={self._cell_count})"
