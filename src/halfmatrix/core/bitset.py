"""
BitSet: fixed-capacity random-access boolean storage.

Bits are packed 64 to a word in a numpy uint64 array:

    index i  →  word i // 64, bit i % 64

Capacity is fixed at construction and never grows. Every index is checked
against it, so an out-of-range access raises instead of touching a
neighbouring word.
"""

from __future__ import annotations
import numpy as np


WORD_BITS = 64

# Addressable limit of the primitive: 4 layers of 64-bit words (64**4 bits)
MAX_BITS = 2 ** 24


class BitSet:
    """
    A packed set of bit flags addressed by integer index.

    All bits start cleared.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"BitSet capacity must be non-negative, got {capacity}")
        if capacity > MAX_BITS:
            raise ValueError(
                f"BitSet capacity {capacity} exceeds the addressable limit of {MAX_BITS} bits"
            )

        self._capacity = capacity
        n_words = (capacity + WORD_BITS - 1) // WORD_BITS
        self._words = np.zeros(n_words, dtype=np.uint64)

    @property
    def capacity(self) -> int:
        """Number of addressable bits."""
        return self._capacity

    def __len__(self) -> int:
        return self._capacity

    def _locate(self, index: int) -> tuple[int, np.uint64]:
        """Return (word position, single-bit mask) for an index."""
        if not 0 <= index < self._capacity:
            raise IndexError(
                f"Bit index {index} out of range for capacity {self._capacity}"
            )
        word, bit = divmod(index, WORD_BITS)
        return word, np.uint64(1) << np.uint64(bit)

    def add(self, index: int) -> bool:
        """Set the bit at index. Returns True if it was already set."""
        word, mask = self._locate(index)
        was_set = bool(self._words[word] & mask)
        self._words[word] |= mask
        return was_set

    def remove(self, index: int) -> bool:
        """Clear the bit at index. Returns True if it was set."""
        word, mask = self._locate(index)
        was_set = bool(self._words[word] & mask)
        self._words[word] &= ~mask
        return was_set

    def contains(self, index: int) -> bool:
        """Return the bit at index."""
        word, mask = self._locate(index)
        return bool(self._words[word] & mask)

    def __contains__(self, index: int) -> bool:
        return self.contains(index)

    def count(self) -> int:
        """Number of set bits."""
        return int(np.unpackbits(self._words.view(np.uint8)).sum())

    def clear(self):
        """Clear every bit."""
        self._words.fill(0)

    def copy(self) -> BitSet:
        """Create an independent copy of this bitset."""
        result = BitSet(self._capacity)
        result._words = self._words.copy()
        return result

    def __repr__(self) -> str:
        return f"BitSet(capacity={self._capacity}, count={self.count()})"
