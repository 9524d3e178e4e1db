#!/usr/bin/env python3
"""
Demo: Pairwise Disc Overlaps in a Half Matrix

Scatters random discs in a unit box and records which pairs overlap:

1. Pairwise distances are computed with numpy
2. Every overlapping pair (i, j) is enabled once, in either order
3. Queries work in both directions: contains(i, j) == contains(j, i)
4. Memory is N*(N+1)/2 bits instead of N*N

Output: printed summary
"""

import numpy as np

from halfmatrix.core import HalfMatrix


def main():
    print("=" * 60)
    print("  PAIRWISE OVERLAP DEMONSTRATION")
    print("=" * 60)

    n_discs = 500
    radius = 0.02
    rng = np.random.default_rng(seed=7)

    print(f"\n1. Scattering {n_discs} discs of radius {radius}...")
    centers = rng.random((n_discs, 2))

    print("\n2. Recording overlaps...")
    overlaps = HalfMatrix(n_discs)
    diff = centers[:, None, :] - centers[None, :, :]
    dist = np.sqrt((diff ** 2).sum(axis=-1))
    rows, cols = np.nonzero(np.tril(dist < 2 * radius, k=-1))
    for i, j in zip(rows.tolist(), cols.tolist()):
        # Column-first on purpose: the matrix swaps it back
        overlaps.enable(j, i)
    print(f"   {len(rows)} overlapping pairs")

    print("\n3. Checking symmetry...")
    i, j = (int(rows[0]), int(cols[0])) if len(rows) else (0, 1)
    print(f"   contains({i}, {j}) = {overlaps.contains(i, j)}")
    print(f"   contains({j}, {i}) = {overlaps.contains(j, i)}")

    print("\n4. Memory...")
    print(f"   Half matrix: {overlaps.cell_count} bits")
    print(f"   Full matrix: {n_discs * n_discs} bits")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
