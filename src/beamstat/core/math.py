from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

EPSILON = 1e-12


def gauss_jordan(augmented: Sequence[Sequence[float]], tol: float = EPSILON) -> np.ndarray:
    """
    Solve a linear system given as an augmented matrix [A | b].

    Partial pivoting selects the largest absolute entry of the active column.
    A column whose pivot candidate is (numerically) zero is skipped without
    advancing the pivot row, so structurally-zero coefficients are tolerated.

    Args:
        augmented: rows x (n + 1) matrix
        tol: magnitude below which a pivot is treated as zero

    Returns:
        Last column of the fully reduced matrix (one entry per row).
    """
    m = np.array(augmented, dtype=float)
    if m.size == 0:
        return np.zeros(0)
    if m.ndim != 2:
        raise ValueError(f"augmented matrix must be 2D, got shape {m.shape}")

    rows, cols = m.shape
    h = 0  # pivot row
    k = 0  # pivot column
    while h < rows and k < cols - 1:
        i_max = h + int(np.argmax(np.abs(m[h:, k])))
        if abs(m[i_max, k]) <= tol:
            k += 1
            continue

        if i_max != h:
            m[[h, i_max]] = m[[i_max, h]]

        m[h, k:] /= m[h, k]
        for i in range(rows):
            if i != h:
                m[i, k:] -= m[i, k] * m[h, k:]
        h += 1
        k += 1

    return m[:, -1].copy()


def trapezoid_resultant(x0: float, x1: float, w0: float, w1: float) -> Tuple[float, float]:
    """
    Resultant and first moment (about x = 0) of a linearly varying intensity.

    w(x) runs linearly from w0 at x0 to w1 at x1.

    Returns:
        (force, first_moment) where force = ∫w dx and first_moment = ∫w·x dx.
    """
    dx = x1 - x0
    force = (w0 + w1) * dx / 2.0
    first_moment = dx * (w0 * (2.0 * x0 + x1) + w1 * (x0 + 2.0 * x1)) / 6.0
    return force, first_moment
