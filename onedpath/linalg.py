"""
Rank-tolerant least-squares solves for the small constraint systems.
"""

import numpy as np
from scipy.linalg import lstsq

from .constants import LSTSQ_RCOND


def solve_least_squares(matrix, rhs):
    """
    Solve ``matrix @ x = rhs`` in the least-squares sense.

    Uses LAPACK's gelsy (column-pivoted complete orthogonal factorization),
    so singular or nearly singular systems (e.g. two constraints with
    proportional gradients) yield the minimum-norm solution instead of failing.

    Args:
        matrix: (n, n) array
        rhs: (n,) array

    Returns:
        np.ndarray: solution, shape (n,)
    """
    A = np.asarray(matrix, dtype=float)
    b = np.asarray(rhs, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"matrix must be square, got shape {A.shape}")
    if b.shape != (A.shape[0],):
        raise ValueError(f"rhs must have shape ({A.shape[0]},), got {b.shape}")

    x, _, _, _ = lstsq(A, b, cond=LSTSQ_RCOND, lapack_driver='gelsy')
    return x


def solve_multipliers(jacobian, rhs):
    """
    Solve ``(g gᵀ) m = rhs`` for one multiplier per row of the Jacobian ``g``.

    Args:
        jacobian: (n, 3) gradients of the selected constraints
        rhs: (n,) right-hand side

    Returns:
        np.ndarray: multipliers, shape (n,)
    """
    g = np.asarray(jacobian, dtype=float)
    m = solve_least_squares(g @ g.T, rhs)
    assert m.shape == (g.shape[0],), "multiplier count does not match selected constraints"
    return m
