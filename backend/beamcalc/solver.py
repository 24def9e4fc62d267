"""Dense linear solver with partial pivoting and instability detection."""

import logging
from typing import Optional

import numpy as np

from .config import CONFIG

logger = logging.getLogger(__name__)


class UnstableStructureError(ValueError):
    """Raised when the reduced stiffness matrix is singular (mechanism)."""
    pass


def solve_linear_system(A: np.ndarray, b: np.ndarray,
                        tol: Optional[float] = None) -> np.ndarray:
    """
    Solve A·x = b by Gauss-Jordan elimination with partial pivoting.

    At each step the remaining row with the largest |A[i, k]| becomes the
    pivot row. A pivot smaller than `tol` in absolute value means the
    system is singular.

    Args:
        A: Square matrix (n x n)
        b: Right-hand side (n,)
        tol: Absolute pivot threshold (defaults to CONFIG.pivot_tolerance)

    Returns:
        x: Solution vector (n,)

    Raises:
        UnstableStructureError: If a pivot falls below `tol`
    """
    if tol is None:
        tol = CONFIG.pivot_tolerance

    M = np.array(A, dtype=float)
    x = np.array(b, dtype=float)
    n = x.shape[0]

    if M.shape != (n, n):
        raise ValueError(f"Matrix shape {M.shape} does not match vector length {n}")

    for k in range(n):
        p = k + int(np.argmax(np.abs(M[k:, k])))
        if abs(M[p, k]) < tol:
            logger.debug("Pivot %.3e below tolerance at column %d", M[p, k], k)
            raise UnstableStructureError(
                f"Singular matrix: pivot {M[p, k]:.3e} at column {k} is below {tol:.0e}"
            )

        if p != k:
            M[[k, p]] = M[[p, k]]
            x[[k, p]] = x[[p, k]]

        pivot = M[k, k]
        M[k, k:] /= pivot
        x[k] /= pivot

        # Eliminate column k from every other row
        factors = M[:, k].copy()
        factors[k] = 0.0
        M[:, k:] -= np.outer(factors, M[k, k:])
        x -= factors * x[k]

    return x
