"""
LU decomposition and inverse reconstruction.

Thin wrappers over the LAPACK routine pair getrf (LU factorization with
partial pivoting) and getri (inverse from the LU factors), reached through
scipy.linalg.lapack. Status codes are returned untouched; deciding what a
non-zero status means is the caller's job.

LAPACK status convention (both routines):
    info == 0: success
    info > 0:  U[info-1, info-1] is exactly zero (matrix is singular)
    info < 0:  argument -info had an illegal value
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import lu_solve
from scipy.linalg.lapack import get_lapack_funcs


@dataclass(frozen=True)
class LUFactorization:
    """
    Result of LU factorization.

    Attributes:
        lu: Packed factors (n x n); strict lower triangle holds L
            (unit diagonal implied), upper triangle holds U
        piv: Pivot indices (0-based); row i was interchanged with row piv[i]
        info: LAPACK status code from getrf
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    info: int

    @property
    def n(self) -> int:
        return self.lu.shape[0]


def lu_factor_cpu(a: NDArray[np.floating[Any]]) -> LUFactorization:
    """
    LU factorization with partial pivoting using LAPACK getrf.

    The input is never modified; LAPACK works on its own Fortran-ordered copy.

    Args:
        a: Square matrix to factorize (n x n)

    Returns:
        LUFactorization with packed factors, pivots and status code
    """
    (getrf,) = get_lapack_funcs(('getrf',), (a,))
    lu, piv, info = getrf(a, overwrite_a=False)
    return LUFactorization(lu=lu, piv=piv, info=int(info))


def lu_inverse_cpu(
    factorization: LUFactorization,
    lwork: int | None = None,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Reconstruct the inverse from an LU factorization using LAPACK getri.

    Args:
        factorization: Output of lu_factor_cpu
        lwork: Workspace size in elements; defaults to n * n.
               LAPACK requires lwork >= max(1, n).

    Returns:
        (inverse, info) where info is the getri status code
    """
    n = factorization.n
    if lwork is None:
        lwork = n * n
    lwork = max(lwork, n, 1)

    (getri,) = get_lapack_funcs(('getri',), (factorization.lu,))
    inverse, info = getri(factorization.lu, factorization.piv, lwork=lwork, overwrite_lu=False)
    return inverse, int(info)


def lu_solve_inverse_cpu(
    factorization: LUFactorization,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Reconstruct the inverse by solving A X = I with the LU factors (getrs).

    getrs has no singularity check of its own, so the status code is
    derived from the diagonal of U using the getri convention.

    Args:
        factorization: Output of lu_factor_cpu

    Returns:
        (inverse, info) where info > 0 marks the first zero pivot (1-based)
    """
    n = factorization.n
    zero_pivots = np.flatnonzero(np.diag(factorization.lu) == 0.0)
    info = int(zero_pivots[0]) + 1 if zero_pivots.size > 0 else 0

    with np.errstate(divide='ignore', invalid='ignore'):
        inverse = lu_solve(
            (factorization.lu, factorization.piv),
            np.eye(n, dtype=factorization.lu.dtype),
            check_finite=False,
        )
    return inverse, info
