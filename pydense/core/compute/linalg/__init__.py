"""
Linear algebra kernels for PyDense.

All functions follow these conventions:
    - CPU functions use SciPy (LAPACK under the hood)
    - Each factorization returns a structured result dataclass
    - LAPACK status codes are returned, never interpreted here

Submodules:
    lu: LU factorization (getrf) and inverse reconstruction (getri / getrs)
"""

from pydense.core.compute.linalg.lu import (
    LUFactorization,
    lu_factor_cpu,
    lu_inverse_cpu,
    lu_solve_inverse_cpu,
)

__all__ = [
    # LU decomposition
    "LUFactorization",
    "lu_factor_cpu",
    "lu_inverse_cpu",
    "lu_solve_inverse_cpu",
]
