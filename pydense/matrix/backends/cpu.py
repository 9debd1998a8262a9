"""
CPU inversion kernels.

Both kernels factorize with LAPACK getrf (via SciPy). They differ in how
the inverse is rebuilt from the factors:

    cpu_getri:    LAPACK getri, in place over the factors with a scratch
                  workspace. This is the reference kernel.
    cpu_lu_solve: LAPACK getrs against the identity (scipy.linalg.lu_solve).
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydense.core.compute.linalg.lu import (
    LUFactorization,
    lu_factor_cpu,
    lu_inverse_cpu,
    lu_solve_inverse_cpu,
)


class CPUGetriBackend:
    """
    CPU kernel using getrf + getri.

    Implements the LUKernel protocol.
    """

    @property
    def name(self) -> str:
        return 'cpu_getri'

    def factor(self, a: NDArray[np.floating[Any]]) -> LUFactorization:
        return lu_factor_cpu(a)

    def reconstruct(
        self,
        factorization: LUFactorization,
        lwork: int,
    ) -> tuple[NDArray[np.floating[Any]], int]:
        return lu_inverse_cpu(factorization, lwork=lwork)


class CPULUSolveBackend:
    """
    CPU kernel using getrf + getrs.

    The workspace size is ignored: getrs writes straight into the
    right-hand side.
    """

    @property
    def name(self) -> str:
        return 'cpu_lu_solve'

    def factor(self, a: NDArray[np.floating[Any]]) -> LUFactorization:
        return lu_factor_cpu(a)

    def reconstruct(
        self,
        factorization: LUFactorization,
        lwork: int,
    ) -> tuple[NDArray[np.floating[Any]], int]:
        return lu_solve_inverse_cpu(factorization)
