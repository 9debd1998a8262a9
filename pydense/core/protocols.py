"""
Core protocols for PyDense.

These define structural interfaces that kernel implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
caller can hand any object with the right methods to Matrix.invert without
inheriting from anything in this package.

Design Principles:
    - Minimal contracts: factor, then reconstruct
    - Status codes travel with the data; kernels never raise on singularity
    - Kernels are stateless and therefore safe to share
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from pydense.core.compute.linalg.lu import LUFactorization


@runtime_checkable
class LUKernel(Protocol):
    """
    Protocol for LU-based inversion kernels.

    A kernel is the "trusted external numeric routine pair": it factorizes
    a square matrix with partial pivoting and reconstructs the inverse from
    the factors. The Matrix type only ever talks to this interface.
    """

    @property
    def name(self) -> str:
        """
        Kernel identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_getri', 'cpu_lu_solve'
        """
        ...

    def factor(self, a: NDArray[np.floating[Any]]) -> LUFactorization:
        """
        Factorize a square matrix.

        Args:
            a: Square matrix (n x n), row-major; must not be modified

        Returns:
            LUFactorization carrying the LAPACK-style status code
        """
        ...

    def reconstruct(
        self,
        factorization: LUFactorization,
        lwork: int,
    ) -> tuple[NDArray[np.floating[Any]], int]:
        """
        Build the inverse from an LU factorization.

        Args:
            factorization: Output of factor()
            lwork: Scratch workspace size in elements (kernels may ignore it)

        Returns:
            (inverse, info) with LAPACK status semantics
        """
        ...
