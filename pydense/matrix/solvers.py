"""
Solver dispatch for matrix inversion.

This module provides invert() (the checked inversion API) and kernel
selection. Matrix.invert() is a thin sentinel-returning wrapper around it.
"""

from typing import Any, Literal, Union
import numpy as np
from numpy.typing import NDArray

from pydense.core.compute.precision import condition_number
from pydense.core.compute.timing import Timer
from pydense.core.exceptions import NumericalError, SingularMatrixError
from pydense.core.protocols import LUKernel
from pydense.core.result import Result
from pydense.core.validation import check_square
from pydense.matrix.backends.cpu import CPUGetriBackend, CPULUSolveBackend
from pydense.matrix.matrix import Matrix
from pydense.matrix.solution import InverseParams


# Type alias for kernel selection
BackendChoice = Union[Literal['auto', 'cpu', 'cpu_getri', 'cpu_lu_solve'], LUKernel]


def invert(
    matrix: Matrix,
    *,
    backend: BackendChoice = 'auto',
    check: bool = True,
) -> Result[InverseParams]:
    """
    Invert a square matrix via LU decomposition.

    Algorithm:
        1. Factorize a copy of the buffer: P A = L U (getrf)
        2. Rebuild A⁻¹ from L, U and the pivots, with a scratch workspace
           of width * height elements (getri)

    The operand is never modified.

    Args:
        matrix: Square, shape-consistent Matrix
        backend: Kernel to use:
            - 'auto' / 'cpu' / 'cpu_getri': LAPACK getrf + getri
            - 'cpu_lu_solve': LAPACK getrf + getrs against the identity
            - any object implementing the LUKernel protocol
        check: If True, non-zero kernel status codes raise. If False they
            are only recorded in the result and whatever the kernel left in
            the buffer is returned.

    Returns:
        Result containing InverseParams

    Raises:
        DimensionError: If matrix is not square or its shape does not match
            its buffer length
        SingularMatrixError: If check=True and a zero pivot was reported
        NumericalError: If check=True and the kernel rejected an argument
    """
    # === Input Validation ===
    check_square(matrix.width, matrix.height, matrix.size, 'matrix')
    kernel = _get_backend(backend)

    n = matrix.width
    lwork = matrix.size
    kernel_warnings: list[str] = []

    timer = Timer()
    timer.start()

    if n == 0:
        timer.stop()
        params = InverseParams(
            inverse=Matrix.empty(),
            pivots=np.empty(0, dtype=np.int32),
            factor_info=0,
            inverse_info=0,
        )
        return Result(
            params=params,
            info={'method': 'lu', 'n': 0, 'lwork': 0},
            timing=timer.result(),
            backend_name=kernel.name,
        )

    a = matrix.to_numpy()

    # === LU Factorization ===
    with timer.section('lu_factorization'):
        factorization = kernel.factor(a)

    if factorization.info != 0:
        if check:
            _raise_for_status(factorization.info, 'getrf', a)
        kernel_warnings.append(f"getrf returned info={factorization.info}")

    # === Inverse Reconstruction ===
    with timer.section('inverse_reconstruction'):
        inverse, inverse_info = kernel.reconstruct(factorization, lwork)

    if inverse_info != 0:
        if check:
            _raise_for_status(inverse_info, 'getri', a)
        kernel_warnings.append(f"getri returned info={inverse_info}")

    timer.stop()

    params = InverseParams(
        inverse=Matrix.from_rows(inverse),
        pivots=np.asarray(factorization.piv),
        factor_info=factorization.info,
        inverse_info=inverse_info,
    )

    return Result(
        params=params,
        info={'method': 'lu', 'n': n, 'lwork': lwork},
        timing=timer.result(),
        backend_name=kernel.name,
        warnings=tuple(kernel_warnings),
    )


def _raise_for_status(info: int, routine: str, a: NDArray[np.floating[Any]]) -> None:
    """Translate a LAPACK status code into an exception."""
    if info > 0:
        raise SingularMatrixError(
            f"Matrix is singular: {routine} reported U[{info - 1},{info - 1}] == 0 "
            f"(info={info}).",
            matrix_name='matrix',
            condition_number=condition_number(a),
            pivot_index=info,
            routine=routine,
        )
    raise NumericalError(
        f"LAPACK {routine} rejected argument {-info} (info={info})."
    )


def _get_backend(choice: BackendChoice) -> LUKernel:
    """
    Select and instantiate the appropriate kernel.

    Args:
        choice: Kernel name or an LUKernel instance

    Returns:
        Kernel ready to factorize

    Raises:
        ValueError: If unknown kernel name specified
        TypeError: If choice is neither a name nor an LUKernel
    """
    if isinstance(choice, str):
        if choice in ('auto', 'cpu', 'cpu_getri'):
            return CPUGetriBackend()
        elif choice == 'cpu_lu_solve':
            return CPULUSolveBackend()
        else:
            raise ValueError(f"Unknown backend: {choice!r}")

    if isinstance(choice, LUKernel):
        return choice

    raise TypeError(
        f"backend must be a kernel name or implement LUKernel, got {type(choice).__name__}"
    )
