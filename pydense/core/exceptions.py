"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error. Non-fatal shape problems on the fluent Matrix API
are reported through ShapeMismatchWarning instead of an exception.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided inputs (buffers, shapes, backend choices)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when an operation requires a square or shape-consistent matrix
    (width * height == buffer length) and the operand is not.
    """
    pass


class NumericalError(PyDenseError):
    """
    Numerical computation failed.

    Base class for errors reported by the LU kernels, including LAPACK
    "illegal argument" status codes (info < 0).
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is exactly singular.

    Raised when the LU factorization reports a zero pivot (info > 0), so
    no inverse can be reconstructed.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        pivot_index: 1-based index of the zero pivot reported by LAPACK
        routine: LAPACK routine that reported the failure ('getrf', 'getri')
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        pivot_index: int | None = None,
        routine: str | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.pivot_index = pivot_index
        self.routine = routine


class ShapeMismatchWarning(UserWarning):
    """
    Operand shapes are incompatible for a fluent Matrix operation.

    Emitted by Matrix.matmul, Matrix.make_identity and Matrix.invert
    before they return their degraded result (unchanged copy or 0x0).
    """
    pass
