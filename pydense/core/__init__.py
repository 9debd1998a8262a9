"""
Core infrastructure for PyDense.

This module provides shared abstractions, utilities, and numeric kernels
used by the matrix package.

Key components:
    protocols: LUKernel protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and ShapeMismatchWarning
    validation: Input validators
    compute: Timing, precision constants, LAPACK wrappers
"""

from pydense.core.protocols import LUKernel
from pydense.core.result import Result
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ShapeMismatchWarning,
)

__all__ = [
    # Protocols
    "LUKernel",
    # Result
    "Result",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "ShapeMismatchWarning",
]
