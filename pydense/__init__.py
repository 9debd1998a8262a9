"""
PyDense: a lightweight dense matrix value type for numerical work.

A row-major float64 matrix with scalar scaling, transpose, matrix
multiplication, Gram matrix, Kronecker product, identity construction and
LU-based inversion through LAPACK.

Submodules:
    matrix: The Matrix type and checked inversion
    core: Exceptions, validation, result envelope, LAPACK wrappers
"""

__version__ = "0.1.0"

from pydense.matrix import Matrix, InverseParams, invert
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ShapeMismatchWarning,
)

__all__ = [
    "__version__",
    "Matrix",
    "InverseParams",
    "invert",
    "PyDenseError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "ShapeMismatchWarning",
]
