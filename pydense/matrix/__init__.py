"""
Dense row-major matrix type.

Public API:
    Matrix: the value type (construction, scalar ops, transpose, matmul,
        xtx, cron, make_identity, invert, text dump)
    invert(matrix, ...) -> Result[InverseParams]: checked LU inversion

Example:
    >>> from pydense.matrix import Matrix
    >>> A = Matrix([4.0, 7.0, 2.0, 6.0], 2, 2)
    >>> A.invert().dump()
"""

from pydense.matrix.matrix import Matrix
from pydense.matrix.solution import InverseParams
from pydense.matrix.solvers import invert

__all__ = [
    "Matrix",
    "InverseParams",
    "invert",
]
