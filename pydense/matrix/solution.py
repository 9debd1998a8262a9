"""
Inversion result types.

Contains the parameter payload produced by pydense.matrix.solvers.invert.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from pydense.matrix.matrix import Matrix


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for LU-based inversion.

    Attributes:
        inverse: The inverse as a new Matrix (never aliases the operand)
        pivots: 0-based pivot indices from the LU factorization
        factor_info: Status code of the factorization step
        inverse_info: Status code of the reconstruction step
    """
    inverse: 'Matrix'
    pivots: NDArray[np.integer[Any]]
    factor_info: int
    inverse_info: int

    @property
    def ok(self) -> bool:
        """True if both kernel steps reported success."""
        return self.factor_info == 0 and self.inverse_info == 0
