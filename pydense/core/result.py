"""
Generic result container for PyDense kernel computations.

The Result class provides a standardized envelope for anything produced by
a swappable numeric kernel (currently LU-based inversion). This keeps
timing, kernel status codes and warnings next to the payload while each
operation defines its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, lwork, status codes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for kernel computations.

    Type Parameters:
        P: The operation-specific parameter payload type

    Attributes:
        params: Operation-specific payload (inverse matrix, pivots, ...)
        info: Structured metadata (method, dimension, workspace size)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the kernel that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InverseParams(inverse=inv, pivots=piv,
        ...                          factor_info=0, inverse_info=0),
        ...     info={'method': 'lu', 'n': 3, 'lwork': 9},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_getri'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
