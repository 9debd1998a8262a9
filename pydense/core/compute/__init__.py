"""
Shared compute infrastructure for PyDense.

IMPORTANT: This is NOT where the swappable inversion kernels live. Those go
in matrix/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    linalg: Linear algebra kernels (LU factorization, inverse)
"""

from pydense.core.compute.timing import Timer

__all__ = [
    # Timing
    "Timer",
]
