"""
Inversion kernels for Matrix.invert.

Each kernel implements the LUKernel protocol from pydense.core.protocols.
"""

from pydense.matrix.backends.cpu import CPUGetriBackend, CPULUSolveBackend

__all__ = [
    "CPUGetriBackend",
    "CPULUSolveBackend",
]
