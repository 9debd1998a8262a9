"""
Dense row-major matrix of float64 values.

Matrix owns a flat, contiguous numpy buffer plus two dimension fields.
Element (x, y), i.e. column x of row y, lives at offset y * width + x.

Control flow is always: construct -> mutate/compose -> read or serialize.

    - In-place mutators (scale, divide, transpose, make_identity) return
      self so calls can be chained.
    - Composing operations (matmul, xtx, cron, invert, times, divided_by)
      return new, independently owned matrices.
    - Shape problems on the fluent API emit ShapeMismatchWarning and
      return a degraded value (an unchanged copy, or a 0x0 matrix). The
      checked inversion API lives in pydense.matrix.solvers.

Example:
    >>> A = Matrix.from_rows([[4.0, 7.0], [2.0, 6.0]])
    >>> A.invert().matmul(A).allclose(Matrix.identity(2), atol=1e-12)
    True
"""

from __future__ import annotations

import os
import warnings
from typing import Any, TextIO, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.compute.precision import DEFAULT_ATOL, DEFAULT_RTOL, is_close
from pydense.core.exceptions import DimensionError, ShapeMismatchWarning
from pydense.core.validation import check_1d, check_2d, check_array, check_dimension
from pydense.matrix import text

if TYPE_CHECKING:
    from pydense.matrix.solvers import BackendChoice


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Matrix:
    """
    Dense matrix value type.

    Attributes:
        data: Owned 1-D float64 buffer, row-major
        width: Number of columns (None for a size-only matrix)
        height: Number of rows (None for a size-only matrix)

    Construction (dispatch is by argument type):
        Matrix(size)                   # zero-filled buffer, shape unset
        Matrix(width, height)          # zero-filled width x height
        Matrix(sequence)               # row vector: height=1, width=len
        Matrix(sequence, width, height)  # caller asserts row-major layout
        Matrix(other)                  # deep copy

    The sequence-plus-shape form trusts the caller. Use sanity_check() to
    verify that width * height matches the buffer length.
    """

    __slots__ = ('data', 'width', 'height')

    # Scalars on the left (np.float64 * m) must defer to __rmul__
    __array_ufunc__ = None

    def __init__(self, *args: Any):
        if len(args) == 0:
            self._set(np.empty(0, dtype=np.float64), 0, 0)
        elif len(args) == 1:
            arg = args[0]
            if isinstance(arg, Matrix):
                self._set(arg.data.copy(), arg.width, arg.height)
            elif _is_int(arg):
                size = check_dimension(arg, 'size')
                self._set(np.zeros(size, dtype=np.float64), None, None)
            else:
                buffer = _flat_buffer(arg, 'sequence')
                self._set(buffer, buffer.size, 1)
        elif len(args) == 2:
            width = check_dimension(args[0], 'width')
            height = check_dimension(args[1], 'height')
            self._set(np.zeros(width * height, dtype=np.float64), width, height)
        elif len(args) == 3:
            buffer = _flat_buffer(args[0], 'sequence')
            width = check_dimension(args[1], 'width')
            height = check_dimension(args[2], 'height')
            self._set(buffer, width, height)
        else:
            raise TypeError(
                f"Matrix() takes at most 3 positional arguments ({len(args)} given)"
            )

    def _set(self, data: NDArray[np.float64], width: int | None, height: int | None) -> None:
        self.data = data
        self.width = width
        self.height = height

    @classmethod
    def _wrap(cls, data: NDArray[np.float64], width: int | None, height: int | None) -> Matrix:
        """Adopt an already-owned buffer without copying it."""
        obj = cls.__new__(cls)
        obj._set(np.ascontiguousarray(data, dtype=np.float64).reshape(-1), width, height)
        return obj

    # === Named constructors ===

    @classmethod
    def with_size(cls, size: int) -> Matrix:
        """Zero-filled buffer of `size` elements with no shape."""
        return cls(check_dimension(size, 'size'))

    @classmethod
    def zeros(cls, width: int, height: int) -> Matrix:
        return cls(width, height)

    @classmethod
    def row_vector(cls, sequence: ArrayLike) -> Matrix:
        buffer = _flat_buffer(sequence, 'sequence')
        return cls._wrap(buffer, buffer.size, 1)

    @classmethod
    def from_flat(cls, sequence: ArrayLike, width: int, height: int) -> Matrix:
        return cls(sequence, width, height)

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2-D nested sequence or array.

        Args:
            rows: height x width array-like; rows[y][x] becomes get(x, y)

        Returns:
            New Matrix owning a row-major copy of the values

        Raises:
            ValidationError: If rows is not numeric
            DimensionError: If rows is not 2-D
        """
        arr = check_array(rows, 'rows')
        check_2d(arr, 'rows')
        height, width = arr.shape
        return cls._wrap(arr.ravel(), width, height)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls(n, n).make_identity()

    @classmethod
    def empty(cls) -> Matrix:
        """The 0x0 matrix used as the failure sentinel."""
        return cls()

    # === Shape ===

    @property
    def size(self) -> int:
        """Length of the flat buffer."""
        return int(self.data.size)

    @property
    def shape(self) -> tuple[int | None, int | None]:
        """(height, width), numpy order."""
        return (self.height, self.width)

    def sanity_check(self) -> bool:
        """True if width * height equals the buffer length."""
        if self.width is None or self.height is None:
            return False
        return self.width * self.height == self.data.size

    def grid(self) -> NDArray[np.float64]:
        """
        View the buffer as a (height, width) array.

        Writes through the view mutate this matrix.

        Raises:
            DimensionError: If the shape is unset or inconsistent
        """
        if not self.sanity_check():
            raise DimensionError(
                f"matrix: shape {self.width}x{self.height} inconsistent with "
                f"buffer length {self.data.size}"
            )
        return self.data.reshape(self.height, self.width)

    def to_numpy(self) -> NDArray[np.float64]:
        """Independent (height, width) copy of the values."""
        return self.grid().copy()

    def __len__(self) -> int:
        return self.size

    # === Copy semantics ===

    def copy(self) -> Matrix:
        return Matrix(self)

    def assign(self, other: Matrix) -> Matrix:
        """
        Copy-assignment: replace buffer and shape with a copy of other's.

        Assigning a matrix to itself is a no-op.
        """
        if other is self:
            return self
        self._set(other.data.copy(), other.width, other.height)
        return self

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    # === Indexing ===

    def get(self, x: int, y: int | None = None) -> float:
        """
        Read element (x, y), or the flat element x when y is omitted.
        """
        if y is None:
            return float(self.data[x])
        return float(self.data[y * self.width + x])

    def set(self, *args: Any) -> Matrix:
        """
        Write an element: set(x, y, value) or set(i, value).

        Returns:
            self
        """
        if len(args) == 3:
            x, y, value = args
            self.data[y * self.width + x] = value
        elif len(args) == 2:
            i, value = args
            self.data[i] = value
        else:
            raise TypeError(
                f"set() takes (x, y, value) or (i, value), got {len(args)} arguments"
            )
        return self

    def __getitem__(self, key: int | tuple[int, int]) -> float:
        if isinstance(key, tuple):
            return self.get(*key)
        return self.get(key)

    def __setitem__(self, key: int | tuple[int, int], value: float) -> None:
        if isinstance(key, tuple):
            self.set(*key, value)
        else:
            self.set(key, value)

    # === Elementwise scalar operations ===

    def scale(self, d: float) -> Matrix:
        """Multiply every element by d in place."""
        with np.errstate(over='ignore', invalid='ignore'):
            self.data *= d
        return self

    def divide(self, d: float) -> Matrix:
        """Divide every element by d in place (IEEE semantics for d == 0)."""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            self.data /= d
        return self

    def times(self, d: float) -> Matrix:
        return self.copy().scale(d)

    def divided_by(self, d: float) -> Matrix:
        return self.copy().divide(d)

    def __mul__(self, d: float) -> Matrix:
        if isinstance(d, Matrix):
            return NotImplemented
        return self.times(d)

    __rmul__ = __mul__

    def __imul__(self, d: float) -> Matrix:
        if isinstance(d, Matrix):
            return NotImplemented
        return self.scale(d)

    def __truediv__(self, d: float) -> Matrix:
        if isinstance(d, Matrix):
            return NotImplemented
        return self.divided_by(d)

    def __itruediv__(self, d: float) -> Matrix:
        if isinstance(d, Matrix):
            return NotImplemented
        return self.divide(d)

    # === Transpose ===

    def transpose(self) -> Matrix:
        """
        Transpose in place.

        Square matrices swap each (x, y) with (y, x) for y > x only, so
        every off-diagonal pair is exchanged exactly once. Non-square
        matrices are rebuilt into a fresh height x width buffer.

        Returns:
            self
        """
        grid = self.grid()
        if self.width == self.height:
            upper = np.triu_indices(self.width, k=1)
            lower = (upper[1], upper[0])
            tmp = grid[upper]
            grid[upper] = grid[lower]
            grid[lower] = tmp
        else:
            # FIXME: non-square transpose still goes through a full copy
            self._set(np.ascontiguousarray(grid.T).reshape(-1), self.height, self.width)
        return self

    # === Products ===

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Requires self.width == other.height and both operands to pass
        sanity_check(). Otherwise a ShapeMismatchWarning is emitted and an
        unchanged copy of self is returned.

        Returns:
            New Matrix of width other.width and height self.height
        """
        if self.width != other.height or not self.sanity_check() or not other.sanity_check():
            warnings.warn(
                f"Matrix dimensions not matching for multiplication: "
                f"left {self.width}x{self.height} (size {self.size}), "
                f"right {other.width}x{other.height} (size {other.size})",
                ShapeMismatchWarning,
                stacklevel=2,
            )
            return self.copy()
        result = self.grid() @ other.grid()
        return Matrix._wrap(result, other.width, self.height)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def xtx(self) -> Matrix:
        """
        Gram matrix AᵀA without materializing the transpose.

        Returns:
            New width x width Matrix
        """
        grid = self.grid()
        result = grid.T @ grid
        return Matrix._wrap(result, self.width, self.width)

    def cron(self, other: Matrix) -> Matrix:
        """
        Kronecker product with every element of other scaling a copy of self.

        Element mapping, for i < other.width, h < other.height,
        j < self.width, k < self.height:

            result[width*i + j + width*other.width*(height*h + k)]
                = other[i, h] * self[j, k]

        Returns:
            New Matrix of width self.width * other.width and height
            self.height * other.height
        """
        result = np.kron(other.grid(), self.grid())
        return Matrix._wrap(result, self.width * other.width, self.height * other.height)

    kron = cron

    # === Identity and inversion ===

    def make_identity(self) -> Matrix:
        """
        Overwrite with the identity in place.

        Requires a square, shape-consistent matrix. Otherwise a
        ShapeMismatchWarning is emitted and a 0x0 matrix is returned
        (self is left untouched).
        """
        if self.width != self.height or not self.sanity_check():
            warnings.warn(
                f"dimensions not matching for identity: {self.width}x{self.height} "
                f"with buffer length {self.size}",
                ShapeMismatchWarning,
                stacklevel=2,
            )
            return Matrix.empty()
        self.data.fill(0.0)
        self.data[::self.width + 1] = 1.0
        return self

    def invert(self, *, backend: BackendChoice = 'auto', check: bool = True) -> Matrix:
        """
        Inverse via LU decomposition.

        Non-square or shape-inconsistent matrices emit ShapeMismatchWarning
        and return a 0x0 matrix. See pydense.matrix.solvers.invert for the
        kernel options and the full result envelope.

        Args:
            backend: Kernel name or LUKernel instance
            check: Raise on non-zero kernel status codes

        Returns:
            New Matrix holding the inverse; self is unmodified

        Raises:
            SingularMatrixError: If check=True and the matrix is singular
        """
        if self.width != self.height or not self.sanity_check():
            warnings.warn(
                f"dimensions not matching for inversion: {self.width}x{self.height} "
                f"with buffer length {self.size}",
                ShapeMismatchWarning,
                stacklevel=2,
            )
            return Matrix.empty()

        from pydense.matrix.solvers import invert

        return invert(self, backend=backend, check=check).params.inverse

    # === Comparison ===

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """True if shapes match and all elements are within tolerance."""
        if self.shape != other.shape or self.size != other.size:
            return False
        return is_close(self.data, other.data, rtol=rtol, atol=atol)

    # === Serialization ===

    def dump(self, stream: TextIO | None = None) -> None:
        """Print the rows to stream (default stdout), preceded by a blank line."""
        text.dump(self, stream)

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the rows to path, overwriting it."""
        text.write(self, path)

    def __str__(self) -> str:
        if self.width is None or self.height is None:
            return repr(self)
        return text.format_rows(self)

    def __repr__(self) -> str:
        return (
            f"Matrix(width={self.width}, height={self.height}, "
            f"data={np.array2string(self.data, separator=', ', threshold=20)})"
        )


def _flat_buffer(sequence: ArrayLike, name: str) -> NDArray[np.float64]:
    """Validate a flat sequence and return an owned float64 copy."""
    arr = check_array(sequence, name)
    check_1d(arr, name)
    return np.array(arr, dtype=np.float64, copy=True)
