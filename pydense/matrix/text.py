"""
Text rendering for Matrix.

Row-major, whitespace-separated, one row per line. Every value is written
with %g formatting and followed by a single space. There is no header and
no shape metadata, and no reader is provided.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO, TYPE_CHECKING

from pydense.core.exceptions import DimensionError

if TYPE_CHECKING:
    from pydense.matrix.matrix import Matrix


def format_rows(matrix: Matrix) -> str:
    """
    Render a matrix as text, one row per line.

    Args:
        matrix: Matrix with a set shape

    Returns:
        The rows joined by newlines, each line terminated by a newline

    Raises:
        DimensionError: If the matrix shape is unset
    """
    if matrix.width is None or matrix.height is None:
        raise DimensionError(
            f"matrix: shape is unset (buffer of {matrix.size} elements), cannot render rows"
        )
    lines = []
    for y in range(matrix.height):
        lines.append("".join(f"{matrix.get(x, y):g} " for x in range(matrix.width)))
    return "".join(line + "\n" for line in lines)


def dump(matrix: Matrix, stream: TextIO | None = None) -> None:
    """Write a blank line followed by the rows to stream (default stdout)."""
    if stream is None:
        stream = sys.stdout
    stream.write("\n")
    stream.write(format_rows(matrix))
    stream.flush()


def write(matrix: Matrix, path: str | os.PathLike[str]) -> None:
    """
    Write the rows to a file, overwriting it.

    The parent directory must already exist.
    """
    text = format_rows(matrix)
    with open(path, "w") as f:
        f.write(text)
