"""Dense matrices of floats stored row by row in a flat list."""

from __future__ import annotations

from typing import Iterable


class Matrix:
    """A ``rows`` by ``cols`` matrix; element (i, j) lives at ``elements[i * cols + j]``."""

    def __init__(self, elements: Iterable[float], rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        values = [float(value) for value in elements]
        if len(values) != rows * cols:
            raise ValueError(
                f"expected {rows * cols} elements for a {rows}x{cols} matrix, got {len(values)}"
            )
        self.elements = values
        self.rows = rows
        self.cols = cols

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index {index!r} out of range for a {self.rows}x{self.cols} matrix")
        return i * self.cols + j

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self.elements[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self.elements[self._offset(index)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self.elements) == (other.rows, other.cols, other.elements)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.elements!r}, rows={self.rows}, cols={self.cols})"

    def diagonal(self) -> list[float]:
        """Return a copy of the main diagonal."""
        return [self[i, i] for i in range(min(self.rows, self.cols))]

    def copy(self) -> "Matrix":
        return Matrix(self.elements, self.rows, self.cols)

    def trace(self) -> float:
        return sum(self.diagonal(), 0.0)

    def _check_same_shape(self, other: "Matrix") -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("wrong input sizes")

    def __iadd__(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other)
        self.elements[:] = [x + y for x, y in zip(self.elements, other.elements)]
        return self

    def __isub__(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other)
        self.elements[:] = [x - y for x, y in zip(self.elements, other.elements)]
        return self

    def scale(self, factor: float) -> None:
        """Multiply every element by ``factor`` in place."""
        self.elements[:] = [factor * x for x in self.elements]


def add(a: Matrix, b: Matrix) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    a._check_same_shape(b)
    return Matrix((x + y for x, y in zip(a.elements, b.elements)), a.rows, a.cols)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """Return the element-wise difference of two matrices of the same shape."""
    a._check_same_shape(b)
    return Matrix((x - y for x, y in zip(a.elements, b.elements)), a.rows, a.cols)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Return the matrix product ``a`` times ``b``."""
    if a.cols != b.rows:
        raise ValueError("wrong input sizes")
    return Matrix(
        (
            sum((a[i, k] * b[k, j] for k in range(a.cols)), 0.0)
            for i in range(a.rows)
            for j in range(b.cols)
        ),
        a.rows,
        b.cols,
    )