"""Strassen's sub-cubic multiplication of square matrices."""

from __future__ import annotations

from algolib.matrix import Matrix, add, subtract


def _pad(m: Matrix, size: int) -> Matrix:
    return Matrix(
        (
            m[i, j] if i < m.rows and j < m.cols else 0.0
            for i in range(size)
            for j in range(size)
        ),
        size,
        size,
    )


def _block(m: Matrix, row: int, col: int, size: int) -> Matrix:
    return Matrix(
        (m[row + i, col + j] for i in range(size) for j in range(size)), size, size
    )


def _assemble(c11: Matrix, c12: Matrix, c21: Matrix, c22: Matrix) -> Matrix:
    half = c11.rows
    quadrants = ((c11, c12), (c21, c22))
    n = 2 * half
    return Matrix(
        (
            quadrants[i // half][j // half][i % half, j % half]
            for i in range(n)
            for j in range(n)
        ),
        n,
        n,
    )


def _recurse(a: Matrix, b: Matrix) -> Matrix:
    n = a.rows
    if n == 1:
        return Matrix([a[0, 0] * b[0, 0]], 1, 1)
    h = n // 2
    a11, a12 = _block(a, 0, 0, h), _block(a, 0, h, h)
    a21, a22 = _block(a, h, 0, h), _block(a, h, h, h)
    b11, b12 = _block(b, 0, 0, h), _block(b, 0, h, h)
    b21, b22 = _block(b, h, 0, h), _block(b, h, h, h)

    p1 = _recurse(add(a11, a22), add(b11, b22))
    p2 = _recurse(add(a21, a22), b11)
    p3 = _recurse(a11, subtract(b12, b22))
    p4 = _recurse(a22, subtract(b21, b11))
    p5 = _recurse(add(a11, a12), b22)
    p6 = _recurse(subtract(a21, a11), add(b11, b12))
    p7 = _recurse(subtract(a12, a22), add(b21, b22))

    c11 = subtract(add(add(p1, p4), p7), p5)
    c12 = add(p3, p5)
    c21 = add(p2, p4)
    c22 = subtract(add(add(p1, p3), p6), p2)
    return _assemble(c11, c12, c21, c22)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Multiply two square matrices of the same size, padding them to a power of two."""
    n = a.rows
    if a.cols != n or b.rows != n or b.cols != n:
        raise ValueError("Strassen multiplication needs two square matrices of the same size")
    if n == 0:
        return Matrix([], 0, 0)
    size = 1 << (n - 1).bit_length()
    product = _recurse(_pad(a, size), _pad(b, size))
    return Matrix((product[i, j] for i in range(n) for j in range(n)), n, n)