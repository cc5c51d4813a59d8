"""Matrix factorisations: Householder reflections, Hessenberg form, eigen, LU and QR."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .errors import (
    InvalidDimensionError,
    LinalgError,
    NotSquareMatrixError,
    SingularMatrixError,
)
from .matrix import Matrix
from .vector import Vector

_MAX_ITERATIONS = 30
_REFLECTION_TOL = 1e-10
_DEFLATION_TOL = 1e-14
_PIVOT_TOL = 1e-10


@dataclass
class EigenDecomposition:
    """Eigenvalues of a matrix together with the accumulated transformation matrix."""

    eigenvalues: list[complex] = field(default_factory=list)
    eigenvectors: Matrix = field(default_factory=lambda: Matrix(0, 0, []))


def householder_reflection(x: Vector) -> Matrix:
    """The Householder matrix that maps ``x`` onto a multiple of the first axis.

    Returns the identity when the reflection vector is numerically zero.
    """
    if x.dim() == 0:
        raise InvalidDimensionError(0, "Householder reflection needs a non-empty vector")
    norm_x = x.norm()
    u = Vector(x.data)
    sign = -1.0 if u[0] < 0.0 else 1.0
    u[0] += sign * norm_x

    norm_u = u.norm()
    if norm_u < _REFLECTION_TOL:
        return Matrix.identity(x.dim())

    unit = u * (1.0 / norm_u)
    outer = unit.outer(unit.transpose())
    return Matrix.identity(x.dim()) - outer * 2.0


def to_hessenberg(matrix: Matrix) -> tuple[Matrix, Matrix]:
    """Reduce a square matrix to upper Hessenberg form.

    Returns ``(h, v)`` with ``matrix == v @ h @ v.transpose()``.
    """
    if not matrix.is_square():
        raise NotSquareMatrixError()
    n = matrix.rows
    h = matrix.copy()
    v = Matrix.identity(n)
    for k in range(n - 2):
        x = h.partial_col(k, k + 1, n)
        reflector = householder_reflection(x)
        full = Matrix.identity(n)
        full.set_submatrix(k + 1, k + 1, reflector)
        h = full @ h @ full
        v = v @ full
    return h, v


def solve_2x2_eigenvalues(a: float, b: float, c: float, d: float) -> tuple[complex, complex]:
    """Both eigenvalues of the matrix ``[[a, b], [c, d]]``, larger real one first."""
    trace = a + d
    det = a * d - b * c
    discriminant = trace * trace - 4.0 * det
    if discriminant >= 0.0:
        root = math.sqrt(discriminant)
        return complex((trace + root) / 2.0, 0.0), complex((trace - root) / 2.0, 0.0)
    real = trace / 2.0
    imag = math.sqrt(-discriminant) / 2.0
    return complex(real, imag), complex(real, -imag)


def _shift(h: Matrix, m: int) -> float:
    s = h[m, m]
    t = h[m - 1, m - 1]
    u = h[m - 1, m]
    p = h[m, m - 1]
    trace = t + s
    det = t * s - u * p
    discriminant = trace * trace / 4.0 - det
    mu1_candidate = trace / 2.0 + math.copysign(math.sqrt(abs(discriminant)), trace)
    mu1 = mu1_candidate if abs(mu1_candidate) > _DEFLATION_TOL else 0.0
    mu2 = det / mu1 if abs(mu1) > _DEFLATION_TOL else 0.0
    return mu1 if abs(mu1 - s) < abs(mu2 - s) else mu2


def eigen_decomposition(matrix: Matrix) -> EigenDecomposition:
    """Eigenvalues by shifted QR iteration on the Hessenberg form.

    Eigenvalues are reported as the real diagonal of the reduced matrix.
    Raises ``NotSquareMatrixError`` for a non-square matrix and ``LinalgError``
    when the iteration does not converge.
    """
    if matrix.rows == 0:
        return EigenDecomposition([], Matrix(0, 0, []))
    if not matrix.is_square():
        raise NotSquareMatrixError()
    if matrix.rows == 1:
        return EigenDecomposition([complex(matrix[0, 0], 0.0)], Matrix.identity(1))

    n = matrix.rows
    h, v = to_hessenberg(matrix)
    end = n
    limit = _MAX_ITERATIONS * n

    while end > 0:
        for _ in range(limit):
            m = end - 1
            if end == 2:
                first, second = solve_2x2_eigenvalues(h[0, 0], h[0, 1], h[1, 0], h[1, 1])
                h[0, 0] = first.real
                h[1, 1] = second.real
                h[0, 1] = 0.0
                h[1, 0] = 0.0
                end = 0
                break
            if end == 1:
                end = 0
                break
            if abs(h[m, m - 1]) < _DEFLATION_TOL:
                end -= 1
                break
            if abs(h[m - 1, m - 2]) < _DEFLATION_TOL:
                end -= 2
                break

            shift = _shift(h, m)
            shifted = h.copy()
            for j in range(end):
                shifted[j, j] -= shift
            q, _ = qr_decomposition(shifted.submatrix(0, end, 0, end))
            q_full = Matrix.identity(n)
            q_full.set_submatrix(0, 0, q)
            h = q_full.transpose() @ h @ q_full
            v = v @ q_full
        else:
            raise LinalgError("Eigenvalue iteration did not converge")

    eigenvalues = [complex(h[i, i], 0.0) for i in range(n)]
    return EigenDecomposition(eigenvalues, v)


def lu_decomposition(matrix: Matrix) -> tuple[Matrix, Matrix, Matrix]:
    """Factorise ``P @ A == L @ U`` with partial pivoting; returns ``(P, L, U)``."""
    if not matrix.is_square():
        raise NotSquareMatrixError()
    n = matrix.rows
    lower = Matrix.zeros(n, n)
    upper = matrix.copy()
    perm = Matrix.identity(n)

    for k in range(n):
        max_val = 0.0
        pivot_row = k
        for i in range(k, n):
            if abs(upper[i, k]) > max_val:
                max_val = abs(upper[i, k])
                pivot_row = i
        if max_val < _PIVOT_TOL:
            raise SingularMatrixError()

        if pivot_row != k:
            perm.swap_rows(k, pivot_row)
            upper.swap_rows(k, pivot_row)
            for j in range(k):
                lower[k, j], lower[pivot_row, j] = lower[pivot_row, j], lower[k, j]

        lower[k, k] = 1.0
        for i in range(k + 1, n):
            lower[i, k] = upper[i, k] / upper[k, k]
        for i in range(k + 1, n):
            factor = lower[i, k]
            for j in range(k, n):
                upper[i, j] -= factor * upper[k, j]

    return perm, lower, upper


def qr_decomposition(matrix: Matrix) -> tuple[Matrix, Matrix]:
    """Householder QR: returns ``(Q, R)`` with Q orthogonal and R's diagonal non-negative."""
    rows, cols = matrix.rows, matrix.cols
    r = matrix.copy()
    q = Matrix.identity(rows)
    steps = min(rows, cols)

    for k in range(steps):
        x = r.partial_col(k, k, rows)
        reflector = householder_reflection(x)
        full = Matrix.identity(rows)
        full.set_submatrix(k, k, reflector)
        r = full @ r
        q = q @ full

    for k in range(steps):
        if r[k, k] >= 0.0:
            continue
        q.scale_col(k, -1.0)
        r.scale_row(k, -1.0)

    return q, r