"""Singular value decomposition built on the eigen decomposition of AᵀA."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .decomposition import eigen_decomposition
from .matrix import Matrix
from .vector import Vector

_NORM_TOL = 1e-14
_ZERO_SIGMA_TOL = 1e-14
_BASIS_TOL = 1e-12


@dataclass
class SVD:
    """Factors of ``A == u @ diag(sigma) @ v.transpose()``."""

    u: Matrix
    sigma: Vector
    v: Matrix


def _orthogonal_basis_vector(u: Matrix, count: int) -> Vector:
    """A unit vector orthogonal to the first ``count`` columns of ``u``.

    Standard basis vectors are tried in order; the zero vector is returned
    when every candidate lies in the span of the existing columns.
    """
    size = u.rows
    previous = [u.col(j) for j in range(count)]
    for k in range(size):
        candidate = Vector.zeros(size)
        candidate[k] = 1.0
        for column in previous:
            candidate = candidate - column * column.dot(candidate)
        norm = candidate.norm()
        if norm > _BASIS_TOL:
            return candidate * (1.0 / norm)
    return Vector.zeros(size)


def svd(matrix: Matrix) -> SVD:
    """Compute ``A = U Σ Vᵀ`` with singular values in descending order.

    Wide matrices are handled through their transpose. Raises whatever the
    eigen decomposition of ``AᵀA`` raises when it fails.
    """
    if matrix.rows < matrix.cols:
        transposed = svd(matrix.transpose())
        return SVD(u=transposed.v, sigma=transposed.sigma, v=transposed.u)

    gram = matrix.transpose() @ matrix
    eigen = eigen_decomposition(gram)
    eigenvectors = eigen.eigenvectors

    order = sorted(
        zip(eigen.eigenvalues, range(eigenvectors.cols)),
        key=lambda pair: pair[0].real,
        reverse=True,
    )

    v = Matrix.zeros(eigenvectors.rows, eigenvectors.cols)
    singular_values = []
    for i, (eigenvalue, original) in enumerate(order):
        column = eigenvectors.col(original)
        norm = column.norm()
        if norm > _NORM_TOL:
            column = column * (1.0 / norm)
        v.set_col(i, column)
        # AᵀA is positive semi-definite; a negative value is rounding noise.
        singular_values.append(math.sqrt(abs(eigenvalue.real)))

    sigma = Vector(singular_values)

    u = Matrix.zeros(matrix.rows, matrix.rows)
    for i in range(matrix.cols):
        sigma_i = sigma[i]
        if abs(sigma_i) < _ZERO_SIGMA_TOL:
            u.set_col(i, _orthogonal_basis_vector(u, i))
        else:
            u.set_col(i, (matrix @ v.col(i)) * (1.0 / sigma_i))

    return SVD(u=u, sigma=sigma, v=v)