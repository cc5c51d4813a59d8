import math

import pytest

from linalgkit.decomposition import (
    EigenDecomposition,
    eigen_decomposition,
    householder_reflection,
    lu_decomposition,
    qr_decomposition,
    solve_2x2_eigenvalues,
    to_hessenberg,
)
from linalgkit.errors import NotSquareMatrixError, SingularMatrixError
from linalgkit.matrix import Matrix
from linalgkit.vector import Vector


def _max_diff(actual, expected):
    assert actual.rows == expected.rows
    assert actual.cols == expected.cols
    return max((abs(x - y) for x, y in zip(actual.data, expected.data)), default=0.0)


def _assert_close(actual, expected, tol):
    assert _max_diff(actual, expected) < tol


def _assert_identity(m, tol):
    _assert_close(m, Matrix.identity(m.rows), tol)


def _sorted_real(decomp):
    return sorted(e.real for e in decomp.eigenvalues)


# --- helpers ---------------------------------------------------------------


def test_householder_maps_onto_first_axis():
    h = householder_reflection(Vector([3.0, 4.0]))
    image = h @ Vector([3.0, 4.0])
    assert abs(image[0] + 5.0) < 1e-12
    assert abs(image[1]) < 1e-12
    _assert_identity(h.transpose() @ h, 1e-12)


def test_householder_of_zero_vector_is_identity():
    assert householder_reflection(Vector([0.0, 0.0, 0.0])) == Matrix.identity(3)


def test_solve_2x2_real():
    assert solve_2x2_eigenvalues(3.0, 1.0, 0.0, 2.0) == (complex(3.0, 0.0), complex(2.0, 0.0))


def test_solve_2x2_complex_pair():
    first, second = solve_2x2_eigenvalues(0.0, -1.0, 1.0, 0.0)
    assert first == complex(0.0, 1.0)
    assert second == complex(0.0, -1.0)


def test_to_hessenberg_reconstructs():
    a = Matrix(4, 4, [4.0, 1.0, 2.0, 3.0, 1.0, 3.0, 1.0, 0.5, 2.0, 1.0, 5.0, 1.0, 3.0, 0.5, 1.0, 2.0])
    h, v = to_hessenberg(a)
    for i in range(4):
        for j in range(i - 1):
            assert abs(h[i, j]) < 1e-12
    _assert_close(v @ h @ v.transpose(), a, 1e-10)


def test_to_hessenberg_rejects_non_square():
    with pytest.raises(NotSquareMatrixError):
        to_hessenberg(Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))


# --- eigen decomposition ---------------------------------------------------


def test_eigen_2x2_real_eigenvalues():
    decomp = eigen_decomposition(Matrix(2, 2, [3.0, 1.0, 0.0, 2.0]))
    assert all(abs(e.imag) < 1e-10 for e in decomp.eigenvalues)
    values = _sorted_real(decomp)
    assert abs(values[0] - 2.0) < 1e-10
    assert abs(values[1] - 3.0) < 1e-10


def test_eigen_identity():
    decomp = eigen_decomposition(Matrix.identity(3))
    assert len(decomp.eigenvalues) == 3
    for e in decomp.eigenvalues:
        assert abs(e.real - 1.0) < 1e-10
        assert abs(e.imag) < 1e-10


def test_eigen_diagonal():
    decomp = eigen_decomposition(Matrix(3, 3, [5.0, 0.0, 0.0, 0.0, -2.0, 0.0, 0.0, 0.0, 7.0]))
    values = _sorted_real(decomp)
    assert abs(values[0] + 2.0) < 1e-10
    assert abs(values[1] - 5.0) < 1e-10
    assert abs(values[2] - 7.0) < 1e-10


def test_eigen_symmetric_trace():
    a = Matrix(3, 3, [4.0, 1.0, 2.0, 1.0, 3.0, 1.0, 2.0, 1.0, 5.0])
    decomp = eigen_decomposition(a)
    assert all(abs(e.imag) < 1e-10 for e in decomp.eigenvalues)
    assert abs(a.trace() - sum(e.real for e in decomp.eigenvalues)) < 1e-10


def test_eigen_rotation_matrix_conjugate_real_parts():
    angle = math.pi / 4.0
    c, s = math.cos(angle), math.sin(angle)
    decomp = eigen_decomposition(Matrix(2, 2, [c, -s, s, c]))
    assert len(decomp.eigenvalues) == 2
    e1, e2 = decomp.eigenvalues
    assert abs(e1.real - e2.real) < 1e-10
    assert abs(e1.imag + e2.imag) < 1e-10
    assert abs(e1.real - c) < 1e-10


def test_eigen_upper_triangular():
    decomp = eigen_decomposition(Matrix(3, 3, [6.0, 2.0, 1.0, 0.0, 4.0, 3.0, 0.0, 0.0, 2.0]))
    values = _sorted_real(decomp)
    assert abs(values[0] - 2.0) < 1e-10
    assert abs(values[1] - 4.0) < 1e-10
    assert abs(values[2] - 6.0) < 1e-10


def test_eigen_complex_pair_real_parts_zero():
    decomp = eigen_decomposition(Matrix(2, 2, [0.0, -1.0, 1.0, 0.0]))
    assert len(decomp.eigenvalues) == 2
    assert all(abs(e.real) < 1e-10 for e in decomp.eigenvalues)
    assert abs(sum(e.imag for e in decomp.eigenvalues)) < 1e-10


def test_eigen_1x1():
    decomp = eigen_decomposition(Matrix(1, 1, [42.0]))
    assert decomp == EigenDecomposition([complex(42.0, 0.0)], Matrix.identity(1))


def test_eigen_empty():
    decomp = eigen_decomposition(Matrix(0, 0, []))
    assert decomp.eigenvalues == []
    assert decomp.eigenvectors == Matrix(0, 0, [])


def test_eigen_repeated():
    decomp = eigen_decomposition(Matrix(3, 3, [2.0, 1.0, 0.0, 0.0, 2.0, 1.0, 0.0, 0.0, 2.0]))
    for e in decomp.eigenvalues:
        assert abs(e.real - 2.0) < 1e-10
        assert abs(e.imag) < 1e-10


def test_eigen_non_square_raises():
    with pytest.raises(NotSquareMatrixError):
        eigen_decomposition(Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))


def test_eigen_zero_matrix():
    decomp = eigen_decomposition(Matrix.zeros(3, 3))
    assert len(decomp.eigenvalues) == 3
    assert all(abs(e.real) < 1e-10 and abs(e.imag) < 1e-10 for e in decomp.eigenvalues)


def test_eigen_block_diagonal_4x4_trace():
    a = Matrix(4, 4, [1.0, 2.0, 0.0, 0.0, 2.0, 3.0, 0.0, 0.0, 0.0, 0.0, 4.0, 1.0, 0.0, 0.0, 1.0, 5.0])
    decomp = eigen_decomposition(a)
    assert len(decomp.eigenvalues) == 4
    assert decomp.eigenvectors.rows == 4 and decomp.eigenvectors.cols == 4
    assert abs(a.trace() - sum(e.real for e in decomp.eigenvalues)) < 1e-10


def test_eigen_random_symmetric():
    a = Matrix(3, 3, [4.0, 1.5, 0.5, 1.5, 3.0, 2.0, 0.5, 2.0, 5.0])
    decomp = eigen_decomposition(a)
    values = _sorted_real(decomp)
    assert all(abs(e.imag) < 1e-10 for e in decomp.eigenvalues)
    assert abs(a.trace() - sum(values)) < 1e-10
    assert abs(a.determinant() - math.prod(values)) < 1e-9


# --- LU ----------------------------------------------------------------------


@pytest.mark.parametrize(
    "n, data",
    [
        (3, [2.0, 1.0, 1.0, 4.0, 3.0, 3.0, 8.0, 7.0, 9.0]),
        (3, [2.0, 1.0, 3.0, 0.0, 4.0, 2.0, 0.0, 0.0, 5.0]),
        (3, [2.0, 0.0, 0.0, 1.0, 3.0, 0.0, 4.0, 2.0, 5.0]),
        (2, [0.0, 1.0, 1.0, 0.0]),
        (4, [1.0, 2.0, 3.0, 4.0, 2.0, 5.0, 6.0, 7.0, 3.0, 6.0, 10.0, 11.0, 4.0, 7.0, 11.0, 15.0]),
        (3, [-2.0, 1.0, 3.0, 4.0, -5.0, 6.0, -7.0, 8.0, -9.0]),
    ],
)
def test_lu_reconstructs(n, data):
    a = Matrix(n, n, data)
    p, l, u = lu_decomposition(a)
    _assert_close(p @ a, l @ u, 1e-10)
    for i in range(n):
        assert l[i, i] == 1.0
        for j in range(i):
            assert abs(u[i, j]) < 1e-10
        for j in range(i + 1, n):
            assert l[i, j] == 0.0


def test_lu_identity():
    identity = Matrix.identity(3)
    p, l, u = lu_decomposition(identity)
    assert _max_diff(p, identity) < 1e-10
    assert _max_diff(l, identity) < 1e-10
    assert _max_diff(u, identity) < 1e-10


def test_lu_singular_raises():
    with pytest.raises(SingularMatrixError):
        lu_decomposition(Matrix(3, 3, [1.0, 2.0, 3.0, 2.0, 4.0, 6.0, 1.0, 2.0, 3.0]))


def test_lu_non_square_raises():
    with pytest.raises(NotSquareMatrixError):
        lu_decomposition(Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))


def test_lu_1x1():
    p, l, u = lu_decomposition(Matrix(1, 1, [5.0]))
    assert p[0, 0] == 1.0
    assert l[0, 0] == 1.0
    assert u[0, 0] == 5.0


# --- QR ----------------------------------------------------------------------


def _check_qr(a, tol=1e-10):
    q, r = qr_decomposition(a)
    _assert_close(q @ r, a, tol)
    _assert_identity(q.transpose() @ q, tol)
    return q, r


def test_qr_basic():
    a = Matrix(3, 3, [12.0, -51.0, 4.0, 6.0, 167.0, -68.0, -4.0, 24.0, -41.0])
    _, r = _check_qr(a)
    for i in range(1, 3):
        for j in range(i):
            assert abs(r[i, j]) < 1e-10


def test_qr_identity():
    identity = Matrix.identity(3)
    q, r = qr_decomposition(identity)
    assert _max_diff(q, identity) < 1e-10
    assert _max_diff(r, identity) < 1e-10


def test_qr_tall():
    q, r = _check_qr(Matrix(4, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0, 11.0, 12.0]))
    assert (q.rows, q.cols) == (4, 4)
    assert (r.rows, r.cols) == (4, 3)


def test_qr_wide():
    q, r = _check_qr(Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))
    assert (q.rows, q.cols) == (2, 2)
    assert (r.rows, r.cols) == (2, 3)


def test_qr_orthogonal_columns():
    _, r = qr_decomposition(Matrix(3, 3, [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]))
    for i in range(3):
        assert abs(r[i, i]) > 0.5
        for j in range(i):
            assert abs(r[i, j]) < 1e-10


def test_qr_negative_values():
    a = Matrix(3, 3, [-2.0, 1.0, 3.0, 4.0, -5.0, 6.0, -7.0, 8.0, -9.0])
    q, r = qr_decomposition(a)
    _assert_close(q @ r, a, 1e-10)
    assert all(r[k, k] >= 0.0 for k in range(3))


def test_qr_1x1():
    q, r = qr_decomposition(Matrix(1, 1, [5.0]))
    assert abs(abs(q[0, 0]) - 1.0) < 1e-10
    assert abs(r[0, 0]) > 1e-10
    assert abs(5.0 - q[0, 0] * r[0, 0]) < 1e-10


def test_qr_zero_column():
    a = Matrix(3, 3, [1.0, 0.0, 3.0, 2.0, 0.0, 6.0, 3.0, 0.0, 9.0])
    q, r = qr_decomposition(a)
    _assert_close(q @ r, a, 1e-10)
    for i in range(3):
        assert abs(r[i, 1]) < 1e-10


def test_qr_small_diagonal_stability():
    a = Matrix(
        4,
        4,
        [1e-10, 1.0, 0.0, 0.0, 0.0, 1e-10, 1.0, 0.0, 0.0, 0.0, 1e-10, 1.0, 0.0, 0.0, 0.0, 1e-10],
    )
    q, r = qr_decomposition(a)
    assert _max_diff(q @ r, a) < 1e-8
    assert _max_diff(q.transpose() @ q, Matrix.identity(4)) < 1e-8


def test_qr_rank_one_5x5():
    a = Matrix(5, 5, [float((i + 1) * (j + 1)) for i in range(5) for j in range(5)])
    q, r = qr_decomposition(a)
    qr = q @ r
    max_error = max(abs(x - y) for x, y in zip(a.data, qr.data))
    assert max_error < 1e-10


def test_qr_specific_case_columns_orthonormal():
    a = Matrix(3, 3, [0.8147, 0.9134, 0.2785, 0.9058, 0.6324, 0.5469, 0.1270, 0.0975, 0.9575])
    q, r = qr_decomposition(a)
    _assert_close(q @ r, a, 1e-10)
    for j in range(3):
        assert abs(q.col(j).norm() - 1.0) < 1e-10
    for i in range(3):
        for j in range(i + 1, 3):
            assert abs(q.col(i).dot(q.col(j))) < 1e-10