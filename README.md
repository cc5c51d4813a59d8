# linalgkit

This package provides dense vectors and matrices of floats in plain Python,
with no third-party dependencies. It covers the everyday operations:
arithmetic, transposes, stacking and slicing. It also covers the classic
factorisations:

- row reduction
- determinants and inverses
- LU with partial pivoting
- Householder QR
- a shifted QR eigenvalue solver
- singular value decomposition

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Vectors

```python
from linalgkit.vector import Vector

v1 = Vector([1.0, 2.0, 3.0])
v2 = Vector([4.0, 5.0, 6.0])

v1.dot(v2)          # 32.0
v1 + v2             # element-wise sum (also v1.add(v2))
v1 - v2             # element-wise difference (also v1.sub(v2))
v1 * v2             # Hadamard product (also v1.hadamard_product(v2))
v1 * 2.0, 2.0 * v1  # scaling
v1 + 1.0, v1 - 1.0  # adding or subtracting a scalar from every element
-v1                 # negation
v1.norm()           # Euclidean length
v1.normalize()      # unit vector (a zero vector stays zero)
v1.cross(v2)        # 3-D cross product
v1.cosine_similarity(v2)   # 0.0 if either vector is zero
v1.transpose()      # a one-row Matrix
v1.outer(m)         # column vector times a one-row Matrix m (also v1 * m)

Vector.zeros(3)
Vector.ones(3)
Vector.linspace(0.0, 10.0, 11)

v = Vector([1.0, 5.0, 3.0, 2.0, 4.0])
v.max(), v.argmax(), v.min(), v.argmin()   # None for an empty vector
v.mean()                                   # None for an empty vector
v.std()                                    # population standard deviation
len(v), v[0], v[1:3], list(v)
```

Vectors whose dimensions do not match raise `InvalidDimensionError`. This
applies to the sum, the difference, the Hadamard product and the cross
product. `linspace` raises `InvalidArgumentError` unless `num > 1` and
`start < end`.

## Matrices

Matrices are stored row by row:

```python
from linalgkit.matrix import Matrix
from linalgkit.vector import Vector

a = Matrix(2, 2, [2.0, 1.0, 1.0, 3.0])
b = Vector([5.0, 7.0])

x = a.inverse() * b       # solves a x = b -> [1.6, 1.8]
a.determinant()           # 5.0
a.trace()
a.transpose()
a.rank()
a.rref()
a.frobenius_norm()

a[0, 1]                   # element access by (row, column)
a @ a                     # matrix product (a * a works as well)
a @ b                     # matrix-vector product
a * 2.0, a + 1.0, a - 1.0, -a

Matrix.identity(3)
Matrix.zeros(2, 3)
Matrix.diag(2, 3, [1.0, 2.0])
a.hstack(a), a.vstack(a)
a.submatrix(0, 1, 0, 2)
a.row(0), a.col(1), a.partial_col(1, 0, 2)
print(a)                  # "rows: 2, cols: 2", then aligned rows rounded to four decimals
```

Several methods change the matrix in place: `set_row`, `set_col`,
`set_submatrix`, `swap_rows`, `scale_row`, `scale_col` and
`add_scaled_row_to_row`. `copy()` returns an independent copy.

The methods report failures as follows:

- Creating a matrix whose data length is not `rows * cols` raises
  `DimensionMismatchError`.
- Adding, subtracting or multiplying operands of incompatible shapes raises
  `DimensionMismatchError`.
- An index out of range raises `IndexOutOfBoundsError`.
- `trace()` raises `NotSquareMatrixError` for a non-square matrix.
- `determinant()` raises `DimensionMismatchError` for a non-square matrix.
- `inverse()` raises `NotSquareMatrixError` for a non-square matrix.
- `inverse()` raises `SingularMatrixError` when the matrix is singular.

## Decompositions

```python
from linalgkit.decomposition import eigen_decomposition, lu_decomposition, qr_decomposition
from linalgkit.svd import svd

m = Matrix(3, 3, [4.0, 1.0, 2.0, 1.0, 3.0, 1.0, 2.0, 1.0, 5.0])

p, l, u = lu_decomposition(m)     # P A = L U
q, r = qr_decomposition(m)        # A = Q R, Q orthogonal, R with non-negative diagonal
eig = eigen_decomposition(m)      # eig.eigenvalues (complex), eig.eigenvectors
result = svd(m)                   # result.u, result.sigma (descending), result.v
```

The decompositions raise exceptions instead of returning a value:

- `lu_decomposition` raises `NotSquareMatrixError` for a non-square matrix.
- `lu_decomposition` raises `SingularMatrixError` when no pivot larger than
  `1e-10` can be found.
- `eigen_decomposition` raises `NotSquareMatrixError` for a non-square
  matrix.
- `eigen_decomposition` raises `LinalgError` when the iteration does not
  converge.
- `svd` passes on any error raised by the eigen decomposition of `AᵀA`.

The module also provides these helpers:

- `householder_reflection` builds a Householder reflection.
- `to_hessenberg` reduces a square matrix to upper Hessenberg form.
- `solve_2x2_eigenvalues` computes the eigenvalues of a 2×2 matrix.

All errors live in `linalgkit.errors` and derive from `LinalgError`.

## Limitations

`eigen_decomposition` does not return true complex eigenvalues for a real
matrix. It takes the eigenvalues from the real diagonal of the reduced
matrix, so every eigenvalue has a zero imaginary part. For a 2×2 block with
a complex pair, only the shared real part is kept. `eigenvectors` is the
accumulated transformation matrix of the iteration. It holds eigenvectors
only where that matrix diagonalises the input, for example when the input
is symmetric.

## Demonstration

This command prints a walk-through of the basic, vector and advanced
operations:

```
linalgkit-demo
```

To print a single walk-through, name it: `linalgkit-demo basic`,
`linalgkit-demo vector` or `linalgkit-demo advanced`. The default is `all`.