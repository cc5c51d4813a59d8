"""A dense, row-major matrix of scalars with elimination-based algebra."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from typing import Any

from .errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    NotSquareMatrixError,
    SingularMatrixError,
)
from .vector import Vector

DISPLAY_PRECISION = 4


def format_element(value: Any) -> str:
    """Render one element for display; floats are rounded to four decimals."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        factor = 10.0**DISPLAY_PRECISION
        scaled = value * factor
        rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled) / factor
        if rounded == 0.0:
            rounded = 0.0
        if rounded.is_integer():
            return str(int(rounded))
        return repr(rounded)
    return str(value)


class Matrix:
    """A ``rows`` x ``cols`` matrix stored as a flat row-major list."""

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows: int, cols: int, data: Iterable[Any]) -> None:
        data = list(data)
        if rows * cols != len(data):
            raise DimensionMismatchError(
                f"{rows}x{cols} ({rows * cols} elements)", f"{len(data)} elements"
            )
        self.rows = rows
        self.cols = cols
        self.data = data

    # --- construction -------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """A matrix of zeros."""
        return cls(rows, cols, [0.0] * (rows * cols))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """The ``size`` x ``size`` identity matrix."""
        matrix = cls.zeros(size, size)
        for i in range(size):
            matrix.data[i * size + i] = 1.0
        return matrix

    @classmethod
    def diag(cls, rows: int, cols: int, diag_elements: Iterable[Any]) -> Matrix:
        """A zero matrix whose leading diagonal is filled from ``diag_elements``."""
        matrix = cls.zeros(rows, cols)
        for i, value in zip(range(min(rows, cols)), diag_elements):
            matrix.data[i * cols + i] = value
        return matrix

    # --- element access -----------------------------------------------

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        if not 0 <= i < self.rows:
            raise IndexOutOfBoundsError(i, self.rows)
        if not 0 <= j < self.cols:
            raise IndexOutOfBoundsError(j, self.cols)
        return i * self.cols + j

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self.data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        self.data[self._offset(index)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self.data) == (other.rows, other.cols, other.data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self.data!r})"

    def __str__(self) -> str:
        cells = [format_element(value) for value in self.data]
        width = max((len(cell) for cell in cells), default=0)
        lines = [f"rows: {self.rows}, cols: {self.cols}"]
        for r in range(self.rows):
            row = cells[r * self.cols : (r + 1) * self.cols]
            lines.append("\t".join(cell.rjust(width) for cell in row))
        return "\n".join(lines) + "\n"

    def copy(self) -> Matrix:
        """An independent copy."""
        return Matrix(self.rows, self.cols, list(self.data))

    # --- structure ----------------------------------------------------

    def _row_slice(self, r: int) -> list[Any]:
        return self.data[r * self.cols : (r + 1) * self.cols]

    def transpose(self) -> Matrix:
        """The transposed matrix."""
        data = [self.data[i * self.cols + j] for j in range(self.cols) for i in range(self.rows)]
        return Matrix(self.cols, self.rows, data)

    def swap_rows(self, r1: int, r2: int) -> None:
        """Exchange two rows in place."""
        row1 = self.row(r1)
        row2 = self.row(r2)
        self.set_row(r1, row2)
        self.set_row(r2, row1)

    def col(self, c: int) -> Vector:
        """Column ``c`` as a vector."""
        if c >= self.cols or c < 0:
            raise IndexOutOfBoundsError(c, self.cols)
        return Vector(self.data[r * self.cols + c] for r in range(self.rows))

    def partial_col(self, col_idx: int, start_row: int, end_row: int) -> Vector:
        """Rows ``start_row`` up to ``end_row`` (exclusive) of one column."""
        if col_idx >= self.cols or col_idx < 0:
            raise IndexOutOfBoundsError(col_idx, self.cols)
        if end_row > self.rows or start_row > end_row or start_row < 0:
            raise InvalidDimensionError(end_row, "Invalid row range for column extraction")
        return Vector(self.data[r * self.cols + col_idx] for r in range(start_row, end_row))

    def row(self, r: int) -> Vector:
        """Row ``r`` as a vector."""
        if r >= self.rows or r < 0:
            raise IndexOutOfBoundsError(r, self.rows)
        return Vector(self._row_slice(r))

    def set_col(self, c: int, col_vec: Vector) -> None:
        """Overwrite column ``c``."""
        if c >= self.cols or c < 0:
            raise IndexOutOfBoundsError(c, self.cols)
        if len(col_vec) != self.rows:
            raise DimensionMismatchError(f"{self.rows} rows", f"{len(col_vec)} rows")
        for r, value in enumerate(col_vec):
            self.data[r * self.cols + c] = value

    def set_row(self, r: int, row_vec: Vector) -> None:
        """Overwrite row ``r``."""
        if r >= self.rows or r < 0:
            raise IndexOutOfBoundsError(r, self.rows)
        if len(row_vec) != self.cols:
            raise DimensionMismatchError(f"{self.cols} columns", f"{len(row_vec)} columns")
        self.data[r * self.cols : (r + 1) * self.cols] = list(row_vec)

    def is_square(self) -> bool:
        """Whether rows equal columns."""
        return self.rows == self.cols

    def submatrix(self, start_row: int, end_row: int, start_col: int, end_col: int) -> Matrix:
        """The block of rows ``start_row:end_row`` and columns ``start_col:end_col``."""
        if not 0 <= start_row <= end_row <= self.rows:
            raise IndexOutOfBoundsError(end_row, self.rows)
        if not 0 <= start_col <= end_col <= self.cols:
            raise IndexOutOfBoundsError(end_col, self.cols)
        data = [
            self.data[i * self.cols + j]
            for i in range(start_row, end_row)
            for j in range(start_col, end_col)
        ]
        return Matrix(end_row - start_row, end_col - start_col, data)

    def set_submatrix(self, start_row: int, start_col: int, submatrix: Matrix) -> None:
        """Copy ``submatrix`` into this matrix with its corner at the given position."""
        if (
            start_row + submatrix.rows > self.rows
            or start_col + submatrix.cols > self.cols
        ):
            raise IndexOutOfBoundsError(start_row + submatrix.rows, self.rows)
        for i in range(submatrix.rows):
            offset = (start_row + i) * self.cols + start_col
            self.data[offset : offset + submatrix.cols] = submatrix._row_slice(i)

    def hstack(self, other: Matrix) -> Matrix:
        """Join ``other`` to the right of this matrix."""
        if other.rows != self.rows:
            raise DimensionMismatchError(f"{self.rows} rows", f"{other.rows} rows")
        data = [
            value
            for r in range(self.rows)
            for value in self._row_slice(r) + other._row_slice(r)
        ]
        return Matrix(self.rows, self.cols + other.cols, data)

    def vstack(self, other: Matrix) -> Matrix:
        """Join ``other`` below this matrix."""
        if other.cols != self.cols:
            raise DimensionMismatchError(f"{self.cols} columns", f"{other.cols} columns")
        return Matrix(self.rows + other.rows, self.cols, self.data + other.data)

    # --- row and column operations -----------------------------------

    def scale_row(self, r: int, scalar: Any) -> None:
        """Multiply row ``r`` by ``scalar`` in place."""
        if r >= self.rows or r < 0:
            raise IndexOutOfBoundsError(r, self.rows)
        start = r * self.cols
        self.data[start : start + self.cols] = [x * scalar for x in self._row_slice(r)]

    def scale_col(self, c: int, scalar: Any) -> None:
        """Multiply column ``c`` by ``scalar`` in place."""
        if c >= self.cols or c < 0:
            raise IndexOutOfBoundsError(c, self.cols)
        for r in range(self.rows):
            self.data[r * self.cols + c] *= scalar

    def add_scaled_row_to_row(self, source_row: int, dest_row: int, scalar: Any) -> None:
        """Add ``scalar`` times ``source_row`` onto ``dest_row`` in place."""
        if not (0 <= source_row < self.rows and 0 <= dest_row < self.rows):
            raise IndexOutOfBoundsError(source_row, self.rows)
        source = self._row_slice(source_row)
        start = dest_row * self.cols
        self.data[start : start + self.cols] = [
            d + s * scalar for d, s in zip(self._row_slice(dest_row), source)
        ]

    def trace(self) -> Any:
        """Sum of the diagonal; only for square matrices."""
        if not self.is_square():
            raise NotSquareMatrixError()
        return sum(self.data[i * self.cols + i] for i in range(self.rows))

    # --- elimination --------------------------------------------------

    def _gauss_elimination(self) -> tuple[Matrix, Any]:
        reduced = self.copy()
        det_factor = 1.0
        pivot_row = 0
        for c in range(self.cols):
            if pivot_row >= self.rows:
                break
            found = next(
                (r for r in range(pivot_row, self.rows) if reduced[r, c] != 0),
                None,
            )
            if found is None:
                det_factor = 0.0
                continue
            if found != pivot_row:
                reduced.swap_rows(pivot_row, found)
                det_factor = -det_factor
            pivot_value = reduced[pivot_row, c]
            reduced.scale_row(pivot_row, 1.0 / pivot_value)
            det_factor = det_factor * pivot_value
            for r in range(self.rows):
                if r != pivot_row:
                    reduced.add_scaled_row_to_row(pivot_row, r, -reduced[r, c])
            pivot_row += 1
        return reduced, det_factor

    def rref(self) -> Matrix:
        """Reduced row echelon form."""
        return self._gauss_elimination()[0]

    def rank(self) -> int:
        """Number of non-zero rows in the reduced row echelon form."""
        return Matrix.rank_from_rref(self.rref())

    @staticmethod
    def rank_from_rref(rref_matrix: Matrix) -> int:
        """Count the rows of an echelon-form matrix holding a non-zero element."""
        return sum(
            1
            for r in range(rref_matrix.rows)
            if any(x != 0 for x in rref_matrix._row_slice(r))
        )

    def determinant(self) -> Any:
        """Determinant of a square matrix."""
        if not self.is_square():
            raise DimensionMismatchError("square matrix", f"{self.rows}x{self.cols}")
        return self._gauss_elimination()[1]

    def inverse(self) -> Matrix:
        """The inverse matrix; raises if the matrix is not square or singular."""
        if not self.is_square():
            raise NotSquareMatrixError()
        n = self.rows
        augmented = self.hstack(Matrix.identity(n))
        reduced, _ = augmented._gauss_elimination()
        if Matrix.rank_from_rref(reduced.submatrix(0, n, 0, n)) != n:
            raise SingularMatrixError()
        return reduced.submatrix(0, n, n, 2 * n)

    def frobenius_norm(self) -> float:
        """Square root of the sum of squared elements; NaN if any is NaN or infinite."""
        if self.rows == 0 or self.cols == 0:
            return 0.0
        total = 0.0
        for value in self.data:
            if math.isnan(value) or math.isinf(value):
                return math.nan
            total += value * value
        return math.sqrt(total)

    # --- arithmetic ---------------------------------------------------

    def _require_same_shape(self, other: Matrix) -> None:
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionMismatchError(
                f"{self.rows}x{self.cols}", f"{other.rows}x{other.cols}"
            )

    def _matmul(self, rhs: Matrix) -> Matrix:
        if self.cols != rhs.rows:
            raise DimensionMismatchError(
                f"{self.rows}x{self.cols}", f"{rhs.rows}x{rhs.cols}"
            )
        rhs_cols = [rhs.col(j).data for j in range(rhs.cols)]
        data = [
            sum(a * b for a, b in zip(self._row_slice(i), column))
            for i in range(self.rows)
            for column in rhs_cols
        ]
        return Matrix(self.rows, rhs.cols, data)

    def _mul_vector(self, rhs: Vector) -> Vector:
        if self.cols != len(rhs):
            raise DimensionMismatchError(
                f"{self.cols} columns", f"{len(rhs)} elements in vector"
            )
        return Vector(
            sum(a * b for a, b in zip(self._row_slice(i), rhs.data))
            for i in range(self.rows)
        )

    def __add__(self, other):
        if isinstance(other, Matrix):
            self._require_same_shape(other)
            return Matrix(self.rows, self.cols, [a + b for a, b in zip(self.data, other.data)])
        if isinstance(other, numbers.Number):
            return Matrix(self.rows, self.cols, [x + other for x in self.data])
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            self._require_same_shape(other)
            return Matrix(self.rows, self.cols, [a - b for a, b in zip(self.data, other.data)])
        if isinstance(other, numbers.Number):
            return Matrix(self.rows, self.cols, [x - other for x in self.data])
        return NotImplemented

    def __mul__(self, other):
        """Scalar scaling, or the matrix product with a matrix or vector."""
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._mul_vector(other)
        if isinstance(other, numbers.Number):
            return Matrix(self.rows, self.cols, [x * other for x in self.data])
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return Matrix(self.rows, self.cols, [other * x for x in self.data])
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._mul_vector(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return Matrix(self.rows, self.cols, [-x for x in self.data])