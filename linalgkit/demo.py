"""Small walkthroughs of the vector and matrix operations."""

from __future__ import annotations

import argparse
import math

from .decomposition import eigen_decomposition, lu_decomposition
from .errors import LinalgError
from .matrix import Matrix
from .vector import Vector


def _num(value: float) -> str:
    """Plain display of a float, dropping a trailing ``.0`` on whole numbers."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_matrix(matrix: Matrix, precision: int = 3) -> str:
    """Each row on its own line, elements in fields eight wide."""
    return "".join(
        "".join(f"{matrix[i, j]:8.{precision}f} " for j in range(matrix.cols)) + "\n"
        for i in range(matrix.rows)
    )


def basic_demo() -> str:
    """Vector arithmetic, a transpose and an identity matrix."""
    lines = ["=== Basic matrix and vector operations ==="]
    v1 = Vector([1.0, 2.0, 3.0])
    v2 = Vector([4.0, 5.0, 6.0])
    lines.append(f"vector v1: {v1.data!r}")
    lines.append(f"vector v2: {v2.data!r}")
    lines.append(f"norm of v1: {_num(v1.norm())}")
    lines.append(f"v1 . v2: {_num(v1.dot(v2))}")
    lines.append(f"v1 + v2: {(v1 + v2).data!r}")

    matrix = Matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    lines.append("")
    lines.append("matrix (2x3):")
    text = format_matrix(matrix, 2)
    transposed = matrix.transpose()
    text += "\ntransposed (3x2):\n" + format_matrix(transposed, 2)
    text += "\nidentity (3x3):\n" + format_matrix(Matrix.identity(3), 2)
    return "\n".join(lines) + "\n" + text


def vector_demo() -> str:
    """Construction, statistics, normalisation and products of vectors."""
    lines = ["=== Vector operations ==="]
    v1 = Vector([1.0, -2.0, 3.0])
    v2 = Vector.zeros(3)
    v3 = Vector.ones(3)
    lines.append(f"v1: {v1.data!r}")
    lines.append(f"v2 (zeros): {v2.data!r}")
    lines.append(f"v3 (ones): {v3.data!r}")
    lines.append("")
    lines.append("statistics of v1:")
    lines.append(f"  norm: {_num(v1.norm())}")

    normalized = v1.normalize()
    lines.append("")
    lines.append(f"v1 normalized: {normalized.data!r}")
    lines.append(f"norm after normalizing: {_num(normalized.norm())}")

    a = Vector([1.0, 0.0, 0.0])
    b = Vector([0.0, 1.0, 0.0])
    try:
        lines.append("")
        lines.append(f"a x b = {a.cross(b).data!r}")
    except LinalgError as exc:
        lines.append(f"cross product failed: {exc}")

    lines.append(f"v1 . v3: {_num(v1.dot(v3))}")
    lines.append(f"v1 + v3: {(v1 + v3).data!r}")
    lines.append(f"v1 * 2.0: {(v1 * 2.0).data!r}")
    return "\n".join(lines) + "\n"


def advanced_demo() -> str:
    """Determinant, trace, inverse, LU, eigenvalues and stacking."""
    parts = ["=== Advanced linear algebra ===\n"]
    square = Matrix(3, 3, [2.0, -1.0, 0.0, -1.0, 2.0, -1.0, 0.0, -1.0, 2.0])
    parts.append("square matrix A:\n" + format_matrix(square))

    try:
        parts.append(f"Determinant: {_num(square.determinant())}\n")
    except LinalgError as exc:
        parts.append(f"determinant failed: {exc}\n")

    parts.append(f"Trace: {_num(square.trace())}\n")

    try:
        parts.append("\nInverse:\n" + format_matrix(square.inverse()))
    except LinalgError:
        parts.append("the inverse does not exist\n")

    try:
        perm, lower, upper = lu_decomposition(square)
        parts.append("\nLU decomposition - L:\n" + format_matrix(lower))
        parts.append("LU decomposition - U:\n" + format_matrix(upper))
        parts.append("LU decomposition - P:\n" + format_matrix(perm))
    except LinalgError:
        parts.append("LU decomposition failed\n")

    try:
        eigen = eigen_decomposition(square)
        parts.append(f"\nEigenvalues: {eigen.eigenvalues!r}\n")
        parts.append(f"Eigenvector count: {eigen.eigenvectors.cols}\n")
    except LinalgError:
        parts.append("eigen decomposition failed\n")

    m1 = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    m2 = Matrix(2, 2, [5.0, 6.0, 7.0, 8.0])
    try:
        parts.append("\nhstack:\n" + format_matrix(m1.hstack(m2)))
    except LinalgError as exc:
        parts.append(f"hstack failed: {exc}\n")
    return "".join(parts)


_DEMOS = {
    "basic": (basic_demo,),
    "vector": (vector_demo,),
    "advanced": (advanced_demo,),
    "all": (basic_demo, vector_demo, advanced_demo),
}


def main(argv: list[str] | None = None) -> int:
    """Run one demo, or all of them, and print the result."""
    parser = argparse.ArgumentParser(description="Linear algebra walkthroughs.")
    parser.add_argument("demo", nargs="?", default="all", choices=sorted(_DEMOS))
    args = parser.parse_args(argv)
    print("\n".join(demo() for demo in _DEMOS[args.demo]), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())