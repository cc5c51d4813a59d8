"""Exceptions raised by vector and matrix operations."""

from __future__ import annotations


class LinalgError(Exception):
    """Base class for every linear-algebra error."""


class DimensionMismatchError(LinalgError, ValueError):
    """Operand shapes do not agree."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Dimension mismatch: expected {expected}, found {found}")


class NotSquareMatrixError(LinalgError, ValueError):
    """The operation needs a square matrix."""

    def __init__(self) -> None:
        super().__init__("Operation requires a square matrix")


class SingularMatrixError(LinalgError, ArithmeticError):
    """The matrix has no inverse."""

    def __init__(self) -> None:
        super().__init__("Matrix is singular (not invertible)")


class IndexOutOfBoundsError(LinalgError, IndexError):
    """A row, column or element index lies outside the container."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of bounds for size {size}")


class InvalidDimensionError(LinalgError, ValueError):
    """A dimension is not acceptable for the requested operation."""

    def __init__(self, dim: int, text: str) -> None:
        self.dim = dim
        self.text = text
        super().__init__(f"Invalid dimension ({dim}): {text}")


class FeatureNotImplementedError(LinalgError, NotImplementedError):
    """The requested feature is not available."""

    def __init__(self) -> None:
        super().__init__("Feature not yet implemented")


class InvalidArgumentError(LinalgError, ValueError):
    """An argument has an unacceptable value."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid argument: {text}")