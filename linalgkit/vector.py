"""A dense vector of scalars with arithmetic and statistics."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator
from typing import Any

from .errors import InvalidArgumentError, InvalidDimensionError


class Vector:
    """A one-dimensional sequence of numbers."""

    __slots__ = ("data",)

    def __init__(self, data: Iterable[Any]) -> None:
        self.data = list(data)

    @classmethod
    def zeros(cls, dim: int) -> Vector:
        """A vector of ``dim`` zeros."""
        return cls([0.0] * dim)

    @classmethod
    def ones(cls, dim: int) -> Vector:
        """A vector of ``dim`` ones."""
        return cls([1.0] * dim)

    @classmethod
    def linspace(cls, start: float, end: float, num: int) -> Vector:
        """``num`` evenly spaced values from ``start`` to ``end`` inclusive."""
        if num <= 1 or start >= end:
            raise InvalidArgumentError(
                "num must be greater than 1 and start must be less than end"
            )
        step = (end - start) / (num - 1.0)
        return cls(start + i * step for i in range(num))

    def dim(self) -> int:
        """Number of elements."""
        return len(self.data)

    def transpose(self):
        """The vector as a one-row matrix."""
        from .matrix import Matrix

        return Matrix(1, self.dim(), list(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self.data[index])
        return self.data[index]

    def __setitem__(self, index, value) -> None:
        self.data[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self.data!r})"

    def argmax(self) -> int | None:
        """Index of the first largest element, or None when empty."""
        if not self.data:
            return None
        best = 0
        for i, value in enumerate(self.data[1:], start=1):
            if value > self.data[best]:
                best = i
        return best

    def argmin(self) -> int | None:
        """Index of the first smallest element, or None when empty."""
        if not self.data:
            return None
        best = 0
        for i, value in enumerate(self.data[1:], start=1):
            if value < self.data[best]:
                best = i
        return best

    def max(self):
        """Largest element, or None when empty."""
        index = self.argmax()
        return None if index is None else self.data[index]

    def min(self):
        """Smallest element, or None when empty."""
        index = self.argmin()
        return None if index is None else self.data[index]

    def _require_same_dim(self, other: Vector, what: str) -> None:
        if self.dim() != other.dim():
            raise InvalidDimensionError(
                self.dim(), f"Vector dimensions must match for {what}."
            )

    def add(self, other: Vector) -> Vector:
        """Element-wise sum; dimensions must match."""
        self._require_same_dim(other, "addition")
        return Vector(a + b for a, b in zip(self.data, other.data))

    def sub(self, other: Vector) -> Vector:
        """Element-wise difference; dimensions must match."""
        self._require_same_dim(other, "subtraction")
        return Vector(a - b for a, b in zip(self.data, other.data))

    def hadamard_product(self, other: Vector) -> Vector:
        """Element-wise product; dimensions must match."""
        self._require_same_dim(other, "Hadamard product")
        return Vector(a * b for a, b in zip(self.data, other.data))

    def outer(self, matrix):
        """Product of this column vector with a one-row matrix."""
        from .matrix import Matrix

        if matrix.rows != 1:
            raise InvalidDimensionError(
                1, "Matrix rows must be 1 for vector multiplication."
            )
        row = matrix.data[: matrix.cols]
        data = [x * y for x in self.data for y in row]
        return Matrix(self.dim(), matrix.cols, data)

    def dot(self, other: Vector):
        """Inner product over the common length."""
        return sum(a * b for a, b in zip(self.data, other.data))

    def cross(self, other: Vector) -> Vector:
        """Cross product of two 3-dimensional vectors."""
        if self.dim() != 3 or other.dim() != 3:
            raise InvalidDimensionError(
                self.dim(), "Cross product is only defined for 3D vectors."
            )
        a, b, c = self.data
        d, e, f = other.data
        return Vector([b * f - c * e, c * d - a * f, a * e - b * d])

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        norm = self.norm()
        if norm == 0.0:
            return Vector.zeros(self.dim())
        return Vector(x / norm for x in self.data)

    def cosine_similarity(self, other: Vector) -> float:
        """Cosine of the angle between the vectors, 0.0 if either is zero."""
        norm_self = self.norm()
        norm_other = other.norm()
        if norm_self == 0.0 or norm_other == 0.0:
            return 0.0
        return self.dot(other) / (norm_self * norm_other)

    def mean(self) -> float | None:
        """Arithmetic mean, or None when empty."""
        if not self.data:
            return None
        return sum(self.data) / len(self.data)

    def std(self) -> float:
        """Population standard deviation; 0.0 for fewer than two elements."""
        if len(self.data) < 2:
            return 0.0
        mean = self.mean()
        variance = sum((x - mean) ** 2 for x in self.data) / len(self.data)
        return math.sqrt(variance)

    def __add__(self, other):
        if isinstance(other, Vector):
            return self.add(other)
        if isinstance(other, numbers.Number):
            return Vector(x + other for x in self.data)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return self.sub(other)
        if isinstance(other, numbers.Number):
            return Vector(x - other for x in self.data)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self.hadamard_product(other)
        if isinstance(other, numbers.Number):
            return Vector(x * other for x in self.data)
        from .matrix import Matrix

        if isinstance(other, Matrix):
            return self.outer(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return Vector(other * x for x in self.data)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-x for x in self.data)