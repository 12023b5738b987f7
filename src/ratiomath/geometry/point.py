"""
Point — Точка в N-мерном пространстве

Immutable Pydantic модель (frozen=True).
    Point + Vector → Point
    Point - Point  → Vector
"""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field

from ratiomath.core.math.fraction import Fraction
from ratiomath.geometry.vector import Vector, ensure_same_dimensions


class Point(BaseModel):
    """Положение в N-мерном пространстве с точными координатами."""

    coordinates: tuple[Fraction, ...] = Field(..., description="Координаты точки")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def __init__(self, *coordinates: Fraction | int | float) -> None:
        super().__init__(coordinates=tuple(Fraction.coerce(x) for x in coordinates))

    @classmethod
    def from_iterable(cls, coordinates: Iterable[Fraction | int | float]) -> "Point":
        return cls(*coordinates)

    @property
    def n_dimensions(self) -> int:
        return len(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __getitem__(self, index: int) -> Fraction:
        return self.coordinates[index]

    def __iter__(self) -> Iterator[Fraction]:  # type: ignore[override]
        """Итерация по координатам; dict(point) поэтому не отдаёт поля модели, используйте model_dump()."""
        return iter(self.coordinates)

    def __str__(self) -> str:
        return "(" + ", ".join(str(x) for x in self.coordinates) + ")"

    def __add__(self, offset: object) -> "Point":
        """
        Сдвиг точки на вектор.

        Raises:
            DimensionMismatch: Если размерности точки и вектора различаются
        """
        if not isinstance(offset, Vector):
            return NotImplemented
        ensure_same_dimensions("point offset", self.n_dimensions, offset.n_dimensions)
        return Point.from_iterable(a + b for a, b in zip(self.coordinates, offset.dimensions))

    def __sub__(self, other: object) -> Vector:
        """
        Разность двух точек — вектор от other к self.

        Raises:
            DimensionMismatch: Если размерности точек различаются
        """
        if not isinstance(other, Point):
            return NotImplemented
        ensure_same_dimensions("point difference", self.n_dimensions, other.n_dimensions)
        return Vector.from_iterable(a - b for a, b in zip(self.coordinates, other.coordinates))

    def to_vector(self) -> Vector:
        """Вектор от начала координат к точке."""
        return Vector.from_iterable(self.coordinates)
