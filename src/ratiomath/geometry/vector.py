"""
Vector — Евклидов вектор в N-мерном пространстве

Immutable Pydantic модель (frozen=True). Компоненты — точные Fraction;
все операции, кроме magnitude(), выполняются без потери точности.
"""

import logging
import math
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from ratiomath.core.errors import DimensionMismatch
from ratiomath.core.math.fraction import Fraction

if TYPE_CHECKING:
    from ratiomath.geometry.point import Point

LOG = logging.getLogger(__name__)


def ensure_same_dimensions(operation: str, left: int, right: int) -> None:
    """
    Проверка совпадения размерностей операндов.

    Raises:
        DimensionMismatch: Если left != right
    """
    if left != right:
        LOG.debug("%s rejected: %d vs %d dimensions", operation, left, right)
        raise DimensionMismatch(operation, left, right)


def _as_scale(value: object) -> Fraction | None:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value)
    return None


class Vector(BaseModel):
    """
    Смещение в N-мерном пространстве.

    Examples:
        >>> Vector(3, 4).magnitude()
        5.0
        >>> str(Vector(1, 2) + Vector(Fraction(1, 2), 0))
        '(3/2, 2)'
    """

    dimensions: tuple[Fraction, ...] = Field(..., description="Значения по измерениям")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def __init__(self, *dimensions: Fraction | int | float) -> None:
        super().__init__(dimensions=tuple(Fraction.coerce(x) for x in dimensions))

    @classmethod
    def from_iterable(cls, dimensions: Iterable[Fraction | int | float]) -> "Vector":
        return cls(*dimensions)

    @property
    def n_dimensions(self) -> int:
        return len(self.dimensions)

    def __len__(self) -> int:
        return len(self.dimensions)

    def __getitem__(self, index: int) -> Fraction:
        return self.dimensions[index]

    def __iter__(self) -> Iterator[Fraction]:  # type: ignore[override]
        """Итерация по компонентам; dict(vector) поэтому не отдаёт поля модели, используйте model_dump()."""
        return iter(self.dimensions)

    def __str__(self) -> str:
        return "(" + ", ".join(str(x) for x in self.dimensions) + ")"

    # -------------------------------------------------------------------------
    # Покомпонентные операции
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Vector":
        return Vector.from_iterable(-x for x in self.dimensions)

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        ensure_same_dimensions("vector addition", self.n_dimensions, other.n_dimensions)
        return Vector.from_iterable(a + b for a, b in zip(self.dimensions, other.dimensions))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        ensure_same_dimensions("vector subtraction", self.n_dimensions, other.n_dimensions)
        return Vector.from_iterable(a - b for a, b in zip(self.dimensions, other.dimensions))

    # -------------------------------------------------------------------------
    # Масштабирование
    # -------------------------------------------------------------------------

    def __mul__(self, scale: object) -> "Vector":
        factor = _as_scale(scale)
        if factor is None:
            return NotImplemented
        return Vector.from_iterable(x * factor for x in self.dimensions)

    def __rmul__(self, scale: object) -> "Vector":
        return self.__mul__(scale)

    def __truediv__(self, scale: object) -> "Vector":
        """
        Деление на scale == умножение на обратную дробь.

        Raises:
            DivisionByZero: Если scale равен нулю
        """
        factor = _as_scale(scale)
        if factor is None:
            return NotImplemented
        return self * factor.reciprocal()

    # -------------------------------------------------------------------------
    # Метрика и конверсия
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """
        Длина вектора sqrt(x1^2 + x2^2 + ...).

        Единственное место геометрии, где точность теряется: компоненты
        переводятся в float до вычисления.
        """
        return math.hypot(*(x.to_double() for x in self.dimensions))

    def to_point(self) -> "Point":
        """Точка, в которую вектор переводит начало координат."""
        from ratiomath.geometry.point import Point

        return Point.from_iterable(self.dimensions)
