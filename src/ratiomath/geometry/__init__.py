"""
Geometry: векторы и точки с точными Fraction-компонентами.
"""

from ratiomath.geometry.point import Point
from ratiomath.geometry.vector import Vector, ensure_same_dimensions

__all__ = [
    "Point",
    "Vector",
    "ensure_same_dimensions",
]
