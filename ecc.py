"""
ecc.py

Group law of a short Weierstrass curve y^2 = x^3 + ax + b.

A curve point is either a Point (affine coordinates plus the curve
coefficients) or the PointAtInfinity, the identity of the group. The
coordinate type is anything satisfying numeric.Ring plus a division known to
numeric.divide: FieldElements for real curves, plain ints for toy ones.

Integer division truncates, so with int coordinates results may leave the
curve and addition is not even commutative; the group laws only hold over
FieldElement coordinates.
"""

import numbers
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from errors import CurveMismatchError, PointNotOnCurveError
from numeric import divide, is_zero, zero_like

C = TypeVar("C")


@dataclass(frozen=True)
class PointAtInfinity:
    def __add__(self, other):
        if isinstance(other, (Point, PointAtInfinity)):
            return other
        return NotImplemented

    def __neg__(self):
        return self

    def __sub__(self, other):
        if not isinstance(other, (Point, PointAtInfinity)):
            return NotImplemented
        return -other

    def __mul__(self, scalar):
        return multiply(self, scalar)

    def __rmul__(self, scalar):
        return multiply(self, scalar)

    def __str__(self):
        return "Point(Infinity)"


@dataclass(frozen=True)
class Point(Generic[C]):
    x: C
    y: C
    a: C
    b: C

    def __post_init__(self):
        if self.y * self.y != self.x * self.x * self.x + self.a * self.x + self.b:
            raise PointNotOnCurveError(self.x, self.y, self.a, self.b)

    @classmethod
    def _unchecked(cls, x, y, a, b):
        # results of the chord-tangent formulas skip the curve check
        point = object.__new__(cls)
        object.__setattr__(point, "x", x)
        object.__setattr__(point, "y", y)
        object.__setattr__(point, "a", a)
        object.__setattr__(point, "b", b)
        return point

    def same_curve(self, other) -> bool:
        return self.a == other.a and self.b == other.b

    def __add__(self, other):
        if isinstance(other, PointAtInfinity):
            return self
        if not isinstance(other, Point):
            return NotImplemented
        if not self.same_curve(other):
            raise CurveMismatchError(self, other)

        x0, y0, x1, y1 = self.x, self.y, other.x, other.y

        if x0 == x1:
            # Vertical line
            if y0 != y1:
                return PointAtInfinity()
            return self.double()

        s = divide(y1 - y0, x1 - x0)
        x2 = s * s - x0 - x1
        y2 = s * (x0 - x2) - y0
        return self._unchecked(x2, y2, self.a, self.b)

    def double(self) -> "CurvePoint":
        x0, y0 = self.x, self.y
        # Vertical tangent
        if is_zero(y0):
            return PointAtInfinity()

        x0_squared = x0 * x0
        s = divide(x0_squared + x0_squared + x0_squared + self.a, y0 + y0)
        x2 = s * s - x0 - x0
        y2 = s * (x0 - x2) - y0
        return self._unchecked(x2, y2, self.a, self.b)

    def __neg__(self):
        return self._unchecked(self.x, zero_like(self.y) - self.y, self.a, self.b)

    def __sub__(self, other):
        if not isinstance(other, (Point, PointAtInfinity)):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar):
        return multiply(self, scalar)

    def __rmul__(self, scalar):
        return multiply(self, scalar)

    def __str__(self):
        return f"Point({self.x}, {self.y})_{self.a}_{self.b}"


CurvePoint = Union[Point, PointAtInfinity]


def multiply(point: CurvePoint, scalar) -> CurvePoint:
    """
    Scalar multiplication by binary double-and-add.

    :param point: the point to multiply
    :param scalar: an integer; a negative scalar multiplies the negated point
    :return: point added to itself scalar times, PointAtInfinity for 0
    """
    if not isinstance(scalar, numbers.Integral):
        raise TypeError(f"Scalar must be an integer, got {type(scalar).__name__}")
    if scalar < 0:
        return multiply(-point, -scalar)

    result = PointAtInfinity()
    addend = point
    while scalar > 0:
        if scalar % 2 == 1:
            result = result + addend
        scalar = scalar // 2
        if scalar > 0:
            addend = addend + addend
    return result
