"""
curves.py

Named short Weierstrass curves over prime fields.

secp256k1 and the toy curves are defined here; the NIST prime curves are read
from pycryptodome's curve table.
"""

import logging
from dataclasses import dataclass
from functools import cached_property, lru_cache
from typing import Dict, List, Optional

from Crypto.PublicKey import ECC
from sympy import isprime

from ecc import Point, PointAtInfinity
from field_element import FieldElement, PrimeField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Curve:
    name: str
    """The name of the elliptic curve."""
    p: int
    """The prime of the underlying field."""
    a: int
    b: int
    gx: int
    gy: int
    """Affine coordinates of the base point."""
    n: Optional[int] = None
    """The order of the base point, when known."""

    @cached_property
    def prime_field(self) -> PrimeField:
        return PrimeField(self.p)

    def field(self, value: int) -> FieldElement:
        return self.prime_field(value)

    def point(self, x: int, y: int) -> Point:
        return Point(self.field(x), self.field(y), self.field(self.a), self.field(self.b))

    @cached_property
    def generator(self) -> Point:
        return self.point(self.gx, self.gy)

    @property
    def infinity(self) -> PointAtInfinity:
        return PointAtInfinity()

    @cached_property
    def order(self) -> int:
        if self.n is not None:
            return self.n
        logger.debug("Counting the order of the generator of %s", self.name)
        return find_order(self.generator, self.p)

    @property
    def has_prime_order(self) -> bool:
        return bool(isprime(self.order))

    def __str__(self):
        return f"{self.name}: y^2 = x^3 + {self.a}x + {self.b} over F_{self.p}"


def find_order(point: Point, p: int) -> int:
    """Order of point by walking its multiples, bounded by p + 1 + 2*sqrt(p) (Hasse)."""
    bound = p + 2 + 2 * (int(p ** 0.5) + 1)
    multiple = point
    for i in range(1, bound):
        if isinstance(multiple, PointAtInfinity):
            return i
        multiple = multiple + point
    raise ValueError(f"No order found for {point} within the Hasse bound")


SECP256K1 = Curve(
    name="secp256k1",
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    a=0,
    b=7,
    gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
)

TOY_223 = Curve(name="toy-223", p=223, a=0, b=7, gx=47, gy=71, n=21)

TOY_9739 = Curve(name="toy-9739", p=9739, a=497, b=1768, gx=1804, gy=5368)

NIST_CURVES = ["P-192", "P-224", "P-256", "P-384", "P-521"]

_builtin_curves: Dict[str, Curve] = {curve.name: curve for curve in (SECP256K1, TOY_223, TOY_9739)}


@lru_cache(maxsize=None)
def nist_curve(name: str) -> Curve:
    """Build a NIST prime curve from pycryptodome's parameters (a = -3)."""
    if name not in NIST_CURVES:
        raise ValueError(f"{name} is not a NIST prime curve. Choose one of {NIST_CURVES}")
    params = ECC._curves[name]
    p = int(params.p)
    return Curve(
        name=name,
        p=p,
        a=p - 3,
        b=int(params.b),
        gx=int(params.Gx),
        gy=int(params.Gy),
        n=int(params.order),
    )


def supported_curves() -> List[str]:
    return list(_builtin_curves) + NIST_CURVES


def get_curve(name: str) -> Curve:
    if name in _builtin_curves:
        return _builtin_curves[name]
    if name in NIST_CURVES:
        return nist_curve(name)
    raise ValueError(
        f"{name} is not one of the specified curves. "
        f"Please choose one of the following curves: {supported_curves()}"
    )
