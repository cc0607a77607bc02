"""
field_element.py

Arithmetic in a prime field GF(p), generic over the integer type used for
the value and the modulus (int, sympy.Integer, ...).

Classes:
 - FieldElement: immutable residue modulo a prime.
 - PrimeField: GF(p) with a checked prime modulus, building FieldElements.
"""

from dataclasses import dataclass
from typing import Generic

from sympy import isprime

from errors import DivisionByZeroError, ModulusMismatchError, OutOfRangeError
from numeric import T, is_zero, one_like, pow_mod, zero_like


@dataclass(frozen=True)
class FieldElement(Generic[T]):
    value: T
    modulus: T

    def __post_init__(self):
        if self.value >= self.modulus or self.value < zero_like(self.value):
            raise OutOfRangeError(self.value, self.modulus)

    def __add__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        return FieldElement((self.value + other.value) % self.modulus, self.modulus)

    def __sub__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        # stays non-negative for unsigned integer types too
        return FieldElement((self.value + (self.modulus - other.value)) % self.modulus, self.modulus)

    def __mul__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        return FieldElement((self.value * other.value) % self.modulus, self.modulus)

    def __pow__(self, exponent):
        order = self.modulus - one_like(self.modulus)
        if is_zero(self.value):
            if exponent < 0:
                raise DivisionByZeroError(f"{self} has no inverse.")
            if exponent == 0:
                return FieldElement(one_like(self.modulus), self.modulus)
            return self
        # Fermat: a^(p-1) == 1, so the exponent only matters modulo p - 1
        return FieldElement(pow_mod(self.value, exponent % order, self.modulus), self.modulus)

    def __truediv__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        return self * other.inverse()

    def __neg__(self):
        return FieldElement((self.modulus - self.value) % self.modulus, self.modulus)

    def inverse(self):
        """Multiplicative inverse, self ** (p - 2). Only valid for a prime modulus."""
        if is_zero(self.value):
            raise DivisionByZeroError(f"{self} has no inverse.")
        two = one_like(self.modulus) + one_like(self.modulus)
        return FieldElement(pow_mod(self.value, self.modulus - two, self.modulus), self.modulus)

    def _check_field(self, other):
        if self.modulus != other.modulus:
            raise ModulusMismatchError(self.modulus, other.modulus)

    def __str__(self):
        return f"FieldElement_{self.modulus}({self.value})"


class PrimeField:
    """
    GF(p) for a prime p.

    Calling the field reduces any integer into range, so PrimeField(7)(9)
    is FieldElement(2, 7).
    """

    def __init__(self, p):
        if not isprime(p):
            raise ValueError(f"Field modulus {p} is not prime")
        self.p = p

    def __call__(self, value) -> FieldElement:
        return FieldElement(value % self.p, self.p)

    def __repr__(self):
        return f"GF({self.p})"
