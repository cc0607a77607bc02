"""
numeric.py

The numeric contract shared by the field and the curve code.

Every value handled by FieldElement (its value and modulus) and by Point
(its coordinates) only needs the operations listed on Ring. Python ints,
sympy Integers and FieldElements all qualify. Small constants are derived
from values already at hand (v - v, v // v) so no literal of the generic
type is ever required.
"""

import numbers
from functools import singledispatch
from typing import Protocol, TypeVar

from errors import DivisionByZeroError


class Ring(Protocol):
    """Ordered ring arithmetic: + - * // % and comparisons."""

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __floordiv__(self, other): ...

    def __mod__(self, other): ...

    def __lt__(self, other): ...

    def __eq__(self, other): ...


T = TypeVar("T", bound=Ring)


def zero_like(value: T) -> T:
    return value - value


def one_like(value: T) -> T:
    """Multiplicative identity of value's type. value must be non-zero."""
    return value // value


def is_zero(value) -> bool:
    return value == value - value


@singledispatch
def divide(numerator, denominator):
    """
    Field division used by the curve group law.

    Types with a true division (FieldElement) use it directly; raw integers
    are handled by the Integral overload below.
    """
    return numerator / denominator


@divide.register(numbers.Integral)
def _divide_integral(numerator, denominator):
    # integers have no field division: quotient truncated toward zero
    if denominator == 0:
        raise DivisionByZeroError(f"Cannot divide {numerator} by zero.")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def pow_mod(base: T, exponent: T, modulus: T) -> T:
    """
    Square-and-multiply: base ** exponent % modulus in O(log exponent) steps.

    :param base: any value of the integer type
    :param exponent: non-negative exponent
    :param modulus: positive modulus
    :return: the reduced power
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    result = one_like(modulus) % modulus
    base = base % modulus
    while exponent > 0:
        if exponent % 2 == 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent = exponent // 2
    return result
