import dataclasses

import pytest
from sympy import Integer

from errors import DivisionByZeroError, EllipticCurveError, ModulusMismatchError, OutOfRangeError
from field_element import FieldElement, PrimeField


def test_equality():
    a = FieldElement(2, 3)
    b = FieldElement(2, 3)
    c = FieldElement(1, 3)

    assert a == b
    assert a != c
    assert FieldElement(2, 5) != FieldElement(2, 7)


@pytest.mark.parametrize(("value", "modulus"), [(7, 7), (8, 7), (-1, 7)])
def test_out_of_range(value, modulus):
    with pytest.raises(OutOfRangeError):
        FieldElement(value, modulus)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((2, 7), (5, 7), (0, 7)),
        ((2, 31), (15, 31), (17, 31)),
        ((17, 31), (21, 31), (7, 31)),
    ],
)
def test_add(a, b, expected):
    assert FieldElement(*a) + FieldElement(*b) == FieldElement(*expected)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((29, 31), (4, 31), (25, 31)),
        ((15, 31), (30, 31), (16, 31)),
        ((0, 7), (1, 7), (6, 7)),
    ],
)
def test_sub(a, b, expected):
    assert FieldElement(*a) - FieldElement(*b) == FieldElement(*expected)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((3, 13), (12, 13), (10, 13)),
        ((24, 31), (19, 31), (22, 31)),
    ],
)
def test_mul(a, b, expected):
    assert FieldElement(*a) * FieldElement(*b) == FieldElement(*expected)


@pytest.mark.parametrize(
    ("a", "exponent", "expected"),
    [
        ((3, 13), 3, (1, 13)),
        ((17, 31), 3, (15, 31)),
        ((17, 31), -3, (29, 31)),
        ((7, 13), 0, (1, 13)),
        ((0, 13), 0, (1, 13)),
        ((0, 13), 5, (0, 13)),
        ((12, 97), 7, (pow(12, 7, 97), 97)),
    ],
)
def test_pow(a, exponent, expected):
    assert FieldElement(*a) ** exponent == FieldElement(*expected)


def test_pow_with_large_exponent():
    p = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
    exponent = (p + 1) // 4
    assert FieldElement(7, p) ** exponent == FieldElement(pow(7, exponent, p), p)


def test_mixed_expression():
    a = FieldElement(4, 31)
    b = FieldElement(11, 31)
    assert a ** -4 * b == FieldElement(13, 31)

    c = FieldElement(95, 97) * FieldElement(45, 97) * FieldElement(31, 97)
    assert c == FieldElement(23, 97)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((7, 19), (5, 19), (9, 19)),
        ((3, 31), (24, 31), (4, 31)),
        ((0, 19), (5, 19), (0, 19)),
    ],
)
def test_div(a, b, expected):
    assert FieldElement(*a) / FieldElement(*b) == FieldElement(*expected)


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        FieldElement(3, 7) / FieldElement(0, 7)
    with pytest.raises(ZeroDivisionError):
        FieldElement(0, 7).inverse()
    with pytest.raises(DivisionByZeroError):
        FieldElement(0, 7) ** -1


@pytest.mark.parametrize("operation", ["__add__", "__sub__", "__mul__", "__truediv__"])
def test_modulus_mismatch(operation):
    a = FieldElement(2, 7)
    b = FieldElement(2, 11)
    with pytest.raises(ModulusMismatchError):
        getattr(a, operation)(b)


def test_errors_are_catchable_as_builtins():
    with pytest.raises(TypeError):
        FieldElement(2, 7) + FieldElement(2, 11)
    with pytest.raises(ValueError):
        FieldElement(9, 7)
    with pytest.raises(EllipticCurveError):
        FieldElement(9, 7)


def test_no_arithmetic_with_plain_integers():
    with pytest.raises(TypeError):
        FieldElement(2, 7) + 3


def test_neg_and_inverse():
    assert -FieldElement(3, 7) == FieldElement(4, 7)
    assert -FieldElement(0, 7) == FieldElement(0, 7)
    a = FieldElement(5, 19)
    assert a * a.inverse() == FieldElement(1, 19)


def test_immutable_and_hashable():
    a = FieldElement(2, 7)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.value = 3
    assert len({a, FieldElement(2, 7), FieldElement(3, 7)}) == 2


def test_str():
    assert str(FieldElement(2, 3)) == "FieldElement_3(2)"


def test_generic_over_sympy_integers():
    a = FieldElement(Integer(7), Integer(19))
    b = FieldElement(Integer(5), Integer(19))

    assert a / b == FieldElement(Integer(9), Integer(19))
    assert a - b == FieldElement(2, 19)
    assert b - a == FieldElement(17, 19)
    assert a ** 3 == FieldElement(pow(7, 3, 19), 19)


def test_prime_field():
    field = PrimeField(7)

    assert field(9) == FieldElement(2, 7)
    assert field(-1) == FieldElement(6, 7)
    assert repr(field) == "GF(7)"


def test_prime_field_rejects_composite_modulus():
    with pytest.raises(ValueError):
        PrimeField(21)
