"""Integer exponentiation tests."""
from fractions import Fraction
import pytest
from exactrational import new, multiply, divide, DivisionByZero
import exactrational as er
from conftest import assert_canonical


@pytest.mark.parametrize("base, exp, expected", [
    ((2, 3), 3, (8, 27)),
    ((2, 3), -2, (9, 4)),
    ((-2, 3), 3, (-8, 27)),
    ((-2, 3), -3, (-27, 8)),
    ((-2, 3), -2, (9, 4)),
    ((5, 7), 1, (5, 7)),
    ((5, 7), -1, (7, 5)),
    ((0, 1), 4, (0, 1)),
])
def test_scenarios(base, exp, expected):
    assert er.pow(new(*base), exp).as_tuple() == expected


def test_zero_exponent(rational):
    """Any base to the power of zero is one, including zero."""
    assert er.pow(rational, 0) == new(1)
    assert er.pow(new(0), 0).as_tuple() == (1, 1)


def test_square_is_self_product(rational):
    assert er.pow(rational, 2) == multiply(rational, rational)


def test_negative_one_is_reciprocal(nonzero_rational):
    assert er.pow(nonzero_rational, -1) == divide(new(1), nonzero_rational)


def test_agrees_with_fraction(nonzero_rational, exponent):
    result = er.pow(nonzero_rational, exponent)
    assert_canonical(result)
    expected = Fraction(nonzero_rational.numerator, nonzero_rational.denominator)**exponent
    assert (result.numerator, result.denominator) == (expected.numerator, expected.denominator)


def test_negative_power_of_zero_fails():
    with pytest.raises(DivisionByZero):
        er.pow(new(0), -1)
    with pytest.raises(ZeroDivisionError):
        new(0)**-3


def test_power_operator():
    assert new(2, 3)**3 == new(8, 27)
    assert new(2, 3)**-2 == new(9, 4)
    assert pow(new(-1, 2), 3) == new(-1, 8)


def test_power_rejects_non_integer_exponent():
    with pytest.raises(TypeError):
        er.pow(new(1, 2), 0.5)
    with pytest.raises(TypeError):
        er.pow(new(1, 2), True)
    with pytest.raises(TypeError):
        new(1, 2)**new(1, 2)


def test_power_with_modulus_unsupported():
    with pytest.raises(TypeError):
        pow(new(2, 3), 2, 5)


def test_large_exponent_stays_exact():
    r = er.pow(new(3, 2), 100)
    assert r.as_tuple() == (3**100, 2**100)
    assert er.pow(r, -1).as_tuple() == (2**100, 3**100)
