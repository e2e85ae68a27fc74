import math
import operator
from fractions import Fraction

import pytest

from ratekit.rational import Rational, gcd

PAIRS = [(6, -4), (0, -5), (-10, -25), (7, 3), (12, 18), (-9, 4)]
OPERANDS = [((1, 2), (1, 3)), ((-3, 4), (5, 6)), ((7, 9), (-7, 9)), ((2, 1), (3, 5))]


def _same(r, f):
    return (r.numerator, r.denominator) == (f.numerator, f.denominator)


@pytest.mark.parametrize("n, d", PAIRS)
def test_normalisation_matches_fraction(n, d):
    r = Rational(n, d)
    assert _same(r, Fraction(n, d))
    assert r.denominator > 0


@pytest.mark.parametrize("n, m", [(12, 18), (-12, 18), (7, 0), (0, 7), (0, 0), (17, 5)])
def test_gcd_matches_math(n, m):
    assert gcd(n, m) == math.gcd(n, m)


@pytest.mark.parametrize("a, b", OPERANDS)
@pytest.mark.parametrize("op", [operator.add, operator.sub, operator.mul, operator.truediv])
def test_arithmetic_matches_fraction(a, b, op):
    result = op(Rational(*a), Rational(*b))
    expected = op(Fraction(*a), Fraction(*b))
    assert result.numerator == expected.numerator
    assert result.denominator == expected.denominator


@pytest.mark.parametrize("a, b", OPERANDS + [((1, 2), (2, 4))])
@pytest.mark.parametrize(
    "op", [operator.lt, operator.le, operator.gt, operator.ge, operator.eq]
)
def test_comparisons_match_fraction(a, b, op):
    assert op(Rational(*a), Rational(*b)) == op(Fraction(*a), Fraction(*b))


def test_str_pinned():
    assert str(Rational(6, -4)) == "-3/2"


@pytest.mark.parametrize("n, d", PAIRS)
def test_parse_round_trip(n, d):
    r = Rational(n, d)
    assert Rational.parse(str(r)) == r


def test_parse_whitespace_form():
    assert Rational.parse(" 3 4 ") == Rational(3, 4)


def test_parse_errors():
    with pytest.raises(ValueError):
        Rational.parse("abc")
    with pytest.raises(ZeroDivisionError):
        Rational.parse("1/0")


def test_zero_denominator_and_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)
    with pytest.raises(ZeroDivisionError):
        Rational(1, 2) / Rational(0)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        Rational(1.5, 2)


def test_unary_operators():
    r = Rational(-9, 4)
    assert -(-r) == r
    assert +r == r
    assert r + (-r) == Rational(0)


def test_increment_and_decrement():
    r = Rational(7, 3)
    assert r.increment() - r == Rational(1)
    assert r - r.decrement() == Rational(1)
    assert r.increment().decrement() == r
    assert _same(r, Fraction(7, 3))


def test_integer_operands_and_hash():
    assert Rational(4, 2) == 2
    assert Rational(1, 2) + 1 == Rational(3, 2)
    assert hash(Rational(4, 2)) == hash(2)
    assert hash(Rational(2, 4)) == hash(Rational(1, 2))