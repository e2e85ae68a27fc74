import pytest

from ratekit.nullable import Nullable


def test_default_is_null():
    n = Nullable()
    assert n.is_null is True
    assert n.value is None


def test_value_is_not_null():
    n = Nullable(5)
    assert n.is_null is False
    assert n.value == 5


def test_equality_between_values():
    assert Nullable(5) == Nullable(5)
    assert Nullable(5) == 5
    assert not (Nullable(5) == Nullable(6))


def test_null_never_compares_true():
    a, b = Nullable(), Nullable(3)
    assert not (a == b)
    assert not (a != b)
    assert not (a < b)
    assert not (b > a)
    assert not (a == a)


def test_explicit_null_flag_hides_value():
    n = Nullable(4, True)
    assert n.is_null is True
    assert not (n == 4)
    assert not (n != 4)


def test_not_equal_for_differing_values():
    assert Nullable(1) != Nullable(2)
    assert Nullable(1) != 2
    assert not (Nullable(1) != 1)


@pytest.mark.parametrize(
    "lhs, rhs, lt, le, gt, ge",
    [
        (1, 2, True, True, False, False),
        (2, 2, False, True, False, True),
        (3, 2, False, False, True, True),
    ],
)
def test_ordering(lhs, rhs, lt, le, gt, ge):
    a = Nullable(lhs)
    for other in (Nullable(rhs), rhs):
        assert (a < other) is lt
        assert (a <= other) is le
        assert (a > other) is gt
        assert (a >= other) is ge


def test_set_clears_null():
    n = Nullable()
    result = n.set(3)
    assert result is n
    assert n.is_null is False
    assert n == 3