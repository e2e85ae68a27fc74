"""Exact rational numbers kept in lowest terms with a positive denominator."""

from __future__ import annotations

import operator
import re

__all__ = ["gcd", "Rational"]

_PATTERN = re.compile(r"\s*([+-]?\d+)\s*(?:/|\s)\s*([+-]?\d+)\s*")


def gcd(n: int, m: int) -> int:
    """Return the greatest common divisor of |n| and |m| (zero when both are zero)."""
    n, m = abs(n), abs(m)
    while True:
        if m == 0:
            return n
        n %= m
        if n == 0:
            return m
        m %= n


class Rational:
    """An immutable fraction numerator/denominator in lowest terms."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        n = operator.index(numerator)
        d = operator.index(denominator)
        if d == 0:
            raise ZeroDivisionError("denominator must not be zero")
        if d < 0:
            n, d = -n, -d
        if n == 0:
            d = 1
        else:
            g = gcd(n, d)
            n //= g
            d //= g
        self._numerator = n
        self._denominator = d

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read a numerator and denominator separated by '/' or whitespace."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a rational number: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @staticmethod
    def _coerce(other: object) -> Rational | None:
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        return None

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (self._numerator, self._denominator) == (rhs._numerator, rhs._denominator)

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._numerator * rhs._denominator > rhs._numerator * self._denominator

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs > self

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self > rhs or self == rhs

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs > self or self == rhs

    def __pos__(self) -> Rational:
        return self

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __add__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + self._denominator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __sub__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator - self._denominator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __mul__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator, self._denominator * rhs._denominator
        )

    def __truediv__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._numerator == 0:
            raise ZeroDivisionError("division by a zero rational")
        return Rational(
            self._numerator * rhs._denominator, self._denominator * rhs._numerator
        )

    def increment(self) -> Rational:
        """Return this value plus one."""
        return Rational(self._numerator + self._denominator, self._denominator)

    def decrement(self) -> Rational:
        """Return this value minus one."""
        return Rational(self._numerator - self._denominator, self._denominator)