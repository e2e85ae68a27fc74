"""Root finders: Brent's method, bracketing, secant and bisection."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .nr import RootNotFoundError, _bisect, _secant

__all__ = [
    "RootFinder",
    "RootSecant",
    "sign",
    "bisector_solve",
    "find_root",
    "find_bracket",
    "reduce_bracket",
    "secant_solve",
]

Func = Callable[[float], float]

_BRACKET_TRIES = 50
_BRACKET_FACTOR = 1.6


def sign(a: float, b: float) -> float:
    """Return |a| carrying the sign of b (zero counts as positive)."""
    return abs(a) if b >= 0.0 else -abs(a)


def find_root(
    func: Func,
    x1: float,
    x2: float,
    max_iterations: int,
    error_tolerance: float,
    machine_precision: float,
) -> float:
    """Find a root of func bracketed by [x1, x2] with Brent's method."""
    a, b, c = x1, x2, x2
    fa = func(a)
    fb = func(b)
    if (fa > 0.0 and fb > 0.0) or (fa < 0.0 and fb < 0.0):
        raise ValueError("root must be bracketed in rootFinder")

    fc = fb
    d = e = 0.0
    for _ in range(max_iterations):
        if (fb > 0.0 and fc > 0.0) or (fb < 0.0 and fc < 0.0):
            c, fc = a, fa
            d = e = b - a
        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol1 = 2.0 * machine_precision * abs(b) + 0.5 * error_tolerance
        xm = 0.5 * (c - b)
        if abs(xm) <= tol1 or fb == 0.0:
            return b

        if abs(e) >= tol1 and abs(fa) > fb:
            s = fb / fa
            if a == c:
                p = 2.0 * xm * s
                q = 1.0 - s
            else:
                q = fa / fc
                r = fb / fc
                p = s * (2.0 * xm * q * (q - r) - (b - a) * (r - 1.0))
                q = (q - 1.0) * (r - 1.0) * (s - 1.0)
            if p > 0.0:
                q = -q
            p = abs(p)
            min1 = 3.0 * xm * q - abs(tol1 * q)
            min2 = abs(e * q)
            if 2.0 * p < min(min1, min2):
                e = d
                d = p / q
            else:
                d = e = xm
        else:
            d = e = xm

        a, fa = b, fb
        b += d if abs(d) > tol1 else sign(tol1, xm)
        fb = func(b)

    raise RootNotFoundError("number of iterations exceeded in findRoot")


def find_bracket(func: Func, x1: float, x2: float) -> tuple[float, float]:
    """Expand [x1, x2] geometrically until it brackets a root; return the bracket."""
    if x1 == x2:
        raise ValueError("Bad initial range in zbrac")

    f1 = func(x1)
    f2 = func(x2)
    for _ in range(_BRACKET_TRIES):
        if f1 * f2 < 0.0:
            return x1, x2
        if abs(f1) < abs(f2):
            x1 += _BRACKET_FACTOR * (x1 - x2)
            f1 = func(x1)
        else:
            x2 += _BRACKET_FACTOR * (x2 - x1)
            f2 = func(x2)

    raise RootNotFoundError("unable to find bracket")


def reduce_bracket(
    func: Func, x1: float, x2: float, n: int, max_roots: int
) -> list[tuple[float, float]]:
    """Split [x1, x2] into n steps and return up to max_roots sub-intervals holding a sign change."""
    if n < 1:
        raise ValueError("the number of steps must be positive")

    brackets: list[tuple[float, float]] = []
    if max_roots <= 0:
        return brackets

    dx = (x2 - x1) / n
    x = x1
    fp = func(x)
    for _ in range(n):
        x += dx
        fc = func(x)
        if fc * fp <= 0.0:
            brackets.append((x - dx, x))
            if len(brackets) == max_roots:
                break
        fp = fc
    return brackets


def secant_solve(
    func: Func,
    lower_bound: float,
    upper_bound: float,
    max_iterations: int,
    error_tolerance: float,
) -> float:
    """Find a root by the secant method starting from the two bounds."""
    return _secant(func, lower_bound, upper_bound, max_iterations, error_tolerance)


def bisector_solve(
    func: Func, lox: float, hix: float, max_iterations: int, error_tolerance: float
) -> float:
    """Bisect [lox, hix] until |func(x)| < error_tolerance."""
    return _bisect(func, lox, hix, max_iterations, error_tolerance)


@dataclass
class RootFinder:
    """Brent root finder with bracketing helpers."""

    error_tolerance: float = 1e-15
    max_iterations: int = 1000
    machine_precision: float = 1e-10

    def find_root(self, func: Func, x1: float, x2: float) -> float:
        """Find a root of func bracketed by [x1, x2]."""
        return find_root(
            func, x1, x2, self.max_iterations, self.error_tolerance, self.machine_precision
        )

    def find_bracket(self, func: Func, x1: float, x2: float) -> tuple[float, float]:
        """Expand [x1, x2] until it brackets a root."""
        return find_bracket(func, x1, x2)

    def reduce_bracket(
        self, func: Func, x1: float, x2: float, n: int, max_roots: int
    ) -> list[tuple[float, float]]:
        """Return up to max_roots sub-intervals of [x1, x2] holding a sign change."""
        return reduce_bracket(func, x1, x2, n, max_roots)


@dataclass
class RootSecant:
    """Secant-method solver."""

    error_tolerance: float = 1e-15
    max_iterations: int = 30

    def solve(self, func: Func, lower_bound: float, upper_bound: float) -> float:
        """Find a root of func starting from the two bounds."""
        return secant_solve(
            func, lower_bound, upper_bound, self.max_iterations, self.error_tolerance
        )