"""Numerical routines: a portable random generator, cubic splines and simple root finders."""

from __future__ import annotations

from collections.abc import Callable, Sequence

__all__ = [
    "RootNotFoundError",
    "Ran2",
    "spline",
    "spline_curve",
    "splint",
    "splint_curve",
    "bisec",
    "rtsec",
]


class RootNotFoundError(ArithmeticError):
    """Raised when an iterative solver fails to converge on a root."""


_IM1 = 2147483563
_IM2 = 2147483399
_IA1 = 40014
_IA2 = 40692
_IQ1 = 53668
_IQ2 = 52774
_IR1 = 12211
_IR2 = 3791
_NTAB = 32
_IMM1 = _IM1 - 1
_NDIV = 1 + _IMM1 // _NTAB
_EPS = 3.0e-16
_RNMX = 1.0 - _EPS
_AM = 1.0 / _IM1


def _schrage(value: int, a: int, q: int, r: int, m: int) -> int:
    """Compute (a * value) mod m without overflow using Schrage's method."""
    k = value // q
    value = a * (value - k * q) - k * r
    if value < 0:
        value += m
    return value


class Ran2:
    """Long-period uniform generator combining two congruential streams with a shuffle.

    Seed with a non-positive value to initialise the shuffle table; zero is treated as one.
    """

    def __init__(self, seed: int) -> None:
        self._idum = int(seed)
        self._idum2 = 123456789
        self._iy = 0
        self._iv = [0] * _NTAB

    def _initialise(self) -> None:
        self._idum = 1 if self._idum == 0 else -self._idum
        self._idum2 = self._idum
        for j in range(_NTAB + 7, -1, -1):
            self._idum = _schrage(self._idum, _IA1, _IQ1, _IR1, _IM1)
            if j < _NTAB:
                self._iv[j] = self._idum
        self._iy = self._iv[0]

    def random(self) -> float:
        """Return the next deviate, uniformly distributed in the open interval (0, 1)."""
        if self._idum <= 0:
            self._initialise()
        self._idum = _schrage(self._idum, _IA1, _IQ1, _IR1, _IM1)
        self._idum2 = _schrage(self._idum2, _IA2, _IQ2, _IR2, _IM2)
        j = self._iy // _NDIV
        self._iy = self._iv[j] - self._idum2
        self._iv[j] = self._idum
        if self._iy < 1:
            self._iy += _IMM1
        return min(_AM * self._iy, _RNMX)


def _unzip(curve: Sequence[tuple[float, float]]) -> tuple[list[float], list[float]]:
    return [x for x, _ in curve], [y for _, y in curve]


def spline(
    xa: Sequence[float], ya: Sequence[float], yp1: float, ypn: float
) -> list[float]:
    """Return the second derivatives of the cubic spline through (xa, ya).

    Boundary first derivatives above 0.99e30 select a natural boundary.
    """
    if len(xa) != len(ya):
        raise ValueError("input arrays must be the same length")
    n = len(xa)
    if n < 2:
        raise ValueError("the curve must have at least two points")

    y2 = [0.0] * n
    u = [0.0] * n
    if yp1 <= 0.99e30:
        y2[0] = -0.5
        u[0] = (3.0 / (xa[1] - xa[0])) * ((ya[1] - ya[0]) / (xa[1] - xa[0]) - yp1)

    for i in range(1, n - 1):
        sig = (xa[i] - xa[i - 1]) / (xa[i + 1] - xa[i - 1])
        p = sig * y2[i - 1] + 2.0
        y2[i] = (sig - 1.0) / p
        slope_change = (ya[i + 1] - ya[i]) / (xa[i + 1] - xa[i]) - (ya[i] - ya[i - 1]) / (
            xa[i] - xa[i - 1]
        )
        u[i] = (6.0 * slope_change / (xa[i + 1] - xa[i - 1]) - sig * u[i - 1]) / p

    if ypn > 0.99e30:
        qn = un = 0.0
    else:
        qn = 0.5
        un = (3.0 / (xa[n - 1] - xa[n - 2])) * (
            ypn - (ya[n - 1] - ya[n - 2]) / (xa[n - 1] - xa[n - 2])
        )

    y2[n - 1] = (un - qn * u[n - 2]) / (qn * y2[n - 2] + 1.0)
    for k in range(n - 2, -1, -1):
        y2[k] = y2[k] * y2[k + 1] + u[k]
    return y2


def spline_curve(
    curve: Sequence[tuple[float, float]], yp1: float, ypn: float
) -> list[float]:
    """Return the spline second derivatives for a curve given as (x, y) pairs."""
    xa, ya = _unzip(curve)
    return spline(xa, ya, yp1, ypn)


def splint(
    xa: Sequence[float], ya: Sequence[float], y2a: Sequence[float], x: float
) -> float:
    """Evaluate the cubic spline defined by (xa, ya, y2a) at x."""
    if not len(xa) == len(ya) == len(y2a):
        raise ValueError("the x array, y array, and y2a array must have the same length")
    n = len(xa)
    if n < 2:
        raise ValueError("the input arrays must have at least two points")

    klo, khi = 0, n - 1
    while khi - klo > 1:
        k = (khi + klo) >> 1
        if xa[k] > x:
            khi = k
        else:
            klo = k

    h = xa[khi] - xa[klo]
    if h == 0.0:
        raise ValueError("Bad xa input to splint")

    a = (xa[khi] - x) / h
    b = (x - xa[klo]) / h
    return (
        a * ya[klo]
        + b * ya[khi]
        + ((a * a * a - a) * y2a[klo] + (b * b * b - b) * y2a[khi]) * (h * h) / 6.0
    )


def splint_curve(
    curve: Sequence[tuple[float, float]], y2a: Sequence[float], x: float
) -> float:
    """Evaluate the cubic spline for a curve of (x, y) pairs at x."""
    if len(curve) != len(y2a):
        raise ValueError("the curve and y2a array must have the same length")
    xa, ya = _unzip(curve)
    return splint(xa, ya, y2a, x)


def _bisect(
    func: Callable[[float], float],
    lox: float,
    hix: float,
    max_iterations: int,
    tolerance: float,
) -> float:
    lof = func(lox)
    hif = func(hix)
    if (lof > 0.0 and hif > 0.0) or (lof < 0.0 and hif < 0.0):
        raise ValueError("root must be bracketed")

    usual = not lof > 0.0
    for _ in range(max_iterations):
        x = (hix + lox) / 2.0
        f = func(x)
        if abs(f) < tolerance:
            return x
        if (f < 0) == usual:
            lox = x
        else:
            hix = x

    raise RootNotFoundError("unable to solve")


def _secant(
    func: Callable[[float], float],
    lower_bound: float,
    upper_bound: float,
    max_iterations: int,
    tolerance: float,
) -> float:
    fl = func(lower_bound)
    f = func(upper_bound)
    if abs(fl) < abs(f):
        # Take the bound with the smaller function value as the latest guess.
        rts, xl = lower_bound, upper_bound
        fl, f = f, fl
    else:
        xl, rts = lower_bound, upper_bound

    for _ in range(max_iterations):
        if f == fl:
            raise RootNotFoundError("unable to find root - secant step is undefined")
        dx = (xl - rts) * f / (f - fl)
        xl = rts
        fl = f
        rts += dx
        f = func(rts)
        if abs(dx) < tolerance or f == 0.0:
            return rts

    raise RootNotFoundError("unable to find root")


def bisec(
    func: Callable[[float], float], lox: float, hix: float, acc: float
) -> float:
    """Bisect [lox, hix] until |func(x)| < acc, allowing 50 iterations."""
    return _bisect(func, lox, hix, 50, acc)


def rtsec(
    func: Callable[[float], float], x1: float, x2: float, xacc: float
) -> float:
    """Find a root near [x1, x2] by the secant method to an accuracy of xacc."""
    return _secant(func, x1, x2, 30, xacc)