"""A cubic-spline interpolated curve."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .nr import spline_curve, splint_curve

__all__ = ["SplineInterpCurve"]


@dataclass
class SplineInterpCurve:
    """Cubic spline through (x, y) points with boundary first derivatives yp1 and ypn."""

    curve: Sequence[tuple[float, float]]
    yp1: float
    ypn: float
    y2axis: list[float] = field(init=False)

    def __post_init__(self) -> None:
        self.curve = [(float(x), float(y)) for x, y in self.curve]
        self.y2axis = spline_curve(self.curve, self.yp1, self.ypn)

    def interpolate(self, x: float) -> float:
        """Return the spline value at x."""
        return splint_curve(self.curve, self.y2axis, x)