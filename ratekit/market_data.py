"""Small market-data records: rate fixings and yield curve points."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

__all__ = ["Fixing", "YieldCurvePoint"]


@dataclass
class Fixing:
    """A rate fixed on a date; the rate is None until it is known."""

    date: datetime.date | None = None
    rate: float | None = None


@dataclass
class YieldCurvePoint:
    """A zero rate at a time measured in years."""

    time: float = 0.0
    rate: float = 0.0