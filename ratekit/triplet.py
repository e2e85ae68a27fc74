"""An ordered group of three values."""

from __future__ import annotations

from typing import Any, NamedTuple

__all__ = ["Triplet", "make_triplet"]


class Triplet(NamedTuple):
    """Three values compared lexicographically, first to third."""

    first: Any = None
    second: Any = None
    third: Any = None


def make_triplet(first: Any, second: Any, third: Any) -> Triplet:
    """Build a Triplet from three values."""
    return Triplet(first, second, third)