"""A value that may be absent, with comparisons that are false whenever a side is null."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

__all__ = ["Nullable"]


class Nullable:
    """Holds a value together with a null flag.

    Every comparison, including ``!=``, is false when either side is null.
    A plain value compares as a non-null right-hand side.
    """

    __slots__ = ("value", "is_null")

    def __init__(self, value: Any = None, is_null: bool | None = None) -> None:
        self.value = value
        self.is_null = (value is None) if is_null is None else bool(is_null)

    def set(self, value: Any) -> Nullable:
        """Store value and clear the null flag."""
        self.value = value
        self.is_null = False
        return self

    def _compare(self, other: object, op: Callable[[Any, Any], bool]) -> bool:
        if self.is_null:
            return False
        if isinstance(other, Nullable):
            if other.is_null:
                return False
            other = other.value
        return bool(op(self.value, other))

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne)

    def __lt__(self, other: object) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: object) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: object) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return self._compare(other, operator.ge)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_null:
            return "Nullable(null)"
        return f"Nullable({self.value!r})"