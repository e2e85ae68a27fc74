"""Dense N-dimensional and two-dimensional matrices with row-major indexing."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Any

__all__ = ["from_dims", "to_dims", "Matrix", "Matrix2"]


def _normalise_bounds(bounds: Sequence[int]) -> tuple[int, ...]:
    result = tuple(int(bound) for bound in bounds)
    if not result:
        raise ValueError("there are no dimensions")
    if any(bound < 0 for bound in result):
        raise ValueError("bounds must not be negative")
    return result


def from_dims(bounds: Sequence[int], dims: Sequence[int]) -> int:
    """Return the flat row-major index of the N-dimensional indices dims."""
    bounds = tuple(bounds)
    dims = tuple(dims)
    if not bounds:
        raise ValueError("there are no dimensions")
    if len(dims) != len(bounds):
        raise ValueError(f"expected {len(bounds)} indices, got {len(dims)}")
    index = 0
    for bound, dim in zip(bounds, dims):
        if not 0 <= dim < bound:
            raise IndexError("Index out of bounds")
        index = index * bound + dim
    return index


def to_dims(bounds: Sequence[int], index: int) -> tuple[int, ...]:
    """Return the N-dimensional indices of the flat row-major index."""
    bounds = tuple(bounds)
    if not bounds:
        raise ValueError("there are no dimensions")
    if not 0 <= index < math.prod(bounds):
        raise IndexError("Index out of bounds")
    dims = []
    for bound in reversed(bounds):
        index, dim = divmod(index, bound)
        dims.append(dim)
    return tuple(reversed(dims))


class Matrix:
    """An N-dimensional matrix stored flat in row-major order.

    Elements are addressed either by a flat integer index or by a tuple of indices.
    """

    def __init__(self, bounds: Sequence[int], fill: Any = 0.0) -> None:
        self._bounds = _normalise_bounds(bounds)
        self._data = [fill] * math.prod(self._bounds)

    @property
    def bounds(self) -> tuple[int, ...]:
        """The extent of each dimension."""
        return self._bounds

    @property
    def ndim(self) -> int:
        """The number of dimensions."""
        return len(self._bounds)

    def resize(self, bounds: Sequence[int]) -> None:
        """Replace the contents with a zero-filled matrix of the given bounds."""
        new_bounds = _normalise_bounds(bounds)
        if len(new_bounds) != len(self._bounds):
            raise ValueError(
                f"expected {len(self._bounds)} dimensions, got {len(new_bounds)}"
            )
        self._bounds = new_bounds
        self._data = [0.0] * math.prod(new_bounds)

    def flat_index(self, dims: Sequence[int]) -> int:
        """Return the flat index of the given N-dimensional indices."""
        return from_dims(self._bounds, dims)

    def nd_index(self, index: int) -> tuple[int, ...]:
        """Return the N-dimensional indices of a flat index."""
        return to_dims(self._bounds, index)

    def _locate(self, key: int | Sequence[int]) -> int:
        if isinstance(key, tuple):
            return self.flat_index(key)
        index = int(key)
        if not 0 <= index < len(self._data):
            raise IndexError("invalid matrix subscript")
        return index

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, key: int | tuple[int, ...]) -> Any:
        return self._data[self._locate(key)]

    def __setitem__(self, key: int | tuple[int, ...], value: Any) -> None:
        self._data[self._locate(key)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._bounds == other._bounds and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Matrix) -> bool:
        """True when every bound and every element is strictly below the other's."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self._data) >= len(other._data):
            return False
        if len(self._bounds) != len(other._bounds):
            return False
        if any(mine >= theirs for mine, theirs in zip(self._bounds, other._bounds)):
            return False
        return all(mine < theirs for mine, theirs in zip(self._data, other._data))

    def __repr__(self) -> str:
        return f"Matrix(bounds={self._bounds!r}, data={self._data!r})"


class Matrix2:
    """A two-dimensional matrix held as a list of rows (or of columns when by_row is false)."""

    def __init__(self, columns: int = 0, rows: int = 0, by_row: bool = True) -> None:
        if columns < 0 or rows < 0:
            raise ValueError("dimensions must not be negative")
        self._columns = columns
        self._rows = rows
        self._by_row = by_row
        self._data = [[0.0] * self._inner for _ in range(self._outer)]

    @property
    def _outer(self) -> int:
        return self._rows if self._by_row else self._columns

    @property
    def _inner(self) -> int:
        return self._columns if self._by_row else self._rows

    @property
    def columns(self) -> int:
        """The number of columns."""
        return self._columns

    @property
    def rows(self) -> int:
        """The number of rows."""
        return self._rows

    @property
    def by_row(self) -> bool:
        """Whether the outer lists are rows."""
        return self._by_row

    def resize(self, columns: int, rows: int) -> None:
        """Change the dimensions, keeping the elements that fall inside both shapes."""
        if columns < 0 or rows < 0:
            raise ValueError("dimensions must not be negative")
        old = self._data
        self._columns = columns
        self._rows = rows
        inner = self._inner
        self._data = [[0.0] * inner for _ in range(self._outer)]
        for new_line, old_line in zip(self._data, old):
            keep = min(inner, len(old_line))
            new_line[:keep] = old_line[:keep]

    def __len__(self) -> int:
        return self._columns * self._rows

    def __iter__(self) -> Iterator[list[Any]]:
        return iter(self._data)

    def __getitem__(self, index: int) -> list[Any]:
        if not 0 <= index < len(self._data):
            raise IndexError("invalid matrix subscript")
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix2):
            return NotImplemented
        return (
            self._columns == other._columns
            and self._rows == other._rows
            and self._by_row == other._by_row
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Matrix2) -> bool:
        """True when both dimensions and every element are strictly below the other's."""
        if not isinstance(other, Matrix2):
            return NotImplemented
        if self._rows >= other._rows or self._columns >= other._columns:
            return False
        return all(
            mine < theirs
            for my_line, their_line in zip(self._data, other._data)
            for mine, theirs in zip(my_line, their_line)
        )

    def __repr__(self) -> str:
        return (
            f"Matrix2(columns={self._columns}, rows={self._rows}, "
            f"by_row={self._by_row}, data={self._data!r})"
        )