"""Dense two-dimensional arrays stored in a flat, column-major list."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class DenseArray2D(Generic[T]):
    """A fixed-size 2-D array indexed by ``(i, j)`` cell pairs."""

    def __init__(self, x0_cells: int, x1_cells: int, default: T = False) -> None:
        if x0_cells < 0 or x1_cells < 0:
            raise ValueError("cell counts must be non-negative")
        self._x0_cells = x0_cells
        self._x1_cells = x1_cells
        self._data: list[T] = [default] * (x0_cells * x1_cells)

    def _flat_index(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self._x0_cells and 0 <= j < self._x1_cells):
            raise IndexError(
                f"cell ({i}, {j}) is outside a {self._x0_cells}x{self._x1_cells} array"
            )
        return j * self._x0_cells + i

    def size(self) -> tuple[int, int]:
        """Number of cells along each dimension."""
        return self._x0_cells, self._x1_cells

    def __getitem__(self, index: tuple[int, int]) -> T:
        return self._data[self._flat_index(index)]

    def __setitem__(self, index: tuple[int, int], value: T) -> None:
        self._data[self._flat_index(index)] = value

    def data(self) -> list[T]:
        """A copy of the flat storage, ``x0`` varying fastest."""
        return list(self._data)