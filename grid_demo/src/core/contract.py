"""Capability contract shared by the fixed-size grids."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np

from grid_demo.src.constants import INT_MAX, INT_MIN
from grid_demo.src.core.errors import InvalidArgumentError, InvalidStateError
from grid_demo.src.utils.console import ConsoleIO
from grid_demo.src.utils.random_source import shared_rng

DEFAULT_MIN_VALUE = -50
DEFAULT_MAX_VALUE = 50
CELL_WIDTH = 6


def format_row(values) -> str:
    """Return ``values`` right-aligned in ``CELL_WIDTH`` wide fields."""
    return "".join(f"{int(v):>{CELL_WIDTH}}" for v in values)


def validate_fill_range(min_value: int, max_value: int) -> None:
    """Raise ``InvalidArgumentError`` unless ``[min_value, max_value]`` is a valid 32-bit range."""
    if min_value > max_value:
        raise InvalidArgumentError(
            f"min_value must be <= max_value (got {min_value} > {max_value})"
        )
    if min_value < INT_MIN or max_value > INT_MAX:
        raise InvalidArgumentError(
            f"fill range [{min_value}, {max_value}] exceeds 32-bit integer bounds"
        )


class GridContract(ABC):
    """Fixed-extent integer grid supporting input, random fill, min query and print.

    Subclasses declare their extents in ``SHAPE``. Storage is zero-filled on
    construction and overwritten in full by every fill or input call.
    """

    SHAPE: Tuple[int, ...] = ()

    def __init__(self, rng=None, console: ConsoleIO | None = None) -> None:
        self._data = np.zeros(self.SHAPE, dtype=np.int64)
        self._rng = rng if rng is not None else shared_rng()
        self.console = console if console is not None else ConsoleIO()
        self.populated = False

    # Contract ------------------------------------------------------------

    @abstractmethod
    def input_from_console(self) -> None:
        """Read one integer per cell from the console, overwriting every cell."""

    @abstractmethod
    def fill_random(
        self, min_value: int = DEFAULT_MIN_VALUE, max_value: int = DEFAULT_MAX_VALUE
    ) -> None:
        """Fill every cell with a uniform draw from ``[min_value, max_value]``."""

    @abstractmethod
    def min_element(self) -> int:
        """Return the smallest cell value."""

    @abstractmethod
    def render(self) -> str:
        """Return the printable text of the grid."""

    def print(self) -> None:
        """Write :meth:`render` to the console."""
        self.console.write(self.render())

    # Shared helpers ------------------------------------------------------

    def shape(self) -> Tuple[int, ...]:
        """Return the grid extents, one per axis."""
        return tuple(self._data.shape)

    def get(self, *index: int) -> int:
        """Return the value at ``index``, one coordinate per axis."""
        self._check_index(index)
        return int(self._data[index])

    def set(self, *args: int) -> None:
        """Set a cell: ``set(*index, value)``."""
        *index, value = args
        self._check_index(index)
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidArgumentError(f"cell values must be integers, got {value!r}")
        if value < INT_MIN or value > INT_MAX:
            raise InvalidArgumentError(f"cell value {value} exceeds 32-bit integer bounds")
        self._data[tuple(index)] = int(value)

    def to_list(self) -> List:
        """Return a deep list copy of the cell values."""
        return self._data.tolist()

    def _check_index(self, index) -> None:
        if len(index) != self._data.ndim:
            raise InvalidArgumentError(
                f"expected {self._data.ndim} indices, got {len(index)}"
            )

    def _require_cells(self) -> None:
        if self._data.size == 0 or 0 in self._data.shape:
            raise InvalidStateError("grid is empty or uninitialised")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape()}, populated={self.populated})"


__all__ = [
    "GridContract",
    "DEFAULT_MIN_VALUE",
    "DEFAULT_MAX_VALUE",
    "CELL_WIDTH",
    "format_row",
    "validate_fill_range",
]
