"""Two-dimensional 3x3 integer grid."""

from __future__ import annotations

from grid_demo.src.core.contract import (
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    GridContract,
    format_row,
    validate_fill_range,
)
from grid_demo.src.utils.console import ConsoleIO
from grid_demo.src.utils.logger import get_logger
from grid_demo.src.utils.random_source import draw_integers

logger = get_logger("grid_demo")


class TwoDGrid(GridContract):
    """3x3 grid stored row-major."""

    SHAPE = (3, 3)
    TITLE = "Two-dimensional grid 3x3:"

    def __init__(self, fill_random: bool = False, rng=None, console: ConsoleIO | None = None) -> None:
        super().__init__(rng=rng, console=console)
        logger.debug("TwoDGrid: created zero-filled %s", self.SHAPE)
        if fill_random:
            self.fill_random()
        logger.debug("TwoDGrid: constructed (fill_random=%s)", fill_random)

    def input_from_console(self) -> None:
        """Read each cell row by row from the console."""
        rows, cols = self.SHAPE
        self.console.write_line(f"Enter the elements of the {rows}x{cols} grid (integers):")
        for i in range(rows):
            for j in range(cols):
                self._data[i, j] = self.console.read_int(f"A[{i},{j}] = ")
        self.populated = True
        logger.debug("TwoDGrid: populated from console")

    def fill_random(self, min_value: int = DEFAULT_MIN_VALUE, max_value: int = DEFAULT_MAX_VALUE) -> None:
        """Fill every cell with a uniform draw from ``[min_value, max_value]``."""
        validate_fill_range(min_value, max_value)
        self._data[:, :] = draw_integers(self._rng, min_value, max_value, self.SHAPE)
        self.populated = True
        logger.debug("TwoDGrid: filled from [%d, %d]", min_value, max_value)

    def min_element(self) -> int:
        """Return the smallest cell value."""
        self._require_cells()
        return int(self._data.min())

    def render(self) -> str:
        """Return the title line followed by one line per row."""
        lines = [self.TITLE]
        for row in self._data:
            lines.append(format_row(row))
        return "\n".join(lines) + "\n"


__all__ = ["TwoDGrid"]
