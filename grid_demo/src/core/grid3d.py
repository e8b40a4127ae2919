"""Three-dimensional 3x3x3 integer grid, walked layer by layer."""

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


class ThreeDGrid(GridContract):
    """3x3x3 grid indexed ``[row, col, layer]``.

    The last axis is the layer: input and print visit layer 0..2 in turn and
    each layer row-major.
    """

    SHAPE = (3, 3, 3)
    TITLE = "Three-dimensional grid 3x3x3 (by layer):"

    def __init__(self, fill_random: bool = False, rng=None, console: ConsoleIO | None = None) -> None:
        super().__init__(rng=rng, console=console)
        logger.debug("ThreeDGrid: created zero-filled %s", self.SHAPE)
        if fill_random:
            self.fill_random()
        logger.debug("ThreeDGrid: constructed (fill_random=%s)", fill_random)

    def layer(self, k: int) -> list:
        """Return a list copy of layer ``k`` as rows."""
        return self._data[:, :, k].tolist()

    def input_from_console(self) -> None:
        """Read all 27 cells from the console, one layer at a time."""
        rows, cols, layers = self.SHAPE
        self.console.write_line(
            f"Enter the elements of the {rows}x{cols}x{layers} grid (integers):"
        )
        for k in range(layers):
            self.console.write_line(f"Layer {k}:")
            for i in range(rows):
                for j in range(cols):
                    self._data[i, j, k] = self.console.read_int(f"B[{i},{j},{k}] = ")
        self.populated = True
        logger.debug("ThreeDGrid: populated from console")

    def fill_random(self, min_value: int = DEFAULT_MIN_VALUE, max_value: int = DEFAULT_MAX_VALUE) -> None:
        """Fill every cell with a uniform draw from ``[min_value, max_value]``."""
        validate_fill_range(min_value, max_value)
        self._data[:, :, :] = draw_integers(self._rng, min_value, max_value, self.SHAPE)
        self.populated = True
        logger.debug("ThreeDGrid: filled from [%d, %d]", min_value, max_value)

    def min_element(self) -> int:
        """Return the smallest value across all layers."""
        self._require_cells()
        return int(self._data.min())

    def render(self) -> str:
        """Return the title line and a labelled block per layer in ascending order."""
        lines = [self.TITLE]
        for k in range(self._data.shape[2]):
            lines.append(f"Layer {k}:")
            for row in self._data[:, :, k]:
                lines.append(format_row(row))
        return "\n".join(lines) + "\n"


__all__ = ["ThreeDGrid"]
