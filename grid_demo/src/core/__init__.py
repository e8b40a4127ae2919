"""Core grid types and the shared capability contract."""

from .contract import CELL_WIDTH, DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE, GridContract
from .errors import GridError, InvalidArgumentError, InvalidStateError
from .grid2d import TwoDGrid
from .grid3d import ThreeDGrid

__all__ = [
    "GridContract",
    "TwoDGrid",
    "ThreeDGrid",
    "GridError",
    "InvalidArgumentError",
    "InvalidStateError",
    "DEFAULT_MIN_VALUE",
    "DEFAULT_MAX_VALUE",
    "CELL_WIDTH",
]
