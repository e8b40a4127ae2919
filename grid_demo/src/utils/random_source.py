"""Process-wide random source shared by all grids."""

from __future__ import annotations

import numpy as np

_SHARED_RNG: np.random.Generator = np.random.default_rng()


def shared_rng() -> np.random.Generator:
    """Return the generator reused by every grid built without an explicit ``rng``."""
    return _SHARED_RNG


def draw_integers(rng, low: int, high: int, size) -> np.ndarray:
    """Return ``size`` integers drawn uniformly from the closed range ``[low, high]``."""
    values = rng.integers(low, high + 1, size=size)
    return np.asarray(values, dtype=np.int64).reshape(size)


__all__ = ["shared_rng", "draw_integers"]
