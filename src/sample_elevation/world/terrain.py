"""Synthetic elevation surface: a diagonal ramp plus bounded uniform noise.

Elevations rise linearly from 0 at the origin corner towards ``RAMP_HEIGHT``
at the opposite corner. Each cell then gets an independent variation drawn
uniformly from ``[0, VARIATION_RANGE)`` and the sum is clamped to
``[MIN_ELEVATION, MAX_ELEVATION]``.
"""
from __future__ import annotations
from typing import List, Optional
import numpy as np
from numpy.random import Generator

from sample_elevation.core.bounds import clamp
from sample_elevation.core.rng import make_rng

RAMP_HEIGHT = 80.0
VARIATION_RANGE = 20.0
MIN_ELEVATION = 0.0
MAX_ELEVATION = 100.0


def _check_dims(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"grid dimensions must be positive, got {width}x{height}")


def base_height(x, y, width: int, height: int):
    """Deterministic ramp term; accepts scalars or numpy arrays."""
    return (x + y) / (width + height) * RAMP_HEIGHT


def compute_elevation(x: int, y: int, width: int, height: int, rng: Generator) -> float:
    variation = rng.uniform(0.0, VARIATION_RANGE)
    return clamp(base_height(x, y, width, height) + variation, MIN_ELEVATION, MAX_ELEVATION)


def generate_grid(width: int, height: int, rng: Optional[Generator] = None) -> List[float]:
    """Return the flat row-major grid, index ``y * width + x``.

    The variation for every cell is drawn in one call, filled row by row, which
    consumes the generator in the same order as calling ``compute_elevation``
    with ``y`` in the outer loop and ``x`` in the inner loop.
    """
    _check_dims(width, height)
    rng = rng if rng is not None else make_rng()
    yy, xx = np.mgrid[:height, :width]
    variation = rng.uniform(0.0, VARIATION_RANGE, size=(height, width))
    surface = clamp(base_height(xx, yy, width, height) + variation, MIN_ELEVATION, MAX_ELEVATION)
    return surface.ravel().tolist()
