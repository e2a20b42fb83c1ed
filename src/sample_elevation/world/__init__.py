"""Elevation surface utilities."""
from .terrain import (
    MAX_ELEVATION,
    MIN_ELEVATION,
    RAMP_HEIGHT,
    VARIATION_RANGE,
    base_height,
    compute_elevation,
    generate_grid,
)

__all__ = [
    "MAX_ELEVATION",
    "MIN_ELEVATION",
    "RAMP_HEIGHT",
    "VARIATION_RANGE",
    "base_height",
    "compute_elevation",
    "generate_grid",
]
