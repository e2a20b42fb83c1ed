"""Analysis utilities."""
from __future__ import annotations

from .report import corner_means, describe_grid, write_report
from .plots import plot_heightmap

__all__ = ["corner_means", "describe_grid", "write_report", "plot_heightmap"]
