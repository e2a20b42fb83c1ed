"""Top-level generate-and-write flow."""
from __future__ import annotations
import logging
from typing import Optional
from numpy.random import Generator

from sample_elevation.config import ConfigSchema
from sample_elevation.core.rng import make_rng
from sample_elevation.engine.sample_io import write_sample_data
from sample_elevation.world.terrain import generate_grid

logger = logging.getLogger(__name__)


def run(config: ConfigSchema, rng: Optional[Generator] = None) -> bool:
    rng = rng if rng is not None else make_rng(config.seed)
    width, height = config.grid.width, config.grid.height
    logger.info("generating %dx%d elevation grid (seed=%s)", width, height, config.seed)
    grid = generate_grid(width, height, rng)
    return write_sample_data(
        config.outputs.path,
        width,
        height,
        grid,
        indent=config.outputs.indent,
        create_dirs=config.outputs.create_dirs,
    )
