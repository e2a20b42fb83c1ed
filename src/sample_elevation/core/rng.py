"""Central RNG helpers using PCG64DXSM."""
from typing import Optional
from numpy.random import Generator, PCG64DXSM


def make_rng(seed: Optional[int] = None) -> Generator:
    """Return a generator; ``seed=None`` draws fresh OS entropy."""
    return Generator(PCG64DXSM(seed))
