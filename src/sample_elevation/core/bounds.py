"""Value bounding helpers."""
import numpy as np


def clamp(value, min_v: float, max_v: float):
    clipped = np.clip(value, min_v, max_v)
    if np.ndim(clipped) == 0:
        return float(clipped)
    return clipped
