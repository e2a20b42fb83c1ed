"""Plotting helpers."""
from __future__ import annotations
from pathlib import Path
import numpy as np
import matplotlib.pyplot as plt

from sample_elevation.engine.sample_io import SampleDocument
from sample_elevation.world.terrain import MAX_ELEVATION, MIN_ELEVATION


def plot_heightmap(document: SampleDocument, out: Path, cmap: str = "terrain") -> Path:
    surface = np.asarray(document.data, dtype=float).reshape(document.height, document.width)
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots()
    image = ax.imshow(surface, origin="lower", cmap=cmap, vmin=MIN_ELEVATION, vmax=MAX_ELEVATION)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(f"Sample elevation {document.width}x{document.height}")
    fig.colorbar(image, label="elevation")
    fig.savefig(out)
    plt.close(fig)
    return out
