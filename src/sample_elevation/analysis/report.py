"""Summary statistics and markdown reports for sample documents."""
from __future__ import annotations
from pathlib import Path
from typing import Tuple
import numpy as np
import pandas as pd

from sample_elevation.engine.sample_io import SampleDocument


def _surface(document: SampleDocument) -> np.ndarray:
    return np.asarray(document.data, dtype=float).reshape(document.height, document.width)


def describe_grid(document: SampleDocument) -> pd.Series:
    return pd.Series(document.data, name="elevation").describe()


def corner_means(document: SampleDocument, size: int = 5) -> Tuple[float, float]:
    """Mean elevation of the ``size``-square block at the origin and at the far corner."""
    if size <= 0:
        raise ValueError("size must be positive")
    surface = _surface(document)
    return float(surface[:size, :size].mean()), float(surface[-size:, -size:].mean())


def write_report(document: SampleDocument, path: Path) -> Path:
    stats = describe_grid(document).to_frame()
    try:
        summary = stats.to_markdown()
    except ImportError:
        summary = stats.to_string()
    near, far = corner_means(document, size=min(5, document.width, document.height))
    path = Path(path)
    path.write_text(
        "\n".join(
            [
                "# Sample Elevation Report",
                "",
                f"- **grid**: {document.width} x {document.height}",
                f"- **origin corner mean**: {near:.4f}",
                f"- **far corner mean**: {far:.4f}",
                "",
                "## Elevation summary",
                summary,
                "",
            ]
        )
    )
    return path
