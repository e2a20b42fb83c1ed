"""Sample document model and JSON persistence."""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import List, Sequence
from pydantic import BaseModel, ValidationInfo, field_validator
from rich.console import Console
from rich.markup import escape

from sample_elevation.world.terrain import MAX_ELEVATION, MIN_ELEVATION

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


class SampleDocument(BaseModel):
    width: int
    height: int
    data: List[float]

    @field_validator("width", "height")
    @classmethod
    def validate_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("grid dimensions must be positive")
        return v

    @field_validator("data")
    @classmethod
    def validate_data(cls, v: List[float], info: ValidationInfo) -> List[float]:
        width = info.data.get("width")
        height = info.data.get("height")
        if width is not None and height is not None and len(v) != width * height:
            raise ValueError(f"data must hold width*height={width * height} values, got {len(v)}")
        for value in v:
            if not MIN_ELEVATION <= value <= MAX_ELEVATION:
                raise ValueError(f"elevation {value} outside [{MIN_ELEVATION}, {MAX_ELEVATION}]")
        return v

    def cell(self, x: int, y: int) -> float:
        return self.data[y * self.width + x]


def build_document(width: int, height: int, grid: Sequence[float]) -> SampleDocument:
    return SampleDocument(width=width, height=height, data=list(grid))


def write_sample_data(
    output_path: Path,
    width: int,
    height: int,
    grid: Sequence[float],
    *,
    indent: int = 2,
    create_dirs: bool = False,
) -> bool:
    """Write ``{width, height, data}`` as pretty JSON, replacing any existing file.

    Write failures are reported on stderr and turned into a ``False`` result;
    nothing is retried.
    """
    output_path = Path(output_path)
    document = build_document(width, height, grid)
    payload = json.dumps(document.model_dump(), indent=indent)
    try:
        if create_dirs:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        logger.debug("writing %s failed: %s", output_path, exc)
        err_console.print(f"Error writing sample data: {escape(str(exc))}", soft_wrap=True)
        return False
    console.print(f"Sample elevation data generated and saved to {escape(str(output_path))}", soft_wrap=True)
    return True


def load_sample_data(path: Path) -> SampleDocument:
    return SampleDocument.model_validate(json.loads(Path(path).read_text(encoding="utf-8")))
