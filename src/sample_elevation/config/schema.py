"""Pydantic config schema and loader."""
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"
DEFAULT_OUTPUT_PATH = Path("data") / "sampleElevation.json"


class GridConfig(BaseModel):
    width: int = 50
    height: int = 50

    @field_validator("width", "height")
    @classmethod
    def validate_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("grid dimensions must be positive")
        return v


class OutputConfig(BaseModel):
    path: Path = DEFAULT_OUTPUT_PATH
    indent: int = 2
    create_dirs: bool = False

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("indent must be non-negative")
        return v


class ConfigSchema(BaseModel):
    seed: Optional[int] = None
    grid: GridConfig = Field(default_factory=GridConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("seed must be non-negative")
        return v


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ConfigSchema(**data)
