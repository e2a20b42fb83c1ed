"""Configuration utilities for the sample elevation generator."""
from .schema import ConfigSchema, GridConfig, OutputConfig, DEFAULT_CONFIG_PATH, load_config

__all__ = ["ConfigSchema", "GridConfig", "OutputConfig", "DEFAULT_CONFIG_PATH", "load_config"]
