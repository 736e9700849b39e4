"""Configuration schema and loading."""

from .schema import TimelineConfig, OutputConfig
from .loader import load_config, save_config

__all__ = [
    "TimelineConfig",
    "OutputConfig",
    "load_config",
    "save_config",
]
