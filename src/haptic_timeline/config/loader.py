"""Configuration file loading and saving."""

from pathlib import Path
from typing import Any
import yaml

from .schema import OutputConfig, TimelineConfig

DEFAULT_CONFIG_NAME = "haptic-timeline.yaml"


def load_config(config_path: Path | None = None) -> TimelineConfig:
    """
    Load configuration from YAML file.

    With no path, ./haptic-timeline.yaml is used if it exists, otherwise
    defaults.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return TimelineConfig.with_defaults()
    elif not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    output_data = data.get("output", {}) or {}
    output = OutputConfig(
        json_indent=output_data.get("json_indent", 2),
    )

    return TimelineConfig(
        match_tolerance_ms=float(data.get("match_tolerance_ms", 1.0)),
        drop_insignificant_curves=bool(data.get("drop_insignificant_curves", False)),
        transient_tail_ms=float(data.get("transient_tail_ms", 100.0)),
        log_level=str(data.get("log_level", "WARNING")).upper(),
        output=output,
    )


def save_config(config: TimelineConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    data: dict[str, Any] = {
        "match_tolerance_ms": config.match_tolerance_ms,
        "drop_insignificant_curves": config.drop_insignificant_curves,
        "transient_tail_ms": config.transient_tail_ms,
        "log_level": config.log_level,
        "output": {
            "json_indent": config.output.json_indent,
        },
    }

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
