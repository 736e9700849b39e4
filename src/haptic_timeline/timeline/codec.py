"""
Conversion between timeline objects and their JSON wire shape.

Patterns are exchanged as {"events": [...], "curves": [...]}:

    {"type": "continuous", "relativeTime": 0, "duration": 500,
     "parameters": [{"type": "intensity", "value": 0.5}, ...]}
    {"type": "intensity", "relativeTime": 0,
     "controlPoints": [{"relativeTime": 0, "value": 0.5}, ...]}

Capture samples are {"type", "timestamp", "intensity", "sharpness"}.
All times are in milliseconds, except compositions, which keep the
editor's seconds.

Only structure is checked here (known type tags, required keys); value
ranges are the import layer's concern.
"""

import json
from pathlib import Path
from typing import Any

from .composer import ComposerContinuous, ComposerEvent, ComposerTransient
from .core.types import (
    ContinuousEvent,
    ControlPoint,
    Curve,
    Event,
    Parameter,
    ParameterKind,
    Pattern,
    RawSample,
    SampleKind,
    TransientEvent,
)


def _require(data: dict, key: str, what: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing '{key}' in {what}")
    return data[key]


def _parameter_kind(name: str) -> ParameterKind:
    try:
        return ParameterKind(name)
    except ValueError:
        raise ValueError(f"Unknown parameter type: {name}")


# =============================================================================
# PATTERNS
# =============================================================================

def event_to_dict(event: Event) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": event.kind,
        "relativeTime": event.relative_time,
        "parameters": [
            {"type": p.kind.value, "value": p.value}
            for p in event.parameters
        ],
    }
    if isinstance(event, ContinuousEvent):
        data["duration"] = event.duration
    return data


def event_from_dict(data: dict) -> Event:
    kind = _require(data, "type", "event")
    parameters = [
        Parameter(
            _parameter_kind(_require(p, "type", "parameter")),
            _require(p, "value", "parameter"),
        )
        for p in data.get("parameters", [])
    ]
    relative_time = _require(data, "relativeTime", "event")

    if kind == "transient":
        return TransientEvent(relative_time=relative_time, parameters=parameters)
    if kind == "continuous":
        return ContinuousEvent(
            relative_time=relative_time,
            duration=data.get("duration", 0),
            parameters=parameters,
        )
    raise ValueError(f"Unknown event type: {kind}")


def curve_to_dict(curve: Curve) -> dict[str, Any]:
    return {
        "type": curve.kind.value,
        "relativeTime": curve.relative_time,
        "controlPoints": [
            {"relativeTime": p.relative_time, "value": p.value}
            for p in curve.control_points
        ],
    }


def curve_from_dict(data: dict) -> Curve:
    return Curve(
        kind=_parameter_kind(_require(data, "type", "curve")),
        relative_time=_require(data, "relativeTime", "curve"),
        control_points=[
            ControlPoint(
                _require(p, "relativeTime", "control point"),
                _require(p, "value", "control point"),
            )
            for p in data.get("controlPoints", [])
        ],
    )


def pattern_to_dict(pattern: Pattern) -> dict[str, Any]:
    """Convert a pattern to its wire shape."""
    return {
        "events": [event_to_dict(e) for e in pattern.events],
        "curves": [curve_to_dict(c) for c in pattern.curves],
    }


def pattern_from_dict(data: dict) -> Pattern:
    """
    Build a pattern from its wire shape.

    Missing events/curves arrays read as empty.

    Raises:
        ValueError: On unknown type tags or missing required keys
    """
    if not isinstance(data, dict):
        raise ValueError("Pattern must be a JSON object")
    return Pattern(
        events=[event_from_dict(e) for e in data.get("events", [])],
        curves=[curve_from_dict(c) for c in data.get("curves", [])],
    )


# =============================================================================
# CAPTURE SAMPLES
# =============================================================================

def sample_to_dict(sample: RawSample) -> dict[str, Any]:
    return {
        "type": sample.kind.value,
        "timestamp": sample.timestamp,
        "intensity": sample.intensity,
        "sharpness": sample.sharpness,
    }


def sample_from_dict(data: dict) -> RawSample:
    kind = _require(data, "type", "sample")
    try:
        sample_kind = SampleKind(kind)
    except ValueError:
        raise ValueError(f"Unknown sample type: {kind}")
    return RawSample(
        kind=sample_kind,
        timestamp=_require(data, "timestamp", "sample"),
        intensity=data.get("intensity", 0.0),
        sharpness=data.get("sharpness", 0.0),
    )


def samples_to_list(samples: list[RawSample]) -> list[dict[str, Any]]:
    return [sample_to_dict(s) for s in samples]


def samples_from_list(data: list) -> list[RawSample]:
    if not isinstance(data, list):
        raise ValueError("Samples must be a JSON array")
    return [sample_from_dict(s) for s in data]


# =============================================================================
# COMPOSITIONS
# =============================================================================

def composer_event_to_dict(event: ComposerEvent) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": event.id,
        "type": event.kind,
        "startTime": event.start_time,
        "intensity": event.intensity,
        "sharpness": event.sharpness,
    }
    if isinstance(event, ComposerContinuous):
        data.update({
            "duration": event.duration,
            "fadeInIntensity": event.fade_in_intensity,
            "fadeInDuration": event.fade_in_duration,
            "fadeOutIntensity": event.fade_out_intensity,
            "fadeOutDuration": event.fade_out_duration,
        })
    return data


def composer_event_from_dict(data: dict) -> ComposerEvent:
    kind = _require(data, "type", "composer event")
    extra = {"id": data["id"]} if data.get("id") else {}

    if kind == "transient":
        return ComposerTransient(
            start_time=data.get("startTime", 0.0),
            intensity=data.get("intensity", 0.5),
            sharpness=data.get("sharpness", 0.5),
            **extra,
        )
    if kind == "continuous":
        return ComposerContinuous(
            start_time=data.get("startTime", 0.0),
            duration=data.get("duration", 0.5),
            intensity=data.get("intensity", 0.5),
            sharpness=data.get("sharpness", 0.5),
            fade_in_intensity=data.get("fadeInIntensity", 0.0),
            fade_in_duration=data.get("fadeInDuration", 0.0),
            fade_out_intensity=data.get("fadeOutIntensity", 0.0),
            fade_out_duration=data.get("fadeOutDuration", 0.0),
            **extra,
        )
    raise ValueError(f"Unknown composer event type: {kind}")


def composition_from_dict(data: dict) -> list[ComposerEvent]:
    """Read composer events from a composition object ({"events": [...]})."""
    if not isinstance(data, dict):
        raise ValueError("Composition must be a JSON object")
    return [composer_event_from_dict(e) for e in data.get("events", [])]


# =============================================================================
# FILES
# =============================================================================

def load_pattern(path: Path) -> Pattern:
    """Load a pattern from a JSON file."""
    with open(path) as f:
        return pattern_from_dict(json.load(f))


def save_pattern(pattern: Pattern, path: Path, indent: int = 2) -> None:
    """Save a pattern to a JSON file."""
    with open(path, "w") as f:
        json.dump(pattern_to_dict(pattern), f, indent=indent)


def load_samples(path: Path) -> list[RawSample]:
    """Load capture samples from a JSON file."""
    with open(path) as f:
        return samples_from_list(json.load(f))


def save_samples(samples: list[RawSample], path: Path, indent: int = 2) -> None:
    """Save capture samples to a JSON file."""
    with open(path, "w") as f:
        json.dump(samples_to_list(samples), f, indent=indent)
