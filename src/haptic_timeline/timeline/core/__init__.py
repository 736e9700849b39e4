"""
Core types for the haptic timeline.

Provides fundamental data structures:
- Parameter / ParameterKind: Event intensity and sharpness
- TransientEvent / ContinuousEvent: Haptic events
- ControlPoint / Curve: Parameter envelopes
- Pattern: Events plus curves
- RawSample / SampleKind: Live capture samples
- FadedContinuousEvent: Fade-described continuous events
"""

from .types import (
    MATCH_TOLERANCE_MS,
    DEFAULT_INTENSITY,
    DEFAULT_SHARPNESS,
    ParameterKind,
    SampleKind,
    Parameter,
    TransientEvent,
    ContinuousEvent,
    Event,
    ControlPoint,
    Curve,
    Pattern,
    RawSample,
    parameter_value,
    make_parameters,
    starts_together,
)
from .envelope import FadedContinuousEvent, synthesize_envelope

__all__ = [
    "MATCH_TOLERANCE_MS",
    "DEFAULT_INTENSITY",
    "DEFAULT_SHARPNESS",
    "ParameterKind",
    "SampleKind",
    "Parameter",
    "TransientEvent",
    "ContinuousEvent",
    "Event",
    "ControlPoint",
    "Curve",
    "Pattern",
    "RawSample",
    "parameter_value",
    "make_parameters",
    "starts_together",
    "FadedContinuousEvent",
    "synthesize_envelope",
]
