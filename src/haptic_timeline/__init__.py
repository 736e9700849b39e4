"""Haptic timeline engine: capture reconstruction, seek trimming and fade envelopes."""

__version__ = "0.1.0"

from .timeline import (
    ParameterKind,
    SampleKind,
    TransientEvent,
    ContinuousEvent,
    ControlPoint,
    Curve,
    Pattern,
    RawSample,
    FadedContinuousEvent,
    synthesize_envelope,
    reconstruct,
    trim,
    expand,
)

__all__ = [
    "ParameterKind",
    "SampleKind",
    "TransientEvent",
    "ContinuousEvent",
    "ControlPoint",
    "Curve",
    "Pattern",
    "RawSample",
    "FadedContinuousEvent",
    "synthesize_envelope",
    "reconstruct",
    "trim",
    "expand",
]
