"""
Haptic timeline engine.

Turns live capture samples and editor input into haptic patterns, and
re-slices patterns for seeking:

    from haptic_timeline.timeline import reconstruct, trim, expand

    pattern = reconstruct(samples)      # capture stream -> events + curves
    resumed = trim(pattern, 300)        # continue playback from 300ms
    samples = expand(pattern)           # events + curves -> capture stream
"""

# Core types
from .core import (
    MATCH_TOLERANCE_MS,
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
    FadedContinuousEvent,
    synthesize_envelope,
)

# Algorithms
from .capture import reconstruct
from .trim import trim, trim_event, trim_curve, drop_insignificant_curves
from .expand import expand
from .core.interpolation import interpolate_between, value_at

# Editor and recording surfaces
from .composer import (
    ComposerTransient,
    ComposerContinuous,
    ComposerEvent,
    new_transient,
    new_continuous,
    compose,
    compose_curves,
    composition_duration,
)
from .recorder import SampleRecorder, Recording

__all__ = [
    # Core types
    "MATCH_TOLERANCE_MS",
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
    "FadedContinuousEvent",
    "synthesize_envelope",
    # Algorithms
    "reconstruct",
    "trim",
    "trim_event",
    "trim_curve",
    "drop_insignificant_curves",
    "expand",
    "interpolate_between",
    "value_at",
    # Editor and recording surfaces
    "ComposerTransient",
    "ComposerContinuous",
    "ComposerEvent",
    "new_transient",
    "new_continuous",
    "compose",
    "compose_curves",
    "composition_duration",
    "SampleRecorder",
    "Recording",
]
